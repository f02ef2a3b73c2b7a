"""Game state shared by the parser, the movement code and the renderer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

FOV_LEN = 0.66
SCREEN_WIDTH = 640
SCREEN_HEIGHT = 480

LEFT = 0
RIGHT = 1

MOVE_SPEED = 0.05
ROT_SPEED = 0.03

KEY_ESC = 65307
KEY_W = 119
KEY_A = 97
KEY_S = 115
KEY_D = 100
KEY_ARR_R = 65363
KEY_ARR_L = 65361

UNSET_DIRECTION = "D"


class CubError(Exception):
    """A fatal problem with the scene file or with starting the game."""


@dataclass
class Rgb:
    """A colour whose channels stay at -1 until the scene file sets them."""

    red: int = -1
    green: int = -1
    blue: int = -1

    def is_set(self) -> bool:
        """True once all three channels have been given."""
        return -1 not in (self.red, self.green, self.blue)

    def packed(self) -> int:
        """The colour as a 0xRRGGBB integer."""
        return (self.red << 16) | (self.green << 8) | self.blue


@dataclass
class Vec2:
    """A point or direction on the map plane."""

    x: float = 0.0
    y: float = 0.0


@dataclass
class KeyState:
    """Which movement keys are held, and where the mouse is."""

    w: bool = False
    s: bool = False
    a: bool = False
    d: bool = False
    arrow_left: bool = False
    arrow_right: bool = False
    mouse_pos: int = SCREEN_WIDTH // 2


@dataclass
class TexturePaths:
    """Paths of the four wall textures."""

    no: Optional[str] = None
    so: Optional[str] = None
    we: Optional[str] = None
    ea: Optional[str] = None

    def complete(self) -> bool:
        """True when every wall has a texture path."""
        return None not in (self.no, self.so, self.we, self.ea)


@dataclass
class GameState:
    """Everything the parser fills in and the game loop works on."""

    start_dir: str = UNSET_DIRECTION
    player_pos: Vec2 = field(default_factory=Vec2)
    dir_vec: Vec2 = field(default_factory=Vec2)
    plane_vec: Vec2 = field(default_factory=Vec2)
    map: list[str] = field(default_factory=list)
    info: list[str] = field(default_factory=list)
    paths: TexturePaths = field(default_factory=TexturePaths)
    floor: Rgb = field(default_factory=Rgb)
    ceiling: Rgb = field(default_factory=Rgb)
    keys: KeyState = field(default_factory=KeyState)


def new_state() -> GameState:
    """A fresh state with nothing parsed yet."""
    return GameState()