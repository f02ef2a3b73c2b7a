"""The game window, input handling, main loop and command entry point."""

from __future__ import annotations

import sys
from array import array
from typing import Optional, Sequence

from raycub.movement import (
    move_backward,
    move_forward,
    move_left,
    move_right,
    rotate_left,
    rotate_right,
)
from raycub.parser import parse_input
from raycub.raycaster import Frame, Texture, draw_ray
from raycub.state import (
    KEY_A,
    KEY_ARR_L,
    KEY_ARR_R,
    KEY_D,
    KEY_ESC,
    KEY_S,
    KEY_W,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    CubError,
    GameState,
    new_state,
)
from raycub.validfile import validate_file_extension

_TITLE = "cub3D"
_FPS = 60
_KEY_FIELDS = {
    KEY_W: "w",
    KEY_S: "s",
    KEY_A: "a",
    KEY_D: "d",
    KEY_ARR_L: "arrow_left",
    KEY_ARR_R: "arrow_right",
}
_WALLS = (("no", "north"), ("so", "south"), ("we", "west"), ("ea", "east"))


def _surface_to_texture(surface) -> Texture:
    width, height = surface.get_size()
    pixels = [
        (colour.r << 16) | (colour.g << 8) | colour.b
        for y in range(height)
        for x in range(width)
        for colour in (surface.get_at((x, y)),)
    ]
    return Texture(width, height, pixels)


def load_textures(state: GameState) -> dict[str, Texture]:
    """Load the four wall textures named in ``state.paths``."""
    import pygame

    textures: dict[str, Texture] = {}
    for key, name in _WALLS:
        path = getattr(state.paths, key)
        try:
            surface = pygame.image.load(path)
        except (pygame.error, OSError, TypeError) as err:
            raise CubError(f"Error\nFailed to load {name} texture") from err
        textures[key] = _surface_to_texture(surface)
    return textures


def _frame_to_bytes(frame: Frame) -> bytes:
    pixels = array("I", (pixel | 0xFF000000 for row in frame for pixel in row))
    if sys.byteorder == "little":
        pixels.byteswap()
    return pixels.tobytes()


class Game:
    """Holds the input state and the rendered frame for one game session."""

    def __init__(self, state: GameState) -> None:
        self.state = state
        self.textures: dict[str, Texture] = {}
        self.frame: Frame = [[0] * SCREEN_WIDTH for _ in range(SCREEN_HEIGHT)]
        self.running = True

    def key_press(self, key: int) -> None:
        """Record a pressed key; Escape ends the game."""
        if key == KEY_ESC:
            self.running = False
        field_name = _KEY_FIELDS.get(key)
        if field_name is not None:
            setattr(self.state.keys, field_name, True)

    def key_release(self, key: int) -> None:
        """Record a released key."""
        field_name = _KEY_FIELDS.get(key)
        if field_name is not None:
            setattr(self.state.keys, field_name, False)

    def mouse_move(self, x: int) -> None:
        """Remember the horizontal mouse position."""
        self.state.keys.mouse_pos = x

    def mouse_left(self) -> None:
        """Centre the remembered mouse position when it leaves the window."""
        self.state.keys.mouse_pos = SCREEN_WIDTH // 2

    def step(self) -> None:
        """Apply held keys and the mouse, then render a frame if textures are loaded."""
        state = self.state
        keys = state.keys
        if keys.w:
            move_forward(state)
        if keys.s:
            move_backward(state)
        if keys.a:
            move_left(state)
        if keys.d:
            move_right(state)
        if keys.arrow_left:
            rotate_left(state)
        if keys.arrow_right:
            rotate_right(state)
        mouse_zone = SCREEN_WIDTH // 4
        if keys.mouse_pos > SCREEN_WIDTH // 2 + mouse_zone:
            rotate_right(state)
        if keys.mouse_pos < SCREEN_WIDTH // 2 - mouse_zone:
            rotate_left(state)
        if self.textures:
            draw_ray(state, self.textures, self.frame)

    def run(self) -> None:
        """Open the window and run the game until it is closed."""
        import pygame

        try:
            pygame.init()
            try:
                screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
            except pygame.error as err:
                raise CubError("Error\nmlx_new_window failed") from err
            pygame.display.set_caption(_TITLE)
            self.textures = load_textures(self.state)
            key_map = {
                pygame.K_ESCAPE: KEY_ESC,
                pygame.K_w: KEY_W,
                pygame.K_a: KEY_A,
                pygame.K_s: KEY_S,
                pygame.K_d: KEY_D,
                pygame.K_LEFT: KEY_ARR_L,
                pygame.K_RIGHT: KEY_ARR_R,
            }
            window_leave = getattr(pygame, "WINDOWLEAVE", None)
            clock = pygame.time.Clock()
            while self.running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        self.running = False
                    elif event.type == pygame.KEYDOWN:
                        self.key_press(key_map.get(event.key, event.key))
                    elif event.type == pygame.KEYUP:
                        self.key_release(key_map.get(event.key, event.key))
                    elif event.type == pygame.MOUSEMOTION:
                        self.mouse_move(event.pos[0])
                    elif window_leave is not None and event.type == window_leave:
                        self.mouse_left()
                if not self.running:
                    break
                self.step()
                image = pygame.image.frombuffer(
                    _frame_to_bytes(self.frame), (SCREEN_WIDTH, SCREEN_HEIGHT), "ARGB"
                )
                screen.blit(image, (0, 0))
                pygame.display.flip()
                clock.tick(_FPS)
        finally:
            pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the game on the scene file named on the command line."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("Error\nInvalid number of arguments!", file=sys.stderr)
        return 1
    try:
        state = new_state()
        validate_file_extension(args[0])
        parse_input(args[0], state)
        Game(state).run()
    except CubError as err:
        print(err, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())