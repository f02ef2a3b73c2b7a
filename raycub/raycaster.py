"""Grid ray casting and drawing of textured wall columns."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Mapping, MutableSequence, Sequence

from raycub.state import FOV_LEN, LEFT, SCREEN_HEIGHT, SCREEN_WIDTH, GameState, Vec2

_MAX_STEPS = 100
_MIN_DIR = 1e-6

Frame = MutableSequence[MutableSequence[int]]


@dataclass
class Texture:
    """A wall texture as rows of 0xRRGGBB pixels stored flat."""

    width: int
    height: int
    pixels: Sequence[int]

    def pixel(self, x: int, y: int) -> int:
        """The colour at column ``x``, row ``y``."""
        return self.pixels[y * self.width + x]


@dataclass
class RayHit:
    """Where a ray cast for one screen column met a wall."""

    pos_x: float
    pos_y: float
    ray_dir_x: float
    ray_dir_y: float
    map_x: int
    map_y: int
    step_x: int
    step_y: int
    side: int
    perp_wall_dist: float


def calculate_plane_vector(direction: Vec2, flag: int) -> Vec2:
    """The camera plane for ``direction``, to its LEFT or RIGHT."""
    if flag == LEFT:
        return Vec2(FOV_LEN * direction.y, -(FOV_LEN * direction.x))
    return Vec2(-(FOV_LEN * direction.y), FOV_LEN * direction.x)


def _clamp_dir(value: float) -> float:
    if abs(value) < _MIN_DIR:
        return -_MIN_DIR if value < 0 else _MIN_DIR
    return value


def _is_valid_position(rows: list[str], map_x: int, map_y: int) -> bool:
    if map_y < 0 or map_y >= len(rows):
        return False
    return 0 <= map_x < len(rows[map_y])


def cast_ray(state: GameState, screen_x: int) -> RayHit:
    """Cast the ray for one screen column and find the wall it meets."""
    camera_x = 2 * screen_x / SCREEN_WIDTH - 1
    ray_x = _clamp_dir(state.dir_vec.x + state.plane_vec.x * camera_x)
    ray_y = _clamp_dir(state.dir_vec.y + state.plane_vec.y * camera_x)
    pos_x, pos_y = state.player_pos.x, state.player_pos.y
    map_x, map_y = int(pos_x), int(pos_y)
    delta_x = abs(1 / ray_x)
    delta_y = abs(1 / ray_y)
    if ray_x < 0:
        step_x, side_x = -1, (pos_x - map_x) * delta_x
    else:
        step_x, side_x = 1, (map_x + 1.0 - pos_x) * delta_x
    if ray_y < 0:
        step_y, side_y = -1, (pos_y - map_y) * delta_y
    else:
        step_y, side_y = 1, (map_y + 1.0 - pos_y) * delta_y

    side = 0
    for _ in range(_MAX_STEPS):
        if side_x < side_y:
            side_x += delta_x
            map_x += step_x
            side = 0
        else:
            side_y += delta_y
            map_y += step_y
            side = 1
        if not _is_valid_position(state.map, map_x, map_y):
            break
        if state.map[map_y][map_x] == "1":
            break

    if side == 0:
        perp = (map_x - pos_x + (1 - step_x) // 2) / ray_x
    else:
        perp = (map_y - pos_y + (1 - step_y) // 2) / ray_y
    return RayHit(pos_x, pos_y, ray_x, ray_y, map_x, map_y,
                  step_x, step_y, side, perp)


def _texture_key(hit: RayHit) -> str:
    if hit.side == 0:
        return "ea" if hit.ray_dir_x >= 0 else "we"
    return "so" if hit.ray_dir_y >= 0 else "no"


def draw_column(state: GameState, hit: RayHit, textures: Mapping[str, Texture],
                frame: Frame, screen_x: int) -> None:
    """Paint ceiling, textured wall and floor for one screen column.

    ``textures`` maps ``"no"``, ``"so"``, ``"we"`` and ``"ea"`` to textures;
    ``frame`` is indexed ``frame[y][x]``.
    """
    if hit.perp_wall_dist > 0:
        line_height = int(SCREEN_HEIGHT / hit.perp_wall_dist)
    else:
        line_height = SCREEN_HEIGHT
    half = SCREEN_HEIGHT // 2
    start = max(-(line_height // 2) + half, 0)
    end = min(line_height // 2 + half, SCREEN_HEIGHT - 1)
    texture = textures[_texture_key(hit)]

    if hit.side == 0:
        wall_x = hit.pos_y + hit.perp_wall_dist * hit.ray_dir_y
    else:
        wall_x = hit.pos_x + hit.perp_wall_dist * hit.ray_dir_x
    wall_x -= math.floor(wall_x)
    tex_x = int(wall_x * texture.width)
    if (hit.side == 0 and hit.ray_dir_x > 0) or (hit.side == 1 and hit.ray_dir_y < 0):
        tex_x = texture.width - tex_x - 1

    ceiling = state.ceiling.packed()
    floor = state.floor.packed()
    for y in range(start):
        frame[y][screen_x] = ceiling
    step = texture.height / (end - start) if end != start else 0.0
    tex_pos = 0.0
    for y in range(start, end + 1):
        tex_y = min(int(tex_pos), texture.height - 1)
        tex_pos += step
        frame[y][screen_x] = texture.pixel(tex_x, tex_y)
    for y in range(end + 1, SCREEN_HEIGHT):
        frame[y][screen_x] = floor


def draw_ray(state: GameState, textures: Mapping[str, Texture], frame: Frame) -> None:
    """Clear ``frame`` and render every screen column into it."""
    for row in frame:
        row[:] = [0] * len(row)
    for screen_x in range(SCREEN_WIDTH):
        draw_column(state, cast_ray(state, screen_x), textures, frame, screen_x)