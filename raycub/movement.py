"""Player movement with wall collision, and view rotation."""

from __future__ import annotations

import math

from raycub.state import MOVE_SPEED, ROT_SPEED, GameState, Vec2

_COLLISION_BUFFER = 0.2


def is_wall_at(state: GameState, x: float, y: float) -> bool:
    """True if the map cell holding ``(x, y)`` is a wall or off the map."""
    map_x = int(x)
    map_y = int(y)
    if map_y < 0 or map_y >= len(state.map):
        return True
    row = state.map[map_y]
    if map_x < 0 or map_x >= len(row):
        return True
    return row[map_x] == "1"


def check_collision(state: GameState, x: float, y: float) -> bool:
    """True if a player standing at ``(x, y)`` would touch a wall."""
    b = _COLLISION_BUFFER
    corners = ((x - b, y - b), (x + b, y - b), (x - b, y + b), (x + b, y + b))
    return any(is_wall_at(state, cx, cy) for cx, cy in corners)


def _try_move(state: GameState, dx: float, dy: float) -> None:
    new_x = state.player_pos.x + dx * MOVE_SPEED
    new_y = state.player_pos.y + dy * MOVE_SPEED
    if not check_collision(state, new_x, new_y):
        state.player_pos = Vec2(new_x, new_y)


def move_forward(state: GameState) -> None:
    """Step along the view direction unless a wall is in the way."""
    _try_move(state, state.dir_vec.x, state.dir_vec.y)


def move_backward(state: GameState) -> None:
    """Step against the view direction unless a wall is in the way."""
    _try_move(state, -state.dir_vec.x, -state.dir_vec.y)


def move_left(state: GameState) -> None:
    """Strafe left unless a wall is in the way."""
    _try_move(state, -state.plane_vec.x, -state.plane_vec.y)


def move_right(state: GameState) -> None:
    """Strafe right unless a wall is in the way."""
    _try_move(state, state.plane_vec.x, state.plane_vec.y)


def _rotate(vec: Vec2, angle: float) -> Vec2:
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    return Vec2(vec.x * cos_a - vec.y * sin_a, vec.x * sin_a + vec.y * cos_a)


def _rotate_view(state: GameState, angle: float) -> None:
    direction = _rotate(state.dir_vec, angle)
    state.plane_vec = _rotate(state.plane_vec, angle)
    length = math.hypot(direction.x, direction.y)
    state.dir_vec = Vec2(direction.x / length, direction.y / length)


def rotate_right(state: GameState) -> None:
    """Turn the view clockwise on screen by one rotation step."""
    _rotate_view(state, ROT_SPEED)


def rotate_left(state: GameState) -> None:
    """Turn the view counter-clockwise on screen by one rotation step."""
    _rotate_view(state, -ROT_SPEED)