"""Locating, splitting and validating the map section of a scene file."""

from __future__ import annotations

import re

from raycub.state import FOV_LEN, UNSET_DIRECTION, CubError, GameState, Vec2

_MAP_START = re.compile(r"\n *1")
_DIRECTIONS = {
    "N": (0.0, -1.0),
    "S": (0.0, 1.0),
    "W": (-1.0, 0.0),
    "E": (1.0, 0.0),
}
_INVALID_INPUT = "Error\nInvalid input!"


def split_lines(text: str) -> list[str]:
    """Split on newlines, dropping empty pieces."""
    return [line for line in text.split("\n") if line]


def map_exists(text: str) -> int:
    """Index where the map begins: the first line after a newline whose
    first non-space character is ``1``."""
    match = _MAP_START.search(text)
    if match is None:
        raise CubError("Error\nNo map found!")
    return match.start() + 1


def check_empty_lines(map_text: str) -> None:
    """Raise CubError if an empty line is followed by more map content."""
    parts = map_text.split("\n")
    seen_empty = False
    for index, part in enumerate(parts):
        last = index == len(parts) - 1
        if last and not part:
            break
        if not last and not part.strip(" "):
            seen_empty = True
        elif seen_empty:
            raise CubError("Error\nEmpty line in map!")


def _is_open(char: str) -> bool:
    return char not in "1 "


def _bad_at_edge(rows: list[str], x: int, y: int) -> bool:
    """True if the cell is on an edge of the enclosed area but not closed."""
    row = rows[y]
    here = row[x]
    if x == 0 or y == 0:
        return _is_open(here)
    if y + 1 >= len(rows) or x + 1 >= len(row):
        return _is_open(here)
    above, below = rows[y - 1], rows[y + 1]
    if len(above) <= x + 1 or len(below) <= x + 1:
        return _is_open(here)
    neighbours = (
        above[x - 1], above[x], above[x + 1],
        row[x - 1], row[x + 1],
        below[x - 1], below[x], below[x + 1],
    )
    if " " in neighbours:
        return _is_open(here)
    return False


def _place_player(state: GameState, x: int, y: int) -> None:
    direction = state.map[y][x]
    state.start_dir = direction
    dx, dy = _DIRECTIONS[direction]
    state.dir_vec = Vec2(dx, dy)
    state.player_pos = Vec2(x + 0.5, y + 0.5)
    state.plane_vec = Vec2(-(FOV_LEN * dy), FOV_LEN * dx)


def valid_map(state: GameState) -> None:
    """Check the map characters and walls, and place the player."""
    for y, row in enumerate(state.map):
        for x, char in enumerate(row):
            if char not in " 10":
                if char in _DIRECTIONS and state.start_dir == UNSET_DIRECTION:
                    _place_player(state, x, y)
                else:
                    raise CubError(_INVALID_INPUT)
            if _bad_at_edge(state.map, x, y):
                raise CubError(_INVALID_INPUT)


def create_and_validate_map(text: str, state: GameState) -> None:
    """Fill ``state.info`` and ``state.map`` from the scene text and validate the map."""
    start = map_exists(text)
    map_text = text[start:]
    check_empty_lines(map_text)
    state.info = split_lines(text)
    state.map = split_lines(map_text)
    valid_map(state)