"""Reading a scene file and turning it into a ready game state."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from raycub.info import parse_info
from raycub.mapfile import create_and_validate_map
from raycub.state import UNSET_DIRECTION, CubError, GameState


def read_file_to_string(file_name: str) -> Optional[str]:
    """Return the whole file as text, or None if it is empty."""
    try:
        data = Path(file_name).read_bytes()
    except OSError as err:
        raise CubError(f"open: {err.strerror}") from err
    if not data:
        return None
    return data.decode("latin-1")


def final_check(state: GameState) -> None:
    """Raise CubError unless every required element was given."""
    if not state.paths.complete():
        raise CubError("Error\nNo path found!")
    if state.start_dir == UNSET_DIRECTION:
        raise CubError("Error\nNo direction found!")
    if not state.floor.is_set() or not state.ceiling.is_set():
        raise CubError("Error\nNo color found!")
    if not state.info or not state.map:
        raise CubError("Error\nInvalid input!")


def fill_spaces_with_walls(state: GameState) -> None:
    """Turn every space in the map into a wall."""
    state.map = [row.replace(" ", "1") for row in state.map]


def parse_input(file_name: str, state: GameState) -> GameState:
    """Read and validate the scene file into ``state`` and return it."""
    text = read_file_to_string(file_name)
    if text is None:
        raise CubError("Error\nEmpty file !\n")
    create_and_validate_map(text, state)
    parse_info(state)
    final_check(state)
    fill_spaces_with_walls(state)
    return state