"""Checks on the name of the scene file given on the command line."""

from __future__ import annotations

from raycub.state import CubError

_INVALID_FORMAT = "Error\ninvalid input format"


def validate_file_extension(file_name: str) -> str:
    """Return the name if it names a ``.cub`` file, else raise CubError."""
    found = file_name.find(".cub")
    if found < 0 or len(file_name) - found > 4:
        raise CubError(_INVALID_FORMAT)
    slash = file_name.rfind("/")
    if slash >= 0 and len(file_name) - slash - 1 < 5:
        raise CubError(_INVALID_FORMAT)
    if len(file_name) < 5:
        raise CubError(_INVALID_FORMAT)
    return file_name