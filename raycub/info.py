"""Parsing of the texture and colour lines that precede the map."""

from __future__ import annotations

from raycub.state import CubError, GameState

_INVALID_INPUT = "Error\nInvalid input!"
_WRONG_EXTENSION = "Error\nWrong path extension!"
_WHITESPACE = " \t\n\v\f\r"
_TEXTURE_KEYS = {"NO ": "no", "SO ": "so", "WE ": "we", "EA ": "ea"}


def skip_spaces(text: str) -> int:
    """Number of leading space characters in ``text``."""
    return len(text) - len(text.lstrip(" "))


def s_atoi(text: str) -> int:
    """Read a leading integer; values above 255 give -1."""
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = ""
    for char in rest:
        if not "0" <= char <= "9":
            break
        digits += char
    number = sign * int(digits) if digits else 0
    return -1 if number > 255 else number


def check_extensions(path: str) -> str:
    """Return ``path`` if it names an ``.xpm`` file, else raise CubError."""
    if len(path) < 5 or not path.endswith(".xpm"):
        raise CubError(_WRONG_EXTENSION)
    return path


def extract_line(state: GameState, pos: int) -> None:
    """Take the texture path from info line ``pos`` and store it."""
    line = state.info[pos].rstrip(" ")
    state.info[pos] = line
    path = line[2:].lstrip(" ")
    check_extensions(path)
    attribute = {"N": "no", "S": "so", "W": "we", "E": "ea"}.get(line[0])
    if attribute is not None:
        setattr(state.paths, attribute, path)


def _split_channels(line: str) -> list[str]:
    pieces = [piece for piece in line[1:].split(",") if piece]
    if len(pieces) != 3:
        raise CubError(_INVALID_INPUT)
    return [piece.strip(" ") for piece in pieces]


def _validate_channels(channels: list[str]) -> None:
    for channel in channels:
        if len(channel) > 3 or not all("0" <= char <= "9" for char in channel):
            raise CubError(_INVALID_INPUT)


def color_info(state: GameState, flag: str, pos: int) -> None:
    """Parse the ``F`` or ``C`` colour on info line ``pos`` into the state."""
    channels = _split_channels(state.info[pos])
    _validate_channels(channels)
    red, green, blue = (s_atoi(channel) for channel in channels)
    if flag == "F":
        target = state.floor
    elif flag == "C":
        target = state.ceiling
    else:
        return
    target.red, target.green, target.blue = red, green, blue
    if -1 in (red, green, blue):
        raise CubError(_INVALID_INPUT)


def _is_texture_line(state: GameState, line: str) -> bool:
    attribute = _TEXTURE_KEYS.get(line[:3])
    return attribute is not None and getattr(state.paths, attribute) is None


def _is_colour_line(state: GameState, line: str) -> bool:
    return (line.startswith("F") and state.floor.blue == -1) or (
        line.startswith("C") and state.ceiling.blue == -1
    )


def parse_info(state: GameState) -> None:
    """Read texture and colour lines until the first map line."""
    for pos, line in enumerate(state.info):
        if _is_texture_line(state, line):
            extract_line(state, pos)
        elif _is_colour_line(state, line):
            color_info(state, line[0], pos)
        elif line[skip_spaces(line):][:1] == "1":
            return
        else:
            raise CubError(_INVALID_INPUT)