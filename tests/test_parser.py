import pytest

from raycub.parser import (
    fill_spaces_with_walls,
    final_check,
    parse_input,
    read_file_to_string,
)
from raycub.state import CubError, Vec2, new_state

HEADER = [
    "NO ./textures/north.xpm",
    "SO ./textures/south.xpm",
    "WE ./textures/west.xpm",
    "EA ./textures/east.xpm",
    "F 220,100,0",
    "C 225,30,0",
]
MAP = ["111111", "100001", "10N001", "111111"]


def _write(tmp_path, header, rows):
    path = tmp_path / "scene.cub"
    path.write_text("\n".join(header) + "\n\n" + "\n".join(rows) + "\n")
    return str(path)


def test_read_file_round_trip(tmp_path):
    path = tmp_path / "scene.cub"
    content = "NO ./a.xpm\n\n1111\n"
    path.write_text(content)
    assert read_file_to_string(str(path)) == content


def test_read_file_empty_gives_none(tmp_path):
    path = tmp_path / "empty.cub"
    path.write_text("")
    assert read_file_to_string(str(path)) is None


def test_read_file_missing_raises(tmp_path):
    with pytest.raises(CubError, match="open"):
        read_file_to_string(str(tmp_path / "missing.cub"))


def test_parse_input_full_scene(tmp_path):
    state = parse_input(_write(tmp_path, HEADER, MAP), new_state())
    assert state.paths.no == "./textures/north.xpm"
    assert state.paths.ea == "./textures/east.xpm"
    assert (state.floor.red, state.floor.green, state.floor.blue) == (220, 100, 0)
    assert (state.ceiling.red, state.ceiling.green, state.ceiling.blue) == (225, 30, 0)
    assert state.start_dir == "N"
    assert state.player_pos == Vec2(2.5, 2.5)
    assert state.map == MAP


def test_parse_input_fills_spaces(tmp_path):
    rows = ["  111111", "  100001", "1110N001", "11111111"]
    state = parse_input(_write(tmp_path, HEADER, rows), new_state())
    assert all(" " not in row for row in state.map)
    assert [len(row) for row in state.map] == [len(row) for row in rows]


def test_parse_input_empty_file(tmp_path):
    path = tmp_path / "empty.cub"
    path.write_text("")
    with pytest.raises(CubError, match="Empty file"):
        parse_input(str(path), new_state())


def test_parse_input_missing_path(tmp_path):
    header = [line for line in HEADER if not line.startswith("EA")]
    with pytest.raises(CubError, match="No path found"):
        parse_input(_write(tmp_path, header, MAP), new_state())


def test_parse_input_missing_colour(tmp_path):
    header = [line for line in HEADER if not line.startswith("C")]
    with pytest.raises(CubError, match="No color found"):
        parse_input(_write(tmp_path, header, MAP), new_state())


def test_parse_input_missing_player(tmp_path):
    rows = ["111111", "100001", "100001", "111111"]
    with pytest.raises(CubError, match="No direction found"):
        parse_input(_write(tmp_path, HEADER, rows), new_state())


def test_final_check_requires_map_and_info():
    state = new_state()
    state.paths.no = state.paths.so = state.paths.we = state.paths.ea = "x.xpm"
    state.start_dir = "N"
    state.floor.red = state.floor.green = state.floor.blue = 1
    state.ceiling.red = state.ceiling.green = state.ceiling.blue = 1
    with pytest.raises(CubError, match="Invalid input"):
        final_check(state)


def test_fill_spaces_with_walls_only_changes_spaces():
    state = new_state()
    state.map = [" 1 ", "10N1"]
    fill_spaces_with_walls(state)
    assert state.map == ["111", "10N1"]