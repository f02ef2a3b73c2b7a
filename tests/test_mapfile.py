import pytest

from raycub.mapfile import (
    check_empty_lines,
    create_and_validate_map,
    map_exists,
    split_lines,
    valid_map,
)
from raycub.state import FOV_LEN, CubError, new_state


def _state_with_map(rows):
    state = new_state()
    state.map = list(rows)
    return state


def test_split_lines_drops_empty():
    assert split_lines("a\n\nb\n") == ["a", "b"]
    assert split_lines("\n\n") == []


def test_map_exists_finds_first_wall_line():
    text = "NO ./n.xpm\nF 1,2,3\n111\n101\n"
    index = map_exists(text)
    assert index == text.index("111")


def test_map_exists_allows_leading_spaces():
    text = "C 0,0,0\n  111\n"
    assert text[map_exists(text):] == "  111\n"


def test_map_exists_ignores_first_line():
    with pytest.raises(CubError, match="No map found"):
        map_exists("111\n")


def test_map_exists_without_map():
    with pytest.raises(CubError, match="No map found"):
        map_exists("NO a.xpm\nSO b.xpm\n")


def test_empty_line_inside_map_rejected():
    with pytest.raises(CubError, match="Empty line in map"):
        check_empty_lines("111\n\n101\n")


def test_space_only_line_inside_map_rejected():
    with pytest.raises(CubError, match="Empty line in map"):
        check_empty_lines("111\n   \n111\n")


def test_trailing_spaces_without_newline_after_blank_rejected():
    with pytest.raises(CubError, match="Empty line in map"):
        check_empty_lines("111\n\n   ")


def test_valid_map_places_north_player():
    state = _state_with_map(["1111", "1N01", "1111"])
    valid_map(state)
    assert state.start_dir == "N"
    assert (state.dir_vec.x, state.dir_vec.y) == (0.0, -1.0)
    assert state.player_pos.x == pytest.approx(1.5)
    assert state.player_pos.y == pytest.approx(1.5)
    assert state.plane_vec.x == pytest.approx(FOV_LEN)
    assert state.plane_vec.y == pytest.approx(0.0)


@pytest.mark.parametrize(
    "char, direction",
    [("S", (0.0, 1.0)), ("W", (-1.0, 0.0)), ("E", (1.0, 0.0))],
)
def test_valid_map_directions(char, direction):
    state = _state_with_map(["1111", f"1{char}01", "1111"])
    valid_map(state)
    assert state.start_dir == char
    assert (state.dir_vec.x, state.dir_vec.y) == direction
    plane = (state.plane_vec.x, state.plane_vec.y)
    assert plane[0] * direction[0] + plane[1] * direction[1] == pytest.approx(0.0)
    assert (plane[0] ** 2 + plane[1] ** 2) ** 0.5 == pytest.approx(FOV_LEN)


def test_valid_map_without_player_keeps_direction_unset():
    state = _state_with_map(["111", "101", "111"])
    valid_map(state)
    assert state.start_dir == "D"


def test_valid_map_with_space_padding():
    state = _state_with_map([" 111", " 1N1", " 111"])
    valid_map(state)
    assert state.start_dir == "N"
    assert state.player_pos.x == pytest.approx(2.5)


@pytest.mark.parametrize(
    "rows",
    [
        ["1111", "10N1", "1101"],
        ["11111", "1NS01", "11111"],
        ["1111", "1NX1", "1111"],
        ["11111", "10 01", "11111"],
        ["N111", "1011", "1111"],
        ["1111", "1N0", "1111"],
    ],
)
def test_invalid_maps_rejected(rows):
    with pytest.raises(CubError, match="Invalid input"):
        valid_map(_state_with_map(rows))


def test_create_and_validate_map_fills_state():
    text = "NO ./n.xpm\nF 1,2,3\n\n1111\n1N01\n1111\n"
    state = new_state()
    create_and_validate_map(text, state)
    assert state.map == ["1111", "1N01", "1111"]
    assert state.info == ["NO ./n.xpm", "F 1,2,3", "1111", "1N01", "1111"]
    assert state.start_dir == "N"


def test_create_and_validate_map_trailing_blank_lines_allowed():
    text = "C 0,0,0\n111\n1S1\n111\n\n\n"
    state = new_state()
    create_and_validate_map(text, state)
    assert state.map == ["111", "1S1", "111"]
    assert state.start_dir == "S"


def test_create_and_validate_map_rejects_gap():
    state = new_state()
    with pytest.raises(CubError, match="Empty line in map"):
        create_and_validate_map("C 0,0,0\n1111\n\n1N01\n1111\n", state)