import pytest

from puzzlebox.day15 import part1, part2, widen_map

SMALL = [
    "########",
    "#..O.O.#",
    "##@.O..#",
    "#...O..#",
    "#.#.O..#",
    "#...O..#",
    "#......#",
    "########",
    "",
    "<^^>>>vv<v>>v<<",
]

WIDE_EXAMPLE = [
    "#######",
    "#...#.#",
    "#.....#",
    "#..OO@#",
    "#..O..#",
    "#.....#",
    "#######",
    "",
    "<vv<<^^<<^^",
]

PUSH_UP = ["#####", "#...#", "#.O.#", "#.@.#", "#####", "", "^"]
PUSHED_UP = ["#####", "#.O.#", "#.@.#", "#...#", "#####", ""]
BLOCKED = ["#####", "#.O.#", "#.@.#", "#####", "", "^"]


def test_part1_worked_example():
    assert part1(SMALL) == 2028


def test_part2_worked_example():
    assert part2(WIDE_EXAMPLE) == 618


def test_widen_map():
    assert widen_map(["#.O@"]) == ["##..[]@."]


def test_widen_map_rejects_unknown_tile():
    with pytest.raises(ValueError):
        widen_map(["#X#"])


def test_part1_push_equals_shifted_map():
    assert part1(PUSH_UP) == part1(PUSHED_UP)


def test_part2_vertical_push_equals_shifted_map():
    assert part2(PUSH_UP) == part2(PUSHED_UP)


def test_push_into_wall_changes_nothing():
    assert part1(BLOCKED) == part1(BLOCKED[:-1])
    assert part2(BLOCKED) == part2(BLOCKED[:-1])


def test_horizontal_push_equals_shifted_map():
    pushed = ["######", "#@O..#", "######", "", ">"]
    shifted = ["######", "#.@O.#", "######", ""]
    assert part1(pushed) == part1(shifted)
    assert part2(pushed) == part2(shifted)


def test_unknown_tile_in_path_raises():
    with pytest.raises(ValueError):
        part1(["#@X#", "", ">"])


def test_missing_robot_raises():
    with pytest.raises(ValueError):
        part1(["#..#", "", ">"])