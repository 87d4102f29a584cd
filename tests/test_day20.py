import pytest

from puzzlebox.day20 import NO_PATH, part1, race_length


def u_track(depth, gap=False):
    """Start and end side by side, joined by a U-shaped corridor."""
    rows = ["#####", "#S.E#" if gap else "#S#E#"]
    rows += ["#.#.#"] * (depth - 1)
    rows += ["#...#", "#####"]
    return rows


def test_longer_track_takes_two_more_steps_per_row():
    for depth in (3, 10, 40):
        assert race_length(u_track(depth + 1)) - race_length(u_track(depth)) == 2


def test_gap_between_start_and_end():
    assert race_length(u_track(20, gap=True)) == 2


def test_gap_is_never_slower_than_detour():
    for depth in (2, 5, 30):
        assert race_length(u_track(depth, gap=True)) <= race_length(u_track(depth))


def test_unreachable_end_gives_no_path():
    grid = ["#####", "#S#E#", "#.#.#", "#####"]
    assert race_length(grid) == NO_PATH


def test_enclosed_start_raises():
    with pytest.raises(ValueError):
        race_length(["###", "#S#", "###"])


def test_missing_start_raises():
    with pytest.raises(ValueError):
        race_length(["###", "#.#", "###"])


def test_short_track_has_no_worthwhile_cheat():
    assert part1(u_track(10)) == 0


def test_long_track_counts_cheats_saving_a_hundred():
    assert part1(u_track(60)) == 11


def test_more_cheats_pay_off_on_longer_tracks():
    assert part1(u_track(61)) >= part1(u_track(60))