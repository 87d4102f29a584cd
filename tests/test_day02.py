import pytest

from puzzlebox.day02 import is_safe, is_safe_dampened, part1, part2

EXAMPLE = [
    "7 6 4 2 1",
    "1 2 7 8 9",
    "9 7 6 2 1",
    "1 3 2 4 5",
    "8 6 4 4 1",
    "1 3 6 7 9",
]


def _levels(line):
    return [int(v) for v in line.split()]


def test_part1_example():
    assert part1(EXAMPLE) == 2


def test_part2_example():
    assert part2(EXAMPLE) == 4


def test_increasing_and_decreasing_reports_are_safe():
    assert is_safe([1, 2, 3])
    assert is_safe([9, 6, 3])


def test_flat_or_large_steps_are_unsafe():
    assert not is_safe([1, 1, 2])
    assert not is_safe([1, 5, 6])


def test_dampener_removes_single_fault():
    assert not is_safe([1, 3, 2, 4, 5])
    assert is_safe_dampened([1, 3, 2, 4, 5])


def test_dampener_cannot_fix_two_faults():
    assert not is_safe_dampened([1, 2, 7, 8, 9])


@pytest.mark.parametrize("line", EXAMPLE)
def test_safe_implies_dampened_safe(line):
    levels = _levels(line)
    assert not is_safe(levels) or is_safe_dampened(levels)


@pytest.mark.parametrize("line", EXAMPLE)
def test_reversal_preserves_safety(line):
    levels = _levels(line)
    assert is_safe(levels[::-1]) == is_safe(levels)


def test_part1_not_above_part2():
    assert part1(EXAMPLE) <= part2(EXAMPLE) <= len(EXAMPLE)