import pytest

from puzzlebox.day19 import count_arrangements, part1, part2

EXAMPLE = [
    "r, wr, b, g, bwu, rb, gb, br",
    "",
    "brwrr",
    "bggr",
    "gbbr",
    "rrbgbr",
    "ubwu",
    "bwurrg",
    "brgr",
    "bbrgwb",
]

PATTERNS = ["r", "wr", "b", "g", "bwu", "rb", "gb", "br"]


def test_part1_example():
    assert part1(EXAMPLE) == 6


def test_part2_example():
    assert part2(EXAMPLE) == 16


def test_part1_counts_designs_with_an_arrangement():
    expected = sum(count_arrangements(PATTERNS, d) > 0 for d in EXAMPLE[2:])
    assert part1(EXAMPLE) == expected


def test_part2_is_sum_of_arrangements():
    total = sum(count_arrangements(PATTERNS, d) for d in EXAMPLE[2:])
    assert part2(EXAMPLE) == total
    assert part2(EXAMPLE) >= part1(EXAMPLE)


def test_unbuildable_design_has_no_arrangement():
    assert not count_arrangements(PATTERNS, "ubwu")
    assert not count_arrangements(PATTERNS, "bbrgwb")


def test_single_towel_covers_repeats_once():
    assert count_arrangements(["ab"], "ab" * 5) == count_arrangements(["ab"], "ab")


def test_empty_design_has_no_arrangement():
    assert not count_arrangements(PATTERNS, "")


def test_empty_pattern_is_rejected():
    with pytest.raises(ValueError):
        count_arrangements(["a", ""], "aa")


def test_blank_pattern_pieces_are_ignored_when_parsing():
    lines = ["r, , b", "", "rb"]
    assert part2(lines) == count_arrangements(["r", "b"], "rb")