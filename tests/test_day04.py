from puzzlebox.day04 import part1, part2

EXAMPLE = [
    "MMMSXXMASM",
    "MSAMXMSMSA",
    "AMXSXMAAMM",
    "MSAMASMSMX",
    "XMASAMXAMM",
    "XXAMMXXAMA",
    "SMSMSASXSS",
    "SAXAMASAAA",
    "MAMMMXMMMM",
    "MXMXAXMASX",
]


def _transpose(lines):
    return ["".join(column) for column in zip(*lines)]


def _mirror(lines):
    return [line[::-1] for line in lines]


def test_part1_example():
    assert part1(EXAMPLE) == 18


def test_part2_example():
    assert part2(EXAMPLE) == 9


def test_part1_invariant_under_transpose():
    assert part1(_transpose(EXAMPLE)) == part1(EXAMPLE)


def test_part1_invariant_under_mirror():
    assert part1(_mirror(EXAMPLE)) == part1(EXAMPLE)
    assert part1(EXAMPLE[::-1]) == part1(EXAMPLE)


def test_part2_invariant_under_symmetries():
    assert part2(_transpose(EXAMPLE)) == part2(EXAMPLE)
    assert part2(_mirror(EXAMPLE)) == part2(EXAMPLE)
    assert part2(EXAMPLE[::-1]) == part2(EXAMPLE)


def test_forward_and_backward_words_count_alike():
    assert part1(["XMAS"]) == part1(["SAMX"])
    assert part1(["X", "M", "A", "S"]) == part1(["XMAS"])


def test_overlapping_words_both_count():
    assert part1(["XMASAMX"]) == part1(["XMAS"]) + part1(["SAMX"])


def test_single_cross():
    assert part2(["M.S", ".A.", "M.S"]) == part1(["XMAS"])


def test_same_letters_on_diagonal_do_not_cross():
    assert part2(["M.M", ".A.", "M.M"]) < part2(["M.S", ".A.", "M.S"])