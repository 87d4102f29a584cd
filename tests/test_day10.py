import pytest

from puzzlebox.day10 import parse_map, part1, part2, trail_rating, trail_score

EXAMPLE = [
    "89010123",
    "78121874",
    "87430965",
    "96549874",
    "45678903",
    "32019012",
    "01329801",
    "10456732",
]


def _zeros(grid):
    return [
        (r, c)
        for r, row in enumerate(grid)
        for c, value in enumerate(row)
        if value == 0
    ]


def test_example_part1():
    assert part1(EXAMPLE) == 36


def test_example_part2():
    assert part2(EXAMPLE) == 81


def test_parse_map_reads_heights():
    grid = parse_map(["0123", "4567"])
    assert grid[0][3] == 3
    assert grid[1][0] == 4


def test_rating_never_below_score():
    grid = parse_map(EXAMPLE)
    for start in _zeros(grid):
        assert trail_rating(grid, start) >= trail_score(grid, start)


def test_part1_is_sum_of_scores():
    grid = parse_map(EXAMPLE)
    assert part1(EXAMPLE) == sum(trail_score(grid, s) for s in _zeros(grid))


def test_part2_is_sum_of_ratings():
    grid = parse_map(EXAMPLE)
    assert part2(EXAMPLE) == sum(trail_rating(grid, s) for s in _zeros(grid))


def test_score_bounded_by_number_of_peaks():
    grid = parse_map(EXAMPLE)
    peaks = sum(line.count("9") for line in EXAMPLE)
    for start in _zeros(grid):
        assert trail_score(grid, start) <= peaks


@pytest.mark.parametrize("transform", [lambda l: l[::-1], lambda l: [s[::-1] for s in l]])
def test_mirrored_map_keeps_totals(transform):
    mirrored = transform(EXAMPLE)
    assert part1(mirrored) == part1(EXAMPLE)
    assert part2(mirrored) == part2(EXAMPLE)


def test_straight_line_both_directions():
    assert part1(["0123456789"]) == part1(["9876543210"])
    grid = parse_map(["0123456789"])
    assert trail_rating(grid, (0, 0)) == trail_score(grid, (0, 0))