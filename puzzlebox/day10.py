"""Hiking trails on a topographic map."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Iterator, Sequence

Grid = list[list[int]]
Position = tuple[int, int]

_TRAILHEAD = 0
_PEAK = 9
_STEPS = ((-1, 0), (1, 0), (0, -1), (0, 1))


def parse_map(lines: Iterable[str]) -> Grid:
    """Turn each character into its height, measured from the character '0'."""
    return [[ord(ch) - ord("0") for ch in line] for line in lines]


def _neighbours(grid: Sequence[Sequence[int]], position: Position) -> Iterator[Position]:
    height = len(grid)
    width = len(grid[0])
    row, col = position
    for dr, dc in _STEPS:
        r, c = row + dr, col + dc
        if 0 <= r < height and 0 <= c < width:
            yield r, c


def _climb(grid: Sequence[Sequence[int]], start: Position) -> Counter[Position]:
    """Count the distinct uphill paths from ``start`` to each peak."""
    frontier: Counter[Position] = Counter({start: 1})
    for level in range(_TRAILHEAD + 1, _PEAK + 1):
        following: Counter[Position] = Counter()
        for position, paths in frontier.items():
            for r, c in _neighbours(grid, position):
                if grid[r][c] == level:
                    following[(r, c)] += paths
        frontier = following
    return frontier


def trail_score(grid: Sequence[Sequence[int]], start: Position) -> int:
    """Number of distinct peaks reachable from ``start`` by climbing one step at a time."""
    return len(_climb(grid, start))


def trail_rating(grid: Sequence[Sequence[int]], start: Position) -> int:
    """Number of distinct hiking trails that begin at ``start``."""
    return sum(_climb(grid, start).values())


def _trailheads(grid: Sequence[Sequence[int]]) -> Iterator[Position]:
    if not grid:
        return
    width = len(grid[0])
    for row, heights in enumerate(grid):
        for col in range(width):
            if heights[col] == _TRAILHEAD:
                yield row, col


def part1(lines: Iterable[str]) -> int:
    """Sum of the scores of all trailheads."""
    grid = parse_map(lines)
    return sum(trail_score(grid, start) for start in _trailheads(grid))


def part2(lines: Iterable[str]) -> int:
    """Sum of the ratings of all trailheads."""
    grid = parse_map(lines)
    return sum(trail_rating(grid, start) for start in _trailheads(grid))