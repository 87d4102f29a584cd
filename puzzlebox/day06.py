"""A guard patrolling a lab map."""

from __future__ import annotations

from collections.abc import Sequence

Position = tuple[int, int]

_GUARD = "^"
_OBSTACLE = "#"
# Up, right, down, left: the guard turns right when blocked.
_HEADINGS = ((-1, 0), (0, 1), (1, 0), (0, -1))


def find_start(grid: Sequence[str]) -> Position | None:
    """Return the (row, column) of the guard, or None if there is none."""
    width = len(grid[0]) if grid else 0
    return next(
        (
            (row, col)
            for row, line in enumerate(grid)
            for col, ch in enumerate(line[:width])
            if ch == _GUARD
        ),
        None,
    )


def _patrol(
    grid: Sequence[str], start: Position, extra: Position | None = None
) -> tuple[set[Position], bool]:
    """Follow the guard from ``start``; return the visited cells and whether it loops.

    ``extra`` is an additional obstacle placed on the map.
    """
    height = len(grid)
    width = len(grid[0]) if grid else 0

    def inside(row: int, col: int) -> bool:
        return 0 <= row < height and 0 <= col < width

    def blocked(row: int, col: int) -> bool:
        return (row, col) == extra or grid[row][col] == _OBSTACLE

    (row, col), heading = start, 0
    visited: set[Position] = set()
    states: set[tuple[int, int, int]] = set()
    while inside(row, col):
        state = (row, col, heading)
        if state in states:
            return visited, True
        states.add(state)
        visited.add((row, col))
        dr, dc = _HEADINGS[heading]
        ahead = (row + dr, col + dc)
        if inside(*ahead) and blocked(*ahead):
            heading = (heading + 1) % len(_HEADINGS)
        else:
            row, col = ahead
    return visited, False


def walk(grid: Sequence[str]) -> set[Position]:
    """Return every cell the guard covers before leaving the map.

    Raises ValueError if the guard walks in a loop and never leaves.
    """
    start = find_start(grid)
    if start is None:
        return set()
    visited, looped = _patrol(grid, start)
    if looped:
        raise ValueError("the guard never leaves the map")
    return visited


def part1(lines: Sequence[str]) -> int:
    """Number of distinct cells the guard visits."""
    return len(walk(lines))


def part2(lines: Sequence[str]) -> int:
    """Number of cells on the guard's path where one obstacle traps it in a loop."""
    start = find_start(lines)
    if start is None:
        return 0
    return sum(_patrol(lines, start, cell)[1] for cell in walk(lines))