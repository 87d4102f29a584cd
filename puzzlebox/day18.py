"""Falling bytes corrupting a memory grid."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .utility import split

SIZE = 73
_LAST = SIZE - 1
_WALL = "#"
_FLOOR = "."
_FIRST_BYTES = 1024
_MORE_BYTES = 2915
_STEPS = ((1, 0), (-1, 0), (0, 1), (0, -1))


def build_memory(lines: Iterable[str], count: int) -> list[str]:
    """Return the walled grid after the first ``count`` bytes have fallen.

    Each input line ``x,y`` corrupts row ``x + 1``, column ``y + 1``; the start
    ``S`` sits at (1, 1) and the exit ``E`` at (71, 71).
    """
    lines = list(lines)
    if len(lines) < count:
        raise ValueError(f"need {count} byte positions, got {len(lines)}")
    grid = [
        [_WALL if i in (0, _LAST) or j in (0, _LAST) else _FLOOR for j in range(SIZE)]
        for i in range(SIZE)
    ]
    for line in lines[:count]:
        parts = split(line, ",")
        if len(parts) < 2:
            raise ValueError(f"malformed byte position: {line!r}")
        row, col = int(parts[0]) + 1, int(parts[1]) + 1
        if not (0 <= row < SIZE and 0 <= col < SIZE):
            raise ValueError(f"byte position outside memory: {line!r}")
        grid[row][col] = _WALL
    grid[1][1] = "S"
    grid[_LAST - 1][_LAST - 1] = "E"
    return ["".join(row) for row in grid]


def fill_dead_ends(grid: Sequence[str], threshold: int = 3) -> list[str]:
    """Wall up floor cells with at least 3 and at most ``threshold`` walls around them.

    Cells are scanned row by row and filled as they are found, repeating until
    nothing changes. Positions off the grid count as walls.
    """
    cells = [list(row) for row in grid]

    def is_wall(row: int, col: int) -> bool:
        inside = 0 <= row < len(cells) and 0 <= col < len(cells[row])
        return not inside or cells[row][col] == _WALL

    changed = True
    while changed:
        changed = False
        for row, line in enumerate(cells):
            for col, ch in enumerate(line):
                if ch != _FLOOR:
                    continue
                walls = sum(is_wall(row + dr, col + dc) for dr, dc in _STEPS)
                if 3 <= walls <= threshold:
                    line[col] = _WALL
                    changed = True
    return ["".join(line) for line in cells]


def part1(lines: Iterable[str]) -> str:
    """The memory map after 1024 bytes with its dead ends filled, for reading by eye."""
    return "\n".join(fill_dead_ends(build_memory(lines, _FIRST_BYTES), 3))


def part2(lines: Iterable[str]) -> str:
    """The memory map after 2915 bytes, filling enclosed cells too."""
    return "\n".join(fill_dead_ends(build_memory(lines, _MORE_BYTES), 4))