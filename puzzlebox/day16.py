"""The cheapest route through a reindeer maze."""

from __future__ import annotations

import heapq
from collections.abc import Sequence

NO_PATH = 0x10000000

_START = "S"
_END = "E"
_WALL = "#"
_FLOOR = "."
_TURN_COST = 1000
# East, south, west, north; the reindeer starts facing east.
_HEADINGS = ((0, 1), (1, 0), (0, -1), (-1, 0))

Position = tuple[int, int]


def fill_dead_ends(grid: Sequence[str]) -> list[str]:
    """Wall up floor cells enclosed on exactly three sides until none are left.

    Cells are scanned row by row and filled as they are found.
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
                walls = sum(is_wall(row + dr, col + dc) for dr, dc in _HEADINGS)
                if ch == _FLOOR and walls == 3:
                    line[col] = _WALL
                    changed = True
    return ["".join(line) for line in cells]


def part1(lines: Sequence[str]) -> int:
    """Lowest score from the start to the end tile.

    A step costs 1 and every change of heading costs 1000; the final step onto
    the end tile costs 1 whatever the heading. Returns ``NO_PATH`` if the end
    cannot be reached.
    """
    grid = fill_dead_ends(lines)
    start = next(
        (
            (row, col)
            for row, line in enumerate(grid)
            for col, ch in enumerate(line)
            if ch == _START
        ),
        None,
    )
    if start is None:
        raise ValueError("the maze has no start tile")

    def tile(row: int, col: int) -> str:
        if 0 <= row < len(grid) and 0 <= col < len(grid[row]):
            return grid[row][col]
        return _WALL

    def next_to_end(pos: Position) -> bool:
        return any(tile(pos[0] + dr, pos[1] + dc) == _END for dr, dc in _HEADINGS)

    queue: list[tuple[int, Position, int]] = []
    for heading, (dr, dc) in enumerate(_HEADINGS):
        pos = (start[0] + dr, start[1] + dc)
        if tile(*pos) == _FLOOR:
            cost = 1 + (_TURN_COST if heading else 0)
            heapq.heappush(queue, (cost, pos, heading))

    settled: set[tuple[Position, int]] = set()
    while queue:
        cost, pos, heading = heapq.heappop(queue)
        if (pos, heading) in settled:
            continue
        settled.add((pos, heading))
        if next_to_end(pos):
            return cost + 1
        for turn in (0, 1, -1):
            new_heading = (heading + turn) % len(_HEADINGS)
            dr, dc = _HEADINGS[new_heading]
            following = (pos[0] + dr, pos[1] + dc)
            if tile(*following) == _FLOOR:
                step = 1 + (_TURN_COST if turn else 0)
                heapq.heappush(queue, (cost + step, following, new_heading))
    return NO_PATH