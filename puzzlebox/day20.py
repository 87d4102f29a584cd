"""Race times through a track and the walls worth cheating through."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator, Sequence

NO_PATH = 0x10000000

_START = "S"
_END = "E"
_WALL = "#"
_FLOOR = "."
_MIN_SAVING = 100
_STEPS = ((0, 1), (0, -1), (1, 0), (-1, 0))

Position = tuple[int, int]


def _tile(grid: Sequence[str], row: int, col: int) -> str:
    if 0 <= row < len(grid) and 0 <= col < len(grid[row]):
        return grid[row][col]
    return _WALL


def _neighbours(pos: Position) -> Iterator[Position]:
    row, col = pos
    for dr, dc in _STEPS:
        yield row + dr, col + dc


def _find_start(grid: Sequence[str]) -> Position:
    for row, line in enumerate(grid):
        col = line.find(_START)
        if col != -1:
            return row, col
    raise ValueError("the track has no start tile")


def _distances(grid: Sequence[str], sources: Iterable[Position]) -> dict[Position, int]:
    """Breadth-first distances over floor cells, each source counting as 1."""
    distances = {source: 1 for source in sources}
    queue = deque(distances)
    while queue:
        pos = queue.popleft()
        for following in _neighbours(pos):
            if following not in distances and _tile(grid, *following) == _FLOOR:
                distances[following] = distances[pos] + 1
                queue.append(following)
    return distances


def _from_start(grid: Sequence[str], start: Position) -> dict[Position, int]:
    openings = [p for p in _neighbours(start) if _tile(grid, *p) == _FLOOR]
    if not openings:
        raise ValueError("the start tile has no open neighbour")
    return _distances(grid, openings)


def _goal_cells(grid: Sequence[str]) -> list[Position]:
    """Floor cells from which one more step reaches an end tile."""
    return [
        (row, col)
        for row, line in enumerate(grid)
        for col, ch in enumerate(line)
        if ch == _FLOOR
        and any(_tile(grid, *p) == _END for p in _neighbours((row, col)))
    ]


def race_length(grid: Sequence[str]) -> int:
    """Steps of the shortest route from the start to the end, or ``NO_PATH``."""
    from_start = _from_start(grid, _find_start(grid))
    return min(
        (from_start[goal] + 1 for goal in _goal_cells(grid) if goal in from_start),
        default=NO_PATH,
    )


def part1(lines: Sequence[str]) -> int:
    """Number of single interior walls whose removal saves at least 100 steps."""
    grid = list(lines)
    baseline = race_length(grid)
    start = _find_start(grid)
    from_start = _from_start(grid, start)
    to_goal = _distances(grid, _goal_cells(grid))
    width = len(grid[0]) if grid else 0

    def through(wall: Position) -> int:
        reach = NO_PATH
        leave = NO_PATH
        for neighbour in _neighbours(wall):
            if neighbour == start:
                reach = min(reach, 1)
            if _tile(grid, *neighbour) == _END:
                leave = min(leave, 1)
            if neighbour in from_start:
                reach = min(reach, from_start[neighbour] + 1)
            if neighbour in to_goal:
                leave = min(leave, to_goal[neighbour] + 1)
        if reach == NO_PATH or leave == NO_PATH:
            return NO_PATH
        return reach + leave

    return sum(
        1
        for row in range(1, len(grid) - 1)
        for col in range(1, width - 1)
        if _tile(grid, row, col) == _WALL
        and baseline - min(baseline, through((row, col))) >= _MIN_SAVING
    )