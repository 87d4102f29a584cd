"""A robot pushing boxes around a warehouse."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import takewhile

Grid = list[list[str]]
Position = tuple[int, int]

_WALL = "#"
_FLOOR = "."
_ROBOT = "@"
_BOX = "O"
_BOX_LEFT = "["
_BOX_RIGHT = "]"
_MOVES = {"<": (0, -1), "v": (1, 0), ">": (0, 1), "^": (-1, 0)}
_WIDE = {"#": "##", ".": "..", "O": "[]", "@": "@."}


def _split_input(lines: Iterable[str]) -> tuple[list[str], str]:
    lines = list(lines)
    warehouse = list(takewhile(bool, lines))
    moves = "".join(lines[len(warehouse) + 1 :])
    return warehouse, moves


def _find_robot(grid: Grid) -> Position:
    for row, cells in enumerate(grid):
        for col, ch in enumerate(cells):
            if ch == _ROBOT:
                return row, col
    raise ValueError("the warehouse has no robot")


def _push(grid: Grid, pos: Position, delta: Position, boxes: str) -> bool:
    """Move the item at ``pos`` one step, pushing any boxes in a straight line."""
    (row, col), (dr, dc) = pos, delta
    nr, nc = row + dr, col + dc
    tile = grid[nr][nc]
    if tile == _WALL:
        return False
    if tile in boxes:
        if not _push(grid, (nr, nc), delta, boxes):
            return False
    elif tile != _FLOOR:
        raise ValueError(f"unexpected tile {tile!r} at {(nr, nc)}")
    grid[nr][nc], grid[row][col] = grid[row][col], grid[nr][nc]
    return True


def _can_shift(grid: Grid, pos: Position, dr: int) -> bool:
    """True if the item at ``pos`` and every wide box it touches can move vertically."""
    row, col = pos
    nr = row + dr
    tile = grid[nr][col]
    if tile == _WALL:
        return False
    if tile == _FLOOR:
        return True
    if tile == _BOX_LEFT:
        return _can_shift(grid, (nr, col), dr) and _can_shift(grid, (nr, col + 1), dr)
    if tile == _BOX_RIGHT:
        return _can_shift(grid, (nr, col), dr) and _can_shift(grid, (nr, col - 1), dr)
    raise ValueError(f"unexpected tile {tile!r} at {(nr, col)}")


def _shift(grid: Grid, pos: Position, dr: int) -> None:
    """Move the item at ``pos`` vertically, carrying the wide boxes in its way."""
    row, col = pos
    nr = row + dr
    tile = grid[nr][col]
    if tile == _BOX_LEFT:
        _shift(grid, (nr, col), dr)
        _shift(grid, (nr, col + 1), dr)
    elif tile == _BOX_RIGHT:
        _shift(grid, (nr, col), dr)
        _shift(grid, (nr, col - 1), dr)
    elif tile != _FLOOR:
        return
    grid[nr][col], grid[row][col] = grid[row][col], grid[nr][col]


def _gps_sum(grid: Grid, box: str) -> int:
    return sum(
        100 * row + col
        for row, cells in enumerate(grid)
        for col, ch in enumerate(cells)
        if ch == box
    )


def widen_map(lines: Iterable[str]) -> list[str]:
    """Double the width of a warehouse map; boxes become ``[]``."""
    try:
        return ["".join(_WIDE[ch] for ch in line) for line in lines]
    except KeyError as exc:
        raise ValueError(f"unexpected map character {exc.args[0]!r}") from exc


def part1(lines: Iterable[str]) -> int:
    """Sum of box GPS coordinates after the robot has made all its moves."""
    warehouse, moves = _split_input(lines)
    grid = [list(row) for row in warehouse]
    robot = _find_robot(grid)
    for move in moves:
        delta = _MOVES.get(move)
        if delta is not None and _push(grid, robot, delta, _BOX):
            robot = (robot[0] + delta[0], robot[1] + delta[1])
    return _gps_sum(grid, _BOX)


def part2(lines: Iterable[str]) -> int:
    """Sum of box GPS coordinates in the widened warehouse."""
    warehouse, moves = _split_input(lines)
    grid = [list(row) for row in widen_map(warehouse)]
    robot = _find_robot(grid)
    for move in moves:
        delta = _MOVES.get(move)
        if delta is None:
            continue
        dr, dc = delta
        if dr == 0:
            moved = _push(grid, robot, delta, _BOX_LEFT + _BOX_RIGHT)
        else:
            moved = _can_shift(grid, robot, dr)
            if moved:
                _shift(grid, robot, dr)
        if moved:
            robot = (robot[0] + dr, robot[1] + dc)
    return _gps_sum(grid, _BOX_LEFT)