"""Word search for XMAS."""

from __future__ import annotations

from collections.abc import Sequence

_WORD = "XMAS"
_DIRECTIONS = tuple(
    (dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0)
)
_DIAGONAL = {"M", "S"}


def _read(lines: Sequence[str], row: int, col: int, dr: int, dc: int) -> str | None:
    chars = []
    for step in range(len(_WORD)):
        r, c = row + dr * step, col + dc * step
        if not (0 <= r < len(lines) and 0 <= c < len(lines[r])):
            return None
        chars.append(lines[r][c])
    return "".join(chars)


def part1(lines: Sequence[str]) -> int:
    """Count occurrences of XMAS in all eight directions."""
    return sum(
        1
        for row, line in enumerate(lines)
        for col, ch in enumerate(line)
        if ch == _WORD[0]
        for dr, dc in _DIRECTIONS
        if _read(lines, row, col, dr, dc) == _WORD
    )


def _is_x_mas(lines: Sequence[str], row: int, col: int) -> bool:
    if lines[row][col] != "A":
        return False
    falling = {lines[row - 1][col - 1], lines[row + 1][col + 1]}
    rising = {lines[row - 1][col + 1], lines[row + 1][col - 1]}
    return falling == _DIAGONAL and rising == _DIAGONAL


def part2(lines: Sequence[str]) -> int:
    """Count crosses of two MAS words sharing their A."""
    return sum(
        1
        for row in range(1, len(lines) - 1)
        for col in range(1, len(lines[row]) - 1)
        if _is_x_mas(lines, row, col)
    )