"""Safety checks of reactor level reports."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import pairwise

from .utility import split

_DIRECTIONS = (1, -1)


def _first_violation(levels: Sequence[int], direction: int) -> int | None:
    """Index of the first pair that does not step by 1..3 in ``direction``."""
    return next(
        (
            index
            for index, (a, b) in enumerate(pairwise(levels))
            if not 1 <= (b - a) * direction <= 3
        ),
        None,
    )


def is_safe(levels: Sequence[int]) -> bool:
    """True if the levels strictly rise or fall by 1 to 3 at every step."""
    return any(_first_violation(levels, d) is None for d in _DIRECTIONS)


def is_safe_dampened(levels: Sequence[int]) -> bool:
    """True if the report is safe, or becomes safe by dropping a level at the first fault."""
    for direction in _DIRECTIONS:
        index = _first_violation(levels, direction)
        if index is None:
            return True
        candidates = (
            [*levels[:index], *levels[index + 1 :]],
            [*levels[: index + 1], *levels[index + 2 :]],
        )
        if any(_first_violation(c, direction) is None for c in candidates):
            return True
    return False


def _reports(lines: Iterable[str]) -> list[list[int]]:
    return [[int(value) for value in split(line, " ")] for line in lines]


def part1(lines: Iterable[str]) -> int:
    """Number of safe reports."""
    return sum(is_safe(report) for report in _reports(lines))


def part2(lines: Iterable[str]) -> int:
    """Number of reports that are safe with the problem dampener."""
    return sum(is_safe_dampened(report) for report in _reports(lines))