"""Arranging striped towels into requested designs."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from functools import lru_cache

from .utility import split


def _counter(patterns: Iterable[str]) -> Callable[[str], int]:
    towels = tuple(patterns)
    if any(not towel for towel in towels):
        raise ValueError("towel patterns must not be empty")

    @lru_cache(maxsize=None)
    def count(design: str) -> int:
        total = 0
        for towel in towels:
            if not design.startswith(towel):
                continue
            if towel == design:
                total += 1
            else:
                total += count(design[len(towel) :])
        return total

    return count


def count_arrangements(patterns: Iterable[str], design: str) -> int:
    """Number of ways to build ``design`` by laying towels end to end."""
    return _counter(patterns)(design)


def _parse(lines: Sequence[str]) -> tuple[list[str], list[str]]:
    if not lines:
        raise ValueError("the input has no towel patterns")
    patterns = [piece.lstrip() for piece in split(lines[0], ",")]
    return [p for p in patterns if p], list(lines[2:])


def part1(lines: Sequence[str]) -> int:
    """Number of designs that can be built at all."""
    patterns, designs = _parse(lines)
    count = _counter(patterns)
    return sum(count(design) > 0 for design in designs)


def part2(lines: Sequence[str]) -> int:
    """Total number of ways to build every design."""
    patterns, designs = _parse(lines)
    count = _counter(patterns)
    return sum(count(design) for design in designs)