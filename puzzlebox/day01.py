"""Comparing two lists of location IDs."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

from .utility import split


def parse_lists(lines: Iterable[str]) -> tuple[list[int], list[int]]:
    """Return the left and right columns of the input as integer lists."""
    left: list[int] = []
    right: list[int] = []
    for line in lines:
        parts = split(line, " ")
        if not parts:
            raise ValueError(f"malformed line: {line!r}")
        left.append(int(parts[0]))
        right.append(int(parts[-1]))
    return left, right


def part1(lines: Iterable[str]) -> int:
    """Total distance between the sorted columns."""
    left, right = parse_lists(lines)
    return sum(abs(a - b) for a, b in zip(sorted(left), sorted(right)))


def part2(lines: Iterable[str]) -> int:
    """Similarity score: each left value times its count in the right column."""
    left, right = parse_lists(lines)
    occurrences = Counter(right)
    return sum(value * occurrences[value] for value in left)