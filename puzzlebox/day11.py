"""Stones that change every time you blink."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence

from .utility import split

_GROWTH = 2024


def blink(stone: int) -> list[int]:
    """Return the stones that ``stone`` becomes after one blink.

    A stone with an even number of digits splits into its lower and upper halves,
    in that order.
    """
    if stone < 0:
        raise ValueError(f"stones carry non-negative numbers, got {stone}")
    if stone == 0:
        return [1]
    digits = str(stone)
    if len(digits) % 2 == 0:
        half = len(digits) // 2
        return [int(digits[half:]), int(digits[:half])]
    return [stone * _GROWTH]


def count_stones(stones: Iterable[int], blinks: int) -> int:
    """Number of stones after blinking ``blinks`` times."""
    counts = Counter(stones)
    for _ in range(blinks):
        following: Counter[int] = Counter()
        for stone, count in counts.items():
            for new_stone in blink(stone):
                following[new_stone] += count
        counts = following
    return sum(counts.values())


def _parse(lines: Sequence[str]) -> list[int]:
    return [int(value) for value in split(lines[0], " ")]


def part1(lines: Sequence[str]) -> int:
    """Stones after 25 blinks."""
    return count_stones(_parse(lines), 25)


def part2(lines: Sequence[str]) -> int:
    """Stones after 75 blinks."""
    return count_stones(_parse(lines), 75)