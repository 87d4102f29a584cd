"""Lanternfish population growth."""

from __future__ import annotations

import string
from collections import Counter, deque
from collections.abc import Sequence

_MAX_TIMER = 8
_RESET_TIMER = 6


def count_fish(line: str, days: int) -> int:
    """Return the number of fish after ``days`` days, starting from the timers in ``line``."""
    counts = Counter(int(ch) for ch in line if ch in string.digits)
    if any(timer > _MAX_TIMER for timer in counts):
        raise ValueError(f"timer values must be at most {_MAX_TIMER}")
    timers = deque(counts[timer] for timer in range(_MAX_TIMER + 1))
    for _ in range(days):
        spawning = timers.popleft()
        timers[_RESET_TIMER] += spawning
        timers.append(spawning)
    return sum(timers)


def part1(lines: Sequence[str]) -> int:
    """Population after 80 days."""
    return count_fish(lines[0], 80)


def part2(lines: Sequence[str]) -> int:
    """Population after 256 days."""
    return count_fish(lines[0], 256)