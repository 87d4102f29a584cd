"""Antinodes of resonant antennas."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from itertools import combinations
from math import gcd


@dataclass(frozen=True)
class Vec2d:
    """A grid position or offset given as (top, left)."""

    top: int
    left: int

    def __add__(self, other: Vec2d) -> Vec2d:
        return Vec2d(self.top + other.top, self.left + other.left)

    def __sub__(self, other: Vec2d) -> Vec2d:
        return Vec2d(self.top - other.top, self.left - other.left)

    def in_bounds(self, height: int, width: int) -> bool:
        """True if the position lies on a map of the given size."""
        return 0 <= self.top < height and 0 <= self.left < width

    def reduced(self) -> Vec2d:
        """Return the shortest integer offset pointing the same way."""
        divisor = gcd(abs(self.top), abs(self.left))
        if divisor == 0:
            raise ValueError("cannot reduce a zero vector")
        return Vec2d(self.top // divisor, self.left // divisor)


def _size(lines: Sequence[str]) -> tuple[int, int]:
    return len(lines), len(lines[0]) if lines else 0


def find_antennas(lines: Sequence[str]) -> dict[str, list[Vec2d]]:
    """Group antenna positions by their frequency character."""
    _, width = _size(lines)
    antennas: dict[str, list[Vec2d]] = {}
    for top, line in enumerate(lines):
        for left, ch in enumerate(line[:width]):
            if ch.isascii() and ch.isalnum():
                antennas.setdefault(ch, []).append(Vec2d(top, left))
    return antennas


def part1(lines: Sequence[str]) -> int:
    """Count antinodes at twice the distance from each antenna pair."""
    height, width = _size(lines)
    antinodes: set[Vec2d] = set()
    for positions in find_antennas(lines).values():
        for a, b in combinations(positions, 2):
            difference = a - b
            for node in (a + difference, b - difference):
                if node.in_bounds(height, width):
                    antinodes.add(node)
    return len(antinodes)


def part2(lines: Sequence[str]) -> int:
    """Count every grid point in line with at least two same-frequency antennas."""
    height, width = _size(lines)
    antinodes: set[Vec2d] = set()
    for positions in find_antennas(lines).values():
        if len(positions) > 1:
            antinodes.update(positions)
        for a, b in combinations(positions, 2):
            step = (a - b).reduced()
            between = a - step
            while between != b:
                antinodes.add(between)
                between -= step
            node = a + step
            while node.in_bounds(height, width):
                antinodes.add(node)
                node += step
            node = b - step
            while node.in_bounds(height, width):
                antinodes.add(node)
                node -= step
    return len(antinodes)