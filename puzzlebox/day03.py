"""Scanning corrupted memory for multiplication instructions."""

from __future__ import annotations

import re
from collections.abc import Iterable

_MUL = re.compile(r"mul\(([0-9]{1,3}),([0-9]{1,3})\)")
_DO = "do()"
_DONT = "don't()"


def find_products(text: str) -> list[tuple[int, int]]:
    """Return the operand pairs of every well-formed ``mul(a,b)`` in ``text``."""
    return [(int(a), int(b)) for a, b in _MUL.findall(text)]


def enabled_sections(lines: Iterable[str]) -> list[str]:
    """Return the stretches of text that lie outside ``don't()`` ... ``do()`` spans.

    The enabled state carries over from one line to the next.
    """
    enabled = True
    sections: list[str] = []
    for line in lines:
        pos = 0
        while pos < len(line):
            marker = _DONT if enabled else _DO
            found = line.find(marker, pos)
            end = len(line) if found == -1 else found
            if enabled:
                sections.append(line[pos:end])
            if found != -1:
                enabled = not enabled
            pos = end + len(marker) - 1
    return sections


def _sum_products(texts: Iterable[str]) -> int:
    return sum(a * b for text in texts for a, b in find_products(text))


def part1(lines: Iterable[str]) -> int:
    """Sum of all multiplications."""
    return _sum_products(lines)


def part2(lines: Iterable[str]) -> int:
    """Sum of the multiplications that are enabled."""
    return _sum_products(enabled_sections(lines))