"""Calibration equations with missing operators."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from operator import add, mul

from .utility import split

Operator = Callable[[int, int], int]


def _concat(left: int, right: int) -> int:
    """Join the digits of ``right`` onto ``left``.

    The shift is the smallest power of ten, at least ten, that is not
    below ``right``.
    """
    multiplier = 10
    while right > multiplier:
        multiplier *= 10
    return left * multiplier + right


@dataclass(frozen=True)
class Equation:
    """A test value and the numbers that should combine to give it."""

    result: int
    values: tuple[int, ...]

    def _reachable(self, operators: tuple[Operator, ...]) -> set[int]:
        if not self.values:
            return set()
        first, *rest = self.values
        # With only positive operands no operator can shrink a value.
        prune = all(value > 0 for value in rest)
        reachable = {first}
        for value in rest:
            reachable = {
                op(total, value) for total in reachable for op in operators
            }
            if prune:
                reachable = {total for total in reachable if total <= self.result}
        return reachable

    def is_solvable(self) -> bool:
        """True if ``+`` and ``*`` evaluated left to right can reach the result."""
        return self.result in self._reachable((add, mul))

    def is_concat_solvable(self) -> bool:
        """True if ``+``, ``*`` and concatenation can reach the result."""
        return self.result in self._reachable((add, mul, _concat))


def parse_equation(line: str) -> Equation:
    """Parse a line of the form ``result: v1 v2 ...``."""
    parts = split(line, ":")
    if len(parts) < 2:
        raise ValueError(f"malformed equation: {line!r}")
    result = int(parts[0])
    values = tuple(int(value) for value in split(parts[1].lstrip(), " "))
    return Equation(result, values)


def part1(lines: Iterable[str]) -> int:
    """Sum of results reachable with addition and multiplication."""
    equations = map(parse_equation, lines)
    return sum(eq.result for eq in equations if eq.is_solvable())


def part2(lines: Iterable[str]) -> int:
    """Sum of results reachable when concatenation is allowed too."""
    equations = map(parse_equation, lines)
    return sum(eq.result for eq in equations if eq.is_concat_solvable())