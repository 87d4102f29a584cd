"""Claw machines and the tokens needed to win their prizes."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from math import lcm

from .utility import split

_A_COST = 3
_B_COST = 1
_PRIZE_OFFSET = 10000000000000


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


@dataclass(frozen=True)
class ClawMachine:
    """Button moves and prize location of one machine."""

    ax: int
    ay: int
    bx: int
    by: int
    px: int
    py: int

    def required_tokens(self) -> int:
        """Tokens needed to reach the prize, or 0 if the search finds no way."""
        if self.ax <= 0 or self.bx <= 0:
            raise ValueError("button X moves must be positive")
        common = lcm(self.ax, self.bx)
        a_cycle = common // self.ax
        b_cycle = common // self.bx
        y_offset = a_cycle * self.ay - b_cycle * self.by

        presses_a = 0
        presses_b = self.px // self.bx + 1
        tokens = presses_b * _B_COST
        cur_x = presses_b * self.bx
        cur_y = presses_b * self.by
        tries = 0
        while cur_x != self.px and tries < a_cycle * b_cycle:
            while cur_x > self.px:
                tokens -= _B_COST
                presses_b -= 1
                cur_x -= self.bx
                cur_y -= self.by
                if presses_b < 0:
                    return 0
            while cur_x < self.px:
                tokens += _A_COST
                presses_a += 1
                cur_x += self.ax
                cur_y += self.ay
            tries += 1

        y_diff = self.py - cur_y
        if y_diff == 0:
            return tokens
        shift = _trunc_div(y_diff, y_offset)
        if shift == 0 or y_diff % shift:
            return 0
        tokens += _A_COST * shift * a_cycle - _B_COST * shift * b_cycle
        presses_a += shift * a_cycle
        presses_b -= shift * b_cycle
        if presses_a < 0 or presses_b < 0:
            return 0
        reaches_x = presses_a * self.ax + presses_b * self.bx == self.px
        reaches_y = presses_a * self.ay + presses_b * self.by == self.py
        if not (reaches_x and reaches_y):
            return 0
        return tokens


def _pair(line: str, marker: str) -> tuple[int, int]:
    try:
        parts = split(split(line, ":")[1], ",")
        return int(split(parts[0], marker)[1]), int(split(parts[1], marker)[1])
    except IndexError as exc:
        raise ValueError(f"malformed machine line: {line!r}") from exc


def parse_machines(lines: Sequence[str], offset: int = 0) -> list[ClawMachine]:
    """Read machines from blocks of three lines separated by a blank line."""
    machines = []
    for start in range(0, len(lines), 4):
        block = lines[start : start + 3]
        if len(block) < 3:
            raise ValueError("incomplete machine description")
        ax, ay = _pair(block[0], "+")
        bx, by = _pair(block[1], "+")
        px, py = _pair(block[2], "=")
        machines.append(ClawMachine(ax, ay, bx, by, px + offset, py + offset))
    return machines


def part1(lines: Sequence[str]) -> int:
    """Tokens needed for all winnable prizes."""
    return sum(m.required_tokens() for m in parse_machines(lines))


def part2(lines: Sequence[str]) -> int:
    """Tokens needed once every prize is moved far away."""
    return sum(m.required_tokens() for m in parse_machines(lines, _PRIZE_OFFSET))