"""Command line entry point that runs a puzzle solution on an input file."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence

from . import (
    day01,
    day02,
    day03,
    day04,
    day05,
    day06,
    day07,
    day08,
    day09,
    day10,
    day11,
    day12,
    day13,
    day14,
    day15,
    day16,
    day17,
    day18,
    day19,
    day20,
    day21,
    lanternfish,
)
from .utility import load

Solver = Callable[[Sequence[str]], object]


def _count_lines(lines: Sequence[str]) -> int:
    return len(lines)


def _render_robots(lines: Sequence[str]) -> int:
    day14.render_frames(lines)
    return 0


_SOLVERS: dict[str, tuple[Solver, ...]] = {
    "template": (_count_lines,),
    "lanternfish": (lanternfish.part1, lanternfish.part2),
    "day01": (day01.part1, day01.part2),
    "day02": (day02.part1, day02.part2),
    "day03": (day03.part1, day03.part2),
    "day04": (day04.part1, day04.part2),
    "day05": (day05.part1, day05.part2),
    "day06": (day06.part1, day06.part2),
    "day07": (day07.part1, day07.part2),
    "day08": (day08.part1, day08.part2),
    "day09": (day09.part1, day09.part2),
    "day10": (day10.part1, day10.part2),
    "day11": (day11.part1, day11.part2),
    "day12": (day12.part1, day12.part2),
    "day13": (day13.part1, day13.part2),
    "day14": (day14.part1, _render_robots),
    "day15": (day15.part1, day15.part2),
    "day16": (day16.part1,),
    "day17": (day17.part1, day17.part2),
    "day18": (day18.part1, day18.part2),
    "day19": (day19.part1, day19.part2),
    "day20": (day20.part1,),
    "day21": (day21.part1, day21.part2),
}


def _normalise(puzzle: str) -> str:
    name = puzzle.strip().lower()
    if name.isdigit():
        return f"day{int(name):02d}"
    return name


def solve(puzzle: str, part: int, lines: Sequence[str]) -> object:
    """Run part ``part`` of ``puzzle`` on the given input lines."""
    solvers = _SOLVERS.get(_normalise(puzzle))
    if solvers is None:
        raise ValueError(f"unknown puzzle: {puzzle!r}")
    if not 1 <= part <= len(solvers):
        raise ValueError(f"puzzle {puzzle!r} has no part {part}")
    return solvers[part - 1](list(lines))


def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments, solve the chosen puzzle and print the answer."""
    parser = argparse.ArgumentParser(
        prog="puzzlebox", description="Solve a puzzle from an input file."
    )
    parser.add_argument("puzzle", help="puzzle name or day number, e.g. 5 or lanternfish")
    parser.add_argument("part", nargs="?", type=int, default=1, help="part 1 or 2")
    parser.add_argument("--input", default="data.txt", help="input file")
    args = parser.parse_args(argv)
    try:
        result = solve(args.puzzle, args.part, load(args.input))
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print(result)
    return 0