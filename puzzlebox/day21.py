"""Typing door codes through a chain of robot-operated keypads."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from functools import lru_cache

Point = tuple[int, int]

# Coordinates are (columns to the left of the A key, rows above it).
_KEYPAD: Mapping[str, Point] = {
    "A": (0, 0),
    "0": (1, 0),
    "1": (2, 1),
    "2": (1, 1),
    "3": (0, 1),
    "4": (2, 2),
    "5": (1, 2),
    "6": (0, 2),
    "7": (2, 3),
    "8": (1, 3),
    "9": (0, 3),
}
_CONTROLLER: Mapping[str, Point] = {
    "A": (0, 0),
    "^": (1, 0),
    ">": (0, -1),
    "v": (1, -1),
    "<": (2, -1),
}
# Key pairs (bottom-row key, left-column key) whose moves must avoid the gap.
_KEYPAD_CORNERS = frozenset(
    {("A", "1"), ("A", "4"), ("A", "7"), ("0", "1"), ("0", "4"), ("0", "7")}
)
_CONTROLLER_CORNERS = frozenset({("^", "<"), ("A", "<")})
_DEFAULT_ORDER = "<v>^"
_PRESS = "A"
_PART1_ROBOTS = 2
_PART2_ROBOTS = 20


def _position(layout: Mapping[str, Point], key: str) -> Point:
    try:
        return layout[key]
    except KeyError:
        raise ValueError(f"unknown key {key!r}") from None


def _moves(origin: Point, target: Point, order: str) -> str:
    dx = target[0] - origin[0]
    dy = target[1] - origin[1]
    strokes = {
        "<": "<" * max(dx, 0),
        ">": ">" * max(-dx, 0),
        "^": "^" * max(dy, 0),
        "v": "v" * max(-dy, 0),
    }
    return "".join(strokes[direction] for direction in order)


def _press(
    keys: str,
    layout: Mapping[str, Point],
    order: Callable[[str, str], str],
) -> str:
    """Directional presses that make an arm, starting on A, press ``keys``."""
    current = _PRESS
    presses: list[str] = []
    for key in keys:
        target = _position(layout, key)
        origin = _position(layout, current)
        presses.append(_moves(origin, target, order(current, key)) + _PRESS)
        current = key
    return "".join(presses)


def _keypad_order(src: str, dst: str) -> str:
    if (dst, src) in _KEYPAD_CORNERS:
        return ">v"
    if (src, dst) in _KEYPAD_CORNERS:
        return "^<"
    return _DEFAULT_ORDER


def _controller_order(src: str, dst: str) -> str:
    if (dst, src) in _CONTROLLER_CORNERS:
        return ">^"
    return _DEFAULT_ORDER


def keypad_sequence(code: str) -> str:
    """Directional presses that type ``code`` on the numeric keypad."""
    return _press(code, _KEYPAD, _keypad_order)


def controller_sequence(keys: str) -> str:
    """Directional presses that type ``keys`` on a directional keypad."""
    return _press(keys, _CONTROLLER, _controller_order)


def split_parts(keys: str) -> list[str]:
    """Split a press sequence into pieces that each end with a press of A.

    Each piece starts with the arm on A, so pieces expand independently.
    """
    if keys and not keys.endswith(_PRESS):
        raise ValueError(f"sequence does not end with a press: {keys!r}")
    return [piece + _PRESS for piece in keys.split(_PRESS)[:-1]]


@lru_cache(maxsize=None)
def _expanded_length(part: str, robots: int) -> int:
    if robots == 0:
        return len(part)
    return sum(
        _expanded_length(piece, robots - 1)
        for piece in split_parts(controller_sequence(part))
    )


def _complexity(code: str, robots: int) -> int:
    length = sum(
        _expanded_length(part, robots) for part in split_parts(keypad_sequence(code))
    )
    return length * int(code[:-1])


def _codes(lines: Iterable[str]) -> list[str]:
    return [line for line in lines if line]


def part1(lines: Iterable[str]) -> int:
    """Sum of complexities with two directional keypads between you and the door."""
    return sum(_complexity(code, _PART1_ROBOTS) for code in _codes(lines))


def part2(lines: Iterable[str]) -> int:
    """Sum of complexities with twenty directional keypads in the chain."""
    return sum(_complexity(code, _PART2_ROBOTS) for code in _codes(lines))