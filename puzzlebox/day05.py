"""Checking and repairing page orderings."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from itertools import takewhile

from .utility import split

Rules = dict[int, list[int]]


def _starts_alnum(line: str) -> bool:
    return line[:1].isalnum()


def parse(lines: Iterable[str]) -> tuple[Rules, list[list[int]]]:
    """Return the ordering rules and the page updates from the input."""
    lines = list(lines)
    rule_lines = list(takewhile(_starts_alnum, lines))
    rules: Rules = {}
    for line in rule_lines:
        parts = split(line, "|")
        if len(parts) < 2:
            raise ValueError(f"malformed rule: {line!r}")
        rules.setdefault(int(parts[0]), []).append(int(parts[1]))
    orders = [
        [int(page) for page in split(line, ",")]
        for line in lines[len(rule_lines):]
        if _starts_alnum(line)
    ]
    return rules, orders


def is_ordered(order: Sequence[int], rules: Mapping[int, Sequence[int]]) -> bool:
    """True if no page is preceded by a page that must come after it."""
    return not any(
        successor in order[: index + 1]
        for index, page in enumerate(order)
        for successor in rules.get(page, ())
    )


def fix_order(order: Sequence[int], rules: Mapping[int, Sequence[int]]) -> list[int]:
    """Return a copy of ``order`` rearranged by swaps until it obeys ``rules``."""
    fixed = list(order)
    changed = True
    while changed:
        changed = False
        for index in reversed(range(len(fixed))):
            for successor in list(rules.get(fixed[index], ())):
                earlier = next(
                    (k for k in range(index, -1, -1) if fixed[k] == successor), None
                )
                if earlier is not None:
                    fixed[earlier], fixed[index] = fixed[index], fixed[earlier]
                    changed = True
    return fixed


def _middle(order: Sequence[int]) -> int:
    return order[(len(order) - 1) // 2]


def part1(lines: Iterable[str]) -> int:
    """Sum of middle pages of correctly ordered updates."""
    rules, orders = parse(lines)
    return sum(_middle(order) for order in orders if is_ordered(order, rules))


def part2(lines: Iterable[str]) -> int:
    """Sum of middle pages of the incorrectly ordered updates after fixing them."""
    rules, orders = parse(lines)
    return sum(
        _middle(fix_order(order, rules))
        for order in orders
        if not is_ordered(order, rules)
    )