"""Input helpers shared by the puzzle solutions."""

from __future__ import annotations

from os import PathLike


def split(line: str, separator: str) -> list[str]:
    """Split ``line`` on ``separator`` and drop the empty pieces."""
    return [part for part in line.split(separator) if part]


def load(path: str | PathLike[str] = "data.txt") -> list[str]:
    """Read a puzzle input file and return its lines without line endings."""
    with open(path, encoding="utf-8") as handle:
        return [line.rstrip("\n") for line in handle]