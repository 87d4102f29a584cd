"""Compacting an amphipod's disk map."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from itertools import groupby

Block = int | None


def build_disk(line: str) -> list[Block]:
    """Expand a dense disk map into blocks: file IDs, with None for free space."""
    disk: list[Block] = []
    for index, ch in enumerate(line):
        if not ch.isdigit():
            raise ValueError(f"invalid disk map character: {ch!r}")
        block = None if index % 2 else index // 2
        disk.extend([block] * int(ch))
    return disk


def compact_blocks(disk: Sequence[Block]) -> list[Block]:
    """Move file blocks one at a time from the end into the leftmost free block."""
    blocks = list(disk)
    front, back = 0, len(blocks) - 1
    while True:
        while front < len(blocks) and blocks[front] is not None:
            front += 1
        while back >= 0 and blocks[back] is None:
            back -= 1
        if front >= back:
            return blocks
        blocks[front], blocks[back] = blocks[back], blocks[front]


def _runs(disk: Sequence[Block]) -> Iterator[tuple[Block, int, int]]:
    """Yield (block, start, length) for each run of equal blocks."""
    start = 0
    for block, group in groupby(disk):
        length = sum(1 for _ in group)
        yield block, start, length
        start += length


def compact_files(disk: Sequence[Block]) -> list[Block]:
    """Move whole files, rightmost first, into the leftmost gap that fits them."""
    blocks = list(disk)
    runs = list(_runs(blocks))
    gaps = [[start, length] for block, start, length in runs if block is None]
    for block, start, length in reversed(runs):
        if block is None:
            continue
        for gap in gaps:
            gap_start, gap_length = gap
            if gap_start >= start:
                break
            if gap_length >= length:
                blocks[gap_start : gap_start + length] = [block] * length
                blocks[start : start + length] = [None] * length
                gap[0] += length
                gap[1] -= length
                break
    return blocks


def checksum(disk: Sequence[Block]) -> int:
    """Sum of position times file ID over all file blocks."""
    return sum(index * block for index, block in enumerate(disk) if block is not None)


def part1(lines: Sequence[str]) -> int:
    """Checksum after block-by-block compaction."""
    return checksum(compact_blocks(build_disk(lines[0])))


def part2(lines: Sequence[str]) -> int:
    """Checksum after whole-file compaction."""
    return checksum(compact_files(build_disk(lines[0])))