"""Fencing garden regions."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from itertools import groupby

Cell = tuple[int, int]


def _neighbours(x: int, y: int) -> tuple[Cell, ...]:
    return ((x + 1, y), (x, y + 1), (x - 1, y), (x, y - 1))


def _runs(values: Sequence[int]) -> Iterator[list[int]]:
    """Yield runs of consecutive integers from a sorted sequence."""
    for _, group in groupby(enumerate(values), key=lambda pair: pair[1] - pair[0]):
        yield [value for _, value in group]


@dataclass
class Region:
    """A connected set of garden plots growing the same plant."""

    kind: str
    cells: set[Cell] = field(default_factory=set)

    @property
    def area(self) -> int:
        return len(self.cells)

    def try_insert(self, x: int, y: int) -> bool:
        """Add the plot if it touches the region; report whether it was added."""
        if any(neighbour in self.cells for neighbour in _neighbours(x, y)):
            self.cells.add((x, y))
            return True
        return False

    def fuse(self, other: Region) -> None:
        """Move every plot of ``other`` into this region."""
        if other is self:
            return
        self.cells |= other.cells
        other.cells.clear()

    def _outside(self) -> set[Cell]:
        return {
            neighbour
            for cell in self.cells
            for neighbour in _neighbours(*cell)
            if neighbour not in self.cells
        }

    def cost(self) -> int:
        """Perimeter times area."""
        perimeter = sum(
            neighbour not in self.cells
            for cell in self.cells
            for neighbour in _neighbours(*cell)
        )
        return perimeter * self.area

    def discounted_cost(self) -> int:
        """Number of sides times area.

        The horizontal sides are counted and doubled, since a region's boundary
        has as many vertical sides as horizontal ones.
        """
        rows: defaultdict[int, list[int]] = defaultdict(list)
        for x, y in self._outside():
            rows[x].append(y)
        horizontal = 0
        for x, ys in rows.items():
            for run in _runs(sorted(ys)):
                for offset in (1, -1):
                    horizontal += sum(
                        1
                        for inside, _ in groupby((x + offset, y) in self.cells for y in run)
                        if inside
                    )
        return 2 * horizontal * self.area


def find_regions(lines: Sequence[str]) -> list[Region]:
    """Group the plots of the map into connected regions of one plant each."""
    regions: list[Region] = []
    width = len(lines[0]) if lines else 0
    for x, line in enumerate(lines):
        for y, kind in enumerate(line[:width]):
            touched = [
                region
                for region in regions
                if region.kind == kind and region.try_insert(x, y)
            ]
            if not touched:
                regions.append(Region(kind, {(x, y)}))
                continue
            first, *rest = touched
            for region in rest:
                first.fuse(region)
            if rest:
                regions = [region for region in regions if region.cells]
    return regions


def part1(lines: Sequence[str]) -> int:
    """Total fencing price by perimeter."""
    return sum(region.cost() for region in find_regions(lines))


def part2(lines: Sequence[str]) -> int:
    """Total fencing price by number of sides."""
    return sum(region.discounted_cost() for region in find_regions(lines))


def _all_cells(lines: Iterable[str]) -> set[Cell]:
    return {(x, y) for x, line in enumerate(lines) for y in range(len(line))}