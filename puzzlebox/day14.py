"""Robots patrolling a bathroom floor whose edges wrap around."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass
from math import prod
from os import PathLike
from pathlib import Path

from PIL import Image

from .utility import split

WIDTH = 101
HEIGHT = 103
_SECONDS = 100
_ROBOT_COLOUR = (255, 255, 255)


@dataclass
class Robot:
    """A robot's position and velocity on a wrapping grid."""

    x: int
    y: int
    vx: int
    vy: int
    width: int = WIDTH
    height: int = HEIGHT

    def move(self, cycles: int = 1) -> None:
        """Advance the robot by ``cycles`` seconds, wrapping at the edges."""
        self.x = (self.x + self.vx * cycles) % self.width
        self.y = (self.y + self.vy * cycles) % self.height

    def quadrant(self) -> int | None:
        """Return the quadrant 0..3, or None for a robot on a middle line.

        Bit 0 is set on the right half, bit 1 on the bottom half.
        """
        mid_x, mid_y = self.width // 2, self.height // 2
        if self.x == mid_x or self.y == mid_y:
            return None
        return int(self.x > mid_x) + 2 * int(self.y > mid_y)


def _parse_robot(line: str) -> Robot:
    try:
        position, velocity = split(line, " ")[:2]
        x, y = split(split(position, "=")[1], ",")[:2]
        vx, vy = split(split(velocity, "=")[1], ",")[:2]
        return Robot(int(x), int(y), int(vx), int(vy))
    except (IndexError, ValueError) as exc:
        raise ValueError(f"malformed robot: {line!r}") from exc


def parse_robots(lines: Iterable[str]) -> list[Robot]:
    """Read robots from lines of the form ``p=x,y v=dx,dy``."""
    return [_parse_robot(line) for line in lines]


def part1(lines: Iterable[str]) -> int:
    """Safety factor: product of robots per quadrant after 100 seconds."""
    counts: Counter[int] = Counter()
    for robot in parse_robots(lines):
        robot.move(_SECONDS)
        quadrant = robot.quadrant()
        if quadrant is not None:
            counts[quadrant] += 1
    return prod(counts[quadrant] for quadrant in range(4))


def render_frames(
    lines: Iterable[str],
    directory: str | PathLike[str] = "pics",
    frames: int = 10000,
) -> list[Path]:
    """Save one PNG per second showing the robots as white pixels.

    Returns the paths of the written images, named ``cycle<n>.png``.
    """
    robots = parse_robots(lines)
    target = Path(directory)
    target.mkdir(parents=True, exist_ok=True)
    paths: list[Path] = []
    for frame in range(frames):
        image = Image.new("RGB", (WIDTH, HEIGHT))
        for robot in robots:
            image.putpixel((robot.x, robot.y), _ROBOT_COLOUR)
            robot.move(1)
        path = target / f"cycle{frame}.png"
        image.save(path)
        paths.append(path)
    return paths