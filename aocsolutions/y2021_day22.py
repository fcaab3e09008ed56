"""Reactor reboot: switching cuboids of cubes on and off."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from itertools import product

_STEP = re.compile(
    r"^(on|off)\s+x=(-?\d+)\.\.(-?\d+),y=(-?\d+)\.\.(-?\d+),z=(-?\d+)\.\.(-?\d+)$"
)


@dataclass(frozen=True, order=True)
class Range:
    """An inclusive integer interval."""

    start: int
    stop: int

    def __post_init__(self) -> None:
        if self.stop < self.start:
            raise ValueError(f"empty range {self.start}..{self.stop}")

    def common(self, other: Range) -> Range | None:
        """The overlap of two ranges, or None if they do not meet."""
        if other.stop < self.start or other.start > self.stop:
            return None
        return Range(max(self.start, other.start), min(self.stop, other.stop))

    def unique_parts(self, other: Range) -> list[Range]:
        """The pieces of this range that lie outside ``other``."""
        if self.common(other) is None:
            return [self]
        parts = []
        if self.start < other.start:
            parts.append(Range(self.start, other.start - 1))
        if self.stop > other.stop:
            parts.append(Range(other.stop + 1, self.stop))
        return parts

    def size(self) -> int:
        return self.stop - self.start + 1

    def values(self) -> range:
        return range(self.start, self.stop + 1)


@dataclass(frozen=True)
class Cuboid:
    """An axis-aligned box of cubes."""

    x: Range
    y: Range
    z: Range

    def unique_cuboids(self, other: Cuboid) -> list[Cuboid]:
        """Disjoint cuboids covering the part of this one outside ``other``."""
        cx = self.x.common(other.x)
        cy = self.y.common(other.y)
        cz = self.z.common(other.z)
        if cx is None or cy is None or cz is None:
            return [self]
        pieces = [Cuboid(part, self.y, self.z) for part in self.x.unique_parts(other.x)]
        pieces += [Cuboid(cx, part, self.z) for part in self.y.unique_parts(other.y)]
        pieces += [Cuboid(cx, cy, part) for part in self.z.unique_parts(other.z)]
        return pieces

    def volume(self) -> int:
        return self.x.size() * self.y.size() * self.z.size()


@dataclass
class CuboidSet:
    """A union of disjoint lit cuboids."""

    cuboids: list[Cuboid] = field(default_factory=list)

    def add(self, cuboid: Cuboid) -> None:
        self.exclude(cuboid)
        self.cuboids.append(cuboid)

    def exclude(self, cuboid: Cuboid) -> None:
        self.cuboids = [
            piece for lit in self.cuboids for piece in lit.unique_cuboids(cuboid)
        ]

    def volume(self) -> int:
        return sum(cuboid.volume() for cuboid in self.cuboids)


def parse_step(line: str) -> tuple[bool, Cuboid]:
    """Whether a reboot step switches on, and the cuboid it covers."""
    match = _STEP.match(line.strip())
    if match is None:
        raise ValueError(f"malformed reboot step: {line!r}")
    x0, x1, y0, y1, z0, z1 = map(int, match.groups()[1:])
    return match.group(1) == "on", Cuboid(Range(x0, x1), Range(y0, y1), Range(z0, z1))


def _steps(text: str) -> list[tuple[bool, Cuboid]]:
    return [parse_step(line) for line in text.splitlines() if line.strip()]


def part_one(text: str) -> int:
    """Count lit cubes by visiting every cube of every step."""
    lit: set[tuple[int, int, int]] = set()
    for switch_on, cuboid in _steps(text):
        cells = product(cuboid.x.values(), cuboid.y.values(), cuboid.z.values())
        if switch_on:
            lit.update(cells)
        else:
            lit.difference_update(cells)
    return len(lit)


def part_two(text: str) -> int:
    """Count lit cubes by keeping a set of disjoint cuboids."""
    lit = CuboidSet()
    for switch_on, cuboid in _steps(text):
        if switch_on:
            lit.add(cuboid)
        else:
            lit.exclude(cuboid)
    return lit.volume()