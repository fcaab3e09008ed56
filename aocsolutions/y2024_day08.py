"""Resonant collinearity: antinodes of same-frequency antennas."""

from __future__ import annotations

from collections import defaultdict
from itertools import combinations

from aocsolutions.points import Point

EMPTY = "."


def parse_antennas(text: str) -> tuple[dict[str, list[Point]], int, int]:
    """Antenna positions (column, row) by frequency, with the map's rows and columns."""
    lines = [line.strip() for line in text.splitlines() if line.strip()]
    antennas: dict[str, list[Point]] = defaultdict(list)
    for row, line in enumerate(lines):
        for column, char in enumerate(line):
            if char != EMPTY:
                antennas[char].append(Point(column, row))
    columns = len(lines[-1]) if lines else 0
    return dict(antennas), len(lines), columns


def find_antinodes(
    antennas: dict[str, list[Point]], rows: int, columns: int, resonant: bool = False
) -> set[Point]:
    """Antinode positions inside the map.

    Without ``resonant`` each pair of antennas makes one antinode beyond each
    antenna; with it every grid point in line at the pair's spacing counts,
    the antennas themselves included.
    """

    def inside(point: Point) -> bool:
        return 0 <= point[0] < columns and 0 <= point[1] < rows

    antinodes: set[Point] = set()
    for locations in antennas.values():
        for first, second in combinations(locations, 2):
            diff = first - second
            if resonant:
                antinodes.update((first, second))
                for origin, step in ((first, diff), (second, -diff)):
                    point = origin + step
                    while inside(point):
                        antinodes.add(point)
                        point = point + step
            else:
                antinodes.update(
                    point for point in (first + diff, second - diff) if inside(point)
                )
    return antinodes


def part_one(text: str) -> int:
    return len(find_antinodes(*parse_antennas(text)))


def part_two(text: str) -> int:
    return len(find_antinodes(*parse_antennas(text), resonant=True))