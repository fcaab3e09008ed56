"""Conway cubes in three or four dimensions."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from itertools import product

CYCLES = 6

Cell = tuple[int, ...]


def _check_dimensions(dimensions: int) -> None:
    if dimensions < 2:
        raise ValueError("at least two dimensions are needed")


def parse_active(text: str, dimensions: int) -> set[Cell]:
    """Active cells of the starting slice, padded with zeros to ``dimensions``."""
    _check_dimensions(dimensions)
    padding = (0,) * (dimensions - 2)
    rows = [line.strip() for line in text.splitlines() if line.strip()]
    return {
        (row, column) + padding
        for row, line in enumerate(rows)
        for column, char in enumerate(line)
        if char == "#"
    }


def simulate(active: Iterable[Cell], dimensions: int, cycles: int = CYCLES) -> set[Cell]:
    """Active cells after running the given number of cycles."""
    _check_dimensions(dimensions)
    cells = {tuple(cell) for cell in active}
    if any(len(cell) != dimensions for cell in cells):
        raise ValueError(f"every cell must have {dimensions} coordinates")
    offsets = [delta for delta in product((-1, 0, 1), repeat=dimensions) if any(delta)]
    for _ in range(cycles):
        neighbours = Counter(
            tuple(a + b for a, b in zip(cell, delta))
            for cell in cells
            for delta in offsets
        )
        cells = {
            cell
            for cell, count in neighbours.items()
            if count == 3 or (count == 2 and cell in cells)
        }
    return cells


def part_one(text: str) -> int:
    return len(simulate(parse_active(text, 3), 3))


def part_two(text: str) -> int:
    return len(simulate(parse_active(text, 4), 4))