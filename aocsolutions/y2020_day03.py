"""Trees met while sledding down a repeating map."""

from __future__ import annotations

import math
from collections.abc import Iterable
from itertools import islice

SLOPES = ((1, 1), (3, 1), (5, 1), (7, 1), (1, 2))


def _lines(text: str) -> list[str]:
    return [line.strip() for line in text.splitlines() if line.strip()]


def count_trees(lines: Iterable[str], right: int, down: int) -> int:
    """Count '#' cells hit moving ``right`` across and ``down`` rows each step."""
    if down < 1:
        raise ValueError("down must be at least 1")
    column = 0
    trees = 0
    for line in islice(lines, 0, None, down):
        trees += line[column] == "#"
        column = (column + right) % len(line)
    return trees


def part_one(text: str) -> int:
    return count_trees(_lines(text), 3, 1)


def part_two(text: str) -> int:
    lines = _lines(text)
    return math.prod(count_trees(lines, right, down) for right, down in SLOPES)