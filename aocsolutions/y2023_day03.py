"""Engine schematic: part numbers and gear ratios."""

from __future__ import annotations

import re
from collections import defaultdict
from collections.abc import Iterable, Iterator
from math import prod

_NUMBER = re.compile(r"[0-9]+")
_DIGITS = "0123456789"


def _index_numbers(lines: list[str]) -> dict[int, list[tuple[int, int, int]]]:
    numbers: dict[int, list[tuple[int, int, int]]] = defaultdict(list)
    for row, line in enumerate(lines):
        for match in _NUMBER.finditer(line):
            numbers[row].append((match.start(), match.end(), int(match.group())))
    return numbers


def _symbols(lines: list[str]) -> Iterator[tuple[int, int, str]]:
    for row, line in enumerate(lines):
        for column, char in enumerate(line):
            if char != "." and char not in _DIGITS:
                yield row, column, char


def _neighbours(
    numbers: dict[int, list[tuple[int, int, int]]], row: int, column: int
) -> list[int]:
    return [
        value
        for near_row in (row - 1, row, row + 1)
        for start, end, value in numbers.get(near_row, ())
        if start <= column + 1 and end - 1 >= column - 1
    ]


def part_number_sum(lines: Iterable[str]) -> int:
    """Sum, over every symbol, of the numbers touching it."""
    grid = list(lines)
    numbers = _index_numbers(grid)
    return sum(
        sum(_neighbours(numbers, row, column))
        for row, column, _ in _symbols(grid)
    )


def gear_ratio_sum(lines: Iterable[str]) -> int:
    """Sum of the products of the two numbers around each '*' touching exactly two."""
    grid = list(lines)
    numbers = _index_numbers(grid)
    total = 0
    for row, column, char in _symbols(grid):
        if char != "*":
            continue
        around = _neighbours(numbers, row, column)
        if len(around) == 2:
            total += prod(around)
    return total


def _lines(text: str) -> list[str]:
    return [line.strip() for line in text.splitlines() if line.strip()]


def part_one(text: str) -> int:
    return part_number_sum(_lines(text))


def part_two(text: str) -> int:
    return gear_ratio_sum(_lines(text))