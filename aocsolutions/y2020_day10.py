"""Joltage adapter chains."""

from __future__ import annotations

import math
from collections.abc import Iterable


def _numbers(text: str) -> list[int]:
    return sorted({int(line) for line in text.splitlines() if line.strip()})


def count_differences(numbers: Iterable[int]) -> tuple[int, int]:
    """Count steps of one and of other sizes, including outlet and device steps."""
    ordered = sorted(set(numbers))
    if not ordered:
        raise ValueError("no adapters given")
    ones = threes = 1
    for previous, current in zip(ordered, ordered[1:]):
        if current - previous == 1:
            ones += 1
        else:
            threes += 1
    return ones, threes


def count_arrangements(numbers: Iterable[int]) -> int:
    """Number of ways to chain the adapters from the outlet."""
    groups = [0]
    previous = 0
    for current in sorted(set(numbers)):
        if current - previous == 1:
            groups[-1] += 1
        elif groups[-1] > 1:
            groups.append(0)
        else:
            groups[-1] = 0
        previous = current
    if groups[-1] <= 1:
        groups.pop()
    return math.prod(2 ** (size - 1) - (size == 4) for size in groups)


def part_one(text: str) -> int:
    ones, threes = count_differences(_numbers(text))
    return ones * threes


def part_two(text: str) -> int:
    return count_arrangements(_numbers(text))