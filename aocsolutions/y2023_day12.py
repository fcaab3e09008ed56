"""Damaged hot-spring records."""

from __future__ import annotations

from collections.abc import Sequence
from functools import lru_cache

UNFOLD_TIMES = 5


def parse_record(line: str) -> tuple[str, tuple[int, ...]]:
    """The spring pattern and the damaged group sizes of one record."""
    parts = line.split()
    if len(parts) != 2:
        raise ValueError(f"malformed record: {line!r}")
    pattern, sizes = parts
    try:
        groups = tuple(int(size) for size in sizes.split(","))
    except ValueError as error:
        raise ValueError(f"malformed group sizes: {line!r}") from error
    return pattern, groups


def count_arrangements(pattern: str, groups: Sequence[int]) -> int:
    """Number of ways to fill the '?' cells so that the '#' runs match ``groups``."""
    groups = tuple(groups)
    length = len(pattern)

    @lru_cache(maxsize=None)
    def arrange(index: int, group: int, run: int) -> int:
        if group == len(groups):
            return 0 if "#" in pattern[index:] else 1
        if run == groups[group]:
            if index == length:
                return int(group + 1 == len(groups))
            if pattern[index] == "#":
                return 0
            return arrange(index + 1, group + 1, 0)
        if index == length:
            return 0
        char = pattern[index]
        total = 0
        if char in ".?" and run == 0:
            total += arrange(index + 1, group, 0)
        if char in "#?":
            total += arrange(index + 1, group, run + 1)
        return total

    return arrange(0, 0, 0)


def unfold(pattern: str, groups: Sequence[int]) -> tuple[str, tuple[int, ...]]:
    """Five copies of the pattern joined by '?', and five copies of the groups."""
    return "?".join([pattern] * UNFOLD_TIMES), tuple(groups) * UNFOLD_TIMES


def _records(text: str) -> list[tuple[str, tuple[int, ...]]]:
    return [parse_record(line) for line in text.splitlines() if line.strip()]


def part_one(text: str) -> int:
    return sum(count_arrangements(p, g) for p, g in _records(text))


def part_two(text: str) -> int:
    return sum(count_arrangements(*unfold(p, g)) for p, g in _records(text))