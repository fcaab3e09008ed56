"""Plutonian pebbles that change every time you blink."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

MULTIPLIER = 2024
FIRST_BLINKS = 25
SECOND_BLINKS = 75


def split_number(number: int) -> tuple[int, int]:
    """Split a number with an even count of digits into its two halves."""
    if number < 0:
        raise ValueError("stones carry non-negative numbers")
    digits = str(number)
    if len(digits) % 2:
        raise ValueError(f"{number} has an odd number of digits")
    half = len(digits) // 2
    return int(digits[:half]), int(digits[half:])


def _blink(stone: int) -> tuple[int, ...]:
    if stone == 0:
        return (1,)
    if len(str(stone)) % 2 == 0:
        return split_number(stone)
    return (stone * MULTIPLIER,)


def count_stones(numbers: Iterable[int], blinks: int) -> int:
    """Number of stones after blinking ``blinks`` times."""
    if blinks < 0:
        raise ValueError("the number of blinks must not be negative")
    counts = Counter(numbers)
    if any(stone < 0 for stone in counts):
        raise ValueError("stones carry non-negative numbers")
    for _ in range(blinks):
        following: Counter[int] = Counter()
        for stone, amount in counts.items():
            for result in _blink(stone):
                following[result] += amount
        counts = following
    return sum(counts.values())


def _numbers(text: str) -> list[int]:
    lines = text.splitlines()
    if not lines:
        return []
    try:
        return [int(token) for token in lines[0].split()]
    except ValueError as error:
        raise ValueError(f"malformed stone line: {lines[0]!r}") from error


def part_one(text: str) -> int:
    return count_stones(_numbers(text), FIRST_BLINKS)


def part_two(text: str) -> int:
    return count_stones(_numbers(text), SECOND_BLINKS)