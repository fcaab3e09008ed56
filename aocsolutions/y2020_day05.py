"""Boarding passes encoded by binary space partitioning."""

from __future__ import annotations

ROWS = 128
COLUMNS = 8


def _lines(text: str) -> list[str]:
    return [line.strip() for line in text.splitlines() if line.strip()]


def _narrow(low: int, high: int, upper: bool) -> tuple[int, int]:
    if upper:
        return (low + high + 1) // 2, high
    return low, high - (high + 1 - low) // 2


def seat_id(code: str) -> int:
    """Seat id of a pass: F/B choose the row half, any other letter the column half."""
    row = (0, ROWS - 1)
    column = (0, COLUMNS - 1)
    for char in code:
        if char in "FB":
            row = _narrow(*row, char == "B")
        else:
            column = _narrow(*column, char == "R")
    return row[0] * 8 + column[0]


def part_one(text: str) -> int:
    return max((seat_id(line) for line in _lines(text)), default=0)


def part_two(text: str) -> int:
    ids = [seat_id(line) for line in _lines(text)]
    if not ids:
        raise ValueError("no boarding passes given")
    first = min(ids)
    last = max(ids)
    expected = (last - first + 1) * (last + first) // 2
    return expected - sum(ids)