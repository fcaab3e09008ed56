"""Lagoon volume from a dig plan."""

from __future__ import annotations

from collections.abc import Iterable

_HEX_DIRECTIONS = {"0": "R", "1": "D", "2": "L", "3": "U"}
_MOVES = {"R": (0, 1), "L": (0, -1), "U": (-1, 0), "D": (1, 0)}


def parse_step(line: str, hexadecimal: bool = False) -> tuple[str, int]:
    """Direction letter and length of one dig step."""
    line = line.strip()
    if hexadecimal:
        code = line[-2:-1]
        if code not in _HEX_DIRECTIONS:
            raise ValueError(f"unknown direction code in {line!r}")
        return _HEX_DIRECTIONS[code], int(line[-7:-2], 16)
    parts = line.split()
    if len(parts) < 2 or parts[0] not in _MOVES:
        raise ValueError(f"malformed dig step: {line!r}")
    return parts[0], int(parts[1])


def lagoon_size(steps: Iterable[tuple[str, int]]) -> int:
    """Cubic metres held by the trench outline and its interior."""
    y = x = 0
    points = [(0, 0)]
    boundary = 0
    for direction, length in steps:
        try:
            dy, dx = _MOVES[direction]
        except KeyError:
            raise ValueError(f"unknown direction {direction!r}") from None
        y += dy * length
        x += dx * length
        boundary += length
        points.append((y, x))
    twice_area = sum(
        x0 * y1 - x1 * y0
        for (y0, x0), (y1, x1) in zip(points, points[1:] + points[:1])
    )
    return abs(twice_area) // 2 + boundary // 2 + 1


def _solve(text: str, hexadecimal: bool) -> int:
    return lagoon_size(
        parse_step(line, hexadecimal) for line in text.splitlines() if line.strip()
    )


def part_one(text: str) -> int:
    return _solve(text, False)


def part_two(text: str) -> int:
    return _solve(text, True)