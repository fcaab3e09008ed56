"""Falling sand bricks: which can be removed and what falls when they go."""

from __future__ import annotations

from collections.abc import Iterable

Coordinate = tuple[int, int, int]
Brick = tuple[Coordinate, Coordinate]

GROUND = 0


def _parse_coordinate(text: str, line: str) -> Coordinate:
    parts = text.split(",")
    if len(parts) != 3:
        raise ValueError(f"malformed brick: {line!r}")
    try:
        x, y, z = (int(part) for part in parts)
    except ValueError as error:
        raise ValueError(f"malformed brick: {line!r}") from error
    return x, y, z


def parse_bricks(text: str) -> list[Brick]:
    """Bricks as (start, stop) corner triples, one per line of ``x,y,z~x,y,z``."""
    bricks: list[Brick] = []
    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue
        first, separator, second = line.partition("~")
        if not separator:
            raise ValueError(f"malformed brick: {line!r}")
        start = _parse_coordinate(first, line)
        stop = _parse_coordinate(second, line)
        if any(a > b for a, b in zip(start, stop)):
            raise ValueError(f"brick corners out of order: {line!r}")
        bricks.append((start, stop))
    return bricks


def _overlap(first: Brick, second: Brick, dim: int) -> bool:
    return first[0][dim] <= second[1][dim] and second[0][dim] <= first[1][dim]


def _overlap_xy(first: Brick, second: Brick) -> bool:
    return _overlap(first, second, 0) and _overlap(first, second, 1)


def settle(bricks: Iterable[Brick]) -> list[Brick]:
    """Let every brick fall as far as it can; the ground lies at z = 0."""
    settled: list[Brick] = []
    for brick in sorted(bricks, key=lambda b: b[1][2]):
        (x0, y0, z0), (x1, y1, z1) = brick
        floor = max(
            (
                below[1][2] + 1
                for below in settled
                if below[1][2] < z0 and _overlap_xy(brick, below)
            ),
            default=GROUND,
        )
        settled.append(((x0, y0, floor), (x1, y1, floor + z1 - z0)))
    return settled


def _supports(settled: list[Brick]) -> tuple[list[set[int]], list[set[int]]]:
    supporters: list[set[int]] = [set() for _ in settled]
    above: list[set[int]] = [set() for _ in settled]
    for lower_index, lower in enumerate(settled):
        for upper_index, upper in enumerate(settled):
            if upper[0][2] - lower[1][2] == 1 and _overlap_xy(lower, upper):
                supporters[upper_index].add(lower_index)
                above[lower_index].add(upper_index)
    return supporters, above


def count_removable(bricks: Iterable[Brick]) -> int:
    """Bricks whose removal, once everything has settled, lets nothing fall."""
    supporters, above = _supports(settle(bricks))
    return sum(
        all(len(supporters[upper]) > 1 for upper in uppers) for uppers in above
    )


def count_chain_falls(bricks: Iterable[Brick]) -> int:
    """Sum over all bricks of how many other bricks fall when it is removed."""
    supporters, above = _supports(settle(bricks))
    total = 0
    for removed in range(len(supporters)):
        remaining = [len(below) for below in supporters]
        pending = [removed]
        fallen = 0
        while pending:
            current = pending.pop()
            for upper in above[current]:
                remaining[upper] -= 1
                if remaining[upper] == 0:
                    fallen += 1
                    pending.append(upper)
        total += fallen
    return total


def part_one(text: str) -> int:
    return count_removable(parse_bricks(text))


def part_two(text: str) -> int:
    return count_chain_falls(parse_bricks(text))