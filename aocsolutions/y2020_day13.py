"""Shuttle bus timetables."""

from __future__ import annotations


def parse_schedule(text: str) -> tuple[int, list[tuple[int, int]]]:
    """Arrival time and the (bus id, offset) pairs of the running buses."""
    parts = text.split(maxsplit=1)
    if not parts:
        raise ValueError("empty schedule")
    arrival = int(parts[0])
    if len(parts) == 1:
        return arrival, []
    buses = [
        (int(token), offset)
        for offset, token in enumerate(t.strip() for t in parts[1].split(","))
        if token != "x"
    ]
    return arrival, buses


def earliest_timestamp(buses: list[tuple[int, int]]) -> int:
    """First timestamp where each bus departs at its offset after it."""
    timestamp = 1
    step = 1
    for bus_id, offset in buses:
        while (timestamp + offset) % bus_id:
            timestamp += step
        step *= bus_id
    return timestamp


def part_one(text: str) -> int:
    arrival, buses = parse_schedule(text)
    if not buses:
        raise ValueError("no buses in service")
    best_wait, best_bus = min(
        ((bus_id - arrival % bus_id, bus_id) for bus_id, _ in buses),
        key=lambda pair: pair[0],
    )
    return best_wait * best_bus


def part_two(text: str) -> int:
    _, buses = parse_schedule(text)
    return earliest_timestamp(buses)