import pytest

from aocsolutions.y2020_day13 import (
    earliest_timestamp,
    parse_schedule,
    part_one,
    part_two,
)

EXAMPLE = "939\n7,13,x,x,59,x,31,19\n"


def test_parse_schedule():
    arrival, buses = parse_schedule(EXAMPLE)
    assert arrival == 939
    assert buses == [(7, 0), (13, 1), (59, 4), (31, 6), (19, 7)]


def test_part_one_example():
    assert part_one(EXAMPLE) == 295


def test_part_two_example():
    assert part_two(EXAMPLE) == 1068781


def test_earliest_timestamp_small_example():
    assert earliest_timestamp([(17, 0), (13, 2), (19, 3)]) == 3417


def test_earliest_timestamp_satisfies_every_bus():
    _, buses = parse_schedule(EXAMPLE)
    timestamp = earliest_timestamp(buses)
    assert all((timestamp + offset) % bus_id == 0 for bus_id, offset in buses)


def test_part_one_without_buses_raises():
    with pytest.raises(ValueError):
        part_one("100\nx,x\n")