"""Distress signal packets and their ordering."""

from __future__ import annotations

import json
from functools import cmp_to_key
from math import prod

Packet = "int | list"

DIVIDERS = ("[[2]]", "[[6]]")


def _validate(node: object, text: str) -> None:
    if isinstance(node, bool):
        raise ValueError(f"malformed packet: {text!r}")
    if isinstance(node, int):
        return
    if isinstance(node, list):
        for item in node:
            _validate(item, text)
        return
    raise ValueError(f"malformed packet: {text!r}")


def parse_packet(text: str) -> list:
    """A packet line as nested lists of integers."""
    try:
        value = json.loads(text)
    except json.JSONDecodeError as error:
        raise ValueError(f"malformed packet: {text!r}") from error
    if not isinstance(value, list):
        raise ValueError(f"a packet must be a list: {text!r}")
    _validate(value, text)
    return value


def compare_packets(left: int | list, right: int | list) -> int:
    """Negative if ``left`` comes first, positive if ``right`` does, else zero."""
    if isinstance(left, int) and isinstance(right, int):
        return (left > right) - (left < right)
    if isinstance(left, int):
        left = [left]
    if isinstance(right, int):
        right = [right]
    for first, second in zip(left, right):
        result = compare_packets(first, second)
        if result:
            return result
    return (len(left) > len(right)) - (len(left) < len(right))


def _lines(text: str) -> list[str]:
    return [line.strip() for line in text.splitlines() if line.strip()]


def part_one(text: str) -> int:
    lines = _lines(text)
    packets = [parse_packet(line) for line in lines]
    return sum(
        number
        for number, (left, right) in enumerate(zip(packets[::2], packets[1::2]), 1)
        if compare_packets(left, right) < 0
    )


def part_two(text: str) -> int:
    entries = [(line, parse_packet(line)) for line in _lines(text)]
    entries += [(line, parse_packet(line)) for line in DIVIDERS]
    ordered = sorted(entries, key=cmp_to_key(lambda a, b: compare_packets(a[1], b[1])))
    distinct: list[tuple[str, list]] = []
    for entry in ordered:
        if distinct and compare_packets(distinct[-1][1], entry[1]) == 0:
            continue
        distinct.append(entry)
    return prod(
        position
        for position, (line, _) in enumerate(distinct, 1)
        if line in DIVIDERS
    )