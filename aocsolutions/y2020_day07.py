"""Luggage rules: which bags hold which."""

from __future__ import annotations

import re
from collections import defaultdict

TARGET_BAG = "shiny gold"

_CONTENT = re.compile(r"(\d+) (.+?) bags?")


def parse_rules(text: str) -> dict[str, list[tuple[str, int]]]:
    """Map each container colour to the (colour, amount) pairs it must hold."""
    rules: dict[str, list[tuple[str, int]]] = {}
    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue
        container, separator, contents = line.partition(" bags contain ")
        if not separator:
            raise ValueError(f"malformed rule: {line!r}")
        rules[container] = [
            (colour, int(amount)) for amount, colour in _CONTENT.findall(contents)
        ]
    return rules


def count_holders(rules: dict[str, list[tuple[str, int]]], bag: str) -> int:
    """Number of distinct colours that can eventually contain ``bag``."""
    holders: dict[str, list[str]] = defaultdict(list)
    for container, contents in rules.items():
        for colour, _ in contents:
            holders[colour].append(container)

    seen: set[str] = set()
    pending = list(holders.get(bag, ()))
    while pending:
        colour = pending.pop()
        if colour in seen:
            continue
        seen.add(colour)
        pending.extend(holders.get(colour, ()))
    seen.discard(bag)
    return len(seen)


def count_required(rules: dict[str, list[tuple[str, int]]], bag: str) -> int:
    """Total number of bags that ``bag`` must contain."""
    cache: dict[str, int] = {}

    def required(colour: str) -> int:
        if colour not in cache:
            cache[colour] = sum(
                amount + amount * required(inner)
                for inner, amount in rules.get(colour, ())
            )
        return cache[colour]

    return required(bag)


def part_one(text: str) -> int:
    return count_holders(parse_rules(text), TARGET_BAG)


def part_two(text: str) -> int:
    return count_required(parse_rules(text), TARGET_BAG)