"""Scratchcards: matching numbers, points and won copies."""

from __future__ import annotations

from dataclasses import dataclass


def _numbers(section: str, line: str) -> frozenset[int]:
    try:
        return frozenset(int(token) for token in section.split())
    except ValueError as error:
        raise ValueError(f"malformed card: {line!r}") from error


@dataclass(frozen=True)
class Card:
    """The winning numbers of a card and the numbers it holds."""

    winning: frozenset[int]
    numbers: frozenset[int]

    @classmethod
    def from_line(cls, line: str) -> Card:
        """Read a card of the form ``Card N: winning | held``."""
        _, separator, body = line.partition(":")
        if not separator:
            raise ValueError(f"malformed card: {line!r}")
        winning, separator, held = body.partition("|")
        if not separator:
            raise ValueError(f"malformed card: {line!r}")
        return cls(_numbers(winning, line), _numbers(held, line))

    def matches(self) -> int:
        """How many held numbers are winning numbers."""
        return len(self.winning & self.numbers)

    def points(self) -> int:
        """One point for the first match, doubled for each further one."""
        count = self.matches()
        return 2 ** (count - 1) if count else 0


def _cards(text: str) -> list[Card]:
    return [Card.from_line(line) for line in text.splitlines() if line.strip()]


def part_one(text: str) -> int:
    return sum(card.points() for card in _cards(text))


def part_two(text: str) -> int:
    """Total cards held once every won copy has been scratched."""
    cards = _cards(text)
    copies = [1] * len(cards)
    for index, card in enumerate(cards):
        last = min(index + card.matches(), len(cards) - 1)
        for target in range(index + 1, last + 1):
            copies[target] += copies[index]
    return sum(copies)