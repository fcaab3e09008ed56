"""Crab Combat, plain and recursive."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable


def parse_decks(text: str) -> tuple[list[int], list[int]]:
    """The two players' decks, top card first."""
    deck_one: list[int] = []
    deck_two: list[int] = []
    current = deck_one
    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue
        if line.startswith("P"):
            current = deck_one if line[7:8] == "1" else deck_two
            continue
        current.append(int(line))
    return deck_one, deck_two


def _game(one: deque[int], two: deque[int], recursive: bool) -> tuple[int, deque[int]]:
    seen: set[tuple[tuple[int, ...], tuple[int, ...]]] = set()
    while one and two:
        if recursive:
            state = (tuple(one), tuple(two))
            if state in seen:
                return 1, one
            seen.add(state)

        card_one = one.popleft()
        card_two = two.popleft()
        if recursive and card_one <= len(one) and card_two <= len(two):
            winner, _ = _game(
                deque(list(one)[:card_one]), deque(list(two)[:card_two]), True
            )
        else:
            winner = 1 if card_one > card_two else 2

        if winner == 1:
            one.extend((card_one, card_two))
        else:
            two.extend((card_two, card_one))
    return (1, one) if one else (2, two)


def play(
    deck_one: Iterable[int], deck_two: Iterable[int], recursive: bool = False
) -> tuple[int, list[int]]:
    """Play a game; return the winning player (1 or 2) and their final deck."""
    winner, deck = _game(deque(deck_one), deque(deck_two), recursive)
    return winner, list(deck)


def score(deck: Iterable[int]) -> int:
    """Each card times its position counted from the bottom, summed."""
    cards = list(deck)
    return sum(card * weight for card, weight in zip(cards, range(len(cards), 0, -1)))


def part_one(text: str) -> int:
    _, deck = play(*parse_decks(text))
    return score(deck)


def part_two(text: str) -> int:
    _, deck = play(*parse_decks(text), recursive=True)
    return score(deck)