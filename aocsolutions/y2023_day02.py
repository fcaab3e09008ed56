"""Cube games: which are possible and how many cubes they need."""

from __future__ import annotations

from collections.abc import Mapping
from math import prod

COLORS = ("red", "green", "blue")
BAG = {"red": 12, "green": 13, "blue": 14}

Game = list[dict[str, int]]


def parse_game(line: str) -> Game:
    """The handfuls of one game, each mapping a colour to its count."""
    _, separator, reveals = line.partition(":")
    if not separator:
        raise ValueError(f"malformed game: {line!r}")
    game: Game = []
    for reveal in reveals.split(";"):
        handful: dict[str, int] = {}
        for item in reveal.split(","):
            parts = item.split()
            if not parts:
                continue
            if len(parts) != 2 or parts[1] not in COLORS or not parts[0].isdigit():
                raise ValueError(f"malformed cube count {item.strip()!r}")
            handful[parts[1]] = handful.get(parts[1], 0) + int(parts[0])
        game.append(handful)
    return game


def is_possible(game: Game, bag: Mapping[str, int] = BAG) -> bool:
    """Whether no handful shows more cubes of a colour than the bag holds."""
    return all(
        count <= bag.get(color, 0)
        for handful in game
        for color, count in handful.items()
    )


def minimum_power(game: Game) -> int:
    """Product of the fewest cubes of each colour the game could be played with."""
    return prod(
        max((handful.get(color, 0) for handful in game), default=0)
        for color in COLORS
    )


def _games(text: str) -> list[Game]:
    return [parse_game(line) for line in text.splitlines() if line.strip()]


def part_one(text: str) -> int:
    return sum(
        number for number, game in enumerate(_games(text), 1) if is_possible(game)
    )


def part_two(text: str) -> int:
    return sum(minimum_power(game) for game in _games(text))