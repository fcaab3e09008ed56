"""Counting paths through a cave system."""

from __future__ import annotations

from collections import defaultdict

START = "start"
END = "end"


def _is_big(cave: str) -> bool:
    return "A" <= cave[:1] <= "Z"


def parse_caves(text: str) -> dict[str, list[str]]:
    """Map each cave to the caves reachable from it.

    Edges touching the start cave only lead away from it, and edges touching
    the end cave only lead into it; all other edges go both ways.
    """
    caves: dict[str, list[str]] = defaultdict(list)
    for line in text.split():
        first, separator, second = line.partition("-")
        if not separator or not first or not second:
            raise ValueError(f"malformed cave link: {line!r}")
        if first == START:
            caves[first].append(second)
        elif second == START:
            caves[second].append(first)
        elif first == END:
            caves[second].append(first)
        elif second == END:
            caves[first].append(second)
        else:
            caves[first].append(second)
            caves[second].append(first)
    return dict(caves)


def count_paths(caves: dict[str, list[str]], allow_twice: bool = False) -> int:
    """Number of paths from start to end.

    Small caves are visited at most once; with ``allow_twice`` a single small
    cave per path may be visited twice.
    """
    if START not in caves:
        raise ValueError("the cave system has no start")

    def walk(cave: str, seen: frozenset[str], doubled: bool) -> int:
        if cave == END:
            return 1
        if not _is_big(cave):
            if cave in seen:
                if not allow_twice or doubled:
                    return 0
                doubled = True
            seen = seen | {cave}
        return sum(walk(nxt, seen, doubled) for nxt in caves.get(cave, ()))

    return sum(walk(cave, frozenset(), False) for cave in caves[START])


def part_one(text: str) -> int:
    return count_paths(parse_caves(text))


def part_two(text: str) -> int:
    return count_paths(parse_caves(text), allow_twice=True)