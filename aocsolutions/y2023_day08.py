"""Haunted wasteland: walking a left/right network."""

from __future__ import annotations

import re
from itertools import cycle

from aocsolutions.arith import lcm

START = "AAA"

_NODE = re.compile(r"^(\w+)\s*=\s*\(\s*(\w+)\s*,\s*(\w+)\s*\)$")


def parse_network(text: str) -> tuple[str, dict[str, tuple[str, str]]]:
    """The L/R instructions and a map from each node to its left and right nodes."""
    lines = [line.strip() for line in text.splitlines() if line.strip()]
    if not lines:
        raise ValueError("empty network description")
    instructions = lines[0]
    if set(instructions) - {"L", "R"}:
        raise ValueError(f"instructions may only hold L and R: {instructions!r}")
    network: dict[str, tuple[str, str]] = {}
    for line in lines[1:]:
        match = _NODE.match(line)
        if match is None:
            raise ValueError(f"malformed node: {line!r}")
        network[match.group(1)] = (match.group(2), match.group(3))
    return instructions, network


def steps_to_end(
    instructions: str, network: dict[str, tuple[str, str]], start: str
) -> int:
    """Steps from ``start`` until a node whose name ends in 'Z' is reached."""
    if not instructions:
        raise ValueError("no instructions to follow")
    node = start
    seen: set[tuple[str, int]] = set()
    for steps, (index, instruction) in enumerate(cycle(enumerate(instructions)), 1):
        state = (node, index)
        if state in seen:
            raise ValueError(f"no end node is reachable from {start!r}")
        seen.add(state)
        try:
            left, right = network[node]
        except KeyError:
            raise ValueError(f"unknown node {node!r}") from None
        node = left if instruction == "L" else right
        if node.endswith("Z"):
            return steps
    raise AssertionError("unreachable")


def part_one(text: str) -> int:
    instructions, network = parse_network(text)
    return steps_to_end(instructions, network, START)


def part_two(text: str) -> int:
    instructions, network = parse_network(text)
    starts = [node for node in network if node.endswith("A")]
    if not starts:
        raise ValueError("no start nodes in the network")
    return lcm(steps_to_end(instructions, network, node) for node in starts)