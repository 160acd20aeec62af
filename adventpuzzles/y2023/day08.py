"""2023 day 8: Haunted Wasteland."""

import math
from collections.abc import Callable
from itertools import cycle

NAME = "Camel Cards"

_SIDES = {"L": 0, "R": 1}

Network = dict[str, tuple[str, str]]


def lcm(numbers) -> int:
    """Return the least common multiple of the given numbers."""
    numbers = list(numbers)
    if not numbers:
        raise ValueError("lcm of no numbers")
    return math.lcm(*numbers)


def _parse(text: str) -> tuple[str, Network]:
    instructions, sep, body = text.strip().partition("\n\n")
    instructions = instructions.strip()
    if not sep or not instructions:
        raise ValueError("expected instructions and nodes separated by a blank line")
    if set(instructions) - _SIDES.keys():
        raise ValueError(f"unknown direction in {instructions!r}")
    network: Network = {}
    for line in body.replace("(", "").replace(")", "").splitlines():
        node, arrow, targets = line.partition(" = ")
        left, comma, right = targets.partition(", ")
        if not arrow or not comma:
            raise ValueError(f"malformed node {line!r}")
        network[node] = (left, right)
    return instructions, network


def _steps(
    instructions: str, network: Network, start: str, done: Callable[[str], bool]
) -> int:
    current = start
    for steps, direction in enumerate(cycle(instructions), start=1):
        current = network[current][_SIDES[direction]]
        if done(current):
            return steps
    raise AssertionError("unreachable")


def part1(text: str) -> int:
    """Count the steps from AAA to ZZZ."""
    instructions, network = _parse(text)
    return _steps(instructions, network, "AAA", lambda node: node == "ZZZ")


def part2(text: str) -> int:
    """Count the steps until every ghost stands on a node ending in Z."""
    instructions, network = _parse(text)
    ghosts = [node for node in network if node[2] == "A"]
    return lcm(
        _steps(instructions, network, ghost, lambda node: node[2] == "Z")
        for ghost in ghosts
    )