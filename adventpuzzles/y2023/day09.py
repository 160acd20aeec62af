"""2023 day 9: Mirage Maintenance."""

from collections.abc import Iterable
from itertools import pairwise

NAME = "Mirage Maintenance"


def extrapolate(numbers: Iterable[int]) -> int:
    """Return the next value of a sequence by repeated differences."""
    sequence = list(numbers)
    if not sequence:
        raise ValueError("cannot extrapolate an empty sequence")
    result = 0
    while True:
        result += sequence[-1]
        differences = [b - a for a, b in pairwise(sequence)]
        if all(d == 0 for d in differences):
            return result
        sequence = differences


def _histories(text: str) -> list[list[int]]:
    return [[int(n) for n in line.split()] for line in text.splitlines() if line.strip()]


def part1(text: str) -> int:
    """Sum the next value of every history."""
    return sum(extrapolate(history) for history in _histories(text))


def part2(text: str) -> int:
    """Sum the previous value of every history."""
    return sum(extrapolate(reversed(history)) for history in _histories(text))