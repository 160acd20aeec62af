"""2015 day 9: All in a Single Night."""

from collections.abc import Iterator
from itertools import pairwise, permutations

NAME = "All in a Single Night"


def _route_lengths(text: str) -> Iterator[int]:
    distances: dict[tuple[str, str], int] = {}
    cities: set[str] = set()
    for line in text.splitlines():
        tokens = line.split(" ")
        if len(tokens) != 5:
            raise ValueError(f"malformed line {line!r}")
        first, _, second, _, dist = tokens
        distances[first, second] = distances[second, first] = int(dist)
        cities.update((first, second))
    for route in permutations(cities):
        yield sum(distances[leg] for leg in pairwise(route))


def part1(text: str) -> int:
    """Return the length of the shortest route visiting every city."""
    return min(_route_lengths(text))


def part2(text: str) -> int:
    """Return the length of the longest route visiting every city."""
    return max(_route_lengths(text))