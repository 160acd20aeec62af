"""2023 day 2: Cube Conundrum."""

from collections.abc import Iterator
from math import prod

NAME = "Cube Conundrum"

_COLOURS = ("red", "green", "blue")
_LIMITS = {"red": 12, "green": 13, "blue": 14}


def _games(text: str) -> Iterator[tuple[int, dict[str, int]]]:
    """Yield each game's 1-based number and the most cubes seen per colour."""
    for number, line in enumerate(text.splitlines(), start=1):
        _, sep, draws = line.partition(": ")
        if not sep:
            raise ValueError(f"malformed game {line!r}")
        most = dict.fromkeys(_COLOURS, 0)
        for game in draws.split("; "):
            for draw in game.split(", "):
                amount, _, colour = draw.partition(" ")
                if colour not in most:
                    raise ValueError(f"unknown colour {colour!r}")
                most[colour] = max(most[colour], int(amount))
        yield number, most


def part1(text: str) -> int:
    """Sum the numbers of the games possible with the given cube limits."""
    return sum(
        number
        for number, most in _games(text)
        if all(most[colour] <= limit for colour, limit in _LIMITS.items())
    )


def part2(text: str) -> int:
    """Sum the power of the smallest cube set for every game."""
    return sum(prod(most.values()) for _, most in _games(text))