"""2015 day 3: Perfectly Spherical Houses in a Vacuum."""

from collections.abc import Iterator

NAME = "Perfectly Spherical Houses in a Vacuum"

_MOVES = {"^": (0, 1), "v": (0, -1), ">": (1, 0), "<": (-1, 0)}


def _moves(text: str) -> Iterator[tuple[int, int]]:
    for char in text.strip():
        try:
            yield _MOVES[char]
        except KeyError:
            raise ValueError(f"unexpected character {char!r}") from None


def part1(text: str) -> int:
    """Return how many houses Santa visits at least once."""
    x, y = 0, 0
    visited = {(x, y)}
    for dx, dy in _moves(text):
        x, y = x + dx, y + dy
        visited.add((x, y))
    return len(visited)


def part2(text: str) -> int:
    """Return how many houses Santa and Robo-Santa visit together."""
    positions = [(0, 0), (0, 0)]
    visited = {(0, 0)}
    for turn, (dx, dy) in enumerate(_moves(text)):
        x, y = positions[turn % 2]
        positions[turn % 2] = (x + dx, y + dy)
        visited.add(positions[turn % 2])
    return len(visited)