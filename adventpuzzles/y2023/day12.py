"""2023 day 12: Hot Springs."""

from collections.abc import Sequence
from functools import lru_cache

NAME = "Hot Springs"


def arrangements(springs: str, groups: Sequence[int]) -> int:
    """Count the ways the unknown springs can match the damaged group sizes."""

    @lru_cache(maxsize=None)
    def count(springs: str, groups: tuple[int, ...]) -> int:
        springs = springs.lstrip(".")
        if not springs:
            return 0 if groups else 1
        if not groups:
            return 0 if "#" in springs else 1
        if springs[0] == "#":
            size = groups[0]
            if len(springs) < size or "." in springs[:size]:
                return 0
            if len(springs) == size:
                return 1 if len(groups) == 1 else 0
            if springs[size] == "#":
                return 0
            return count(springs[size + 1 :], groups[1:])
        rest = springs[1:]
        return count("#" + rest, groups) + count("." + rest, groups)

    return count(springs, tuple(groups))


def _records(text: str, folds: int) -> int:
    total = 0
    for line in text.splitlines():
        if not line.strip():
            continue
        springs, sep, sizes = line.partition(" ")
        if not sep:
            raise ValueError(f"malformed record {line!r}")
        groups = [int(n) for n in sizes.split(",")]
        total += arrangements("?".join([springs] * folds), groups * folds)
    return total


def part1(text: str) -> int:
    """Sum the arrangement counts of all records."""
    return _records(text, 1)


def part2(text: str) -> int:
    """Sum the arrangement counts of all records unfolded five times."""
    return _records(text, 5)