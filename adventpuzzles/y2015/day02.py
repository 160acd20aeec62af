"""2015 day 2: I Was Told There Would Be No Math."""

from collections.abc import Iterator

NAME = "I Was Told There Would Be No Math"


def _boxes(text: str) -> Iterator[tuple[int, int, int]]:
    for line in text.strip().splitlines():
        dims = sorted(int(item) for item in line.split("x"))
        if len(dims) != 3:
            raise ValueError(f"expected three dimensions in {line!r}")
        yield dims[0], dims[1], dims[2]


def part1(text: str) -> int:
    """Return the total square feet of wrapping paper."""
    return sum(3 * l * w + 2 * l * h + 2 * w * h for l, w, h in _boxes(text))


def part2(text: str) -> int:
    """Return the total feet of ribbon."""
    return sum(2 * l + 2 * w + l * w * h for l, w, h in _boxes(text))