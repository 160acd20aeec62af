"""2016 day 3: Squares With Three Sides."""

NAME = "Squares With Three Sides"


def _rows(text: str) -> list[list[int]]:
    return [[int(n) for n in line.split()] for line in text.splitlines() if line.strip()]


def _is_triangle(sides) -> bool:
    a, b, c = sorted(sides)
    return a + b > c


def part1(text: str) -> int:
    """Count the rows that form valid triangles."""
    return sum(_is_triangle(row) for row in _rows(text))


def part2(text: str) -> int:
    """Count the valid triangles read down columns in groups of three rows."""
    rows = _rows(text)
    if len(rows) % 3:
        raise ValueError("the number of rows must be a multiple of three")
    return sum(
        _is_triangle(column)
        for start in range(0, len(rows), 3)
        for column in zip(*rows[start : start + 3])
    )