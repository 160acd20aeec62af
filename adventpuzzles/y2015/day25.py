"""2015 day 25: Let It Snow."""

import re

NAME = "Let It Snow"
NO_PUZZLE = "NO PUZZLE"

_FIRST_CODE = 20151125
_MULTIPLIER = 252533
_MODULUS = 33554393
_POSITION = re.compile(r"row (\d+), column (\d+)")


def code_at(row: int, column: int) -> int:
    """Return the code at a 1-based position of the diagonal code grid."""
    if row < 1 or column < 1:
        raise ValueError("row and column start at 1")
    base = row + column - 1
    number = base * (base + 1) // 2 - row + 1
    return _FIRST_CODE * pow(_MULTIPLIER, number - 1, _MODULUS) % _MODULUS


def _position(text: str) -> tuple[int, int]:
    match = _POSITION.search(text)
    if match is None:
        raise ValueError("no row and column found")
    return int(match.group(1)), int(match.group(2))


def part1(text: str) -> int:
    """Return the code at the position named in the text."""
    row, column = _position(text)
    return code_at(row, column)


def part2(text: str) -> str:
    """Check the input names a position; the day has no second puzzle."""
    _position(text)
    return NO_PUZZLE