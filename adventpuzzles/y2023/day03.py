"""2023 day 3: Gear Ratios."""

import re

NAME = "Gear Ratios"

_NUMBER = re.compile(r"[0-9]+")


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def _adjacent_numbers(rows: list[str], r: int, c: int) -> set[tuple[int, int]]:
    """Return the start positions of the numbers touching a cell."""
    starts: set[tuple[int, int]] = set()
    for nr in (r - 1, r, r + 1):
        if not 0 <= nr < len(rows):
            continue
        row = rows[nr]
        for nc in (c - 1, c, c + 1):
            if not 0 <= nc < len(row) or not _is_digit(row[nc]):
                continue
            while nc > 0 and _is_digit(row[nc - 1]):
                nc -= 1
            starts.add((nr, nc))
    return starts


def _number_at(rows: list[str], start: tuple[int, int]) -> int:
    r, c = start
    return int(_NUMBER.match(rows[r], c).group())


def part1(text: str) -> int:
    """Sum every number adjacent to a symbol."""
    rows = text.splitlines()
    starts: set[tuple[int, int]] = set()
    for r, row in enumerate(rows):
        for c, char in enumerate(row):
            if not _is_digit(char) and char != ".":
                starts |= _adjacent_numbers(rows, r, c)
    return sum(_number_at(rows, start) for start in starts)


def part2(text: str) -> int:
    """Sum the ratios of gears touching exactly two numbers."""
    rows = text.splitlines()
    total = 0
    for r, row in enumerate(rows):
        for c, char in enumerate(row):
            if char != "*":
                continue
            pair = _adjacent_numbers(rows, r, c)
            if len(pair) == 2:
                first, second = pair
                total += _number_at(rows, first) * _number_at(rows, second)
    return total