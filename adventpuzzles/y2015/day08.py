"""2015 day 8: Matchsticks."""

import re

NAME = "Matchsticks"

_HEX_ESCAPE = re.compile(r"\\x[a-fA-F0-9]{2}")


def _rendered_length(line: str) -> int:
    rendered = _HEX_ESCAPE.sub("x", line).replace("\\\\", "x").replace('\\"', "x")
    return len(rendered) - 2


def _encoded_length(line: str) -> int:
    return len(line) + line.count("\\") + line.count('"') + 2


def part1(text: str) -> int:
    """Return code characters minus in-memory characters."""
    return sum(len(line) - _rendered_length(line) for line in text.splitlines())


def part2(text: str) -> int:
    """Return encoded characters minus code characters."""
    return sum(_encoded_length(line) - len(line) for line in text.splitlines())