"""2015 day 10: Elves Look, Elves Say."""

import re

NAME = "Elves Look, Elves Say"

_RUN = re.compile(r"(.)\1*")


def look_and_say(digits: str) -> str:
    """Return one look-and-say step of the given string."""
    return _RUN.sub(lambda m: f"{len(m.group())}{m.group(1)}", digits)


def expanded_length(digits: str, repetitions: int) -> int:
    """Return the length after applying look-and-say repeatedly."""
    for _ in range(repetitions):
        digits = look_and_say(digits)
    return len(digits)


def part1(text: str) -> int:
    """Return the length after 40 steps."""
    return expanded_length(text.strip(), 40)


def part2(text: str) -> int:
    """Return the length after 50 steps."""
    return expanded_length(text.strip(), 50)