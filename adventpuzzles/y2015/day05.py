"""2015 day 5: Doesn't He Have Intern-Elves For This?"""

import re

NAME = "Doesn't He Have Intern-Elves For This?"

_THREE_VOWELS = re.compile(r"([aeiou].*){3}")
_DOUBLE_LETTER = re.compile(r"(.)\1")
_FORBIDDEN = re.compile(r"ab|cd|pq|xy")
_REPEATED_PAIR = re.compile(r"(..).*\1")
_SANDWICH = re.compile(r"(.).\1")


def is_nice(line: str) -> bool:
    """Apply the first set of rules."""
    return (
        _THREE_VOWELS.search(line) is not None
        and _DOUBLE_LETTER.search(line) is not None
        and _FORBIDDEN.search(line) is None
    )


def is_nicer(line: str) -> bool:
    """Apply the second set of rules."""
    return _REPEATED_PAIR.search(line) is not None and _SANDWICH.search(line) is not None


def part1(text: str) -> int:
    """Count the nice strings under the first rules."""
    return sum(is_nice(line) for line in text.splitlines())


def part2(text: str) -> int:
    """Count the nice strings under the second rules."""
    return sum(is_nicer(line) for line in text.splitlines())