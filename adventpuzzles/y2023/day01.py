"""2023 day 1: Trebuchet?!"""

from string import digits

NAME = "Trebuchet?!"

# Spelled digits are replaced so that letters shared with a neighbouring word
# (as in "eightwo") survive the replacement.
_SPELLED = [
    ("one", "o1e"),
    ("two", "t2o"),
    ("three", "t3e"),
    ("four", "4"),
    ("five", "5e"),
    ("six", "6"),
    ("seven", "7n"),
    ("eight", "e8t"),
    ("nine", "n9e"),
]


def _calibration_sum(text: str) -> int:
    total = 0
    for line in text.splitlines():
        found = [char for char in line if char in digits]
        if not found:
            raise ValueError(f"no digit in line {line!r}")
        total += int(found[0] + found[-1])
    return total


def part1(text: str) -> int:
    """Sum the two-digit values made of each line's first and last digit."""
    return _calibration_sum(text)


def part2(text: str) -> int:
    """Sum the calibration values, counting spelled-out digits too."""
    for word, replacement in _SPELLED:
        text = text.replace(word, replacement)
    return _calibration_sum(text)