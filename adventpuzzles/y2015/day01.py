"""2015 day 1: Not Quite Lisp."""

NAME = "Not Quite Lisp"


def part1(text: str) -> int:
    """Return the floor reached after following every instruction."""
    text = text.strip()
    return len(text) - 2 * text.count(")")


def part2(text: str) -> int:
    """Return the 1-based position of the first step into the basement.

    If the basement is never entered, the length of the instructions is returned.
    """
    level = 0
    position = 0
    for position, char in enumerate(text.strip(), start=1):
        if char == "(":
            level += 1
        elif char == ")":
            level -= 1
        else:
            raise ValueError(f"unexpected character {char!r}")
        if level < 0:
            break
    return max(position, 1)