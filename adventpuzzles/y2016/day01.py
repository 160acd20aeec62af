"""2016 day 1: No Time for a Taxicab."""

NAME = "No Time for a Taxicab"

_DIRECTIONS = [(0, 1), (-1, 0), (0, -1), (1, 0)]
_TURNS = {"L": 1, "R": 3}


def distance(text: str, first_repeat: bool) -> int:
    """Return the taxicab distance of the end point.

    With first_repeat, stop at the first location visited twice; if there is
    none, the end point is used.
    """
    x, y = 0, 0
    heading = 0
    trail: set[tuple[int, int]] = set()
    for command in text.strip().split(", "):
        if len(command) < 2 or command[0] not in _TURNS:
            raise ValueError(f"malformed command {command!r}")
        heading = (heading + _TURNS[command[0]]) % 4
        dx, dy = _DIRECTIONS[heading]
        for _ in range(int(command[1:])):
            x, y = x + dx, y + dy
            if first_repeat:
                if (x, y) in trail:
                    return abs(x) + abs(y)
                trail.add((x, y))
    return abs(x) + abs(y)


def part1(text: str) -> int:
    """Return the distance to the end point."""
    return distance(text, False)


def part2(text: str) -> int:
    """Return the distance to the first location visited twice."""
    return distance(text, True)