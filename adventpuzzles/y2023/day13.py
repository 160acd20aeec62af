"""2023 day 13: Point of Incidence."""

from collections.abc import Sequence

NAME = "Point of Incidence"


def reflection_index(rows: Sequence[str], smudged: bool) -> int | None:
    """Return how many rows lie above the mirror line, or None if there is none.

    With smudged, the reflection must differ in exactly one cell.
    """
    for r in range(1, len(rows)):
        pairs = zip(reversed(rows[:r]), rows[r:])
        if smudged:
            if sum(a != b for above, below in pairs for a, b in zip(above, below)) == 1:
                return r
        elif all(above == below for above, below in pairs):
            return r
    return None


def summarize(text: str, smudged: bool) -> int:
    """Sum the columns left of vertical mirrors and 100 times the rows above horizontal ones."""
    total = 0
    for block in text.split("\n\n"):
        rows = [line for line in block.splitlines() if line]
        if not rows:
            continue
        horizontal = reflection_index(rows, smudged)
        if horizontal is not None:
            total += 100 * horizontal
        columns = ["".join(column) for column in zip(*rows)]
        vertical = reflection_index(columns, smudged)
        if vertical is not None:
            total += vertical
    return total


def part1(text: str) -> int:
    """Summarize the clean mirrors."""
    return summarize(text, False)


def part2(text: str) -> int:
    """Summarize the mirrors after fixing one smudge each."""
    return summarize(text, True)