"""2023 day 18: Lavaduct Lagoon."""

from collections.abc import Iterator

NAME = "Lavaduct Lagoon"

_DIRECTIONS = {"U": (0, -1), "D": (0, 1), "L": (-1, 0), "R": (1, 0)}
_COLOUR_DIRECTIONS = "RDLU"


def _steps(text: str, from_colour: bool) -> Iterator[tuple[tuple[int, int], int]]:
    for line in text.splitlines():
        if not line.strip():
            continue
        first, sep, colour = line.strip().partition(" (#")
        if not sep:
            raise ValueError(f"malformed dig step {line!r}")
        direction, _, length_text = first.partition(" ")
        colour = colour.rstrip(")")
        if from_colour:
            if len(colour) != 6 or colour[-1] not in "0123":
                raise ValueError(f"malformed colour code in {line!r}")
            direction = _COLOUR_DIRECTIONS[int(colour[-1])]
            length = int(colour[:5], 16)
        else:
            length = int(length_text)
        if direction not in _DIRECTIONS:
            raise ValueError(f"unknown direction in {line!r}")
        yield _DIRECTIONS[direction], length


def lagoon_size(text: str, from_colour: bool) -> int:
    """Return how many cubic metres the dug lagoon holds.

    With from_colour, direction and length are read from the hexadecimal code.
    """
    x, y = 0, 0
    points = [(x, y)]
    boundary = 0
    for (dx, dy), length in _steps(text, from_colour):
        x, y = x + dx * length, y + dy * length
        boundary += length
        points.append((x, y))

    twice_area = sum(
        x1 * y2 - x2 * y1
        for (x1, y1), (x2, y2) in zip(points, points[1:] + points[:1])
    )
    area = abs(twice_area) // 2
    interior = area - boundary // 2 + 1
    return interior + boundary


def part1(text: str) -> int:
    """Return the lagoon size following the plain instructions."""
    return lagoon_size(text, False)


def part2(text: str) -> int:
    """Return the lagoon size following the colour codes."""
    return lagoon_size(text, True)