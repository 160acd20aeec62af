"""2023 day 16: The Floor Will Be Lava."""

from collections import deque
from collections.abc import Sequence

NAME = "The Floor Will Be Lava"

Beam = tuple[int, int, int, int]


def energized(rows: Sequence[str], start: Beam) -> int:
    """Count the tiles a beam energizes.

    The start is (row, column, row step, column step) just before the first tile.
    """
    height = len(rows)
    width = len(rows[0]) if rows else 0
    seen: set[Beam] = set()
    queue = deque([start])

    def push(beam: Beam) -> None:
        if beam not in seen:
            seen.add(beam)
            queue.append(beam)

    while queue:
        r, c, dr, dc = queue.popleft()
        r, c = r + dr, c + dc
        if not (0 <= r < height and 0 <= c < width):
            continue
        char = rows[r][c]
        if (dr == 0 and char == "-") or (dc == 0 and char == "|") or char == ".":
            push((r, c, dr, dc))
        elif char == "/":
            push((r, c, -dc, -dr))
        elif char == "\\":
            push((r, c, dc, dr))
        elif char == "-":
            push((r, c, 0, 1))
            push((r, c, 0, -1))
        elif char == "|":
            push((r, c, 1, 0))
            push((r, c, -1, 0))
        else:
            raise ValueError(f"unknown tile {char!r}")
    return len({(r, c) for r, c, _, _ in seen})


def _rows(text: str) -> list[str]:
    rows = [line for line in text.splitlines() if line]
    if not rows:
        raise ValueError("empty contraption")
    return rows


def part1(text: str) -> int:
    """Count the tiles energized by a beam entering the top-left heading right."""
    return energized(_rows(text), (0, -1, 0, 1))


def part2(text: str) -> int:
    """Return the most tiles any edge-entering beam energizes."""
    rows = _rows(text)
    height, width = len(rows), len(rows[0])
    starts = [(r, -1, 0, 1) for r in range(height)]
    starts += [(r, width, 0, -1) for r in range(height)]
    starts += [(-1, c, 1, 0) for c in range(width)]
    starts += [(height, c, -1, 0) for c in range(width)]
    return max(energized(rows, start) for start in starts)