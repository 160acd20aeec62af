"""2023 day 17: Clumsy Crucible."""

import heapq

NAME = "The Floor Will Be Lava"

_DIRECTIONS = ((0, 1), (0, -1), (1, 0), (-1, 0))


def _grid(text: str) -> list[list[int]]:
    rows = [line.strip() for line in text.splitlines() if line.strip()]
    if not rows:
        raise ValueError("empty heat loss map")
    try:
        return [[int(char) for char in row] for row in rows]
    except ValueError:
        raise ValueError("the heat loss map must consist of digits") from None


def min_heat_loss(text: str, ultra: bool) -> int:
    """Return the least heat lost on the way from the top-left to the bottom-right block.

    A normal crucible moves at most three blocks in a line; an ultra crucible
    moves at most ten and must move at least four before turning.
    """
    grid = _grid(text)
    height, width = len(grid), len(grid[0])
    longest = 10 if ultra else 3
    target = (height - 1, width - 1)
    heap = [(0, 0, 0, 0, 0, 0)]
    seen: set[tuple[int, int, int, int, int]] = set()

    while heap:
        loss, r, c, dr, dc, run = heapq.heappop(heap)
        if (r, c) == target:
            return loss
        state = (r, c, dr, dc, run)
        if state in seen:
            continue
        seen.add(state)

        moving = (dr, dc) != (0, 0)
        moves = []
        if moving and run < longest:
            moves.append((dr, dc, run + 1))
        if not (ultra and moving and run < 4):
            moves.extend(
                (ndr, ndc, 1)
                for ndr, ndc in _DIRECTIONS
                if (ndr, ndc) != (dr, dc) and (ndr, ndc) != (-dr, -dc)
            )
        for ndr, ndc, steps in moves:
            nr, nc = r + ndr, c + ndc
            if 0 <= nr < height and 0 <= nc < width and nc < len(grid[nr]):
                heapq.heappush(heap, (loss + grid[nr][nc], nr, nc, ndr, ndc, steps))

    raise ValueError("the bottom-right block cannot be reached")


def part1(text: str) -> int:
    """Return the least heat loss for a normal crucible."""
    return min_heat_loss(text, False)


def part2(text: str) -> int:
    """Return the least heat loss for an ultra crucible."""
    return min_heat_loss(text, True)