"""2023 day 11: Cosmic Expansion."""

from itertools import accumulate, combinations

NAME = "Cosmic Expansion"


def distance_sum(text: str, expansion: int) -> int:
    """Sum the distances between all galaxy pairs; empty lines count as expansion."""
    grid = text.splitlines()
    if not grid:
        raise ValueError("empty image")
    width = len(grid[0])
    galaxies = [
        (r, c) for r, row in enumerate(grid) for c, char in enumerate(row[:width]) if char == "#"
    ]
    row_costs = [1 if "#" in row else expansion for row in grid]
    col_costs = [
        1 if any(row[c : c + 1] == "#" for row in grid) else expansion for c in range(width)
    ]
    row_at = list(accumulate(row_costs, initial=0))
    col_at = list(accumulate(col_costs, initial=0))
    return sum(
        abs(row_at[r1] - row_at[r2]) + abs(col_at[c1] - col_at[c2])
        for (r1, c1), (r2, c2) in combinations(galaxies, 2)
    )


def part1(text: str) -> int:
    """Sum the distances with empty lines doubled."""
    return distance_sum(text, 2)


def part2(text: str) -> int:
    """Sum the distances with empty lines a million times wider."""
    return distance_sum(text, 1_000_000)