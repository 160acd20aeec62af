"""2015 day 17: No Such Thing as Too Much."""

from itertools import combinations

NAME = "No Such Thing as Too Much"


def count_combinations(text: str, target: int, fewest: bool) -> int:
    """Count container choices holding exactly the target volume.

    With fewest, only choices using the smallest possible number of containers
    are counted. Choices using every container are not considered.
    """
    sizes = [int(token) for token in text.split()]
    total = 0
    for n in range(1, len(sizes)):
        found = sum(1 for combo in combinations(sizes, n) if sum(combo) == target)
        if fewest and found:
            return found
        total += found
    return total


def part1(text: str) -> int:
    """Count the ways to store 150 litres."""
    return count_combinations(text, 150, False)


def part2(text: str) -> int:
    """Count the ways to store 150 litres with the fewest containers."""
    return count_combinations(text, 150, True)