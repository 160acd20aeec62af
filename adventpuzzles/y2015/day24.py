"""2015 day 24: It Hangs in the Balance."""

from itertools import combinations
from math import prod

NAME = "It Hangs in the Balance"


def best_entanglement(text: str, groups: int) -> int:
    """Return the entanglement of the chosen front group, or 0 if none fits.

    Sizes are tried from one upwards; among the combinations of the first size
    that reaches the group weight, the smallest in input order is chosen.
    """
    packages = [int(token) for token in text.split()]
    target = sum(packages) // groups
    for size in range(1, len(packages) // groups + 1):
        fitting = [c for c in combinations(packages, size) if sum(c) == target]
        if fitting:
            return prod(min(fitting))
    return 0


def part1(text: str) -> int:
    """Return the entanglement for three groups."""
    return best_entanglement(text, 3)


def part2(text: str) -> int:
    """Return the entanglement for four groups."""
    return best_entanglement(text, 4)