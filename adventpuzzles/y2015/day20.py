"""2015 day 20: Infinite Elves and Infinite Houses."""

NAME = "Infinite Elves and Infinite Houses"


def lowest_house(presents: int, lazy_elves: bool) -> int:
    """Return the lowest house number receiving at least the given presents.

    Lazy elves deliver eleven presents per house but stop after fifty houses.
    """
    size = presents // 10
    houses = [0] * size
    per_house = 11 if lazy_elves else 10
    for elf in range(1, size):
        stop = min(size, elf * 51) if lazy_elves else size
        gift = elf * per_house
        for house in range(elf, stop, elf):
            houses[house] += gift
    for number, received in enumerate(houses):
        if received >= presents:
            return number
    raise ValueError(f"no house below {size} receives {presents} presents")


def part1(text: str) -> int:
    """Return the lowest house with enough presents."""
    return lowest_house(int(text.strip()), False)


def part2(text: str) -> int:
    """Return the lowest house with enough presents from lazy elves."""
    return lowest_house(int(text.strip()), True)