"""2015 day 16: Aunt Sue."""

NAME = "Aunt Sue"

_TICKER = {
    "children": 3,
    "cats": 7,
    "samoyeds": 2,
    "pomeranians": 3,
    "akitas": 0,
    "vizslas": 0,
    "goldfish": 5,
    "trees": 3,
    "cars": 2,
    "perfumes": 1,
}

_GREATER = {"cats", "trees"}
_FEWER = {"pomeranians", "goldfish"}


def _matches(thing: str, actual: int, ranged: bool) -> bool:
    try:
        target = _TICKER[thing]
    except KeyError:
        raise ValueError(f"unknown compound {thing!r}") from None
    if ranged and thing in _GREATER:
        return actual > target
    if ranged and thing in _FEWER:
        return actual < target
    return actual == target


def find_sue(text: str, ranged: bool) -> int:
    """Return the 1-based line number of the Sue whose facts fit the ticker tape."""
    for number, line in enumerate(text.splitlines(), start=1):
        tokens = line.replace(",", "").replace(":", "").split(" ")
        if len(tokens) < 8:
            raise ValueError(f"malformed line {line!r}")
        facts = zip(tokens[2:8:2], tokens[3:8:2])
        if all(_matches(thing, int(amount), ranged) for thing, amount in facts):
            return number
    raise ValueError("no aunt matches the ticker tape")


def part1(text: str) -> int:
    """Return the Sue matching exactly."""
    return find_sue(text, False)


def part2(text: str) -> int:
    """Return the Sue matching with the outdated retroencabulator ranges."""
    return find_sue(text, True)