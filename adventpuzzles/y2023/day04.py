"""2023 day 4: Scratchcards."""

NAME = "Scratchcards"


def _matches(text: str) -> list[int]:
    """Return, per card, how many of its numbers are winning numbers."""
    result = []
    for line in text.splitlines():
        _, sep, draw = line.partition(": ")
        winning, bar, mine = draw.partition(" | ")
        if not sep or not bar:
            raise ValueError(f"malformed card {line!r}")
        winners = {int(n) for n in winning.split()}
        result.append(len({int(n) for n in mine.split()} & winners))
    return result


def part1(text: str) -> int:
    """Sum the points of all cards."""
    return sum(2 ** (won - 1) for won in _matches(text) if won)


def part2(text: str) -> int:
    """Count all scratchcards, including the copies won."""
    matches = _matches(text)
    cards = [1] * len(matches)
    for index, won in enumerate(matches):
        if index + won >= len(cards):
            raise ValueError(f"card {index + 1} wins copies past the last card")
        copies = cards[index]
        cards[index + 1 : index + 1 + won] = [n + copies for n in cards[index + 1 : index + 1 + won]]
    return sum(cards)