"""2023 day 7: Camel Cards."""

from collections import Counter

NAME = "Camel Cards"

_HAND_TYPES = {
    (5,): 6,
    (4, 1): 5,
    (3, 2): 4,
    (3, 1, 1): 3,
    (2, 2, 1): 2,
    (2, 1, 1, 1): 1,
    (1, 1, 1, 1, 1): 0,
}

_PLAIN_ORDER = str.maketrans({"A": "E", "K": "D", "Q": "C", "J": "B", "T": "A"})
_JOKER_ORDER = str.maketrans({"A": "E", "K": "D", "Q": "C", "J": ".", "T": "A"})


def _hand_type(hand: str, jokers: bool) -> int:
    cards = Counter(hand)
    counts = sorted(cards.values(), reverse=True)
    if jokers and len(cards) > 1 and "J" in cards:
        # Jokers all join the most common other card.
        counts.remove(cards["J"])
        counts[0] += cards["J"]
    try:
        return _HAND_TYPES[tuple(counts)]
    except KeyError:
        raise ValueError(f"not a hand of five cards: {hand!r}") from None


def total_winnings(text: str, jokers: bool) -> int:
    """Rank every hand and sum bid times rank.

    With jokers, J is wild for the hand type and weakest when breaking ties.
    """
    order = _JOKER_ORDER if jokers else _PLAIN_ORDER
    plays = []
    for line in text.splitlines():
        tokens = line.split()
        if len(tokens) != 2:
            raise ValueError(f"malformed line {line!r}")
        hand, bid = tokens
        plays.append((_hand_type(hand, jokers), hand.translate(order), int(bid)))
    plays.sort(key=lambda play: (play[0], play[1]))
    return sum(rank * bid for rank, (_, _, bid) in enumerate(plays, start=1))


def part1(text: str) -> int:
    """Return the total winnings."""
    return total_winnings(text, False)


def part2(text: str) -> int:
    """Return the total winnings with jokers."""
    return total_winnings(text, True)