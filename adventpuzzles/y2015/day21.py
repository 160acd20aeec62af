"""2015 day 21: RPG Simulator 20XX."""

from collections.abc import Iterator
from dataclasses import dataclass
from itertools import product

NAME = "RPG Simulator 20XX"


@dataclass(frozen=True)
class Item:
    """A piece of shop equipment."""

    cost: int
    damage: int
    armor: int


@dataclass(frozen=True)
class Fighter:
    """A combatant; the one calling beats() strikes first."""

    hp: int
    damage: int
    armor: int
    cost: int = 0

    def beats(self, other: "Fighter") -> bool:
        """Return whether this fighter wins when striking first."""
        own_hp, other_hp = self.hp, other.hp
        while True:
            other_hp -= max(self.damage - other.armor, 1)
            own_hp -= max(other.damage - self.armor, 1)
            if other_hp <= 0:
                return True
            if own_hp <= 0:
                return False


WEAPONS = [Item(8, 4, 0), Item(10, 5, 0), Item(25, 6, 0), Item(40, 7, 0), Item(74, 8, 0)]

ARMORS = [
    Item(13, 0, 1),
    Item(31, 0, 2),
    Item(53, 0, 3),
    Item(75, 0, 4),
    Item(102, 0, 5),
    Item(0, 0, 0),
]

RINGS = [
    Item(25, 1, 0),
    Item(50, 2, 0),
    Item(100, 3, 0),
    Item(20, 0, 1),
    Item(40, 0, 2),
    Item(80, 0, 3),
    Item(0, 0, 0),
]

BOSS = Fighter(hp=109, damage=8, armor=2)

PLAYER_HP = 100


def loadouts() -> Iterator[Fighter]:
    """Yield the player for every allowed combination of shop items."""
    for weapon, armor, left, right in product(WEAPONS, ARMORS, RINGS, RINGS):
        if left.cost == right.cost:
            continue
        items = (weapon, armor, left, right)
        yield Fighter(
            hp=PLAYER_HP,
            damage=sum(item.damage for item in items),
            armor=sum(item.armor for item in items),
            cost=sum(item.cost for item in items),
        )


def part1(text: str) -> int:
    """Return the least gold spent to beat the boss."""
    return min(player.cost for player in loadouts() if player.beats(BOSS))


def part2(text: str) -> int:
    """Return the most gold spent while still losing to the boss."""
    return max(player.cost for player in loadouts() if not player.beats(BOSS))