"""2015 day 22: Wizard Simulator 20XX."""

import heapq
from dataclasses import astuple, dataclass, replace
from enum import Enum
from itertools import count

NAME = "Wizard Simulator 20XX"

PLAYER_HP = 50
PLAYER_MANA = 500
BOSS_HP = 51
BOSS_DAMAGE = 9


class Spell(Enum):
    """The spells a wizard can cast, valued by their mana cost."""

    MISSILE = 53
    DRAIN = 73
    SHIELD = 113
    POISON = 173
    RECHARGE = 229

    @property
    def cost(self) -> int:
        return self.value


@dataclass
class GameState:
    """Everything that changes during a fight."""

    player_hp: int
    player_mana: int
    boss_hp: int
    boss_damage: int
    player_armor: int = 0
    poison_timer: int = 0
    shield_timer: int = 0
    recharge_timer: int = 0
    mana_spent: int = 0

    def apply_effects(self) -> None:
        """Let every active effect act once."""
        self.player_armor = 0
        if self.shield_timer > 0:
            self.player_armor = 7
            self.shield_timer -= 1
        if self.recharge_timer > 0:
            self.player_mana += 101
            self.recharge_timer -= 1
        if self.poison_timer > 0:
            self.boss_hp -= 3
            self.poison_timer -= 1

    def cast(self, spell: Spell) -> None:
        """Pay for a spell and apply its immediate result."""
        if spell is Spell.MISSILE:
            self.boss_hp -= 4
        elif spell is Spell.DRAIN:
            self.boss_hp -= 2
            self.player_hp += 2
        elif spell is Spell.SHIELD:
            self.shield_timer = 6
        elif spell is Spell.POISON:
            self.poison_timer = 6
        else:
            self.recharge_timer = 5
        self.mana_spent += spell.cost
        self.player_mana -= spell.cost


def least_mana(
    player_hp: int, player_mana: int, boss_hp: int, boss_damage: int, hard: bool
) -> int:
    """Return the least mana the player can spend and still win.

    In hard mode the player loses one hit point at the start of each own turn.
    """
    start = GameState(player_hp, player_mana, boss_hp, boss_damage)
    order = count()
    heap = [(0, next(order), start, spell) for spell in Spell]
    heapq.heapify(heap)
    visited: set[tuple] = set()
    best: int | None = None

    while heap:
        spent, _, previous, spell = heapq.heappop(heap)
        if best is not None and spent >= best:
            break
        key = (astuple(previous), spell)
        if key in visited:
            continue
        visited.add(key)

        state = replace(previous)
        if hard:
            state.player_hp -= 1
            if state.player_hp <= 0:
                continue

        state.apply_effects()
        if state.boss_hp <= 0:
            best = state.mana_spent if best is None else min(best, state.mana_spent)
            continue

        state.cast(spell)
        if state.player_mana < 0:
            continue
        if best is not None and state.mana_spent > best:
            continue

        state.apply_effects()
        if state.boss_hp <= 0:
            best = state.mana_spent if best is None else min(best, state.mana_spent)
            continue

        state.player_hp -= max(state.boss_damage - state.player_armor, 1)
        if state.player_hp <= 0:
            continue

        for following in Spell:
            heapq.heappush(heap, (state.mana_spent, next(order), state, following))

    if best is None:
        raise ValueError("the player cannot win this fight")
    return best


def part1(text: str) -> int:
    """Return the least mana needed to win."""
    return least_mana(PLAYER_HP, PLAYER_MANA, BOSS_HP, BOSS_DAMAGE, False)


def part2(text: str) -> int:
    """Return the least mana needed to win in hard mode."""
    return least_mana(PLAYER_HP, PLAYER_MANA, BOSS_HP, BOSS_DAMAGE, True)