"""2015 day 15: Science for Hungry People."""

from collections.abc import Iterator
from dataclasses import dataclass
from math import prod

NAME = "Science for Hungry People"


@dataclass(frozen=True)
class _Ingredient:
    name: str
    properties: tuple[int, int, int, int]
    calories: int


def _parse(text: str) -> list[_Ingredient]:
    ingredients: dict[str, _Ingredient] = {}
    for line in text.splitlines():
        if not line.strip():
            continue
        tokens = line.replace(":", "").replace(",", "").split(" ")
        if len(tokens) < 11:
            raise ValueError(f"malformed ingredient {line!r}")
        properties = (int(tokens[2]), int(tokens[4]), int(tokens[6]), int(tokens[8]))
        ingredients[tokens[0]] = _Ingredient(tokens[0], properties, int(tokens[10]))
    return list(ingredients.values())


def _amounts(total: int, parts: int) -> Iterator[tuple[int, ...]]:
    if parts == 1:
        yield (total,)
        return
    for first in range(total + 1):
        for rest in _amounts(total - first, parts - 1):
            yield (first, *rest)


def highest_score(text: str, teaspoons: int, calories: int | None) -> int:
    """Return the best cookie score; with calories set, only matching recipes count."""
    ingredients = _parse(text)
    if not ingredients:
        return 0
    best = 0
    for amounts in _amounts(teaspoons, len(ingredients)):
        if calories is not None:
            energy = sum(a * i.calories for a, i in zip(amounts, ingredients))
            if energy != calories:
                continue
        totals = (
            sum(a * i.properties[k] for a, i in zip(amounts, ingredients))
            for k in range(4)
        )
        best = max(best, prod(max(t, 0) for t in totals))
    return best


def part1(text: str) -> int:
    """Return the best score for 100 teaspoons."""
    return highest_score(text, 100, None)


def part2(text: str) -> int:
    """Return the best score for 100 teaspoons and 500 calories."""
    return highest_score(text, 100, 500)