import pytest

from adventpuzzles.y2023 import day02

GAMES = [
    ["3 blue, 4 red", "1 red, 2 green, 6 blue", "2 green"],
    ["1 blue, 2 green", "3 green, 4 blue, 1 red", "1 green, 1 blue"],
    ["8 green, 6 blue, 20 red", "5 blue, 4 red, 13 green", "5 green, 1 red"],
    ["1 green, 3 red, 6 blue", "3 green, 6 red", "3 green, 15 blue, 14 red"],
    ["6 red, 1 blue, 3 green", "2 blue, 1 red, 2 green"],
]

SAMPLE = "".join(
    f"Game {number}: {'; '.join(draws)}\n" for number, draws in enumerate(GAMES, 1)
)


def test_example_part1():
    assert day02.part1(SAMPLE) == 8


def test_example_part2():
    assert day02.part2(SAMPLE) == 2286


def test_missing_colour_gives_zero_power():
    assert day02.part2("Game 1: 3 blue, 4 red\n") == 0


def test_unknown_colour_raises():
    with pytest.raises(ValueError):
        day02.part1("Game 1: 3 purple\n")