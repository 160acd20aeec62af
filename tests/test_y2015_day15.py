import pytest

from adventpuzzles.y2015.day15 import highest_score, part1, part2

SAMPLE = (
    "Butterscotch: capacity -1, durability -2, flavor 6, texture 3, calories 8\n"
    "Cinnamon: capacity 2, durability 3, flavor -2, texture -1, calories 3\n"
)


def test_example_part1():
    assert highest_score(SAMPLE, 100, None) == 62842880
    assert part1(SAMPLE) == 62842880


def test_example_part2():
    assert highest_score(SAMPLE, 100, 500) == 57600000
    assert part2(SAMPLE) == 57600000


def test_calorie_limit_never_raises_score():
    assert highest_score(SAMPLE, 100, 500) <= highest_score(SAMPLE, 100, None)


def test_unreachable_calories_scores_zero():
    assert highest_score(SAMPLE, 100, 1) == 0


def test_single_ingredient():
    text = "Sugar: capacity 1, durability 1, flavor 1, texture 1, calories 1\n"
    assert highest_score(text, 3, None) == 81


def test_malformed_line_raises():
    with pytest.raises(ValueError):
        highest_score("Sugar: capacity 1", 10, None)