import pytest

from adventpuzzles.y2015.day17 import count_combinations, part1, part2

SAMPLE = "20\n15\n10\n5\n5\n"


def test_example_all_ways():
    assert count_combinations(SAMPLE, 25, False) == 4


def test_example_fewest():
    assert count_combinations(SAMPLE, 25, True) == 3


def test_fewest_never_exceeds_all():
    for target in range(0, 60, 5):
        assert count_combinations(SAMPLE, target, True) <= count_combinations(
            SAMPLE, target, False
        )


def test_parts_use_150_litres():
    text = "100\n50\n75\n75\n"
    assert part1(text) == count_combinations(text, 150, False)
    assert part2(text) == count_combinations(text, 150, True)


def test_non_numeric_raises():
    with pytest.raises(ValueError):
        count_combinations("10\nabc\n", 10, False)