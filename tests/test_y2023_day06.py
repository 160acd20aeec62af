import pytest

from adventpuzzles.y2023 import day06

SAMPLE = """Time:      7  15   30
Distance:  9  40  200
"""


def test_example_part1():
    assert day06.part1(SAMPLE) == 288


def test_example_part2():
    assert day06.part2(SAMPLE) == 71503


@pytest.mark.parametrize(
    ("race", "ways"),
    [("Time: 7\nDistance: 9\n", 4), ("Time: 15\nDistance: 40\n", 8), ("Time: 30\nDistance: 200\n", 9)],
)
def test_single_races(race, ways):
    assert day06.part1(race) == ways


def test_unbeatable_record():
    assert day06.part1("Time: 4\nDistance: 4\n") == 0


def test_missing_distance_line_raises():
    with pytest.raises(ValueError):
        day06.part1("Time: 7\n")