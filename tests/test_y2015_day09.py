import pytest

from adventpuzzles.y2015.day09 import part1, part2

SAMPLE = """London to Dublin = 464
London to Belfast = 518
Dublin to Belfast = 141
"""


def test_part1_example():
    assert part1(SAMPLE) == 605


def test_part2_example():
    assert part2(SAMPLE) == 982


def test_two_cities():
    assert part1("A to B = 7") == part2("A to B = 7") == 7


def test_malformed_line_raises():
    with pytest.raises(ValueError):
        part1("London to Dublin 464")