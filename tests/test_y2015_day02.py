import pytest

from adventpuzzles.y2015.day02 import part1, part2

SAMPLE = "2x3x4\n"


def test_part1_example():
    assert part1(SAMPLE) == 58


def test_part2_example():
    assert part2(SAMPLE) == 34


def test_second_example():
    assert part1("1x1x10") == 43
    assert part2("1x1x10") == 14


def test_totals_add_up_over_lines():
    assert part1("2x3x4\n1x1x10\n") == part1("2x3x4") + part1("1x1x10")


def test_order_of_dimensions_does_not_matter():
    assert part1("4x2x3") == part1("2x3x4")
    assert part2("4x2x3") == part2("2x3x4")


def test_malformed_line_raises():
    with pytest.raises(ValueError):
        part1("2x3")