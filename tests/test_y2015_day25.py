import pytest

from adventpuzzles.y2015.day25 import code_at, part1, part2


def test_first_code():
    assert code_at(1, 1) == 20151125


def test_table_values():
    assert code_at(2, 1) == 31916031
    assert code_at(1, 2) == 18749137


def test_consecutive_codes_follow_recurrence():
    assert code_at(1, 2) == code_at(2, 1) * 252533 % 33554393


def test_part1_reads_position():
    text = "Enter the code at row 1, column 1."
    assert part1(text) == 20151125


def test_part2_has_no_puzzle():
    assert part2("") == "NO PUZZLE"


def test_missing_position():
    with pytest.raises(ValueError):
        part1("nothing here")


def test_invalid_position():
    with pytest.raises(ValueError):
        code_at(0, 1)