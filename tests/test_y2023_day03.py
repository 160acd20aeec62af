from adventpuzzles.y2023 import day03

SAMPLE = """467..114..
...*......
..35..633.
......#...
617*......
.....+.58.
..592.....
......755.
...$.*....
.664.598..
"""


def test_example_part1():
    assert day03.part1(SAMPLE) == 4361


def test_example_part2():
    assert day03.part2(SAMPLE) == 467835


def test_number_touching_two_symbols_counts_once():
    assert day03.part1("#12#\n") == 12


def test_gear_with_one_number_is_ignored():
    assert day03.part2("12*\n...\n") == 0


def test_symbol_in_corner():
    assert day03.part1("*5\n7.\n") == 12