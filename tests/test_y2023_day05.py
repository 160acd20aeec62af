import pytest

from adventpuzzles.y2023 import day05

SEEDS = (79, 14, 55, 13)

MAPS = [
    ("seed-to-soil", [(50, 98, 2), (52, 50, 48)]),
    ("soil-to-fertilizer", [(0, 15, 37), (37, 52, 2), (39, 0, 15)]),
    ("fertilizer-to-water", [(49, 53, 8), (0, 11, 42), (42, 0, 7), (57, 7, 4)]),
    ("water-to-light", [(88, 18, 7), (18, 25, 70)]),
    ("light-to-temperature", [(45, 77, 23), (81, 45, 19), (68, 64, 13)]),
    ("temperature-to-humidity", [(0, 69, 1), (1, 0, 69)]),
    ("humidity-to-location", [(60, 56, 37), (56, 93, 4)]),
]


def _section(name, ranges):
    body = "\n".join(" ".join(str(value) for value in entry) for entry in ranges)
    return f"{name} map:\n{body}"


SAMPLE = (
    "seeds: "
    + " ".join(str(seed) for seed in SEEDS)
    + "\n\n"
    + "\n\n".join(_section(name, ranges) for name, ranges in MAPS)
)


def test_example_part1():
    assert day05.part1(SAMPLE) == 35


def test_example_part2():
    assert day05.part2(SAMPLE) == 46


def test_unmapped_seed_keeps_value():
    assert day05.part1("seeds: 7 3\n\nmap:\n100 50 2\n") == 3


def test_odd_seed_count_raises_for_ranges():
    with pytest.raises(ValueError):
        day05.part2("seeds: 1 2 3\n\nmap:\n0 0 1\n")