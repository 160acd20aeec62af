import pytest

from adventpuzzles.y2023.day18 import lagoon_size, part1, part2

PLAN = [
    ("R", 6, "70c710"),
    ("D", 5, "0dc571"),
    ("L", 2, "5713f0"),
    ("D", 2, "d2c081"),
    ("R", 2, "59c680"),
    ("D", 2, "411b91"),
    ("L", 5, "8ceee2"),
    ("U", 2, "caa173"),
    ("L", 1, "1b58a2"),
    ("U", 2, "caa171"),
    ("R", 2, "7807d2"),
    ("U", 3, "a77fa3"),
    ("L", 2, "015232"),
    ("U", 2, "7a21e3"),
]


def _dig_plan(steps):
    return "\n".join(f"{direction} {length} (#{colour})" for direction, length, colour in steps)


SAMPLE = _dig_plan(PLAN)

SQUARE = _dig_plan(
    [("R", 2, "000020"), ("D", 2, "000021"), ("L", 2, "000022"), ("U", 2, "000023")]
)

SQUARE_REVERSED = _dig_plan(
    [("D", 2, "000021"), ("R", 2, "000020"), ("U", 2, "000023"), ("L", 2, "000022")]
)


def test_example_part1():
    assert part1(SAMPLE) == 62


def test_example_part2():
    assert part2(SAMPLE) == 952408144115


def test_colour_and_plain_agree_when_codes_match():
    assert lagoon_size(SQUARE, True) == lagoon_size(SQUARE, False)


def test_orientation_does_not_matter():
    assert part1(SQUARE_REVERSED) == part1(SQUARE)


def test_malformed_line_rejected():
    with pytest.raises(ValueError):
        part1("R 6 70c710")


def test_bad_colour_direction_rejected():
    with pytest.raises(ValueError):
        part2("R 6 (#70c719)")