import pytest

from adventpuzzles.y2023.day12 import arrangements, part1, part2

RECORDS = [
    ("???.###", (1, 1, 3)),
    (".??..??...?##.", (1, 1, 3)),
    ("?#?#?#?#?#?#?#?", (1, 3, 1, 6)),
    ("????.#...#...", (4, 1, 1)),
    ("????.######..#####.", (1, 6, 5)),
    ("?###????????", (3, 2, 1)),
]

SAMPLE = "".join(
    f"{springs} {','.join(str(size) for size in groups)}\n" for springs, groups in RECORDS
)


def test_example_part1():
    assert part1(SAMPLE) == 21


def test_example_part2():
    assert part2(SAMPLE) == 525152


def test_single_records():
    assert arrangements(RECORDS[0][0], list(RECORDS[0][1])) == 1
    assert arrangements(RECORDS[1][0], list(RECORDS[1][1])) == 4
    assert arrangements(RECORDS[5][0], list(RECORDS[5][1])) == 10


def test_no_groups_and_damaged_spring():
    assert arrangements("#", []) == 0
    assert arrangements("...", []) == 1


def test_malformed_line_raises():
    with pytest.raises(ValueError):
        part1("???.###\n")