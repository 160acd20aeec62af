import pytest

from adventpuzzles.y2023.day22 import part1, part2

SAMPLE = """1,0,1~1,2,1
0,0,2~2,0,2
0,2,3~2,2,3
0,0,4~0,2,4
2,0,5~2,2,5
0,1,6~2,1,6
1,1,8~1,1,9"""


def test_example_part1():
    assert part1(SAMPLE) == 5


def test_example_part2():
    assert part2(SAMPLE) == 7


def test_single_brick():
    assert part1("0,0,5~0,0,5") == 1
    assert part2("0,0,5~0,0,5") == 0


def test_tower_of_two_after_falling():
    tower = "0,0,1~0,0,1\n0,0,3~0,0,3"
    assert part1(tower) == 1
    assert part2(tower) == 1


def test_order_of_lines_does_not_matter():
    reversed_sample = "\n".join(reversed(SAMPLE.splitlines()))
    assert part1(reversed_sample) == part1(SAMPLE)
    assert part2(reversed_sample) == part2(SAMPLE)


def test_malformed_brick_rejected():
    with pytest.raises(ValueError):
        part1("1,0,1~1,2")