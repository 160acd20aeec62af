import json

import pytest

from adventpuzzles.y2015.day12 import part1, part2, total

SAMPLE = '{"a":2,"b":4}\n'
SAMPLE2 = '[1,{"c":"red","b":2},3]\n'


def test_part1_example():
    assert total(json.loads(SAMPLE), False) == 6
    assert part1(SAMPLE) == 6


def test_part2_example():
    assert total(json.loads(SAMPLE2), True) == 4
    assert part2(SAMPLE2) == 4


def test_red_in_array_is_kept():
    assert part2('[1,"red",5]') == part1('[1,"red",5]')


def test_nested_and_negative():
    assert part1('{"a":[-1,1]}') == 0
    assert part1("[[[3]]]") == 3


def test_float_rejected():
    with pytest.raises(TypeError):
        part1("[1.5]")