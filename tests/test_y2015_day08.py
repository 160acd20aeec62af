from adventpuzzles.y2015.day08 import part1, part2

SAMPLE = "\n".join(['""', '"abc"', r'"aaa\"aaa"', r'"\x27"']) + "\n"


def test_part1_example():
    assert part1(SAMPLE) == 12


def test_part2_example():
    assert part2(SAMPLE) == 19


def test_hex_escape_overhead():
    assert part1(r'"\x27"') == 5


def test_plain_characters_add_nothing():
    assert part1('"abc"') == part1('""')
    assert part2('"abc"') == part2('""')


def test_results_add_over_lines():
    lines = SAMPLE.splitlines()
    assert part1(SAMPLE) == sum(part1(line) for line in lines)
    assert part2(SAMPLE) == sum(part2(line) for line in lines)