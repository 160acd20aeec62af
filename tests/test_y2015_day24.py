from adventpuzzles.y2015.day24 import best_entanglement, part1, part2

SAMPLE = "\n".join(str(n) for n in [1, 2, 3, 4, 5, 7, 8, 9, 10, 11])


def test_example_three_groups():
    assert part1(SAMPLE) == 99


def test_example_four_groups():
    assert part2(SAMPLE) == 44


def test_parts_match_general_function():
    assert best_entanglement(SAMPLE, 3) == part1(SAMPLE)
    assert best_entanglement(SAMPLE, 4) == part2(SAMPLE)


def test_single_package_groups():
    assert best_entanglement("5\n5\n5", 3) == 5


def test_no_fitting_group():
    assert best_entanglement("1\n2", 3) == 0