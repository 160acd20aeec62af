import pytest

from adventpuzzles.y2015.day23 import (
    Instruction,
    parse_program,
    part1,
    part2,
    run_program,
)


def test_parse_program():
    program = parse_program("jio a, +2\ntpl b\njmp -1")
    assert program == [
        Instruction("jio", "a", 2),
        Instruction("tpl", "b"),
        Instruction("jmp", None, -1),
    ]


def test_example_program_on_b():
    program = parse_program("inc b\njio b, +2\ntpl b\ninc b")
    assert run_program(program, 0) == 2


def test_increments_count_up():
    program = parse_program("\n".join(["inc b"] * 7))
    assert run_program(program, 0) == 7


def test_parts_use_register_a():
    text = "jio a, +2\ninc b\ninc b"
    assert part1(text) == run_program(parse_program(text), 0)
    assert part2(text) == run_program(parse_program(text), 1)
    assert part1(text) > part2(text)


def test_jump_past_end_halts():
    assert part1("jmp +5\ninc b") == 0


def test_unknown_instruction():
    with pytest.raises(ValueError):
        parse_program("nop a")


def test_unknown_register():
    with pytest.raises(ValueError):
        parse_program("inc c")