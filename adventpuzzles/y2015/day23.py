"""2015 day 23: Opening the Turing Lock."""

from dataclasses import dataclass

NAME = "Opening the Turing Lock"

_REGISTER_OPS = {"hlf", "tpl", "inc"}
_CONDITIONAL_JUMPS = {"jie", "jio"}


@dataclass(frozen=True)
class Instruction:
    """One instruction; register is None for an unconditional jump."""

    op: str
    register: str | None = None
    offset: int = 0


def _register(token: str) -> str:
    name = token.rstrip(",")
    if name not in ("a", "b"):
        raise ValueError(f"unknown register {token!r}")
    return name


def _parse_line(line: str) -> Instruction:
    tokens = line.split()
    if not tokens:
        raise ValueError("empty instruction")
    op = tokens[0]
    try:
        if op == "jmp":
            return Instruction(op, None, int(tokens[1]))
        if op in _REGISTER_OPS:
            return Instruction(op, _register(tokens[1]))
        if op in _CONDITIONAL_JUMPS:
            return Instruction(op, _register(tokens[1]), int(tokens[2]))
    except IndexError:
        raise ValueError(f"missing operand in {line!r}") from None
    raise ValueError(f"unknown instruction {line!r}")


def parse_program(text: str) -> list[Instruction]:
    """Parse one instruction per line."""
    return [_parse_line(line) for line in text.splitlines() if line.strip()]


def run_program(program: list[Instruction], a: int) -> int:
    """Run the program with register a preset and return register b."""
    registers = {"a": a, "b": 0}
    pointer = 0
    while 0 <= pointer < len(program):
        instruction = program[pointer]
        op, reg = instruction.op, instruction.register
        step = 1
        if op == "inc":
            registers[reg] += 1
        elif op == "hlf":
            registers[reg] //= 2
        elif op == "tpl":
            registers[reg] *= 3
        elif op == "jmp":
            step = instruction.offset
        elif op == "jie":
            if registers[reg] % 2 == 0:
                step = instruction.offset
        elif op == "jio":
            if registers[reg] == 1:
                step = instruction.offset
        pointer += step
    return registers["b"]


def part1(text: str) -> int:
    """Return register b after running with a = 0."""
    return run_program(parse_program(text), 0)


def part2(text: str) -> int:
    """Return register b after running with a = 1."""
    return run_program(parse_program(text), 1)