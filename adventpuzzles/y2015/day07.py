"""2015 day 7: Some Assembly Required."""

from collections.abc import Callable
from dataclasses import dataclass

NAME = "Some Assembly Required"

_MASK = 0xFFFF

_OPERATIONS: dict[str | None, Callable[[int, int], int]] = {
    None: lambda a, b: a,
    "NOT": lambda a, b: ~a & _MASK,
    "AND": lambda a, b: a & b,
    "OR": lambda a, b: a | b,
    "LSHIFT": lambda a, b: (a << b) & _MASK,
    "RSHIFT": lambda a, b: a >> b,
}


@dataclass
class Gate:
    """A gate feeding one wire; op None means a direct connection."""

    op: str | None
    in1: str
    in2: str | None = None

    @property
    def inputs(self) -> tuple[str, ...]:
        return (self.in1,) if self.in2 is None else (self.in1, self.in2)

    def evaluate(self, a: int, b: int = 0) -> int:
        return _OPERATIONS[self.op](a, b)


def parse_gates(text: str) -> dict[str, Gate]:
    """Parse the circuit into a mapping from output wire to gate."""
    gates: dict[str, Gate] = {}
    for line in text.splitlines():
        expression, sep, wire = line.partition(" -> ")
        if not sep:
            raise ValueError(f"missing '->' in {line!r}")
        tokens = expression.split(" ")
        if len(tokens) == 1:
            gate = Gate(None, tokens[0])
        elif tokens[0] == "NOT" and len(tokens) == 2:
            gate = Gate("NOT", tokens[1])
        elif len(tokens) == 3 and tokens[1] in _OPERATIONS and tokens[1] != "NOT":
            gate = Gate(tokens[1], tokens[0], tokens[2])
        else:
            raise ValueError(f"unknown gate {expression!r}")
        gates[wire] = gate
    return gates


def signal(gates: dict[str, Gate], wire: str) -> int:
    """Return the signal on a wire (or the value of a numeric literal)."""
    values: dict[str, int] = {}

    def known(token: str) -> bool:
        return token in values or token.isdigit()

    def value(token: str) -> int:
        return values[token] if token in values else int(token)

    expanding: set[str] = set()
    stack = [wire]
    while stack:
        current = stack[-1]
        if known(current):
            stack.pop()
            continue
        gate = gates[current]
        missing = [token for token in gate.inputs if not known(token)]
        if missing:
            if any(token in expanding for token in missing):
                raise ValueError(f"circular dependency at wire {current!r}")
            expanding.add(current)
            stack.extend(missing)
            continue
        values[current] = gate.evaluate(*(value(token) for token in gate.inputs))
        expanding.discard(current)
        stack.pop()
    return value(wire)


def part1(text: str) -> int:
    """Return the signal on wire a."""
    return signal(parse_gates(text), "a")


def part2(text: str) -> int:
    """Feed a's signal into b and return the new signal on a."""
    gates = parse_gates(text)
    result = signal(gates, "a")
    if "b" in gates:
        gates["b"] = Gate(None, str(result))
        result = signal(gates, "a")
    return result