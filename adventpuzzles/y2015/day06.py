"""2015 day 6: Probably a Fire Hazard."""

import re
from dataclasses import dataclass

NAME = "Probably a Fire Hazard"

_SIZE = 1000
_PATTERN = re.compile(r"(turn on|turn off|toggle) (\d+),(\d+) through (\d+),(\d+)")

_SWITCH = {
    "turn on": lambda cells: [1] * len(cells),
    "turn off": lambda cells: [0] * len(cells),
    "toggle": lambda cells: [1 - v for v in cells],
}

_DIM = {
    "turn on": lambda cells: [v + 1 for v in cells],
    "turn off": lambda cells: [v - 1 if v else 0 for v in cells],
    "toggle": lambda cells: [v + 2 for v in cells],
}


@dataclass(frozen=True)
class Instruction:
    """One instruction acting on a rectangle of lights, corners inclusive."""

    command: str
    start: tuple[int, int]
    end: tuple[int, int]


def parse_instruction(line: str) -> Instruction:
    """Parse a line such as 'toggle 0,0 through 999,0'."""
    match = _PATTERN.search(line)
    if match is None:
        raise ValueError(f"not an instruction: {line!r}")
    command, x0, y0, x1, y1 = match.groups()
    return Instruction(command, (int(x0), int(y0)), (int(x1), int(y1)))


def lights_on(text: str, brightness: bool) -> int:
    """Run all instructions and return the total light (count or brightness)."""
    rules = _DIM if brightness else _SWITCH
    grid = [[0] * _SIZE for _ in range(_SIZE)]
    for line in text.splitlines():
        instruction = parse_instruction(line)
        (x0, y0), (x1, y1) = instruction.start, instruction.end
        if max(x0, y0, x1, y1) >= _SIZE:
            raise ValueError(f"coordinates outside the grid: {line!r}")
        change = rules[instruction.command]
        for row in grid[y0 : y1 + 1]:
            row[x0 : x1 + 1] = change(row[x0 : x1 + 1])
    return sum(map(sum, grid))


def part1(text: str) -> int:
    """Return how many lights are lit."""
    return lights_on(text, False)


def part2(text: str) -> int:
    """Return the total brightness."""
    return lights_on(text, True)