"""2016 day 2: Bathroom Security."""

NAME = "Bathroom Security"

_MOVES = {"L": (-1, 0), "R": (1, 0), "U": (0, -1), "D": (0, 1)}

_SQUARE = ["123", "456", "789"]
_DIAMOND = ["..1..", ".234.", "56789", ".ABC.", "..D.."]


def _code(text: str, keypad: list[str], start: tuple[int, int]) -> str:
    x, y = start
    size = len(keypad)
    code = []
    for line in text.splitlines():
        for char in line:
            try:
                dx, dy = _MOVES[char]
            except KeyError:
                raise ValueError(f"unknown direction {char!r}") from None
            nx = min(max(x + dx, 0), size - 1)
            ny = min(max(y + dy, 0), size - 1)
            if keypad[ny][nx] != ".":
                x, y = nx, ny
        code.append(keypad[y][x])
    return "".join(code)


def part1(text: str) -> str:
    """Return the code on the square keypad."""
    return _code(text, _SQUARE, (1, 1))


def part2(text: str) -> str:
    """Return the code on the diamond keypad."""
    return _code(text, _DIAMOND, (1, 1))