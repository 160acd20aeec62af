"""2015 day 18: Like a GIF For Your Yard."""

from collections import Counter

NAME = "No Such Thing as Too Much"

_NEIGHBOURS = [(dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0)]


class LightGrid:
    """A rectangular grid of lights following the game of life."""

    def __init__(self, text: str) -> None:
        lines = text.splitlines()
        if not lines:
            raise ValueError("empty grid")
        self.rows = len(lines)
        self.cols = len(lines[0])
        self._cells = {(r, c) for r, line in enumerate(lines) for c in range(len(line))}
        self._on = {
            (r, c)
            for r, line in enumerate(lines)
            for c, state in enumerate(line)
            if state == "#"
        }

    def step(self, stuck_corners: bool) -> None:
        """Advance one generation; optionally force the four corners on."""
        counts = Counter((r + dr, c + dc) for r, c in self._on for dr, dc in _NEIGHBOURS)
        self._on = {
            cell
            for cell in self._cells
            if counts[cell] == 3 or (counts[cell] == 2 and cell in self._on)
        }
        if stuck_corners:
            last_r, last_c = self.rows - 1, self.cols - 1
            corners = {(0, 0), (last_r, 0), (0, last_c), (last_r, last_c)}
            self._cells |= corners
            self._on |= corners

    def lights_on(self) -> int:
        """Return how many lights are on."""
        return len(self._on)


def _run(text: str, stuck_corners: bool) -> int:
    grid = LightGrid(text)
    for _ in range(100):
        grid.step(stuck_corners)
    return grid.lights_on()


def part1(text: str) -> int:
    """Return the lights on after 100 steps."""
    return _run(text, False)


def part2(text: str) -> int:
    """Return the lights on after 100 steps with stuck corners."""
    return _run(text, True)