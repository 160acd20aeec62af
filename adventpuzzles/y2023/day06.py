"""2023 day 6: Wait For It."""

from math import isqrt, prod

NAME = "Wait For It"


def _ways(time: int, record: int) -> int:
    """Count the hold times t in [0, time) with t * (time - t) > record."""
    middle = time // 2
    if middle * (time - middle) <= record:
        return 0
    low = max(0, (time - isqrt(time * time - 4 * record)) // 2)
    while low * (time - low) <= record:
        low += 1
    while low > 0 and (low - 1) * (time - low + 1) > record:
        low -= 1
    return time - 2 * low + 1


def _columns(text: str) -> tuple[list[str], list[str]]:
    lines = text.splitlines()
    if len(lines) < 2:
        raise ValueError("expected a time line and a distance line")
    times = lines[0].partition(":")[2].split()
    distances = lines[1].partition(":")[2].split()
    if len(times) != len(distances):
        raise ValueError("every race needs a time and a distance")
    return times, distances


def part1(text: str) -> int:
    """Multiply the numbers of ways to win each race."""
    times, distances = _columns(text)
    return prod(_ways(int(t), int(d)) for t, d in zip(times, distances))


def part2(text: str) -> int:
    """Count the ways to win the single race written with bad kerning."""
    times, distances = _columns(text)
    return _ways(int("".join(times)), int("".join(distances)))