"""2023 day 22: Sand Slabs."""

from collections import defaultdict, deque

NAME = "Sand Slabs"

Brick = list[int]


def _overlap(a: Brick, b: Brick) -> bool:
    return max(a[0], b[0]) <= min(a[3], b[3]) and max(a[1], b[1]) <= min(a[4], b[4])


def _parse(text: str) -> list[Brick]:
    bricks = []
    for line in text.splitlines():
        if not line.strip():
            continue
        values = [int(v) for v in line.strip().replace("~", ",").split(",")]
        if len(values) != 6:
            raise ValueError(f"malformed brick {line!r}")
        bricks.append(values)
    return bricks


def _settle(bricks: list[Brick]) -> list[Brick]:
    settled: list[Brick] = []
    for brick in sorted(bricks, key=lambda b: b[2]):
        floor = max((other[5] + 1 for other in settled if _overlap(brick, other)), default=1)
        drop = brick[2] - floor
        settled.append([brick[0], brick[1], floor, brick[3], brick[4], brick[5] - drop])
    settled.sort(key=lambda b: b[2])
    return settled


def _supports(text: str) -> tuple[int, dict[int, set[int]], dict[int, set[int]]]:
    """Return the brick count, who each brick holds up, and who holds each up."""
    bricks = _settle(_parse(text))
    holds: dict[int, set[int]] = defaultdict(set)
    held_by: dict[int, set[int]] = defaultdict(set)
    for u, upper in enumerate(bricks):
        for l, lower in enumerate(bricks[:u]):
            if lower[5] + 1 == upper[2] and _overlap(lower, upper):
                holds[l].add(u)
                held_by[u].add(l)
    return len(bricks), holds, held_by


def part1(text: str) -> int:
    """Count the bricks that can be removed without anything falling."""
    count, holds, held_by = _supports(text)
    return sum(
        all(len(held_by[upper]) >= 2 for upper in holds.get(index, ()))
        for index in range(count)
    )


def part2(text: str) -> int:
    """Sum, over every brick, how many other bricks fall when it is removed."""
    count, holds, held_by = _supports(text)
    total = 0
    for index in range(count):
        falling = {index}
        queue = deque(u for u in holds.get(index, ()) if len(held_by[u]) == 1)
        falling.update(queue)
        while queue:
            lower = queue.popleft()
            for upper in holds.get(lower, ()):
                if upper not in falling and held_by[upper] <= falling:
                    falling.add(upper)
                    queue.append(upper)
        total += len(falling) - 1
    return total