"""2023 day 5: If You Give A Seed A Fertilizer."""

from collections import deque

NAME = "If You Give A Seed A Fertilizer"

Mapping = list[tuple[int, int, int]]


def _parse(text: str) -> tuple[list[int], list[Mapping]]:
    blocks = text.strip().split("\n\n")
    _, sep, seed_text = blocks[0].partition(": ")
    if not sep:
        raise ValueError("missing seed list")
    seeds = [int(n) for n in seed_text.split()]
    mappings = []
    for block in blocks[1:]:
        ranges = []
        for line in block.splitlines()[1:]:
            if not line.strip():
                continue
            numbers = [int(n) for n in line.split()]
            if len(numbers) != 3:
                raise ValueError(f"malformed range {line!r}")
            dest, src, length = numbers
            ranges.append((dest, src, length))
        mappings.append(ranges)
    return seeds, mappings


def _map_value(mapping: Mapping, value: int) -> int:
    for dest, src, length in mapping:
        if src <= value < src + length:
            return dest + value - src
    return value


def part1(text: str) -> int:
    """Return the lowest location of any listed seed."""
    seeds, mappings = _parse(text)
    for mapping in mappings:
        seeds = [_map_value(mapping, seed) for seed in seeds]
    return min(seeds)


def part2(text: str) -> int:
    """Return the lowest location when the seed list names ranges."""
    numbers, mappings = _parse(text)
    if len(numbers) % 2:
        raise ValueError("seed ranges need a start and a length each")
    ranges = [(start, start + length) for start, length in zip(numbers[::2], numbers[1::2])]
    for mapping in mappings:
        pending = deque(ranges)
        mapped = []
        while pending:
            start, end = pending.popleft()
            for dest, src, length in mapping:
                lo, hi = max(start, src), min(end, src + length)
                if lo < hi:
                    mapped.append((lo - src + dest, hi - src + dest))
                    if lo > start:
                        pending.append((start, lo))
                    if end > hi:
                        pending.append((hi, end))
                    break
            else:
                mapped.append((start, end))
        ranges = mapped
    return min(start for start, _ in ranges)