"""2015 day 12: JSAbacusFramework.io."""

import json
from typing import Any

NAME = "JSAbacusFramework.io"


def total(value: Any, ignore_red: bool) -> int:
    """Sum every integer in a decoded JSON document.

    With ignore_red, objects holding the value "red" count as zero.
    """
    if isinstance(value, bool) or value is None:
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        raise TypeError(f"non-integer number {value!r}")
    if isinstance(value, list):
        return sum(total(item, ignore_red) for item in value)
    if isinstance(value, dict):
        if ignore_red and "red" in value.values():
            return 0
        return sum(total(item, ignore_red) for item in value.values())
    return 0


def part1(text: str) -> int:
    """Sum all numbers in the document."""
    return total(json.loads(text), False)


def part2(text: str) -> int:
    """Sum all numbers, skipping objects marked red."""
    return total(json.loads(text), True)