"""2015 day 4: The Ideal Stocking Stuffer."""

import hashlib
from itertools import count

NAME = "The Ideal Stocking Stuffer"


def find_suffix(secret: str, zeros: int) -> int:
    """Return the lowest number whose MD5 with the secret starts with enough zeros."""
    prefix = "0" * zeros
    base = hashlib.md5(secret.encode())
    for index in count():
        digest = base.copy()
        digest.update(str(index).encode())
        if digest.hexdigest().startswith(prefix):
            return index
    raise AssertionError("unreachable")


def part1(text: str) -> int:
    """Return the suffix giving five leading zeros."""
    return find_suffix(text.strip(), 5)


def part2(text: str) -> int:
    """Return the suffix giving six leading zeros."""
    return find_suffix(text.strip(), 6)