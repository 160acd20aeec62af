"""2016 day 5: How About a Nice Game of Chess?"""

import hashlib
from collections.abc import Iterator
from itertools import count

NAME = "Cube Conundrum"

_LENGTH = 8


def _interesting(door_id: str) -> Iterator[bytes]:
    """Yield the digests whose hex form starts with five zeros, in order."""
    base = hashlib.md5(door_id.encode())
    for index in count():
        digest = base.copy()
        digest.update(str(index).encode())
        raw = digest.digest()
        if raw[0] == 0 and raw[1] == 0 and raw[2] < 0x10:
            yield raw


def part1(text: str) -> str:
    """Return the password built from the sixth hex digit of each hash."""
    password = []
    for raw in _interesting(text.strip()):
        password.append(format(raw[2], "x"))
        if len(password) == _LENGTH:
            break
    return "".join(password)


def part2(text: str) -> str:
    """Return the password whose positions are given by the sixth hex digit."""
    password: list[str | None] = [None] * _LENGTH
    for raw in _interesting(text.strip()):
        position = raw[2]
        if position < _LENGTH and password[position] is None:
            password[position] = format(raw[3] >> 4, "x")
            if all(char is not None for char in password):
                break
    return "".join(password)