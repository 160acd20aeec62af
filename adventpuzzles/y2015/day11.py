"""2015 day 11: Corporate Policy."""

import re

NAME = "Corporate Policy"

_PAIR = re.compile(r"(.)\1")
_FORBIDDEN = re.compile(r"[ilo]")


def is_valid(password: str) -> bool:
    """Check the three password rules."""
    if _FORBIDDEN.search(password):
        return False
    if len({m.group() for m in _PAIR.finditer(password)}) < 2:
        return False
    return any(
        ord(b) == ord(a) + 1 and ord(c) == ord(a) + 2
        for a, b, c in zip(password, password[1:], password[2:])
    )


def _increment(password: str) -> str:
    head = password.rstrip("z")
    carried = len(password) - len(head)
    if not head:
        return "a" * len(password)
    return head[:-1] + chr(ord(head[-1]) + 1) + "a" * carried


def _skip_forbidden(password: str) -> str:
    # Every candidate sharing a prefix that contains a forbidden letter is invalid.
    match = _FORBIDDEN.search(password)
    if match is None:
        return password
    k = match.start()
    return password[:k] + chr(ord(password[k]) + 1) + "a" * (len(password) - k - 1)


def next_password(password: str) -> str:
    """Return the next valid password after the given one."""
    candidate = password
    while True:
        candidate = _skip_forbidden(_increment(candidate))
        if is_valid(candidate):
            return candidate


def part1(text: str) -> str:
    """Return Santa's next password."""
    return next_password(text.strip())


def part2(text: str) -> str:
    """Return the password after the next one."""
    return next_password(next_password(text.strip()))