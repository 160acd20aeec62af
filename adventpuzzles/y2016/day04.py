"""2016 day 4: Security Through Obscurity."""

import re
from collections import Counter
from dataclasses import dataclass

NAME = "Security Through Obscurity"

_ROOM = re.compile(r"([a-z]+(?:-[a-z]+)*)-(\d+)\[([a-z]*)")


@dataclass(frozen=True)
class Room:
    """An encrypted room name with its sector id and claimed checksum."""

    names: tuple[str, ...]
    sector: int
    checksum: str


def parse_room(line: str) -> Room:
    """Parse a line such as 'aaaaa-bbb-z-y-x-123[abxyz]'."""
    match = _ROOM.match(line.strip())
    if match is None:
        raise ValueError(f"malformed room {line!r}")
    names, sector, claimed = match.groups()
    return Room(tuple(names.split("-")), int(sector), claimed)


def checksum(names, length: int) -> str:
    """Return the most common letters, ties broken alphabetically."""
    counts = Counter("".join(names))
    ordered = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    return "".join(letter for letter, _ in ordered[:length])


def decrypt(names, sector: int) -> str:
    """Shift every letter forward by the sector id and join words with spaces."""
    shift = sector % 26
    return " ".join(
        "".join(chr((ord(c) - ord("a") + shift) % 26 + ord("a")) for c in name)
        for name in names
    )


def _rooms(text: str) -> list[Room]:
    return [parse_room(line) for line in text.splitlines() if line.strip()]


def part1(text: str) -> int:
    """Sum the sector ids of the real rooms."""
    return sum(
        room.sector
        for room in _rooms(text)
        if checksum(room.names, len(room.checksum)) == room.checksum
    )


def part2(text: str) -> int:
    """Return the sector id of the room holding North Pole objects, or 0."""
    for room in _rooms(text):
        if "northpole" in decrypt(room.names, room.sector):
            return room.sector
    return 0