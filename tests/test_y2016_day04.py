import pytest

from adventpuzzles.y2016.day04 import Room, checksum, decrypt, parse_room, part1, part2

SAMPLE = """aaaaa-bbb-z-y-x-123[abxyz]
a-b-c-d-e-f-g-h-987[abcde]
not-a-real-room-404[oarel]
totally-real-room-200[decoy]"""


def test_parse_room():
    assert parse_room("not-a-real-room-404[oarel]") == Room(
        ("not", "a", "real", "room"), 404, "oarel"
    )


def test_checksum_orders_by_count_then_letter():
    assert checksum(("aaaaa", "bbb", "z", "y", "x"), 5) == "abxyz"


def test_sum_of_real_rooms():
    assert part1(SAMPLE) == 1514


def test_decrypt_example():
    assert decrypt(("qzmt", "zixmtkozy", "ivhz"), 343) == "very encrypted name"


def test_decrypt_shift_wraps_around():
    assert decrypt(("mnqsgonkd",), 27) == "northpole"


def test_find_northpole_room():
    assert part2(SAMPLE + "\nnorthpole-object-storage-26[abcde]") == 26


def test_malformed_room():
    with pytest.raises(ValueError):
        parse_room("123[abc]")