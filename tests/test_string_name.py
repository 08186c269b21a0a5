import zlib

import pytest

from mapo.string_name import SName, crc32


def test_crc32_check_value():
    assert crc32(b"123456789") == 0xCBF43926


def test_crc32_of_empty_is_zero():
    assert crc32("") == 0


@pytest.mark.parametrize("data", [b"a", b"mapo", b"\x00\xff\x80", bytes(range(256))])
def test_crc32_matches_reference(data):
    assert crc32(data) == zlib.crc32(data)


def test_crc32_text_and_bytes_agree():
    assert crc32("Bunny") == crc32(b"Bunny")


def test_equal_names_compare_equal():
    assert SName("Cube +X") == SName("Cube +X")
    assert not (SName("Cube +X") == SName("Cube +Z"))


def test_text_round_trip():
    assert SName("Viking Room").text == "Viking Room"
    assert str(SName("Plane")) == "Plane"


def test_hash_value_is_crc32():
    name = SName("Fat Cat")
    assert name.hash_value == crc32("Fat Cat")
    assert hash(name) == name.hash_value


def test_empty_name():
    empty = SName.empty()
    assert empty.text == ""
    assert empty == SName()
    assert empty.hash_value == 0


def test_name_stops_at_nul():
    assert SName("ab\0cd").text == "ab"
    assert SName("ab\0cd") == SName("ab")


def test_names_work_as_dict_keys():
    table = {SName("light"): 1}
    assert table[SName("light")] == 1


def test_comparison_with_other_types():
    assert (SName("x") == "x") is False