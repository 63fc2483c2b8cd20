"""Tests for bit string packing, using synthetic data."""

import pytest

from oslib.bits import extract_field, from_bits, insert_field, splice_field, to_bits
from oslib.constants import GAME_ID_FIELD
from oslib.errors import FormatError, RangeError

from conftest import SAMPLE_DECODED


def test_to_bits_uses_six_bit_symbols():
    assert to_bits([1, 63]) == "000001111111"


def test_to_bits_custom_width():
    assert to_bits(b"\xff\x01", width=8) == "1111111100000001"


def test_to_bits_length():
    assert len(to_bits(SAMPLE_DECODED)) == 120


def test_from_bits():
    assert from_bits("000001111111") == bytes([1, 63])
    assert from_bits("1111111100000001", width=8) == b"\xff\x01"


def test_from_bits_rejects_partial_symbol():
    with pytest.raises(FormatError, match="not a multiple of 6"):
        from_bits("0101")


def test_from_bits_rejects_non_binary():
    with pytest.raises(FormatError, match="only contain"):
        from_bits("0000x0")


def test_extract_field_reads_reversed():
    # '110' reversed is '011'
    assert extract_field("0110000", 1, 3) == 3
    assert extract_field("0011", 0, 4) == 12


def test_extract_field_out_of_bounds():
    with pytest.raises(FormatError, match="exceeds"):
        extract_field("0000", 2, 4)


def test_insert_field_writes_reversed():
    assert insert_field(3, 5) == "11000"
    assert insert_field(63, 6) == "111111"
    assert insert_field(0, 3) == "000"


def test_insert_field_range():
    with pytest.raises(RangeError, match="does not fit"):
        insert_field(64, 6)
    with pytest.raises(RangeError):
        insert_field(-1, 6)


def test_splice_field():
    assert splice_field("000000", 1, 1, 3) == "010000"


def test_splice_then_extract():
    bits = "0" * 30
    bits = splice_field(bits, 5, 14129, 15)
    assert len(bits) == 30
    assert extract_field(bits, 5, 15) == 14129


def test_game_id_in_sample():
    assert extract_field(to_bits(SAMPLE_DECODED), *GAME_ID_FIELD) == 14129
