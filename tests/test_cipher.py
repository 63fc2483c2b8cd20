"""Tests for secret scrambling."""

import pytest

from oslib.cipher import cipher_key, decode_bytes, encode_bytes
from oslib.errors import FormatError

from conftest import SAMPLE_DECODED, SAMPLE_SECRET


def test_cipher_key():
    assert cipher_key(14129) == 0
    assert cipher_key(0) == 0
    assert cipher_key(1) == 1
    assert cipher_key(5) == 5
    assert cipher_key(0x0107) == 0


def test_ids_sharing_a_key():
    assert cipher_key(0) == cipher_key(2048) == 0


def test_decode_sample():
    assert decode_bytes(SAMPLE_SECRET) == SAMPLE_DECODED


def test_encode_sample():
    assert encode_bytes(SAMPLE_DECODED) == SAMPLE_SECRET


def test_key_bits_pass_through():
    data = bytes([0b101011] + [0] * 19)
    assert encode_bytes(data)[0] >> 3 == 0b101
    assert decode_bytes(encode_bytes(data)) == data


def test_rejects_symbol_out_of_range():
    with pytest.raises(FormatError, match="expected 0-63"):
        decode_bytes([0] * 19 + [64])


def test_rejects_empty():
    with pytest.raises(FormatError, match="empty"):
        encode_bytes(b"")


def test_rejects_too_long():
    with pytest.raises(FormatError, match="at most 20"):
        decode_bytes([0] * 21)
