"""Bit strings: symbol <-> bit conversion and reversed field packing.

Secrets are handled as strings of '0'/'1' characters, each symbol
contributing SYMBOL_BITS bits MSB first. Fields inside that string are
stored least significant bit first, so a field is read by reversing its
substring before parsing it as a binary numeral.
"""

from .constants import SYMBOL_BITS
from .errors import FormatError, RangeError


def to_bits(data, width=SYMBOL_BITS):
    """Concatenate the `width`-bit binary form of every value in data."""
    return ''.join(format(b, f'0{width}b') for b in data)


def from_bits(bits, width=SYMBOL_BITS):
    """Split a bit string into `width`-bit values. Returns bytes."""
    if len(bits) % width:
        raise FormatError(f"Bit string length {len(bits)} is not a multiple of {width}")
    if bits.strip('01'):
        raise FormatError("Bit string may only contain '0' and '1'")
    return bytes(int(bits[i:i + width], 2) for i in range(0, len(bits), width))


def reversed_substring(bits, offset, width):
    return bits[offset:offset + width][::-1]


def extract_field(bits, offset, width):
    """Read a reversed `width`-bit field starting at `offset`."""
    if offset < 0 or offset + width > len(bits):
        raise FormatError(f"Field at bit {offset} (width {width}) "
                          f"exceeds bit string of length {len(bits)}")
    return int(reversed_substring(bits, offset, width), 2)


def insert_field(value, width):
    """Render value as a reversed, zero-padded `width`-bit field."""
    if not (0 <= value < (1 << width)):
        raise RangeError(f"Value {value} does not fit in {width} bits")
    return format(value, f'0{width}b')[::-1]


def splice_field(bits, offset, value, width):
    """Return bits with value written as a field at offset."""
    if offset < 0 or offset + width > len(bits):
        raise FormatError(f"Field at bit {offset} (width {width}) "
                          f"exceeds bit string of length {len(bits)}")
    return bits[:offset] + insert_field(value, width) + bits[offset + width:]
