"""Secret checksum."""

from .constants import CHECKSUM_INDEX


def calculate_checksum(data):
    """Sum every symbol except the checksum slot, keep the low nibble."""
    total = sum(b for i, b in enumerate(data) if i != CHECKSUM_INDEX)
    return total & 0x0F


def checksum_matches(stored, computed):
    """Only the low 3 bits of the checksum slot are checked by the game."""
    return (stored & 0x07) == (computed & 0x07)
