"""Secret scrambling: keyed XOR over the 6-bit symbols.

The top three bits of the first symbol hold the (bit-reversed) cipher key
and are never scrambled; they pick where in CIPHER the XOR stream starts.
"""

from .constants import CIPHER, SECRET_LENGTH
from .errors import FormatError


def cipher_key(game_id):
    """Derive the 0-7 cipher key the game uses for a given game ID."""
    return ((game_id >> 8) + (game_id & 0xFF)) & 7


def _check_symbols(data):
    if not data:
        raise FormatError("Secret is empty")
    if len(data) > SECRET_LENGTH:
        raise FormatError(f"Secret holds at most {SECRET_LENGTH} symbols, got {len(data)}")
    for i, b in enumerate(data):
        if not (0 <= b <= 0x3F):
            raise FormatError(f"Symbol {i} is {b}, expected 0-63")


def _xor_stream(data):
    key = data[0] >> 3
    pos = key * 4
    out = bytearray(b ^ CIPHER[pos + i] for i, b in enumerate(data))
    out[0] = (out[0] & 0x07) | (key << 3)
    return bytes(out)


def decode_bytes(secret):
    """Unscramble raw secret symbols into the packed payload."""
    _check_symbols(secret)
    return _xor_stream(secret)


def encode_bytes(data):
    """Scramble a packed payload into the symbols shown to the player."""
    _check_symbols(data)
    return _xor_stream(data)
