"""Oracle of Ages / Seasons game secret codec."""

from .constants import Animal, Game, Region
from .errors import (
    FormatError, InvalidChecksumError, RangeError, SecretError, UnsupportedCharacterError,
)
from .info import GameInfo
from .secret import GameSecret
from .text import parse_secret, secret_to_string
from .validate import validate_name, validate_pal

__all__ = [
    'Animal', 'Game', 'Region',
    'SecretError', 'FormatError', 'InvalidChecksumError', 'RangeError', 'UnsupportedCharacterError',
    'GameInfo', 'GameSecret',
    'parse_secret', 'secret_to_string',
    'validate_name', 'validate_pal',
]
