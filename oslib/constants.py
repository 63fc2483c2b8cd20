"""Constants, layout and lookup tables for Oracle game secrets."""

from enum import IntEnum

from .errors import RangeError

SECRET_LENGTH = 20
SYMBOL_BITS = 6
NAME_LENGTH = 5

MAX_GAME_ID = 0x7FFF
MAX_BEHAVIOR = 0x3F
MAX_ANIMAL = 0x0F


class Region(IntEnum):
    US = 0
    JP = 1


class Game(IntEnum):
    AGES = 0
    SEASONS = 1


class Animal(IntEnum):
    NONE = 0x00
    RICKY = 0x0B
    DIMITRI = 0x0C
    MOOSH = 0x0D


# XOR table shared by every secret type; a secret uses 20 consecutive
# entries starting at (cipher key * 4).
CIPHER = (
    21, 35, 46,  4, 13, 63, 26, 16,
    58, 47, 30, 32, 15, 62, 54, 55,
     9, 41, 59, 49,  2, 22, 61, 56,
    40, 19, 52, 50,  1, 11, 10, 53,
    14, 27, 18, 44, 33, 45, 37, 48,
    25, 42,  6, 57, 60, 23, 51, 24,
)

# Bit offsets into the 120-bit game secret buffer as (offset, width).
# Name bytes are interleaved between hero and child.
KEY_FIELD = (0, 3)
KIND_FIELD = (3, 2)
GAME_ID_FIELD = (5, 15)
HERO_QUEST_FIELD = (20, 1)
TARGET_GAME_FIELD = (21, 1)
BEHAVIOR_FIELD = (54, 6)
FREE_RING_FIELD = (76, 1)
ANIMAL_FIELD = (85, 4)
LINKED_GAME_FIELD = (105, 1)
HERO_OFFSETS = (22, 38, 60, 77, 89)
CHILD_OFFSETS = (30, 46, 68, 97, 106)
CHECKSUM_INDEX = 19

# The PAL release only accepts names built from its keyboard.
VALID_PAL_CHARACTERS = frozenset([
    0x41, 0x42, 0x43, 0x44, 0x45, 0x46, 0x47, 0x48,
    0x49, 0x4a, 0x4b, 0x4c, 0x4d, 0x4e, 0x4f, 0x50,
    0x51, 0x52, 0x53, 0x54, 0x55, 0x56, 0x57, 0x58,
    0x59, 0x5a, 0x20, 0x2e, 0x2c, 0x5f, 0x80, 0x81,
    0x82, 0x83, 0x84, 0x20, 0x85, 0x86, 0x87, 0x88,
    0x89, 0x8a, 0x8b, 0x8c, 0x8d, 0x8e, 0x8f, 0x90,
    0x21, 0x27, 0x2d, 0x3a, 0x3b, 0x3d, 0x11, 0x12,
    0xbd, 0x13, 0x28, 0x29, 0x00, 0x61, 0x62, 0x63,
    0x64, 0x65, 0x66, 0x67, 0x68, 0x69, 0x6a, 0x6b,
    0x6c, 0x6d, 0x6e, 0x6f, 0x70, 0x71, 0x72, 0x73,
    0x74, 0x75, 0x76, 0x77, 0x78, 0x79, 0x7a, 0x20,
    0x2e, 0x2c, 0x5f, 0xa0, 0xa1, 0xa2, 0xa3, 0xa4,
    0x20, 0xa5, 0xa6, 0xa7, 0xa8, 0xa9, 0xaa, 0xab,
    0xac, 0xad, 0xae, 0xaf, 0xb0, 0x21, 0x27, 0x2d,
    0x3a, 0x3b, 0x3d, 0x11, 0x12, 0xbd, 0x13, 0x28,
    0x29, 0x00,
])
VALID_PAL_ANIMALS = frozenset([Animal.RICKY, Animal.DIMITRI, Animal.MOOSH])


def _parse_enum(enum_cls, val, context):
    if isinstance(val, enum_cls):
        return val
    if isinstance(val, str):
        key = val.strip().upper()
        if key in enum_cls.__members__:
            return enum_cls[key]
        raise RangeError(f"{context} must be one of "
                         f"{sorted(m.lower() for m in enum_cls.__members__)}, got '{val}'")
    if isinstance(val, int) and not isinstance(val, bool):
        try:
            return enum_cls(val)
        except ValueError:
            pass
    raise RangeError(f"{context} has no value {val!r}")


def parse_region(val):
    """Resolve a Region from an enum member, its int value or its name."""
    return _parse_enum(Region, val, 'region')


def parse_game(val):
    """Resolve a Game from an enum member, its int value or its name."""
    return _parse_enum(Game, val, 'game')


def parse_animal(val):
    """Resolve an animal value (0-15), accepting companion names too.

    Values without a name are kept as plain ints.
    """
    if isinstance(val, str):
        return _parse_enum(Animal, val, 'animal')
    if isinstance(val, bool) or not isinstance(val, int) or not (0 <= val <= MAX_ANIMAL):
        raise RangeError(f"animal must be 0-{MAX_ANIMAL}, got {val!r}")
    try:
        return Animal(val)
    except ValueError:
        return val
