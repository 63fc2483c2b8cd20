"""Game secrets: the code that starts a linked game in the other Oracle title.

A game secret is 20 six-bit symbols. Unscrambled, they form a 120-bit buffer
holding the cipher key, a kind tag, the game ID, the hero and child names
(interleaved byte by byte with the other fields), child behavior, animal
companion, three flags, and a checksum in the last symbol.
"""

from .bits import extract_field, from_bits, splice_field, to_bits
from .checksum import calculate_checksum, checksum_matches
from .cipher import cipher_key, decode_bytes, encode_bytes
from .constants import (
    SECRET_LENGTH, SYMBOL_BITS, CHECKSUM_INDEX,
    MAX_GAME_ID, MAX_BEHAVIOR,
    KEY_FIELD, KIND_FIELD, GAME_ID_FIELD, HERO_QUEST_FIELD, TARGET_GAME_FIELD,
    BEHAVIOR_FIELD, FREE_RING_FIELD, ANIMAL_FIELD, LINKED_GAME_FIELD,
    HERO_OFFSETS, CHILD_OFFSETS,
    Game, Region, parse_animal, parse_game, parse_region,
)
from .errors import FormatError, InvalidChecksumError, RangeError
from .text import decode_name, encode_name, pad_name, parse_secret, secret_to_string, trim_name
from .validate import validate_pal

_FIELDS = (
    'region', 'game_id', 'target_game', 'hero', 'child', 'animal', 'behavior',
    'is_linked_game', 'is_hero_quest', 'was_given_free_ring',
)


def _check_range(value, max_value, name):
    if isinstance(value, bool) or not isinstance(value, int):
        raise RangeError(f"{name} must be an integer, got {value!r}")
    if not (0 <= value <= max_value):
        raise RangeError(f"{name} must be 0-{max_value}, got {value}")
    return value


class GameSecret:
    """A secret used to start a new game linked to a finished one.

    Fields are validated as they are assigned. Listeners added with
    add_listener() are called as listener(secret, field_name) whenever a
    field changes value.
    """

    length = SECRET_LENGTH

    def __init__(self, region=Region.US, game_id=0, target_game=Game.AGES,
                 hero='', child='', animal=0, behavior=0,
                 is_linked_game=False, is_hero_quest=False, was_given_free_ring=False):
        self._listeners = []
        self._region = Region.US
        self._game_id = 0
        self._target_game = Game.AGES
        self._hero = pad_name('')
        self._child = pad_name('')
        self._animal = 0
        self._behavior = 0
        self._is_linked_game = False
        self._is_hero_quest = False
        self._was_given_free_ring = False

        self.region = region
        self.game_id = game_id
        self.target_game = target_game
        self.hero = hero
        self.child = child
        self.animal = animal
        self.behavior = behavior
        self.is_linked_game = is_linked_game
        self.is_hero_quest = is_hero_quest
        self.was_given_free_ring = was_given_free_ring

    # --- change notification ---

    def add_listener(self, listener):
        self._listeners.append(listener)

    def remove_listener(self, listener):
        self._listeners.remove(listener)

    def _set(self, name, value):
        attr = '_' + name
        if getattr(self, attr) == value:
            return
        setattr(self, attr, value)
        for listener in list(self._listeners):
            listener(self, name)

    # --- fields ---

    @property
    def region(self):
        return self._region

    @region.setter
    def region(self, value):
        self._set('region', parse_region(value))

    @property
    def game_id(self):
        return self._game_id

    @game_id.setter
    def game_id(self, value):
        self._set('game_id', _check_range(value, MAX_GAME_ID, 'game_id'))

    @property
    def target_game(self):
        return self._target_game

    @target_game.setter
    def target_game(self, value):
        self._set('target_game', parse_game(value))

    @property
    def hero(self):
        return trim_name(self._hero)

    @hero.setter
    def hero(self, value):
        self._set('hero', pad_name(value))

    @property
    def padded_hero(self):
        """The hero's name exactly as stored, null-padded to 5 characters."""
        return self._hero

    @property
    def child(self):
        return trim_name(self._child)

    @child.setter
    def child(self, value):
        self._set('child', pad_name(value))

    @property
    def padded_child(self):
        """The child's name exactly as stored, null-padded to 5 characters."""
        return self._child

    @property
    def animal(self):
        return self._animal

    @animal.setter
    def animal(self, value):
        self._set('animal', parse_animal(value))

    @property
    def behavior(self):
        return self._behavior

    @behavior.setter
    def behavior(self, value):
        self._set('behavior', _check_range(value, MAX_BEHAVIOR, 'behavior'))

    @property
    def is_linked_game(self):
        return self._is_linked_game

    @is_linked_game.setter
    def is_linked_game(self, value):
        self._set('is_linked_game', bool(value))

    @property
    def is_hero_quest(self):
        return self._is_hero_quest

    @is_hero_quest.setter
    def is_hero_quest(self, value):
        self._set('is_hero_quest', bool(value))

    @property
    def was_given_free_ring(self):
        """Whether Vasu has already given the player a free ring."""
        return self._was_given_free_ring

    @was_given_free_ring.setter
    def was_given_free_ring(self, value):
        self._set('was_given_free_ring', bool(value))

    # --- decoding ---

    @classmethod
    def decode(cls, secret, region=Region.US):
        """Build a GameSecret from raw secret symbols."""
        game_secret = cls(region=region)
        game_secret.load(secret, region)
        return game_secret

    @classmethod
    def parse(cls, text, region=Region.US):
        """Build a GameSecret from the secret as the player types it."""
        return cls.decode(parse_secret(text, parse_region(region)), region)

    def load(self, secret, region=None):
        """Load every field from raw secret symbols.

        Nothing is assigned unless the whole secret is valid.
        """
        if secret is None or len(secret) != SECRET_LENGTH:
            raise FormatError(f"Secret must contain exactly {SECRET_LENGTH} bytes")
        region = self._region if region is None else parse_region(region)

        decoded = decode_bytes(list(secret))
        bits = to_bits(decoded)

        if not checksum_matches(decoded[CHECKSUM_INDEX], calculate_checksum(decoded)):
            raise InvalidChecksumError("Checksum does not match expected value")

        if extract_field(bits, *KIND_FIELD) != 0:
            raise FormatError("The specified data is not a game secret")

        game_id = extract_field(bits, *GAME_ID_FIELD)
        if extract_field(bits, *KEY_FIELD) != cipher_key(game_id):
            raise FormatError("Cipher key does not match the game ID")

        hero = decode_name([extract_field(bits, o, 8) for o in HERO_OFFSETS], region)
        child = decode_name([extract_field(bits, o, 8) for o in CHILD_OFFSETS], region)

        self.region = region
        self.game_id = game_id
        self.target_game = Game.SEASONS if extract_field(bits, *TARGET_GAME_FIELD) else Game.AGES
        self.is_hero_quest = extract_field(bits, *HERO_QUEST_FIELD)
        self.is_linked_game = extract_field(bits, *LINKED_GAME_FIELD)
        self.was_given_free_ring = extract_field(bits, *FREE_RING_FIELD)
        self.hero = hero
        self.child = child
        self.animal = extract_field(bits, *ANIMAL_FIELD)
        self.behavior = extract_field(bits, *BEHAVIOR_FIELD)

    def load_string(self, text, region=None):
        region = self._region if region is None else parse_region(region)
        self.load(parse_secret(text, region), region)

    # --- encoding ---

    def to_bytes(self):
        """Encode the fields as the 20 raw secret symbols."""
        hero = encode_name(self._hero, self._region)
        child = encode_name(self._child, self._region)

        fields = [
            (KEY_FIELD, cipher_key(self._game_id)),
            (KIND_FIELD, 0),
            (GAME_ID_FIELD, self._game_id),
            (HERO_QUEST_FIELD, int(self._is_hero_quest)),
            (TARGET_GAME_FIELD, int(self._target_game == Game.SEASONS)),
            (BEHAVIOR_FIELD, self._behavior),
            (FREE_RING_FIELD, int(self._was_given_free_ring)),
            (ANIMAL_FIELD, int(self._animal)),
            (LINKED_GAME_FIELD, int(self._is_linked_game)),
        ]
        fields += [((offset, 8), b) for offset, b in zip(HERO_OFFSETS, hero)]
        fields += [((offset, 8), b) for offset, b in zip(CHILD_OFFSETS, child)]

        bits = '0' * (SECRET_LENGTH * SYMBOL_BITS)
        for (offset, width), value in fields:
            bits = splice_field(bits, offset, value, width)

        data = bytearray(from_bits(bits))
        data[CHECKSUM_INDEX] = calculate_checksum(data)
        return encode_bytes(data)

    encode = to_bytes

    def to_string(self, group=5):
        """The secret as shown in game, e.g. 'H~2:@ ←2♦yq GB3●( 6♥?↑6'."""
        return secret_to_string(self.to_bytes(), self._region, group)

    # --- validation ---

    def is_valid_for_pal(self):
        """The PAL release rejects unusual animals and name characters."""
        return not validate_pal(self)

    # --- player record interchange ---

    @classmethod
    def from_info(cls, info):
        return cls(
            region=info.region,
            game_id=info.game_id,
            target_game=info.game,
            hero=info.hero,
            child=info.child,
            animal=info.animal,
            behavior=info.behavior,
            is_linked_game=info.is_linked_game,
            is_hero_quest=info.is_hero_quest,
            was_given_free_ring=info.was_given_free_ring,
        )

    def update_from(self, info):
        """Copy every secret field from a GameInfo."""
        self.region = info.region
        self.game_id = info.game_id
        self.target_game = info.game
        self.hero = info.hero
        self.child = info.child
        self.animal = info.animal
        self.behavior = info.behavior
        self.is_linked_game = info.is_linked_game
        self.is_hero_quest = info.is_hero_quest
        self.was_given_free_ring = info.was_given_free_ring

    def update_into(self, info):
        """Copy every secret field onto a GameInfo."""
        info.region = self.region
        info.game_id = self.game_id
        info.game = self.target_game
        info.hero = self.hero
        info.child = self.child
        info.animal = self.animal
        info.behavior = self.behavior
        info.is_linked_game = self.is_linked_game
        info.is_hero_quest = self.is_hero_quest
        info.was_given_free_ring = self.was_given_free_ring

    # --- comparison ---

    def _key(self):
        return tuple(getattr(self, '_' + name) for name in _FIELDS)

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._key() == other._key()

    __hash__ = None

    def __repr__(self):
        return (f"GameSecret(region={self.region.name}, game_id={self.game_id}, "
                f"target_game={self.target_game.name}, hero={self.hero!r}, "
                f"child={self.child!r}, animal={self.animal!r}, behavior={self.behavior}, "
                f"is_linked_game={self.is_linked_game}, is_hero_quest={self.is_hero_quest}, "
                f"was_given_free_ring={self.was_given_free_ring})")
