"""Exceptions raised while loading or building secrets."""


class SecretError(Exception):
    """Base class for every secret codec failure."""


class FormatError(SecretError, ValueError):
    """The secret data has the wrong shape (length, kind tag, cipher key)."""


class InvalidChecksumError(SecretError):
    """The checksum stored in the secret does not match its contents.

    Almost always a mistyped secret rather than a programming error.
    """


class UnsupportedCharacterError(SecretError, ValueError):
    """A character or byte has no mapping in the region's character set."""


class RangeError(SecretError, ValueError):
    """A field value does not fit in the bits reserved for it."""
