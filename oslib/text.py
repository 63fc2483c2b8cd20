"""Region text: name character sets and secret display glyphs.

Names are stored as 5 single-byte characters from the game's font. The
secret itself is shown as 20 glyphs, one per 6-bit symbol, from a separate
64-glyph alphabet.

Only the US tables are known. Japanese names and glyphs raise
UnsupportedCharacterError rather than produce secrets a Japanese cartridge
would reject.
"""

from .constants import NAME_LENGTH, Region
from .errors import FormatError, UnsupportedCharacterError

PLACEHOLDER = '\ufffd'

_ASCII = ''.join(chr(c) for c in range(0x20, 0x7F))


def _build_charset(blocks):
    table = [None] * 256
    for start, chars in blocks:
        for i, c in enumerate(chars):
            table[start + i] = c
    return tuple(table)


US_CHARSET = _build_charset([
    (0x00, '\0'),
    (0x10, '●♣♦♠'),
    (0x15, '↑↓←→×'),
    (0x20, _ASCII),
    (0x80, 'ÀÂÄÆÇÈÉÊËÎÏÑÖŒÙÛÜ'),
    (0xA0, 'àâäæçèéêëîïñöœùûü'),
    (0xBD, '♥'),
])

US_SECRET_SYMBOLS = (
    'BDFGHJLM♠♥♦♣#NQRSTWY!●▲■+-bdfghjm$*/:~nqrstwy?%&(=)23456789↑↓←→@'
)

# Typing aids for glyphs that are not on a keyboard.
SYMBOL_ALIASES = {
    'circle': '●', 'club': '♣', 'diamond': '♦', 'spade': '♠', 'heart': '♥',
    'triangle': '▲', 'square': '■',
    'up': '↑', 'down': '↓', 'left': '←', 'right': '→',
}

_US_LOOKUP = {c: i for i, c in enumerate(US_CHARSET) if c is not None}
_US_SYMBOL_LOOKUP = {c: i for i, c in enumerate(US_SECRET_SYMBOLS)}


def get_charset(region):
    if region == Region.US:
        return US_CHARSET, _US_LOOKUP
    if region == Region.JP:
        raise UnsupportedCharacterError("Japanese name characters are not supported (unverified table)")
    raise UnsupportedCharacterError(f"No character set for region {region!r}")


def get_secret_symbols(region):
    if region == Region.US:
        return US_SECRET_SYMBOLS, _US_SYMBOL_LOOKUP
    if region == Region.JP:
        raise UnsupportedCharacterError("Japanese secret symbols are not supported (unverified table)")
    raise UnsupportedCharacterError(f"No secret alphabet for region {region!r}")


def pad_name(text, length=NAME_LENGTH):
    """Trim trailing whitespace, then null-pad or truncate to length."""
    return (text or '').rstrip().ljust(length, '\0')[:length]


def trim_name(text):
    return text.strip(' \0')


def byte_to_char(b, region):
    """Display form of a single byte; unmapped bytes show PLACEHOLDER."""
    table, _ = get_charset(region)
    c = table[b]
    return PLACEHOLDER if c is None else c


def char_to_byte(c, region):
    _, lookup = get_charset(region)
    try:
        return lookup[c]
    except KeyError:
        raise UnsupportedCharacterError(
            f"Character {c!r} is not supported for region {Region(region).name}"
        ) from None


def encode_name(text, region):
    """Encode a name as exactly NAME_LENGTH bytes."""
    return bytes(char_to_byte(c, region) for c in pad_name(text))


def decode_name(data, region):
    """Decode name bytes into the stored (null-padded) string."""
    table, _ = get_charset(region)
    chars = []
    for b in data:
        c = table[b]
        if c is None:
            raise UnsupportedCharacterError(
                f"Byte 0x{b:02X} has no character for region {Region(region).name}"
            )
        chars.append(c)
    return ''.join(chars)


def secret_to_string(data, region, group=5):
    """Render secret symbols as glyphs, `group` glyphs per word."""
    symbols, _ = get_secret_symbols(region)
    glyphs = []
    for i, b in enumerate(data):
        if not (0 <= b < len(symbols)):
            raise FormatError(f"Symbol {i} is {b}, expected 0-{len(symbols) - 1}")
        glyphs.append(symbols[b])
    if not group:
        return ''.join(glyphs)
    return ' '.join(''.join(glyphs[i:i + group]) for i in range(0, len(glyphs), group))


def parse_secret(text, region):
    """Parse typed glyphs back into symbol values.

    Whitespace is ignored and `{name}` stands for the glyph in
    SYMBOL_ALIASES, e.g. '{left}' for '←'.
    """
    _, lookup = get_secret_symbols(region)
    values = []
    i = 0
    while i < len(text):
        c = text[i]
        i += 1
        if c.isspace():
            continue
        if c == '{':
            end = text.find('}', i)
            if end == -1:
                raise UnsupportedCharacterError(f"Unterminated alias at position {i - 1}")
            name = text[i:end].strip().lower()
            if name not in SYMBOL_ALIASES:
                raise UnsupportedCharacterError(f"Unknown symbol alias '{{{name}}}'")
            c = SYMBOL_ALIASES[name]
            i = end + 1
        if c not in lookup:
            raise UnsupportedCharacterError(
                f"'{c}' is not a secret symbol for region {Region(region).name}"
            )
        values.append(lookup[c])
    return bytes(values)
