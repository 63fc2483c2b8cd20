"""Extra validation for secrets headed to a PAL cartridge."""

from .constants import VALID_PAL_ANIMALS, VALID_PAL_CHARACTERS, Region
from .text import encode_name, get_charset, pad_name, trim_name


def validate_name(text, region):
    """Check all characters are in the region's charset. Returns list of bad chars or empty list."""
    _, lookup = get_charset(region)
    bad = []
    for c in pad_name(text):
        if c not in lookup:
            bad.append(c)
    return bad


def validate_pal(secret):
    """Run the PAL release's sanity checks against a GameSecret.

    PAL games only accept Ricky, Dimitri or Moosh as the animal companion
    and names typed on their own keyboard (encoded with the US charset).

    Returns a list of error strings; empty when the secret is accepted.
    """
    errors = []

    if secret.animal not in VALID_PAL_ANIMALS:
        errors.append(f"animal must be one of Ricky, Dimitri or Moosh, got 0x{int(secret.animal):02X}")

    for label, text in (('hero', secret.padded_hero), ('child', secret.padded_child)):
        bad = validate_name(text, Region.US)
        if bad:
            errors.append(f"{label}: invalid chars {bad!r} in '{trim_name(text)}'")
            continue
        rejected = [b for b in encode_name(text, Region.US) if b not in VALID_PAL_CHARACTERS]
        if rejected:
            shown = ', '.join(f"0x{b:02X}" for b in rejected)
            errors.append(f"{label}: characters {shown} in '{trim_name(text)}' "
                          f"are not on the PAL keyboard")

    return errors
