#!/usr/bin/env python3
"""
Oracle of Ages / Oracle of Seasons - Game Secret Encoder

Builds the game secret for a set of fields, either from command line
options or from a JSON file in the format printed by
`decode_secret.py --json`.

Usage:
    python3 encode_secret.py [field options] [--region us|jp] [--raw] [--pal]
    python3 encode_secret.py --from-json <fields.json> [--raw]

Example:
    python3 encode_secret.py --game ages --game-id 14129 --hero Link --child Pip \\
        --animal dimitri --behavior 4 --linked --free-ring
"""

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from oslib import SecretError, validate_pal
from oslib.config import load_settings
from oslib.logging_config import setup_logging
from oslib.schema import SecretFields

logger = logging.getLogger(__name__)


def animal_arg(value):
    """Accept a companion name or a number (decimal or 0x hex)."""
    try:
        return int(value, 0)
    except ValueError:
        return value


def fields_from_args(args, region):
    return SecretFields(
        region=region,
        game=args.game,
        game_id=args.game_id,
        hero=args.hero,
        child=args.child,
        animal=args.animal,
        behavior=args.behavior,
        is_linked_game=args.linked,
        is_hero_quest=args.hero_quest,
        was_given_free_ring=args.free_ring,
    )


def main(argv=None):
    settings = load_settings()

    parser = argparse.ArgumentParser(description='Encode an Oracle of Ages/Seasons game secret')
    parser.add_argument('--from-json', metavar='FILE', help='Read the fields from a JSON file')
    parser.add_argument('--region', choices=['us', 'jp'],
                        help='Game region (default from SECRET_REGION, else us)')
    parser.add_argument('--game', choices=['ages', 'seasons'], default='ages',
                        help='Game the secret will be entered into')
    parser.add_argument('--game-id', type=int, default=0, help='Game ID (0-32767)')
    parser.add_argument('--hero', default='', help="Hero's name (up to 5 characters)")
    parser.add_argument('--child', default='', help="Child's name (up to 5 characters)")
    parser.add_argument('--animal', type=animal_arg, default=0,
                        help='Animal companion: ricky, dimitri, moosh or a number 0-15')
    parser.add_argument('--behavior', type=int, default=0, help='Child behavior (0-63)')
    parser.add_argument('--linked', action='store_true', help='Mark as a linked game')
    parser.add_argument('--hero-quest', action='store_true', help="Mark as a hero's quest")
    parser.add_argument('--free-ring', action='store_true',
                        help='Vasu has already given the free ring')
    parser.add_argument('--raw', action='store_true', help='Print raw symbol values instead of glyphs')
    parser.add_argument('--pal', action='store_true',
                        help='Warn when the secret would be rejected by the PAL release')
    parser.add_argument('--log-level', default=settings.log_level,
                        help='Logging level (default from LOG_LEVEL, else WARNING)')
    args = parser.parse_args(argv)

    setup_logging(args.log_level)

    try:
        if args.from_json:
            fields = SecretFields.model_validate_json(Path(args.from_json).read_text(encoding='utf-8'))
            if args.region:
                fields = fields.model_copy(update={'region': args.region})
        else:
            fields = fields_from_args(args, args.region or settings.region.name.lower())
    except ValidationError as e:
        print("Invalid fields:", file=sys.stderr)
        for err in e.errors():
            loc = '.'.join(str(p) for p in err['loc'])
            print(f"  {loc}: {err['msg']}", file=sys.stderr)
        sys.exit(1)
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        secret = fields.to_secret()
        data = secret.to_bytes()
    except SecretError as e:
        logger.warning("Secret not encodable", extra={"region": fields.region, "error": str(e)})
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    logger.info("Encoded game secret", extra={"region": fields.region, "game_id": secret.game_id})

    if args.pal:
        for err in validate_pal(secret):
            print(f"PAL warning: {err}", file=sys.stderr)

    if args.raw:
        print(', '.join(str(b) for b in data))
    else:
        print(secret.to_string())


if __name__ == '__main__':
    main()
