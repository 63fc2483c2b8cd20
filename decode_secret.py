#!/usr/bin/env python3
"""
Oracle of Ages / Oracle of Seasons - Game Secret Decoder

Reads a game secret as shown in game (20 symbols, spaces optional) and
prints the fields it carries.

Symbols that are awkward to type can be written as aliases:
  {circle} {triangle} {square} {heart} {diamond} {club} {spade}
  {up} {down} {left} {right}

Usage:
    python3 decode_secret.py <secret> [--region us|jp] [--json] [--pal]

Example:
    python3 decode_secret.py "H~2:@ ←2♦yq GB3●( 6♥?↑6"
    python3 decode_secret.py "H~2:@ {left}2{diamond}yq GB3{circle}( 6{heart}?{up}6" --json
"""

import argparse
import json
import logging
import sys

from oslib import GameSecret, SecretError, validate_pal
from oslib.config import load_settings
from oslib.constants import Animal
from oslib.logging_config import setup_logging
from oslib.schema import SecretFields

logger = logging.getLogger(__name__)


def format_animal(value):
    if isinstance(value, Animal):
        return f"{value.name.title()} (0x{int(value):02X})"
    return f"0x{value:02X}"


def format_fields(secret):
    """Human-readable listing of a decoded secret."""
    return '\n'.join([
        f"Region:      {secret.region.name}",
        f"Game:        {secret.target_game.name.title()}",
        f"Game ID:     {secret.game_id}",
        f"Hero:        {secret.hero}",
        f"Child:       {secret.child}",
        f"Animal:      {format_animal(secret.animal)}",
        f"Behavior:    {secret.behavior}",
        f"Linked game: {'yes' if secret.is_linked_game else 'no'}",
        f"Hero quest:  {'yes' if secret.is_hero_quest else 'no'}",
        f"Free ring:   {'yes' if secret.was_given_free_ring else 'no'}",
    ])


def main(argv=None):
    settings = load_settings()

    parser = argparse.ArgumentParser(description='Decode an Oracle of Ages/Seasons game secret')
    parser.add_argument('secret', help='The secret as shown in game')
    parser.add_argument('--region', choices=['us', 'jp'], default=settings.region.name.lower(),
                        help='Game region (default from SECRET_REGION, else us)')
    parser.add_argument('--json', action='store_true', help='Print the fields as JSON')
    parser.add_argument('--pal', action='store_true',
                        help='Also check the secret against the PAL release rules')
    parser.add_argument('--log-level', default=settings.log_level,
                        help='Logging level (default from LOG_LEVEL, else WARNING)')
    args = parser.parse_args(argv)

    setup_logging(args.log_level)

    try:
        secret = GameSecret.parse(args.secret, args.region)
    except SecretError as e:
        logger.warning("Secret rejected", extra={"region": args.region, "error": str(e)})
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    logger.info("Decoded game secret", extra={"region": args.region, "game_id": secret.game_id})

    pal_errors = validate_pal(secret) if args.pal else None

    if args.json:
        output = SecretFields.from_secret(secret).model_dump()
        if pal_errors is not None:
            output['pal_valid'] = not pal_errors
            output['pal_errors'] = pal_errors
        print(json.dumps(output, indent=2, ensure_ascii=False))
    else:
        print(format_fields(secret))
        if pal_errors is not None:
            if pal_errors:
                print("PAL:         rejected")
                for err in pal_errors:
                    print(f"  - {err}")
            else:
                print("PAL:         ok")


if __name__ == '__main__':
    main()
