"""Player record that secrets are copied into and out of."""

from dataclasses import dataclass

from .constants import Game, Region


@dataclass
class GameInfo:
    """User data for an individual game.

    Only the fields a game secret carries are interchanged with GameSecret;
    `rings` belongs to ring secrets and is left untouched.
    """

    region: Region = Region.US
    game: Game = Game.AGES
    game_id: int = 0
    hero: str = ''
    child: str = ''
    animal: int = 0
    behavior: int = 0
    is_linked_game: bool = False
    is_hero_quest: bool = False
    was_given_free_ring: bool = False
    rings: int = 0
