"""Pydantic model of the fields carried by a game secret."""

from typing import Union

from pydantic import BaseModel, Field, field_validator

from .constants import MAX_BEHAVIOR, MAX_GAME_ID, NAME_LENGTH, Animal, parse_animal, parse_game, parse_region
from .secret import GameSecret


class SecretFields(BaseModel):
    """Game secret fields as read from or written to JSON."""

    region: str = "us"
    game: str = "ages"
    game_id: int = Field(0, ge=0, le=MAX_GAME_ID)
    hero: str = Field("", max_length=NAME_LENGTH)
    child: str = Field("", max_length=NAME_LENGTH)
    animal: Union[int, str] = 0
    behavior: int = Field(0, ge=0, le=MAX_BEHAVIOR)
    is_linked_game: bool = False
    is_hero_quest: bool = False
    was_given_free_ring: bool = False

    @field_validator("region")
    @classmethod
    def check_region(cls, v):
        return parse_region(v).name.lower()

    @field_validator("game")
    @classmethod
    def check_game(cls, v):
        return parse_game(v).name.lower()

    @field_validator("animal")
    @classmethod
    def check_animal(cls, v):
        animal = parse_animal(v)
        if isinstance(animal, Animal):
            return animal.name.lower()
        return animal

    @classmethod
    def from_secret(cls, secret):
        return cls(
            region=secret.region.name,
            game=secret.target_game.name,
            game_id=secret.game_id,
            hero=secret.hero,
            child=secret.child,
            animal=secret.animal,
            behavior=secret.behavior,
            is_linked_game=secret.is_linked_game,
            is_hero_quest=secret.is_hero_quest,
            was_given_free_ring=secret.was_given_free_ring,
        )

    def to_secret(self):
        return GameSecret(
            region=self.region,
            game_id=self.game_id,
            target_game=self.game,
            hero=self.hero,
            child=self.child,
            animal=self.animal,
            behavior=self.behavior,
            is_linked_game=self.is_linked_game,
            is_hero_quest=self.is_hero_quest,
            was_given_free_ring=self.was_given_free_ring,
        )
