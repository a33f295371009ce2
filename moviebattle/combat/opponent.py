"""
Opponent module for the movie battle.

Defines the Opponent model, the enemy a movie attacks.
"""

from pydantic import BaseModel, Field

from moviebattle.core.constants import EntityType


class Opponent(BaseModel):
    """An enemy with a name, a health pool and an attack value.

    Only the combat resolver changes `health`. It is never clamped, so it can
    go below zero; no defeated state is tracked.
    """

    name: str = Field(
        description="The name of the opponent",
    )
    health: int = Field(
        description="The current hit points",
    )
    attack: int = Field(
        description="Attack power, halved when it blunts incoming damage",
    )

    @property
    def entity_type(self) -> EntityType:
        return EntityType.OPPONENT

    @property
    def colored_name(self) -> str:
        return self.entity_type.colorize(self.name)

    def __str__(self) -> str:
        return f"{self.name} (HP {self.health}, ATK {self.attack})"
