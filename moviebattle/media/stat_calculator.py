"""
Stat calculator module for the movie battle.

Turns a movie's runtime and rating into the combat stats it fights with.
"""

from pydantic import BaseModel, ConfigDict, Field

from moviebattle.core.constants import (
    ATTACK_RUNTIME_DIVISOR,
    DEFENSE_RATING_MULTIPLIER,
    HEALTH_DEFENSE_MULTIPLIER,
)
from moviebattle.core.logging import log_debug
from moviebattle.core.utils import truncating_div


class CombatStats(BaseModel):
    """The health, attack and defense derived from a piece of media.

    No invariant is enforced: pathological inputs give zero or negative
    values. Instances are frozen once built.
    """

    model_config = ConfigDict(frozen=True)

    health: int = Field(
        description="Hit points, twice the defense",
    )
    attack: int = Field(
        description="Attack power, half the runtime",
    )
    defense: int = Field(
        description="Defense, ten times the rating",
    )

    def __str__(self) -> str:
        return f"HP {self.health}, ATK {self.attack}, DEF {self.defense}"


def calculate_stats(runtime_minutes: int, rating: float) -> CombatStats:
    """
    Derives combat stats from a runtime and a rating.

    Args:
        runtime_minutes (int):
            The runtime in minutes.
        rating (float):
            The rating, typically on a 0-10 scale.

    Returns:
        CombatStats:
            The derived stats. Inputs are not validated, so zero or negative
            values come out as zero or negative stats.

    """
    attack = truncating_div(runtime_minutes, ATTACK_RUNTIME_DIVISOR)
    # int() truncates toward zero.
    defense = int(rating * DEFENSE_RATING_MULTIPLIER)
    health = defense * HEALTH_DEFENSE_MULTIPLIER

    log_debug(
        "Derived combat stats",
        {
            "runtime_minutes": runtime_minutes,
            "rating": rating,
            "health": health,
            "attack": attack,
            "defense": defense,
        },
    )

    return CombatStats(health=health, attack=attack, defense=defense)
