"""
Media item module for the movie battle.

Defines the MediaItem model: a movie's descriptive fields together with the
combat stats derived from them.
"""

from typing import Any

from pydantic import BaseModel, Field

from moviebattle.core.constants import EntityType

from .stat_calculator import CombatStats, calculate_stats


class MediaItem(BaseModel):
    """A movie that fights.

    The stats are computed once, when the item is built, from its runtime and
    rating. A value passed in for `stats` is replaced by the derived one.
    """

    title: str = Field(
        description="The title of the movie",
    )
    runtime_minutes: int = Field(
        description="The runtime in minutes",
    )
    rating: float = Field(
        description="The rating, typically on a 0-10 scale",
    )
    genres: list[str] = Field(
        default_factory=list,
        description="The genres, in display order",
    )
    stats: CombatStats = Field(
        default=None,
        validate_default=False,
        description="The combat stats derived at construction",
    )

    def model_post_init(self, _: Any) -> None:
        """Derives the combat stats after model initialization."""
        self.stats = calculate_stats(self.runtime_minutes, self.rating)

    @property
    def entity_type(self) -> EntityType:
        return EntityType.MEDIA

    @property
    def colored_name(self) -> str:
        return self.entity_type.colorize(self.title)

    def __str__(self) -> str:
        return f"{self.title} ({self.runtime_minutes} min, {self.rating})"
