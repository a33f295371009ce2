"""
Constants and enumerations for the movie battle.

Defines the global verbosity and logging levels, the tuning constants used to
turn a movie into combat stats, the damage floor, and the literal values of
the default battle scenario.
"""

import logging
from enum import Enum

from rich.markup import escape

# Global verbose level for battle output:
# 0 - Minimal (only the battle report)
# 1 - Moderate (print the movie and opponent sheets before the report)
GLOBAL_VERBOSE_LEVEL = 0

# Level used by the driver when setting up logging.
LOG_LEVEL = logging.WARNING

# ==============================================================================
# STAT DERIVATION
# ==============================================================================

# Attack is the runtime (in minutes) divided by this value.
ATTACK_RUNTIME_DIVISOR = 2
# Defense is the rating multiplied by this value, truncated.
DEFENSE_RATING_MULTIPLIER = 10
# Health is the defense multiplied by this value.
HEALTH_DEFENSE_MULTIPLIER = 2

# ==============================================================================
# DAMAGE RESOLUTION
# ==============================================================================

# The defender's attack is divided by this value before being subtracted.
DEFENDER_ATTACK_DIVISOR = 2
# Every exchange deals at least this much damage.
MIN_DAMAGE = 1

# ==============================================================================
# DEFAULT SCENARIO
# ==============================================================================

DEFAULT_MEDIA_TITLE = "Inception"
DEFAULT_MEDIA_RUNTIME = 148
DEFAULT_MEDIA_RATING = 8.8
DEFAULT_MEDIA_GENRES = ("Action", "Sci-Fi")

DEFAULT_OPPONENT_NAME = "Phone Scroller"
DEFAULT_OPPONENT_HEALTH = 40
DEFAULT_OPPONENT_ATTACK = 6


class NiceEnum(Enum):
    """An enumeration that provides a nicer string representation."""

    def __str__(self) -> str:
        return self.name


class EntityType(NiceEnum):
    """Defines which side of the battle an entity is on."""

    MEDIA = "MEDIA"
    OPPONENT = "OPPONENT"

    @property
    def emoji(self) -> str:
        """Returns the emoji associated with this entity type."""
        return {
            EntityType.MEDIA: "🎬",
            EntityType.OPPONENT: "👹",
        }.get(self, "❔")

    @property
    def color(self) -> str:
        """Returns the color string associated with this entity type."""
        return {
            EntityType.MEDIA: "bold blue",
            EntityType.OPPONENT: "bold red",
        }.get(self, "dim white")

    def colorize(self, message: str) -> str:
        """Applies entity type color formatting to a message."""
        return f"[{self.color}]{escape(message)}[/]"
