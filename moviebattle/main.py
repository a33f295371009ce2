"""
Main entry point for the movie battle.

Builds a movie and an opponent, lets the movie attack once, and prints a
three-line report of the exchange.
"""

from moviebattle.combat.damage import apply_attack
from moviebattle.combat.opponent import Opponent
from moviebattle.core import constants
from moviebattle.core.logging import log_info, setup_logging
from moviebattle.core.sheets import print_media_sheet, print_opponent_sheet
from moviebattle.core.utils import cprint, crule
from moviebattle.media.media_item import MediaItem


def create_media_item(
    title: str, runtime_minutes: int, rating: float, genres: list[str]
) -> MediaItem:
    """Builds a media item; its stats are derived on construction."""
    return MediaItem(
        title=title,
        runtime_minutes=runtime_minutes,
        rating=rating,
        genres=list(genres),
    )


def create_opponent(name: str, health: int, attack: int) -> Opponent:
    """Builds an opponent."""
    return Opponent(name=name, health=health, attack=attack)


def default_media_item() -> MediaItem:
    return create_media_item(
        constants.DEFAULT_MEDIA_TITLE,
        constants.DEFAULT_MEDIA_RUNTIME,
        constants.DEFAULT_MEDIA_RATING,
        list(constants.DEFAULT_MEDIA_GENRES),
    )


def default_opponent() -> Opponent:
    return create_opponent(
        constants.DEFAULT_OPPONENT_NAME,
        constants.DEFAULT_OPPONENT_HEALTH,
        constants.DEFAULT_OPPONENT_ATTACK,
    )


def run_battle(media: MediaItem, opponent: Opponent) -> list[str]:
    """
    Lets the media item attack the opponent once.

    Args:
        media (MediaItem): The attacking movie.
        opponent (Opponent): The opponent, whose health is reduced.

    Returns:
        list[str]: The report lines, in print order.

    """
    starting_health = opponent.health
    damage = apply_attack(media.stats, opponent)

    log_info(
        f"{media.title} attacked {opponent.name}",
        {"damage": damage, "remaining_health": opponent.health},
    )

    return [
        "Battle Start!",
        f"Enemy HP: {starting_health}",
        f"You dealt {damage} damage.",
    ]


def main() -> int:
    setup_logging(constants.LOG_LEVEL)

    media = default_media_item()
    opponent = default_opponent()

    if constants.GLOBAL_VERBOSE_LEVEL >= 1:
        crule("Movie Battle", style="bold green")
        print_media_sheet(media)
        print_opponent_sheet(opponent)
        crule(style="bold green")

    for line in run_battle(media, opponent):
        cprint(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
