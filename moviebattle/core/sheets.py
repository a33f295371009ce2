from rich.markup import escape
from rich.padding import Padding

from moviebattle.combat.opponent import Opponent
from moviebattle.media.media_item import MediaItem

from .utils import cprint, make_bar


def genres_to_string(genres: list[str]) -> str:
    """Joins the genres into a colored, comma-separated string."""
    if not genres:
        return "[dim white]No genres[/]"
    return ", ".join(f"[magenta]{escape(genre)}[/]" for genre in genres)


def print_media_sheet(item: MediaItem, padding: int = 2) -> None:
    """
    Prints the details of a media item in a formatted way.

    Args:
        item (MediaItem): The media item to display.
        padding (int): The left padding of the detail lines.

    """
    cprint(
        f"{item.entity_type.emoji} {item.colored_name}, "
        f"[cyan]{item.runtime_minutes} min[/], rated [yellow]{item.rating}[/]"
    )
    cprint(Padding(genres_to_string(item.genres), (0, padding)))
    cprint(
        Padding(
            f"HP: [green]{item.stats.health}[/], "
            f"ATK: [red]{item.stats.attack}[/], "
            f"DEF: [yellow]{item.stats.defense}[/]",
            (0, padding),
        )
    )


def print_opponent_sheet(
    opponent: Opponent, max_health: int | None = None, padding: int = 2
) -> None:
    """
    Prints the details of an opponent in a formatted way.

    Args:
        opponent (Opponent): The opponent to display.
        max_health (int | None): The health the bar is measured against.
            Defaults to the opponent's current health.
        padding (int): The left padding of the detail lines.

    """
    max_health = opponent.health if max_health is None else max_health
    cprint(f"{opponent.entity_type.emoji} {opponent.colored_name}")
    cprint(
        Padding(
            f"HP: {make_bar(opponent.health, max_health, color='green')} "
            f"[green]{opponent.health}/{max_health}[/], "
            f"ATK: [red]{opponent.attack}[/]",
            (0, padding),
        )
    )
