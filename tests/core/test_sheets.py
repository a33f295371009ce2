"""
Tests for the media and opponent sheets.
"""

from moviebattle.combat.opponent import Opponent
from moviebattle.core.sheets import (
    genres_to_string,
    print_media_sheet,
    print_opponent_sheet,
)
from moviebattle.media.media_item import MediaItem


def test_genres_to_string():
    """Test coloring and joining genres."""
    assert genres_to_string(["Action", "Sci-Fi"]) == (
        "[magenta]Action[/], [magenta]Sci-Fi[/]"
    )
    assert "No genres" in genres_to_string([])


def test_print_media_sheet(inception, capsys):
    """Test that the sheet shows the title, genres and stats."""
    print_media_sheet(inception)
    out = capsys.readouterr().out
    assert "Inception" in out
    assert "148 min" in out
    assert "Action, Sci-Fi" in out
    assert "HP: 176" in out
    assert "ATK: 74" in out
    assert "DEF: 88" in out


def test_print_opponent_sheet(capsys):
    """Test that the sheet shows the health against its maximum."""
    opponent = Opponent(name="Phone Scroller", health=-31, attack=6)
    print_opponent_sheet(opponent, max_health=40)
    out = capsys.readouterr().out
    assert "Phone Scroller" in out
    assert "-31/40" in out
    assert "ATK: 6" in out


def test_print_media_sheet_keeps_brackets_in_title(capsys):
    """Test that a title holding a closing tag is printed literally."""
    item = MediaItem(
        title="Up [/] Down",
        runtime_minutes=96,
        rating=8.3,
        genres=["[bold]Family"],
    )
    print_media_sheet(item)
    out = capsys.readouterr().out
    assert "Up [/] Down" in out
    assert "[bold]Family" in out


def test_print_opponent_sheet_keeps_brackets_in_name(capsys):
    """Test that markup-like text in a name is not interpreted."""
    opponent = Opponent(name="[bold]Rec", health=10, attack=2)
    print_opponent_sheet(opponent)
    out = capsys.readouterr().out
    assert "[bold]Rec" in out


def test_genres_to_string_escapes_markup():
    """Test that genre names cannot open or close tags."""
    assert genres_to_string(["Sci[/]Fi"]) == "[magenta]Sci\\[/]Fi[/]"
