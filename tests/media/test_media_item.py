"""
Tests for the MediaItem model and its serialization helpers.
"""

import json

import pytest
from pydantic import ValidationError

from moviebattle.core.constants import EntityType
from moviebattle.media import (
    CombatStats,
    MediaItem,
    load_media_item,
    media_item_from_dict,
    media_item_to_dict,
)


def test_stats_derived_on_construction(inception):
    """Test that the stats are computed from runtime and rating."""
    assert inception.stats == CombatStats(health=176, attack=74, defense=88)


def test_genres_keep_order(inception):
    """Test that genres are stored in the order given."""
    assert inception.genres == ["Action", "Sci-Fi"]


def test_genres_default_to_empty():
    """Test that genres are optional."""
    item = MediaItem(title="Untitled", runtime_minutes=80, rating=5.0)
    assert item.genres == []


def test_supplied_stats_are_replaced():
    """Test that stats passed in are overwritten by the derived ones."""
    item = MediaItem(
        title="Cheater",
        runtime_minutes=100,
        rating=5.0,
        stats=CombatStats(health=9999, attack=9999, defense=9999),
    )
    assert item.stats == CombatStats(health=100, attack=50, defense=50)


def test_invalid_rating_raises():
    """Test that a non-numeric rating is rejected."""
    with pytest.raises(ValidationError):
        MediaItem(title="Broken", runtime_minutes=100, rating="great")


def test_entity_type_and_str(inception):
    """Test the display helpers of a media item."""
    assert inception.entity_type == EntityType.MEDIA
    assert "Inception" in inception.colored_name
    assert str(inception) == "Inception (148 min, 8.8)"


def test_to_dict_includes_stats(inception):
    """Test that the dictionary form carries the derived stats."""
    data = media_item_to_dict(inception)
    assert data["title"] == "Inception"
    assert data["runtime_minutes"] == 148
    assert data["stats"] == {"health": 176, "attack": 74, "defense": 88}


def test_from_dict_ignores_stats():
    """Test that stats in the input are ignored and derived again."""
    item = media_item_from_dict(
        {
            "title": "Alien",
            "runtime_minutes": 117,
            "rating": 8.5,
            "genres": ["Horror"],
            "stats": {"health": 1, "attack": 1, "defense": 1},
        }
    )
    assert item.stats == CombatStats(health=170, attack=58, defense=85)
    assert item.genres == ["Horror"]


def test_from_dict_missing_key_raises():
    """Test that a missing required key is rejected."""
    with pytest.raises(ValidationError):
        media_item_from_dict({"title": "Alien", "rating": 8.5})


def test_load_media_item(tmp_path):
    """Test loading a media item from a JSON file."""
    path = tmp_path / "movie.json"
    path.write_text(
        json.dumps({"title": "Heat", "runtime_minutes": 170, "rating": 8.3}),
        encoding="utf-8",
    )
    item = load_media_item(path)
    assert item is not None
    assert item.title == "Heat"
    assert item.stats == CombatStats(health=166, attack=85, defense=83)


def test_load_media_item_missing_file(tmp_path, caplog):
    """Test that a missing file is logged and gives None."""
    assert load_media_item(tmp_path / "missing.json") is None
    assert "Failed to load media item" in caplog.text


def test_load_media_item_bad_json(tmp_path):
    """Test that malformed JSON gives None."""
    path = tmp_path / "movie.json"
    path.write_text("{not json", encoding="utf-8")
    assert load_media_item(path) is None


def test_load_media_item_not_an_object(tmp_path):
    """Test that a JSON list is rejected."""
    path = tmp_path / "movies.json"
    path.write_text("[]", encoding="utf-8")
    with pytest.raises(ValueError):
        load_media_item(path)
