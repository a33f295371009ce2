"""
Media item serialization and deserialization functions.

This module provides functions to build MediaItem instances from dictionaries
and JSON files, and to turn them back into dictionaries.
"""

import json
from pathlib import Path
from typing import Any

from moviebattle.core.logging import log_error

from .media_item import MediaItem


def media_item_from_dict(data: dict[str, Any]) -> MediaItem:
    """
    Creates a MediaItem instance from a dictionary of data.

    Any `stats` entry is ignored; the stats are always derived again.

    Args:
        data (dict[str, Any]):
            The dictionary containing the media data.

    Returns:
        MediaItem:
            The created MediaItem instance.

    """
    fields = {key: value for key, value in data.items() if key != "stats"}
    return MediaItem.model_validate(fields)


def media_item_to_dict(item: MediaItem) -> dict[str, Any]:
    """
    Converts a MediaItem into a dictionary, including its derived stats.

    Args:
        item (MediaItem):
            The media item to convert.

    Returns:
        dict[str, Any]:
            The dictionary representation of the item.

    """
    return item.model_dump()


def load_media_item(file_path: Path) -> MediaItem | None:
    """
    Loads a media item from a JSON file.

    Args:
        file_path (Path): The path to the JSON file containing the media data.

    Returns:
        MediaItem | None: A MediaItem if the file could be read, None otherwise.

    Raises:
        ValueError: If the file does not hold a JSON object.

    """
    try:
        with open(file_path, encoding="utf-8") as f:
            data = json.load(f)
    except (FileNotFoundError, json.JSONDecodeError) as e:
        log_error(
            f"Failed to load media item from {file_path}: {e}",
            {
                "file_path": str(file_path),
                "error": str(e),
                "context": "media_file_loading",
            },
        )
        return None
    if not isinstance(data, dict):
        raise ValueError(
            f"Expected an object in {file_path}, got {type(data).__name__}"
        )
    return media_item_from_dict(data)
