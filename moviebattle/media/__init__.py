from .media_item import MediaItem
from .media_serialization import (
    load_media_item,
    media_item_from_dict,
    media_item_to_dict,
)
from .stat_calculator import CombatStats, calculate_stats

__all__ = [
    "CombatStats",
    "MediaItem",
    "calculate_stats",
    "load_media_item",
    "media_item_from_dict",
    "media_item_to_dict",
]
