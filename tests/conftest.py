"""
Shared fixtures for the movie battle tests.
"""

import pytest

from moviebattle.media.media_item import MediaItem


@pytest.fixture
def inception():
    """The movie used by the default battle."""
    return MediaItem(
        title="Inception",
        runtime_minutes=148,
        rating=8.8,
        genres=["Action", "Sci-Fi"],
    )
