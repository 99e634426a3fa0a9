"""
Pytest fixtures and configuration for the test suite.

Strategy:
- Use a real SQLite database (temp file or in-memory) for persistence tests
- Never touch the network: HTTP is replaced with mocks
- Canned Odesli documents live here so every layer tests against the same shape
"""

import os
import sys
import tempfile
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest

# Add project root to path so tests can import smartlinker package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


# === DATABASE FIXTURES ===


@pytest.fixture
def temp_db() -> Generator[str, None, None]:
    """
    Provide a temporary database file path.

    For faster unit tests, use in_memory_db fixture.
    """
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield os.path.join(tmp_dir, "db", "smartlinks.sqlite")


@pytest.fixture
def test_db(temp_db):
    """Provide a Database instance with initialized schema (real DB file)."""
    from smartlinker.persistence.db import Database

    db = Database(temp_db)
    yield db
    db.close()


@pytest.fixture
def in_memory_db():
    """Provide an in-memory Database instance for fast unit tests."""
    from smartlinker.persistence.db import Database

    db = Database(":memory:")
    yield db
    db.close()


# === DOMAIN FIXTURES ===


@pytest.fixture
def sample_form():
    """A minimal form with one manually entered platform."""
    from smartlinker.helpers.dto.smartlink_dto import PlatformLink, SmartlinkFormData

    return SmartlinkFormData(
        title="T",
        artist="A",
        description="Debut single",
        release_date="2024-03-01",
        platforms=(
            PlatformLink(
                id="spotify",
                name="Spotify",
                url="https://open.spotify.com/track/manual",
                icon="spotify",
                color="#1DB954",
            ),
        ),
    )


@pytest.fixture
def odesli_response() -> dict[str, Any]:
    """A realistic Odesli links document (trimmed)."""
    return {
        "entityUniqueId": "SPOTIFY_SONG::abc",
        "userCountry": "US",
        "pageUrl": "https://song.link/s/abc",
        "entitiesByUniqueId": {
            "SPOTIFY_SONG::abc": {
                "id": "abc",
                "type": "song",
                "title": "Midnight City",
                "artistName": "M83",
                "thumbnailUrl": "https://i.scdn.co/image/abc",
                "thumbnailWidth": 640,
                "thumbnailHeight": 640,
                "apiProvider": "spotify",
                "platforms": ["spotify"],
            },
            "ITUNES_SONG::123": {
                "id": "123",
                "type": "song",
                "title": "Midnight City (iTunes)",
                "artistName": "M83 (iTunes)",
                "thumbnailUrl": "https://is1-ssl.mzstatic.com/image/123",
                "apiProvider": "itunes",
                "platforms": ["appleMusic", "itunes"],
            },
        },
        "linksByPlatform": {
            "spotify": {
                "url": "https://open.spotify.com/track/abc",
                "entityUniqueId": "SPOTIFY_SONG::abc",
            },
            "appleMusic": {
                "url": "https://geo.music.apple.com/us/album/_/123",
                "entityUniqueId": "ITUNES_SONG::123",
            },
            "itunes": {
                "url": "https://geo.music.apple.com/us/album/_/123?app=itunes",
                "entityUniqueId": "ITUNES_SONG::123",
            },
            "deezer": {
                "url": "https://www.deezer.com/track/456",
                "entityUniqueId": "DEEZER_SONG::456",
            },
            "tidal": {"url": "", "entityUniqueId": "TIDAL_SONG::789"},
            "youtubeMusic": {
                "url": "https://music.youtube.com/watch?v=xyz",
                "entityUniqueId": "YOUTUBE_VIDEO::xyz",
            },
        },
    }


# === PYTEST MARKERS ===


def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line("markers", "unit: fast, isolated unit test")
    config.addinivalue_line("markers", "integration: exercises several layers together")
