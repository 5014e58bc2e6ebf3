"""
Shared fixtures: a small catalog injected into the app, driven in-process over ASGI.
"""

import pytest
from httpx import ASGITransport, AsyncClient

from soundshelf.core.config import Settings
from soundshelf.core.loaders import build_catalog
from soundshelf.main import create_app

FIXTURE_DATA = {
    "tracks": [
        {"id": 1, "title": "Blinding Lights", "artist": "The Weeknd", "genre": "Pop", "duration": 200,
         "streamUrl": "https://cdn.test/stream/1", "fileUrl": "https://cdn.test/files/1.mp3",
         "format": "mp3", "bitrate": 320, "size": 8000000},
        {"id": 2, "title": "Save Your Tears", "artist": "The Weeknd", "genre": "Pop", "duration": 215,
         "streamUrl": "https://cdn.test/stream/2"},
        {"id": 3, "title": "Levitating", "artist": "Dua Lipa", "genre": "pop", "duration": 203,
         "streamUrl": "https://cdn.test/stream/3"},
        {"id": 4, "title": "Bohemian Rhapsody", "artist": "Queen", "genre": "Rock", "duration": 354,
         "streamUrl": "https://cdn.test/stream/4"},
        {"id": 5, "title": "Lose Yourself", "artist": "Eminem", "genre": "Hip-Hop", "duration": 326,
         "streamUrl": "https://cdn.test/stream/5"},
    ],
    "artists": [
        {"id": 1, "name": "The Weeknd", "genre": "R&B", "country": "Canada",
         "profileImage": "https://cdn.test/a/1.jpg",
         "socialLinks": {"instagram": "https://instagram.com/theweeknd"}},
        {"id": 2, "name": "Dua Lipa", "genre": "Pop", "country": "United Kingdom"},
        {"id": 3, "name": "Queen", "genre": "Rock", "country": "United Kingdom"},
        {"id": 4, "name": "Eminem", "genre": "Hip-Hop", "country": "United States"},
        {"id": 5, "name": "Nobody Yet", "genre": "Ambient", "country": "Iceland"},
    ],
    "playlists": [
        {"id": 1, "name": "Night Drive", "tracks": [1, 2], "createdBy": "tester",
         "totalDuration": 415, "trackCount": 2},
        {"id": 2, "name": "Rock Classics", "tracks": [4], "createdBy": "tester",
         "totalDuration": 354, "trackCount": 1},
        {"id": 3, "name": "Broken Mix", "tracks": [3, 99, 1], "createdBy": "tester",
         "totalDuration": 403, "trackCount": 3},
    ],
}


@pytest.fixture
def catalog():
    return build_catalog(FIXTURE_DATA)


@pytest.fixture
def settings():
    return Settings(
        API_VERSION="1.0",
        API_PREFIX="/api/v1",
        ADMIN_USERNAME="admin",
        ADMIN_PASSWORD="secret",
        CATALOG_PATH="",
        LOG_LEVEL="WARNING",
    )


@pytest.fixture
def app(catalog, settings):
    return create_app(catalog=catalog, settings=settings)


@pytest.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
