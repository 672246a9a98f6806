"""
Shared test fixtures and configuration for kitsu-manga test suite.

This module provides:
- Sample Kitsu API payloads (full record, sparse record, no results)
- Fake requests responses usable as context managers
- A patched requests.get that counts network calls
"""

import json
from unittest.mock import MagicMock, patch

import pytest

from models.config import KitsuSettings
from services.kitsu_service import KitsuClient


def make_response(status_code: int = 200, content: bytes = b"") -> MagicMock:
    """Fake requests.Response supporting ``with``."""
    resp = MagicMock()
    resp.status_code = status_code
    resp.content = content
    resp.iter_content.return_value = [content] if content else []
    resp.__enter__.return_value = resp
    return resp


# ========== Sample Data Fixtures ==========


@pytest.fixture
def sample_berserk_payload():
    """Realistic Kitsu response for Berserk (trimmed)."""
    return {
        "data": [
            {
                "id": "11",
                "type": "manga",
                "links": {"self": "https://kitsu.io/api/edge/manga/11"},
                "attributes": {
                    "createdAt": "2013-12-18T13:48:27.451Z",
                    "slug": "berserk",
                    "synopsis": "Guts, a former mercenary...<br><br>\r\n(Source: MU)<br />\r\n<i>Dark fantasy.</i>",
                    "canonicalTitle": "Berserk",
                    "abbreviatedTitle": "Berserk: The Prototype",
                    "averageRating": "87.32",
                    "popularityRank": 12,
                    "chapterCount": 374,
                    "volumeCount": 41,
                    "serialization": "Young Animal",
                    "posterImage": {
                        "tiny": "https://media.kitsu.io/manga/poster_images/11/tiny.jpg",
                        "small": "https://media.kitsu.io/manga/poster_images/11/small.jpg",
                        "medium": "https://media.kitsu.io/manga/poster_images/11/medium.jpg",
                        "large": "https://media.kitsu.io/manga/poster_images/11/large.jpg",
                        "original": "https://media.kitsu.io/manga/poster_images/11/original.jpg",
                        "meta": {"dimensions": {}},
                    },
                },
            }
        ],
        "meta": {"count": 120},
        "links": {"first": "https://kitsu.io/api/edge/manga?page%5Blimit%5D=1"},
    }


@pytest.fixture
def sample_sparse_payload():
    """Kitsu response with nulls and missing fields."""
    return {
        "data": [
            {
                "id": "42",
                "type": "manga",
                "attributes": {
                    "canonicalTitle": "Sparse",
                    "abbreviatedTitle": None,
                    "chapterCount": None,
                    "volumeCount": 5,
                    "averageRating": None,
                    "synopsis": "",
                    "posterImage": None,
                },
            }
        ]
    }


@pytest.fixture
def empty_payload():
    """Kitsu response with no results."""
    return {"data": [], "meta": {"count": 0}, "links": {}}


# ========== Network Fixtures ==========


@pytest.fixture
def mock_get():
    """Patch requests.get in the Kitsu service; exposes call_count."""
    with patch("services.kitsu_service.requests.get") as mock:
        yield mock


@pytest.fixture
def respond_with(mock_get):
    """Configure mock_get to return a given status/body."""

    def _respond(payload=None, status_code: int = 200, content: bytes | None = None):
        if content is None:
            content = json.dumps(payload).encode() if payload is not None else b""
        resp = make_response(status_code, content)
        mock_get.return_value = resp
        return resp

    return _respond


@pytest.fixture
def client():
    """Kitsu client pointed at the default API with a short deadline."""
    return KitsuClient(KitsuSettings(timeout_seconds=5))
