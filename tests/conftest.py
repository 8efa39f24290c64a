"""Shared pytest fixtures for the bhdapi test suite."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from bhdapi.client import Client
from bhdapi.config import Settings

BASE_URL = "http://bhd.test"

@pytest.fixture()
def settings() -> Settings:
    """Return a Settings instance with test defaults."""
    return Settings(api_key="test-key", rss_key="rss-key", base_url=BASE_URL)


@pytest.fixture()
def client(settings: Settings) -> Client:
    return Client.from_settings(settings)


@pytest.fixture()
def make_page() -> Callable[..., dict[str, Any]]:
    """Factory for search response payloads with sequential torrent ids."""

    def _make(start: int, count: int, *, total: int, page: int = 1, total_pages: int = 0) -> dict[str, Any]:
        return {
            "status_code": 1,
            "page": page,
            "results": [{"id": i, "name": f"Torrent {i}"} for i in range(start, start + count)],
            "total_pages": total_pages,
            "total_results": total,
            "success": True,
        }

    return _make


@pytest.fixture()
def fight_club_response() -> dict[str, Any]:
    return {
        "status_code": 1,
        "page": 1,
        "results": [
            {
                "id": 7531,
                "name": "Fight.Club.1999.BluRay.1080p.DTS-HD.MA.5.1.AVC.REMUX-FraMeSToR",
                "info_hash": "abcdef0123456789abcdef0123456789abcdef01",
            }
        ],
        "total_pages": 1,
        "total_results": 1,
        "success": True,
    }
