"""Centralised configuration via Pydantic Settings."""

from __future__ import annotations

from pydantic_settings import BaseSettings

BASE_URL = "https://beyond-hd.me"


class Settings(BaseSettings):
    """Client configuration loaded from environment variables."""

    model_config = {"env_prefix": "BHD_", "frozen": True}

    # Credentials
    api_key: str = ""
    rss_key: str = ""
    # Inject rss_key into search request bodies as "rsskey".
    add_rss_key: bool = False

    # Service
    base_url: str = BASE_URL
    # Seconds; unset means no client-side timeout (callers attach deadlines).
    timeout: float | None = None


def get_settings() -> Settings:
    """Factory — allows overriding in tests."""
    return Settings()
