"""Hardcoded default configuration values."""

from __future__ import annotations

from typing import Any

DEFAULT_CONFIG: dict[str, Any] = {
    "app_name": "catalogarr",
    "environment": "dev",
    "http": {
        "base_url": "https://www.crunchyroll.com",
        "timeout_seconds": 30.0,
        "user_agent": "Catalogarr/0.1.0",
    },
    "logging": {
        "level": "INFO",
        "format": None,  # Derived from environment in schema.py
    },
    "catalog": {
        "page_size": 20,
        "locale": None,
        "preferred_audio_language": None,
        "access_token": None,
    },
}
