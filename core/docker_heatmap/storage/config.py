"""Application settings.

Settings live in a small JSON file (:data:`paths.SETTINGS_FILE`) merged over
:data:`DEFAULT_SETTINGS`.  The backend and frontend base URLs can also be
overridden with the ``DOCKER_HEATMAP_API_URL`` and
``DOCKER_HEATMAP_FRONTEND_URL`` environment variables, which win over the
file.
"""

from __future__ import annotations

import json
import os
from typing import Any

from loguru import logger

from .paths import SETTINGS_FILE, atomic_write, ensure_parents

DEFAULT_API_URL = "http://localhost:8080/api"
DEFAULT_FRONTEND_URL = "http://localhost:3000"

DEFAULT_SETTINGS: dict[str, Any] = {
    "api_url": DEFAULT_API_URL,
    "frontend_url": DEFAULT_FRONTEND_URL,
    "timeout": 30.0,
    "debug": False,
}

_ENV_OVERRIDES = {
    "api_url": "DOCKER_HEATMAP_API_URL",
    "frontend_url": "DOCKER_HEATMAP_FRONTEND_URL",
}


class AppSettings:
    """Read/write access to the persisted settings file."""

    @staticmethod
    def load() -> dict[str, Any]:
        """Return the effective settings (defaults, then file, then env)."""
        settings = dict(DEFAULT_SETTINGS)
        if SETTINGS_FILE.exists():
            try:
                loaded = json.loads(SETTINGS_FILE.read_text(encoding="utf-8"))
                if isinstance(loaded, dict):
                    settings.update(loaded)
            except (OSError, json.JSONDecodeError, ValueError) as exc:
                logger.warning(f"Ignoring unreadable settings file {SETTINGS_FILE}: {exc}")
        for key, env_name in _ENV_OVERRIDES.items():
            value = os.environ.get(env_name)
            if value:
                settings[key] = value
        return settings

    @staticmethod
    def get(key: str, default: Any = None) -> Any:
        return AppSettings.load().get(key, default)

    @staticmethod
    def set(key: str, value: Any) -> None:
        """Persist a single setting, keeping the other keys in the file."""
        current: dict[str, Any] = {}
        if SETTINGS_FILE.exists():
            try:
                loaded = json.loads(SETTINGS_FILE.read_text(encoding="utf-8"))
                if isinstance(loaded, dict):
                    current = loaded
            except (OSError, json.JSONDecodeError, ValueError):
                current = {}
        current[key] = value
        ensure_parents(SETTINGS_FILE)
        atomic_write(SETTINGS_FILE, json.dumps(current, indent=2))


def api_url() -> str:
    """Backend base URL without a trailing slash."""
    return str(AppSettings.get("api_url", DEFAULT_API_URL)).rstrip("/")


def frontend_url() -> str:
    """Frontend base URL without a trailing slash."""
    return str(AppSettings.get("frontend_url", DEFAULT_FRONTEND_URL)).rstrip("/")
