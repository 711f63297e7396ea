"""Navigation hand-off used by the session controller.

Sign-in leaves the application entirely (the user is sent to GitHub) and
comes back through a redirect, and a successful hand-off ends with a full
reload.  The controller only decides *where* to go; a :class:`Navigator`
decides how.
"""

from __future__ import annotations

import webbrowser
from typing import Protocol

from loguru import logger

from ..storage import config


class Navigator(Protocol):
    def navigate(self, target: str) -> None:
        """Leave the current surface for *target* (absolute URL or app path)."""

    def reload(self, target: str) -> None:
        """Restart the application context at *target*, discarding cached state."""


class BrowserNavigator:
    """Open targets in the system web browser.

    App-relative paths are resolved against the configured frontend URL.
    A browser has no separate notion of reload, so both operations open the
    resolved URL.
    """

    def __init__(self, frontend_url: str | None = None) -> None:
        self.frontend_url = (frontend_url or config.frontend_url()).rstrip("/")

    def resolve(self, target: str) -> str:
        if target.startswith(("http://", "https://")):
            return target
        return f"{self.frontend_url}/{target.lstrip('/')}"

    def navigate(self, target: str) -> None:
        url = self.resolve(target)
        logger.debug(f"Opening {url}")
        if not webbrowser.open(url):
            logger.warning(f"Could not open a browser; visit {url} manually")

    def reload(self, target: str) -> None:
        self.navigate(target)
