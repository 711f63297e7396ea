"""GitHub sign-in endpoints.

The OAuth dance itself runs on the backend.  The client only asks for the
GitHub authorization URL, resolves the current user from the bearer
credential and notifies the backend on logout.
"""

from __future__ import annotations

from loguru import logger

from ..models.user import User
from .client import ApiError, HeatmapClient


async def get_auth_url(client: HeatmapClient) -> str:
    """Return the GitHub authorization URL to send the user to.

    Raises :class:`ApiError` if the backend does not return one.
    """
    data = await client.get("/auth/github")
    auth_url = data.get("auth_url") if isinstance(data, dict) else None
    if not auth_url:
        raise ApiError(502, "No authorization URL returned")
    return auth_url


async def get_current_user(client: HeatmapClient) -> User:
    """Resolve the identity behind the current credential."""
    data = await client.get("/user/me")
    raw = data.get("user", data) if isinstance(data, dict) and "user" in data else data
    return User.model_validate(raw)


async def logout(client: HeatmapClient) -> str:
    """Tell the backend the session is over.  Returns the server's message."""
    data = await client.post("/auth/logout")
    message = data.get("message", "") if isinstance(data, dict) else ""
    logger.debug(f"Backend logout: {message}")
    return message
