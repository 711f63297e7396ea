"""Profile operations for the signed-in user."""

from __future__ import annotations

from ..models.activity import EmbedCodes
from ..models.user import UpdateProfileRequest, User
from .client import HeatmapClient


async def get_profile(client: HeatmapClient) -> User:
    """Fetch the signed-in user's profile."""
    data = await client.get("/user/me")
    raw = data.get("user", data) if isinstance(data, dict) and "user" in data else data
    return User.model_validate(raw)


async def update_profile(client: HeatmapClient, update: UpdateProfileRequest) -> User:
    """Apply a partial profile update and return the updated user.

    Only fields set on *update* are sent.
    """
    data = await client.put("/user/me", json=update.model_dump(exclude_none=True))
    raw = data.get("user", data) if isinstance(data, dict) and "user" in data else data
    return User.model_validate(raw)


async def get_embed_codes(client: HeatmapClient, docker_username: str) -> EmbedCodes:
    """Fetch the server-generated embed snippets for *docker_username*."""
    data = await client.get("/user/embed", params={"docker_username": docker_username})
    return EmbedCodes.model_validate(data)
