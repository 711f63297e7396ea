"""Anonymous endpoints: themes, public profiles and activity data."""

from __future__ import annotations

from urllib.parse import quote

from loguru import logger

from ..models.activity import ActivityResponse, ProfileData, Theme
from ..urls import DEFAULT_DAYS
from .client import HeatmapClient


async def get_themes(client: HeatmapClient) -> list[Theme]:
    """Fetch the available heatmap themes.

    Themes that fail to parse are logged and skipped.
    """
    data = await client.get("/themes")
    raw_themes: list[dict] = (
        (data.get("themes") or []) if isinstance(data, dict) else data
    )

    themes: list[Theme] = []
    for raw in raw_themes:
        try:
            themes.append(Theme.model_validate(raw))
        except Exception as exc:
            theme_id = raw.get("id", "<unknown>") if isinstance(raw, dict) else "<unknown>"
            logger.warning(f"Failed to parse theme {theme_id}: {exc}")
    return themes


async def get_profile(client: HeatmapClient, username: str) -> ProfileData:
    """Fetch the public profile for a Docker Hub *username*."""
    return ProfileData.model_validate(await client.get(f"/profile/{quote(username, safe='')}"))


async def get_activity(
    client: HeatmapClient, username: str, days: int = DEFAULT_DAYS
) -> ActivityResponse:
    """Fetch *days* of aggregated activity for *username*."""
    data = await client.get(f"/activity/{quote(username, safe='')}", params={"days": days})
    return ActivityResponse.model_validate(data)
