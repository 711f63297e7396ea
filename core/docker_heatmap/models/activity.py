"""Pydantic v2 models for public activity, profile, theme and embed payloads."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ActivityEvent(BaseModel):
    """One day of aggregated activity."""

    model_config = ConfigDict(populate_by_name=True)

    date: str
    count: int
    level: int
    pushes: int | None = None
    pulls: int | None = None
    builds: int | None = None


class ActivityTotals(BaseModel):
    activities: int = 0
    pushes: int = 0
    pulls: int = 0
    builds: int = 0


class ActivityResponse(BaseModel):
    """Body of ``GET /activity/{username}``."""

    username: str
    days: int
    totals: ActivityTotals = Field(default_factory=ActivityTotals)
    activity: list[ActivityEvent] = Field(default_factory=list)

    @property
    def active_days(self) -> int:
        return sum(1 for event in self.activity if event.count > 0)


class ProfileUser(BaseModel):
    github_username: str
    name: str | None = None
    bio: str | None = None
    avatar_url: str = ""


class ProfileDocker(BaseModel):
    username: str
    last_sync_at: str | None = None


class ProfileStats(BaseModel):
    total_activities: int = 0


class ProfileData(BaseModel):
    """Body of ``GET /profile/{username}``."""

    user: ProfileUser
    docker: ProfileDocker
    stats: ProfileStats = Field(default_factory=ProfileStats)
    available_themes: list[str] | None = None


class Theme(BaseModel):
    """A heatmap colour theme offered by the rendering service."""

    id: str
    name: str
    bg_color: str
    text_color: str
    colors: list[str] = Field(default_factory=list)


class EmbedCodes(BaseModel):
    """Ready-to-paste embed snippets for a heatmap."""

    svg_url: str
    json_url: str
    markdown: str
    html: str
    html_link: str
