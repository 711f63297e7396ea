"""Re-export all docker-heatmap data models for convenient access."""

from docker_heatmap.models.activity import (
    ActivityEvent,
    ActivityResponse,
    ActivityTotals,
    EmbedCodes,
    ProfileData,
    ProfileDocker,
    ProfileStats,
    ProfileUser,
    Theme,
)
from docker_heatmap.models.options import HeatmapOptions
from docker_heatmap.models.user import (
    ConnectDockerRequest,
    DockerAccount,
    StoredCredential,
    UpdateProfileRequest,
    User,
)

__all__ = [
    # Activity / public models
    "ActivityEvent",
    "ActivityResponse",
    "ActivityTotals",
    "EmbedCodes",
    "ProfileData",
    "ProfileDocker",
    "ProfileStats",
    "ProfileUser",
    "Theme",
    # Options
    "HeatmapOptions",
    # User models
    "ConnectDockerRequest",
    "DockerAccount",
    "StoredCredential",
    "UpdateProfileRequest",
    "User",
]
