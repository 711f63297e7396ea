"""docker-heatmap API client layer -- re-exports the primary client class."""

from docker_heatmap.api.client import ApiError, HeatmapClient

__all__ = ["ApiError", "HeatmapClient"]
