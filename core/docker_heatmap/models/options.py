"""Customisation options for a rendered heatmap.

Every field is optional.  ``None`` means "let the rendering service apply
its default"; the service owns the defaults and the valid ranges, so no
validation beyond types happens here.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class HeatmapOptions(BaseModel):
    """Immutable, closed set of heatmap rendering options."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    theme: str | None = None
    days: int | None = None
    cell_size: int | None = None
    radius: int | None = None
    hide_legend: bool | None = None
    hide_total: bool | None = None
    hide_labels: bool | None = None
    title: str | None = None
