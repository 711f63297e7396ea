"""Embeddable heatmap URLs.

These URLs end up pasted into READMEs and static pages, so their shape must
never change for a given set of options.  Only options that are actually set
are encoded; everything else is left to the rendering service's defaults, so
links created before an option existed keep rendering exactly as they did.

Parameter order is fixed::

    theme, days, cell_size, radius, hide_legend, hide_total, hide_labels, title

Toggles are presence-only (``hide_total=true``); ``radius=0`` is a real value
and is emitted, whereas ``days`` and ``cell_size`` are emitted when
non-zero.  Nothing here validates ranges or touches the network.
"""

from __future__ import annotations

from html import escape
from urllib.parse import quote, urlencode

from .models.activity import EmbedCodes
from .models.options import HeatmapOptions
from .storage import config

DEFAULT_DAYS = 365


def _base(base_url: str | None) -> str:
    return (base_url or config.api_url()).rstrip("/")


def _subject(username: str) -> str:
    return quote(username, safe="")


def encode_options(options: HeatmapOptions | None) -> str:
    """Return the query string (without ``?``) for *options*, possibly empty."""
    if options is None:
        return ""

    params: list[tuple[str, str]] = []
    if options.theme:
        params.append(("theme", options.theme))
    if options.days:
        params.append(("days", str(options.days)))
    if options.cell_size:
        params.append(("cell_size", str(options.cell_size)))
    if options.radius is not None:
        params.append(("radius", str(options.radius)))
    if options.hide_legend:
        params.append(("hide_legend", "true"))
    if options.hide_total:
        params.append(("hide_total", "true"))
    if options.hide_labels:
        params.append(("hide_labels", "true"))
    if options.title:
        params.append(("title", options.title))
    return urlencode(params)


def heatmap_url(
    username: str,
    options: HeatmapOptions | None = None,
    base_url: str | None = None,
) -> str:
    """Build the SVG heatmap URL for *username*.

    Example::

        heatmap_url("alice", HeatmapOptions(theme="github", radius=0))
        # -> ".../heatmap/alice.svg?theme=github&radius=0"
    """
    query = encode_options(options)
    url = f"{_base(base_url)}/heatmap/{_subject(username)}.svg"
    return f"{url}?{query}" if query else url


def heatmap_url_simple(
    username: str,
    days: int = DEFAULT_DAYS,
    base_url: str | None = None,
) -> str:
    """Legacy day-count-only form, identical to ``heatmap_url`` with just *days*."""
    return heatmap_url(username, HeatmapOptions(days=days), base_url)


def activity_url(
    username: str,
    days: int = DEFAULT_DAYS,
    base_url: str | None = None,
) -> str:
    """Build the JSON activity URL for *username*."""
    return f"{_base(base_url)}/activity/{_subject(username)}.json?days={days}"


def embed_snippets(
    username: str,
    options: HeatmapOptions | None = None,
    base_url: str | None = None,
    profile_base_url: str | None = None,
) -> EmbedCodes:
    """Build Markdown and HTML embed snippets for *username*'s heatmap.

    The linked variant points at the public profile page on the frontend
    (*profile_base_url*, defaulting to the configured frontend URL).
    """
    svg_url = heatmap_url(username, options, base_url)
    days = options.days if options is not None and options.days else DEFAULT_DAYS
    json_url = activity_url(username, days, base_url)
    profile_base = (profile_base_url or config.frontend_url()).rstrip("/")
    profile_url = f"{profile_base}/profile/{_subject(username)}"

    img = f'<img src="{escape(svg_url)}" alt="Docker Activity Heatmap" />'
    return EmbedCodes(
        svg_url=svg_url,
        json_url=json_url,
        markdown=f"![Docker Activity]({svg_url})",
        html=img,
        html_link=f'<a href="{escape(profile_url)}">{img}</a>',
    )
