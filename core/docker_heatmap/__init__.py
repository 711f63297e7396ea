"""Client core for docker-heatmap: session lifecycle, API client and embed URLs."""

__version__ = "0.1.0"
