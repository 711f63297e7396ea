"""Docker Hub account linking.

The access token passed to :func:`connect` goes straight to the backend,
which encrypts and stores it.  Nothing here keeps a copy.
"""

from __future__ import annotations

from loguru import logger

from ..models.user import ConnectDockerRequest, DockerAccount
from .client import HeatmapClient


def _parse_account(data) -> DockerAccount:
    raw = (
        data.get("account", data)
        if isinstance(data, dict) and "account" in data
        else data
    )
    return DockerAccount.model_validate(raw)


async def connect(client: HeatmapClient, request: ConnectDockerRequest) -> DockerAccount:
    """Link a Docker Hub account to the signed-in user."""
    data = await client.post("/docker/connect", json=request.model_dump())
    account = _parse_account(data)
    logger.info(f"Linked Docker Hub account {account.docker_username}")
    return account


async def get_account(client: HeatmapClient) -> DockerAccount:
    """Fetch the linked account.

    Raises :class:`~docker_heatmap.api.client.ApiError` (404) when no account
    is linked.
    """
    return _parse_account(await client.get("/docker/account"))


async def disconnect(client: HeatmapClient) -> str:
    """Unlink the Docker Hub account.  Returns the server's message."""
    data = await client.delete("/docker/disconnect")
    return data.get("message", "") if isinstance(data, dict) else ""


async def sync(client: HeatmapClient) -> str:
    """Ask the backend to start a synchronisation run.  Returns its message."""
    data = await client.post("/docker/sync")
    return data.get("message", "") if isinstance(data, dict) else ""
