"""Async HTTP client for the docker-heatmap backend."""

from __future__ import annotations

from typing import Any

import httpx
from loguru import logger

from ..session.store import SessionStore
from ..storage import config

DEFAULT_ERROR_MESSAGE = "An error occurred"


class ApiError(Exception):
    """Raised for every failed backend call.

    ``status`` is the HTTP status code, or ``0`` when the request never got
    a response (connection refused, DNS failure, timeout...).  Branch on
    ``status``; ``message`` is meant for display only.
    """

    def __init__(self, status: int, message: str) -> None:
        super().__init__(message)
        self.status = status
        self.message = message

    @property
    def is_unauthorized(self) -> bool:
        return self.status in (401, 403)

    @property
    def is_network_error(self) -> bool:
        return self.status == 0

    def __repr__(self) -> str:
        return f"ApiError(status={self.status}, message={self.message!r})"


def _error_message(resp: httpx.Response) -> str:
    """Pull a human-readable message out of an error response body."""
    try:
        body = resp.json()
    except ValueError:
        return DEFAULT_ERROR_MESSAGE
    if isinstance(body, dict):
        message = body.get("error") or body.get("message")
        if isinstance(message, str) and message:
            return message
    return DEFAULT_ERROR_MESSAGE


class HeatmapClient:
    """Thin JSON client that authenticates with the current session.

    The bearer credential is always read from the :class:`SessionStore`
    passed in, so callers cannot issue requests on behalf of anything other
    than the current session.  The client never modifies the store, not even
    when the backend rejects the credential.

    Example::

        store = SessionStore()
        async with HeatmapClient(store) as client:
            themes = await client.get("/themes")
    """

    def __init__(
        self,
        store: SessionStore,
        base_url: str | None = None,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._store = store
        self.base_url = (base_url or config.api_url()).rstrip("/")
        self._http = httpx.AsyncClient(timeout=timeout, transport=transport)

    # ------------------------------------------------------------------
    # Headers
    # ------------------------------------------------------------------

    def _auth_headers(self) -> dict[str, str]:
        """Build an ``Authorization`` header dict using the current credential."""
        token = self._store.credential
        if not token:
            return {}
        return {"Authorization": f"Bearer {token}"}

    # ------------------------------------------------------------------
    # Requests
    # ------------------------------------------------------------------

    async def request(
        self,
        endpoint: str,
        method: str = "GET",
        json: Any = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """Send a JSON request to ``base_url + endpoint`` and return the parsed body.

        Raises :class:`ApiError` on request failures (including undecodable
        bodies) and non-2xx responses.
        The body is returned as-is; no shape validation happens here.
        """
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
            **self._auth_headers(),
        }
        url = f"{self.base_url}{endpoint}"
        try:
            resp = await self._http.request(
                method, url, json=json, params=params, headers=headers
            )
        except httpx.RequestError as exc:
            logger.warning(f"{method} {endpoint} failed: {exc}")
            raise ApiError(0, f"Network error: {exc}") from exc

        if not resp.is_success:
            message = _error_message(resp)
            logger.debug(f"{method} {endpoint} -> {resp.status_code}: {message}")
            raise ApiError(resp.status_code, message)

        try:
            return resp.json()
        except ValueError as exc:
            logger.error(f"{method} {endpoint} returned a non-JSON body")
            raise ApiError(resp.status_code, "Invalid response from server") from exc

    async def get(self, endpoint: str, params: dict[str, Any] | None = None) -> Any:
        return await self.request(endpoint, params=params)

    async def post(self, endpoint: str, json: Any = None) -> Any:
        return await self.request(endpoint, method="POST", json=json)

    async def put(self, endpoint: str, json: Any = None) -> Any:
        return await self.request(endpoint, method="PUT", json=json)

    async def delete(self, endpoint: str) -> Any:
        return await self.request(endpoint, method="DELETE")

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    @property
    def is_closed(self) -> bool:
        return self._http.is_closed

    async def aclose(self) -> None:
        """Close the underlying HTTP transport."""
        await self._http.aclose()

    async def __aenter__(self) -> HeatmapClient:
        return self

    async def __aexit__(self, *args) -> None:
        await self.aclose()
