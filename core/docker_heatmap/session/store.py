"""In-memory session state backed by the persisted credential."""

from __future__ import annotations

from loguru import logger

from ..models.user import User
from ..storage.credentials import delete_credential, load_credential, save_credential


class SessionStore:
    """Holds the bearer credential and the identity resolved from it.

    The store is owned by a :class:`~docker_heatmap.session.controller.SessionController`,
    which is the only caller of the mutators.  The API client and the
    presentation layer only read from it.

    The credential is loaded from disk on construction.  The identity is
    never persisted and starts out unresolved (``None``) in every process.
    """

    def __init__(self) -> None:
        self._credential: str | None = load_credential()
        self._identity: User | None = None
        self._loading = False

    # ------------------------------------------------------------------
    # Read-only view
    # ------------------------------------------------------------------

    @property
    def credential(self) -> str | None:
        return self._credential

    @property
    def identity(self) -> User | None:
        return self._identity

    @property
    def is_authenticated(self) -> bool:
        """``True`` iff an identity has been resolved."""
        return self._identity is not None

    @property
    def is_loading(self) -> bool:
        return self._loading

    # ------------------------------------------------------------------
    # Mutators (session controller only)
    # ------------------------------------------------------------------

    def adopt_credential(self, token: str) -> None:
        """Persist a freshly handed-off credential, dropping any old identity.

        The identity stays unresolved until :meth:`set_session` is called.
        """
        save_credential(token)
        self._credential = token
        self._identity = None

    def set_session(self, credential: str, identity: User) -> None:
        """Set credential and identity together."""
        if credential != self._credential:
            save_credential(credential)
        self._credential = credential
        self._identity = identity
        logger.debug(f"Session established for {identity.github_username}")

    def clear(self) -> None:
        """Drop credential and identity, in memory and on disk."""
        self._credential = None
        self._identity = None
        delete_credential()

    def set_loading(self, loading: bool) -> None:
        self._loading = loading
