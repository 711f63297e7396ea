"""Session lifecycle: bootstrap, sign-in hand-off and logout.

State machine::

    UNRESOLVED --bootstrap--> RESOLVING --ok--> AUTHENTICATED
         |                        |
         +--(no credential)-------+--failure--> ANONYMOUS

Every failed transition ends in ``ANONYMOUS`` with the credential cleared;
nothing here leaves the session half-resolved.  Sign-in is split across two
independent entry points, :meth:`SessionController.login` and
:meth:`SessionController.handle_callback`, because the process may restart
in between; only the persisted credential survives.
"""

from __future__ import annotations

from enum import Enum

from loguru import logger
from pydantic import ValidationError

from ..api import auth as auth_api
from ..api.client import ApiError, HeatmapClient
from ..models.user import User
from .navigation import Navigator
from .redirect import (
    DASHBOARD_PATH,
    LANDING_PATH,
    AuthErrorReason,
    error_path,
    extract_token,
)
from .store import SessionStore


class SessionState(str, Enum):
    UNRESOLVED = "unresolved"
    RESOLVING = "resolving"
    AUTHENTICATED = "authenticated"
    ANONYMOUS = "anonymous"


class SessionController:
    """Single writer of the :class:`SessionStore`.

    *client* must have been constructed with the same *store*, so that
    resolution requests carry the credential being resolved.
    """

    def __init__(
        self,
        store: SessionStore,
        client: HeatmapClient,
        navigator: Navigator,
    ) -> None:
        self.store = store
        self._client = client
        self._navigator = navigator
        self._state = SessionState.UNRESOLVED
        self._bootstrapped = False
        self._handoff_started = False
        self._resolving = False
        self.last_error: Exception | None = None
        self.failure_reason: AuthErrorReason | None = None

    # ------------------------------------------------------------------
    # Read-only view
    # ------------------------------------------------------------------

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def identity(self) -> User | None:
        return self.store.identity

    @property
    def is_authenticated(self) -> bool:
        return self.store.is_authenticated

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    def _fail(self, exc: Exception) -> None:
        """Drop the session after a failed resolution."""
        self.last_error = exc
        if isinstance(exc, ApiError) and exc.is_unauthorized:
            logger.info("Stored credential was rejected; signing out")
        elif isinstance(exc, ApiError) and exc.is_network_error:
            # TODO: keep the credential on network errors once product confirms
            # a transient outage should not sign the user out.
            logger.warning(f"Backend unreachable while resolving session; signing out: {exc}")
        else:
            logger.warning(f"Could not resolve session; signing out: {exc}")
        self.store.clear()
        self._state = SessionState.ANONYMOUS

    async def _resolve(self) -> None:
        """Resolve the stored credential into an identity.

        At most one resolution runs at a time; a call made while another is
        in flight returns immediately.
        """
        if self._resolving:
            logger.debug("Session resolution already in flight; ignoring")
            return
        credential = self.store.credential
        if not credential:
            self.store.clear()
            self._state = SessionState.ANONYMOUS
            return

        self._resolving = True
        self._state = SessionState.RESOLVING
        self.store.set_loading(True)
        try:
            identity = await auth_api.get_current_user(self._client)
        except (ApiError, ValidationError) as exc:
            self._fail(exc)
            return
        finally:
            self._resolving = False
            self.store.set_loading(False)

        self.store.set_session(credential, identity)
        self.last_error = None
        self._state = SessionState.AUTHENTICATED

    async def bootstrap(self) -> SessionState:
        """Hydrate the session on process start.

        Runs once per controller.  Without a stored credential this goes
        straight to ``ANONYMOUS`` without touching the network.
        """
        if self._bootstrapped:
            logger.debug("Bootstrap already ran; ignoring")
            return self._state
        self._bootstrapped = True

        if not self.store.credential:
            self._state = SessionState.ANONYMOUS
            return self._state
        await self._resolve()
        return self._state

    async def refresh_user(self) -> SessionState:
        """Re-resolve the identity, e.g. after the profile was edited."""
        await self._resolve()
        return self._state

    # ------------------------------------------------------------------
    # Sign-in
    # ------------------------------------------------------------------

    async def login(self) -> str | None:
        """Send the user to GitHub to sign in.

        Returns the authorization URL that was opened, or ``None`` if the
        session is already authenticated.  Raises :class:`ApiError` if the
        URL could not be obtained; the session is left untouched.
        """
        if self.is_authenticated:
            logger.info("Already signed in; ignoring login request")
            return None
        try:
            auth_url = await auth_api.get_auth_url(self._client)
        except ApiError as exc:
            logger.error(f"Login failed: {exc}")
            raise
        self._navigator.navigate(auth_url)
        return auth_url

    async def handle_callback(self, token: str | None) -> SessionState:
        """Complete sign-in with the credential handed back by the redirect.

        Without a token the user is routed to the ``no_token`` error surface
        and nothing is resolved.  With one, the credential is persisted and
        resolved; success reloads the application at the dashboard, failure
        clears it and returns to the landing page.  Only the first call per
        controller is honoured.
        """
        if self._handoff_started:
            logger.debug("Sign-in callback already handled; ignoring")
            return self._state
        self._handoff_started = True

        if not token:
            logger.warning("Sign-in callback carried no token")
            self.failure_reason = AuthErrorReason.NO_TOKEN
            self._navigator.navigate(error_path(AuthErrorReason.NO_TOKEN))
            return self._state

        try:
            self.store.adopt_credential(token)
        except OSError as exc:
            logger.error(f"Could not persist credential: {exc}")
            self._fail(exc)
        else:
            await self._resolve()

        if self._state is SessionState.AUTHENTICATED:
            self._navigator.reload(DASHBOARD_PATH)
        else:
            self._navigator.navigate(LANDING_PATH)
        return self._state

    async def handle_callback_url(self, url: str) -> SessionState:
        """Like :meth:`handle_callback`, reading the token from *url*."""
        return await self.handle_callback(extract_token(url))

    # ------------------------------------------------------------------
    # Sign-out
    # ------------------------------------------------------------------

    async def logout(self) -> None:
        """Sign out locally, telling the backend on a best-effort basis."""
        try:
            await auth_api.logout(self._client)
        except ApiError as exc:
            logger.debug(f"Ignoring failed logout notification: {exc}")
        finally:
            self.store.clear()
            self._state = SessionState.ANONYMOUS
            self._navigator.navigate(LANDING_PATH)
