"""OAuth redirect contract.

After GitHub sign-in the backend redirects to the frontend callback with the
credential in the ``token`` query parameter.  Failures are redirected to the
error surface with a machine-readable ``message`` reason code.  The set of
reason codes is closed so error pages stay stable and linkable.
"""

from __future__ import annotations

from enum import Enum
from urllib.parse import parse_qs, urlencode, urlsplit

TOKEN_PARAM = "token"
REASON_PARAM = "message"

ERROR_PATH = "/auth/error"
DASHBOARD_PATH = "/dashboard"
LANDING_PATH = "/"


class AuthErrorReason(str, Enum):
    """Reason codes carried to the authentication error surface."""

    NO_TOKEN = "no_token"
    MISSING_PARAMS = "missing_params"
    INVALID_STATE = "invalid_state"
    AUTH_FAILED = "auth_failed"
    TOKEN_FAILED = "token_failed"
    DEFAULT = "default"

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]

    @classmethod
    def from_code(cls, code: str | None) -> AuthErrorReason:
        """Map a raw reason code to a member; unknown or empty codes are ``DEFAULT``."""
        try:
            return cls(code)
        except ValueError:
            return cls.DEFAULT


_DESCRIPTIONS = {
    AuthErrorReason.NO_TOKEN: "No authentication token received.",
    AuthErrorReason.MISSING_PARAMS: "Missing required parameters. Please try signing in again.",
    AuthErrorReason.INVALID_STATE: "Invalid OAuth state. The link may have expired.",
    AuthErrorReason.AUTH_FAILED: "Authentication with GitHub failed. Please try again.",
    AuthErrorReason.TOKEN_FAILED: "Failed to generate authentication token.",
    AuthErrorReason.DEFAULT: "An unexpected error occurred during authentication.",
}


def _query_value(url: str, name: str) -> str | None:
    values = parse_qs(urlsplit(url).query).get(name)
    if not values:
        return None
    return values[0] or None


def extract_token(url: str) -> str | None:
    """Return the one-time credential from a callback URL, or ``None``.

    *url* may be a full URL, a path with a query string, or a bare query
    string starting with ``?``.
    """
    return _query_value(url, TOKEN_PARAM)


def parse_error_reason(url: str) -> AuthErrorReason:
    """Return the reason code carried by an error-surface URL."""
    return AuthErrorReason.from_code(_query_value(url, REASON_PARAM))


def error_path(reason: AuthErrorReason) -> str:
    """App-relative path of the error surface for *reason*."""
    return f"{ERROR_PATH}?{urlencode({REASON_PARAM: reason.value})}"
