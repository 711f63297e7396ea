"""Persistent storage for the bearer credential.

The credential is stored under the fixed key ``token`` in a JSON file in the
platform-specific config directory (see :data:`paths.CREDENTIALS_FILE`).
All writes go through :func:`atomic_write` to avoid corrupted files on crash.
"""

from __future__ import annotations

from loguru import logger
from pydantic import ValidationError

from ..models.user import StoredCredential
from .paths import CREDENTIALS_FILE, atomic_write, ensure_parents


def load_credential() -> str | None:
    """Load the saved credential from disk.

    Returns ``None`` if the file does not exist, cannot be parsed, or holds
    an empty token.
    """
    if not CREDENTIALS_FILE.exists():
        return None
    try:
        stored = StoredCredential.model_validate_json(
            CREDENTIALS_FILE.read_text(encoding="utf-8")
        )
    except (OSError, ValidationError) as exc:
        logger.warning(f"Failed to load credential from {CREDENTIALS_FILE}: {exc}")
        return None
    return stored.token or None


def save_credential(token: str) -> None:
    """Persist *token* to disk atomically."""
    ensure_parents(CREDENTIALS_FILE)
    atomic_write(
        CREDENTIALS_FILE,
        StoredCredential(token=token).model_dump_json(indent=2),
    )
    logger.debug(f"Credential saved to {CREDENTIALS_FILE}")


def delete_credential() -> None:
    """Remove the persisted credential file, if it exists."""
    try:
        if CREDENTIALS_FILE.exists():
            CREDENTIALS_FILE.unlink()
            logger.debug(f"Credential deleted from {CREDENTIALS_FILE}")
    except OSError as exc:
        logger.error(f"Failed to delete credential at {CREDENTIALS_FILE}: {exc}")
