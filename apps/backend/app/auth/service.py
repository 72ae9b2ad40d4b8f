"""Pre-shared key verification."""

from __future__ import annotations

import logging
import secrets

from mergesplit.exceptions import AuthError

LOGGER = logging.getLogger("mergesplit.auth")

AUTH_FAILURE_MESSAGE = "Invalid or missing API key"


class InternalKeyVerifier:
    """Checks request keys against the key configured for the service."""

    def __init__(self, expected_key: str | None):
        self._expected_key = expected_key
        if not expected_key:
            LOGGER.warning("No internal API key configured; protected routes will reject every request")

    @property
    def configured(self) -> bool:
        return bool(self._expected_key)

    def verify(self, provided_key: str | None) -> None:
        """Raise :class:`AuthError` unless ``provided_key`` matches the configured key."""

        if not self._expected_key or not provided_key:
            raise AuthError(AUTH_FAILURE_MESSAGE)
        if not secrets.compare_digest(provided_key.encode("utf-8"), self._expected_key.encode("utf-8")):
            raise AuthError(AUTH_FAILURE_MESSAGE)


__all__ = ["AUTH_FAILURE_MESSAGE", "InternalKeyVerifier"]
