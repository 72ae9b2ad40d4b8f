"""Runtime configuration for the merge/split service."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Mapping

DEFAULT_PORT = 3000
DEFAULT_HOST = "0.0.0.0"
DEFAULT_API_KEY_HEADER = "x-internal-api-key"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


@dataclass(frozen=True)
class Settings:
    """Process-wide settings, built once at startup."""

    port: int = DEFAULT_PORT
    host: str = DEFAULT_HOST
    internal_api_key: str | None = None
    api_key_header: str = DEFAULT_API_KEY_HEADER
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        """Read settings from ``environ`` (defaults to :data:`os.environ`)."""

        env = os.environ if environ is None else environ

        raw_port = env.get("PORT", "").strip()
        try:
            port = int(raw_port) if raw_port else DEFAULT_PORT
        except ValueError as exc:
            raise ValueError(f"PORT must be an integer, got {raw_port!r}") from exc

        return cls(
            port=port,
            host=env.get("HOST") or DEFAULT_HOST,
            internal_api_key=env.get("INTERNAL_API_KEY") or None,
            api_key_header=(env.get("INTERNAL_API_KEY_HEADER") or DEFAULT_API_KEY_HEADER).lower(),
            log_level=(env.get("LOG_LEVEL") or "INFO").upper(),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the cached settings loaded from the environment."""

    return Settings.from_env()


def configure_logging(level: str = "INFO") -> None:
    """Configure service-wide logging."""
    logging.basicConfig(level=level, format=LOG_FORMAT)


__all__ = ["Settings", "configure_logging", "get_settings"]
