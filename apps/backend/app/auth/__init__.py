"""Pre-shared key authentication for the merge/split service."""

from .middleware import PUBLIC_PATHS, install_internal_key_gate
from .service import AUTH_FAILURE_MESSAGE, InternalKeyVerifier

__all__ = [
    "AUTH_FAILURE_MESSAGE",
    "InternalKeyVerifier",
    "PUBLIC_PATHS",
    "install_internal_key_gate",
]
