"""HTTP middleware that guards every route behind the internal API key."""

from __future__ import annotations

import logging
from typing import Awaitable, Callable, Iterable

from fastapi import FastAPI, Request, Response, status
from fastapi.responses import JSONResponse

from mergesplit.exceptions import AuthError

from .service import InternalKeyVerifier

LOGGER = logging.getLogger("mergesplit.auth")

PUBLIC_PATHS = frozenset({"/health"})


def install_internal_key_gate(
    app: FastAPI,
    verifier: InternalKeyVerifier,
    *,
    header_name: str,
    public_paths: Iterable[str] = PUBLIC_PATHS,
) -> None:
    """Reject requests without a valid key before any route or body parsing runs."""

    exempt = frozenset(public_paths)

    @app.middleware("http")
    async def verify_internal_key(
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        if request.url.path in exempt:
            return await call_next(request)

        try:
            verifier.verify(request.headers.get(header_name))
        except AuthError as exc:
            LOGGER.warning("Rejected %s %s: %s", request.method, request.url.path, exc)
            return JSONResponse(
                status_code=status.HTTP_401_UNAUTHORIZED,
                content={"error": str(exc)},
            )
        return await call_next(request)


__all__ = ["PUBLIC_PATHS", "install_internal_key_gate"]
