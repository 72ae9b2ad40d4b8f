"""FastAPI application exposing the merge and split endpoints."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator, List
from urllib.parse import quote

import uvicorn
from fastapi import APIRouter, FastAPI, File, Form, Request, UploadFile, status
from fastapi.exceptions import RequestValidationError
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse, Response, StreamingResponse
from pydantic import BaseModel

from mergesplit import (
    MIN_DOCUMENTS,
    SERVICE_NAME,
    MissingDocumentError,
    NotEnoughDocumentsError,
    ProcessingError,
    SplitOptions,
    ValidationError,
    archive_filename,
    merge_documents,
    split_to_zip,
)

from .auth import InternalKeyVerifier, install_internal_key_gate
from .config import Settings, configure_logging, get_settings

LOGGER = logging.getLogger("mergesplit.api")

MERGED_FILENAME = "merged.pdf"


class HealthStatus(BaseModel):
    """Payload returned by the health endpoint."""

    status: str
    service: str


class ErrorResponse(BaseModel):
    """Body of every error response."""

    error: str


def _safe_filename(filename: str | None, default: str) -> str:
    """Return a filesystem-safe filename derived from user input."""

    if not filename:
        return default

    candidate = Path(filename).name
    return candidate or default


def _content_disposition(filename: str) -> str:
    """Build an ``attachment`` disposition.

    Names outside Latin-1, or holding characters that would break the quoted
    form, are sent as RFC 5987 ``filename*``.
    """

    try:
        filename.encode("latin-1")
        quotable = not ('"' in filename or "\\" in filename)
    except UnicodeEncodeError:
        quotable = False
    if not quotable:
        return f"attachment; filename*=utf-8''{quote(filename)}"
    return f'attachment; filename="{filename}"'


def _file_uploads(values: Iterable[UploadFile | str] | None) -> list[UploadFile]:
    """Keep uploaded files only, dropping text values and parts without a filename."""

    return [
        value
        for value in values or []
        if not isinstance(value, str) and getattr(value, "filename", None)
    ]


def _log_stream_failures(chunks: Iterator[bytes], filename: str) -> Iterator[bytes]:
    """Pass ``chunks`` through, logging a failure that cuts the stream short."""

    try:
        yield from chunks
    except Exception:
        LOGGER.exception("Streaming %s aborted after headers were sent", filename)
        raise


router = APIRouter(prefix="/pdf", tags=["pdf"])


@router.post(
    "/merge",
    response_class=Response,
    summary="Merge PDFs",
    response_description="The merged PDF document.",
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def merge_pdfs(
    pdfs: List[UploadFile | str] | None = File(None, description="PDF files to merge, in order."),
) -> Response:
    """Concatenate the pages of every uploaded PDF into one document."""

    uploads = _file_uploads(pdfs)
    if len(uploads) < MIN_DOCUMENTS:
        raise NotEnoughDocumentsError(MIN_DOCUMENTS)

    sources = [await upload.read() for upload in uploads]
    LOGGER.info("Merging %d uploads", len(sources))
    merged = await run_in_threadpool(merge_documents, sources)

    return Response(
        content=merged,
        media_type="application/pdf",
        headers={"Content-Disposition": _content_disposition(MERGED_FILENAME)},
    )


@router.post(
    "/split",
    response_class=StreamingResponse,
    summary="Split a PDF into parts",
    response_description="Zip archive containing part_1.pdf, part_2.pdf, ...",
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def split_pdf(
    pdf: UploadFile | str | None = File(None, description="Source PDF to split."),
    parts: str | None = Form(None, description="Number of output files."),
    pages_per_split: str | None = Form(
        None,
        alias="pagesPerSplit",
        description="Pages per output file. Ignored when 'parts' is given.",
    ),
) -> StreamingResponse:
    """Split the uploaded PDF into consecutive parts streamed back as a zip archive."""

    uploads = _file_uploads([pdf] if pdf is not None else None)
    if not uploads:
        raise MissingDocumentError()

    upload = uploads[0]
    data = await upload.read()
    options = SplitOptions.from_form(parts, pages_per_split)
    filename = archive_filename(_safe_filename(upload.filename, "document.pdf"))
    LOGGER.info(
        "Splitting %s (parts=%d, pages_per_split=%d)",
        upload.filename,
        options.parts,
        options.pages_per_split,
    )

    chunks = await run_in_threadpool(split_to_zip, data, options)

    return StreamingResponse(
        _log_stream_failures(chunks, filename),
        media_type="application/zip",
        headers={"Content-Disposition": _content_disposition(filename)},
    )


async def _validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    LOGGER.info("Rejected %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": str(exc)})


async def _request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = "; ".join(
        f"{'.'.join(str(part) for part in error.get('loc', ()))}: {error.get('msg', 'invalid value')}"
        for error in exc.errors()
    )
    LOGGER.info("Rejected %s %s: %s", request.method, request.url.path, message)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": message or "Invalid request"},
    )


async def _processing_error_handler(request: Request, exc: ProcessingError) -> JSONResponse:
    LOGGER.error("Processing failed for %s %s: %s", request.method, request.url.path, exc, exc_info=exc)
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": str(exc)})


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application for ``settings`` (defaults to the environment)."""

    settings = settings or get_settings()
    app = FastAPI(title=SERVICE_NAME, version="1.0.0")
    app.state.settings = settings

    @app.get("/health", response_model=HealthStatus)
    async def health() -> HealthStatus:
        """Lightweight health endpoint for uptime checks."""
        return HealthStatus(status="OK", service=SERVICE_NAME)

    app.include_router(router)
    app.add_exception_handler(ValidationError, _validation_error_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_error_handler)
    app.add_exception_handler(ProcessingError, _processing_error_handler)
    install_internal_key_gate(
        app,
        InternalKeyVerifier(settings.internal_api_key),
        header_name=settings.api_key_header,
    )
    return app


app = create_app()


def run() -> None:
    """Serve :data:`app` on the configured host and port."""

    settings = get_settings()
    configure_logging(settings.log_level)
    LOGGER.info("Merge/Split API running on port %s", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":  # pragma: no cover
    run()
