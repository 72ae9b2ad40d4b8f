"""Thin helpers around :mod:`pypdf` for in-memory documents."""

from __future__ import annotations

import io
import logging
from typing import Iterable

from pypdf import PasswordType, PdfReader, PdfWriter

from .exceptions import PdfLoadError

LOGGER = logging.getLogger("mergesplit.document")


def load_document(data: bytes) -> PdfReader:
    """Open ``data`` as a PDF, decrypting with the empty password if needed.

    Raises:
        PdfLoadError: If the bytes are not a readable PDF.
    """

    try:
        reader = PdfReader(io.BytesIO(data))
    except Exception as exc:
        LOGGER.error("Failed to read PDF (%d bytes): %s", len(data), exc)
        raise PdfLoadError(str(exc) or "Unable to read PDF") from exc

    if reader.is_encrypted:
        LOGGER.debug("Attempting to decrypt encrypted PDF")
        try:
            result = reader.decrypt("")
        except Exception as exc:  # pragma: no cover - decrypt errors vary
            LOGGER.error("Failed to decrypt PDF: %s", exc)
            raise PdfLoadError("Unable to decrypt encrypted PDF") from exc
        if result == PasswordType.NOT_DECRYPTED:
            raise PdfLoadError("Unable to decrypt encrypted PDF")
    return reader


def copy_pages(writer: PdfWriter, reader: PdfReader, indices: Iterable[int]) -> int:
    """Append the pages of ``reader`` at ``indices`` to ``writer`` in order."""

    copied = 0
    for index in indices:
        writer.add_page(reader.pages[index])
        copied += 1
    return copied


def serialize(writer: PdfWriter) -> bytes:
    """Return the bytes of ``writer`` as a complete PDF file."""

    buffer = io.BytesIO()
    writer.write(buffer)
    return buffer.getvalue()


__all__ = ["load_document", "copy_pages", "serialize"]
