"""Merge functionality for the :mod:`mergesplit.merge` package."""

from __future__ import annotations

import logging
from typing import Sequence

from pypdf import PdfWriter

from ..document import copy_pages, load_document, serialize
from ..exceptions import PdfLoadError
from ..metadata import stamp_metadata
from .exceptions import NotEnoughDocumentsError, PdfMergeError

LOGGER = logging.getLogger("mergesplit.merge")

MIN_DOCUMENTS = 2


def merge_documents(sources: Sequence[bytes]) -> bytes:
    """Concatenate every page of ``sources`` into one PDF and return its bytes.

    Args:
        sources: Raw PDF files in the order their pages should appear.

    Raises:
        NotEnoughDocumentsError: If fewer than two sources are given. No
            document is opened in that case.
        PdfMergeError: If any source cannot be loaded, copied or written.
    """

    if len(sources) < MIN_DOCUMENTS:
        raise NotEnoughDocumentsError(MIN_DOCUMENTS)

    writer = PdfWriter()
    for position, data in enumerate(sources, start=1):
        try:
            reader = load_document(data)
            copied = copy_pages(writer, reader, range(len(reader.pages)))
        except PdfLoadError as exc:
            raise PdfMergeError(str(exc)) from exc
        except Exception as exc:  # pragma: no cover - dependency exceptions vary
            LOGGER.error("Failed to copy pages from document %d: %s", position, exc)
            raise PdfMergeError(str(exc)) from exc
        LOGGER.debug("Added %d pages from document %d", copied, position)

    stamp_metadata(writer)
    try:
        merged = serialize(writer)
    except Exception as exc:  # pragma: no cover - IO errors vary
        LOGGER.error("Failed to write merged PDF: %s", exc)
        raise PdfMergeError(str(exc)) from exc

    LOGGER.info("Merged %d PDFs into %d pages", len(sources), len(writer.pages))
    return merged


__all__ = ["MIN_DOCUMENTS", "merge_documents"]
