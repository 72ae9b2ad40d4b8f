"""Document-info stamping applied to every generated PDF."""

from __future__ import annotations

import logging
from typing import Mapping

from pypdf import PdfWriter

LOGGER = logging.getLogger("mergesplit.metadata")

SERVICE_NAME = "Merge-Split-API"

STAMPED_METADATA: Mapping[str, str] = {
    "/Producer": SERVICE_NAME,
    "/Creator": SERVICE_NAME,
    "/Keywords": "merge-split-api, pdf, generated",
}


def stamp_metadata(writer: PdfWriter) -> PdfWriter:
    """Write :data:`STAMPED_METADATA` into ``writer`` and return it.

    Only the document information dictionary is touched; page content and
    page count are left alone.
    """

    writer.add_metadata(dict(STAMPED_METADATA))
    LOGGER.debug("Stamped metadata on document with %d pages", len(writer.pages))
    return writer


__all__ = ["SERVICE_NAME", "STAMPED_METADATA", "stamp_metadata"]
