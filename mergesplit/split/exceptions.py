"""Custom exceptions raised by :mod:`mergesplit.split`."""

from __future__ import annotations

from ..exceptions import ProcessingError, ValidationError


class MissingDocumentError(ValidationError):
    """Raised when a split is requested without a source PDF."""

    def __init__(self) -> None:
        super().__init__("Upload a PDF")


class PdfSplitError(ProcessingError):
    """Raised when a part cannot be produced from the source PDF."""
