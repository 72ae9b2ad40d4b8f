"""Custom exceptions for the :mod:`mergesplit.merge` package."""

from __future__ import annotations

from ..exceptions import ProcessingError, ValidationError


class NotEnoughDocumentsError(ValidationError):
    """Raised when fewer documents than required are supplied for a merge."""

    def __init__(self, minimum: int) -> None:
        self.minimum = minimum
        super().__init__(f"Upload at least {minimum} PDFs")


class PdfMergeError(ProcessingError):
    """Raised when the merge operation fails."""
