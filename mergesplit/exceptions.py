"""Exception hierarchy shared by the :mod:`mergesplit` packages."""

from __future__ import annotations


class MergeSplitError(Exception):
    """Base exception for all errors raised by :mod:`mergesplit`."""


class ValidationError(MergeSplitError):
    """Raised when a request carries malformed or insufficient input."""


class ProcessingError(MergeSplitError):
    """Raised when the PDF engine or archive writer fails."""


class PdfLoadError(ProcessingError):
    """Raised when uploaded bytes cannot be opened as a PDF."""


class AuthError(MergeSplitError):
    """Raised when a request does not carry a valid pre-shared key."""


__all__ = [
    "MergeSplitError",
    "ValidationError",
    "ProcessingError",
    "PdfLoadError",
    "AuthError",
]
