"""Merge utilities for the :mod:`mergesplit` toolkit."""

from __future__ import annotations

from .exceptions import NotEnoughDocumentsError, PdfMergeError
from .merger import MIN_DOCUMENTS, merge_documents

__all__ = [
    "merge_documents",
    "MIN_DOCUMENTS",
    "NotEnoughDocumentsError",
    "PdfMergeError",
]
