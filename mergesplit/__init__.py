"""Merge PDF documents together or split one into fixed-size parts."""

from __future__ import annotations

from . import merge, split
from .document import copy_pages, load_document, serialize
from .exceptions import (
    AuthError,
    MergeSplitError,
    PdfLoadError,
    ProcessingError,
    ValidationError,
)
from .merge import MIN_DOCUMENTS, NotEnoughDocumentsError, PdfMergeError, merge_documents
from .metadata import SERVICE_NAME, STAMPED_METADATA, stamp_metadata
from .split import (
    MissingDocumentError,
    PageRange,
    PdfSplitError,
    SplitOptions,
    archive_filename,
    partition_pages,
    split_document,
    split_to_zip,
    stream_zip,
)

__all__ = [
    "merge",
    "split",
    "merge_documents",
    "split_document",
    "split_to_zip",
    "stream_zip",
    "partition_pages",
    "archive_filename",
    "load_document",
    "copy_pages",
    "serialize",
    "stamp_metadata",
    "SplitOptions",
    "PageRange",
    "MIN_DOCUMENTS",
    "SERVICE_NAME",
    "STAMPED_METADATA",
    "MergeSplitError",
    "ValidationError",
    "ProcessingError",
    "PdfLoadError",
    "AuthError",
    "NotEnoughDocumentsError",
    "PdfMergeError",
    "MissingDocumentError",
    "PdfSplitError",
]
