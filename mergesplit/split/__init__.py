"""Split utilities for the :mod:`mergesplit` toolkit."""

from __future__ import annotations

from .archive import stream_zip
from .exceptions import MissingDocumentError, PdfSplitError
from .splitter import build_part, iter_split_parts, plan_split, split_document, split_to_zip
from .utils import PageRange, SplitOptions, archive_filename, parse_int, partition_pages

__all__ = [
    "split_document",
    "split_to_zip",
    "plan_split",
    "build_part",
    "iter_split_parts",
    "stream_zip",
    "partition_pages",
    "parse_int",
    "archive_filename",
    "PageRange",
    "SplitOptions",
    "MissingDocumentError",
    "PdfSplitError",
]
