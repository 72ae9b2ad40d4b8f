"""Splitting utilities for :mod:`mergesplit`."""

from __future__ import annotations

import logging
from typing import Iterator, List, Sequence, Tuple

from pypdf import PdfReader, PdfWriter

from ..document import copy_pages, load_document, serialize
from ..metadata import stamp_metadata
from .archive import stream_zip
from .exceptions import PdfSplitError
from .utils import PageRange, SplitOptions, partition_pages

LOGGER = logging.getLogger("mergesplit.split")


def plan_split(reader: PdfReader, options: SplitOptions) -> List[PageRange]:
    """Return the page ranges ``reader`` is cut into under ``options``."""

    try:
        total_pages = len(reader.pages)
    except Exception as exc:  # pragma: no cover - malformed page trees vary
        LOGGER.error("Failed to count pages: %s", exc)
        raise PdfSplitError(str(exc)) from exc
    pages_per_split = options.resolve(total_pages)
    ranges = partition_pages(total_pages, pages_per_split)
    LOGGER.info(
        "Splitting %d pages into %d parts of up to %d pages",
        total_pages,
        len(ranges),
        pages_per_split,
    )
    return ranges


def build_part(reader: PdfReader, page_range: PageRange) -> bytes:
    """Copy ``page_range`` out of ``reader`` into a new stamped PDF."""

    writer = PdfWriter()
    try:
        copy_pages(writer, reader, page_range.indices)
        stamp_metadata(writer)
        data = serialize(writer)
    except Exception as exc:  # pragma: no cover - dependency exceptions vary
        LOGGER.error("Failed to build %s: %s", page_range.filename, exc)
        raise PdfSplitError(str(exc)) from exc
    LOGGER.debug(
        "Built %s from pages %d-%d", page_range.filename, page_range.start + 1, page_range.stop
    )
    return data


def iter_split_parts(
    reader: PdfReader,
    ranges: Sequence[PageRange],
) -> Iterator[Tuple[str, bytes]]:
    """Yield ``(filename, pdf_bytes)`` for each range, building one part at a time."""

    for page_range in ranges:
        yield page_range.filename, build_part(reader, page_range)


def split_document(data: bytes, options: SplitOptions | None = None) -> List[Tuple[str, bytes]]:
    """Split the PDF in ``data`` and return every part in order."""

    reader = load_document(data)
    ranges = plan_split(reader, options or SplitOptions())
    return list(iter_split_parts(reader, ranges))


def split_to_zip(data: bytes, options: SplitOptions | None = None) -> Iterator[bytes]:
    """Load ``data`` and return an iterator over the bytes of its parts archive.

    The source is loaded and partitioned before this function returns, so
    load failures surface immediately rather than part-way through the
    stream.
    """

    reader = load_document(data)
    ranges = plan_split(reader, options or SplitOptions())
    return stream_zip(iter_split_parts(reader, ranges))


__all__ = [
    "build_part",
    "iter_split_parts",
    "plan_split",
    "split_document",
    "split_to_zip",
]
