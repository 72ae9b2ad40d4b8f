"""Utility helpers for :mod:`mergesplit.split`."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import List, Optional

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")
_EXTENSION = re.compile(r"\.[^/.]+$")


def parse_int(value: object) -> int:
    """Parse the leading integer of ``value`` or return ``0``.

    Mirrors form handling in browsers: ``"3"`` and ``"3 parts"`` give ``3``,
    ``"2.9"`` gives ``2`` and blanks or words give ``0``.
    """

    if value is None:
        return 0
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    match = _LEADING_INT.match(str(value))
    if not match:
        return 0
    return int(match.group(1))


@dataclass(frozen=True)
class SplitOptions:
    """Requested granularity of a split.

    ``parts`` is the number of output files and ``pages_per_split`` the page
    count of each. Zero or less means "not given". When both are given ``parts``
    wins, and when neither is given every page becomes its own file.
    """

    parts: int = 0
    pages_per_split: int = 0

    @classmethod
    def from_form(cls, parts: Optional[object], pages_per_split: Optional[object]) -> "SplitOptions":
        """Build options from raw form values, treating non-positive values as absent."""

        return cls(
            parts=max(parse_int(parts), 0),
            pages_per_split=max(parse_int(pages_per_split), 0),
        )

    def resolve(self, total_pages: int) -> int:
        """Return the number of pages each part of a ``total_pages`` document holds."""

        parts = max(self.parts, 0)
        pages_per_split = max(self.pages_per_split, 0)
        if not parts and not pages_per_split:
            pages_per_split = 1
        if parts > 0:
            pages_per_split = math.ceil(total_pages / parts)
        return pages_per_split


@dataclass(frozen=True)
class PageRange:
    """Half-open range ``[start, stop)`` of zero-based page indices."""

    number: int
    start: int
    stop: int

    @property
    def indices(self) -> range:
        return range(self.start, self.stop)

    @property
    def page_count(self) -> int:
        return self.stop - self.start

    @property
    def filename(self) -> str:
        return f"part_{self.number}.pdf"


def partition_pages(total_pages: int, pages_per_split: int) -> List[PageRange]:
    """Split ``[0, total_pages)`` into consecutive ranges of ``pages_per_split`` pages.

    The final range is shorter when the division is not exact. An empty
    document yields no ranges.
    """

    if total_pages <= 0:
        return []
    if pages_per_split < 1:
        raise ValueError(f"pages_per_split must be at least 1, got {pages_per_split}")

    ranges: List[PageRange] = []
    for start in range(0, total_pages, pages_per_split):
        ranges.append(
            PageRange(
                number=start // pages_per_split + 1,
                start=start,
                stop=min(start + pages_per_split, total_pages),
            )
        )
    return ranges


def archive_filename(original: Optional[str], default: str = "document") -> str:
    """Return the download name for the parts archive of ``original``."""

    base = _EXTENSION.sub("", original or "") or default
    return f"{base}-by-parts.zip"


__all__ = [
    "PageRange",
    "SplitOptions",
    "archive_filename",
    "parse_int",
    "partition_pages",
]
