from __future__ import annotations

import io
from pathlib import Path
from typing import Callable, Sequence
import sys

import pytest
from pypdf import PdfReader, PdfWriter

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


def _build_pdf(widths: Sequence[int], title: str | None = None) -> bytes:
    writer = PdfWriter()
    for width in widths:
        writer.add_blank_page(width=width, height=200)
    if title is not None:
        writer.add_metadata({"/Title": title})
    buffer = io.BytesIO()
    writer.write(buffer)
    return buffer.getvalue()


@pytest.fixture()
def pdf_factory() -> Callable[..., bytes]:
    """Build a PDF whose pages are identified by their widths."""

    def _create(widths: Sequence[int], title: str | None = None) -> bytes:
        return _build_pdf(widths, title)

    return _create


@pytest.fixture()
def sample_pdf() -> bytes:
    return _build_pdf([100, 101, 102, 103, 104], title="Sample")


@pytest.fixture()
def ten_page_pdf() -> bytes:
    return _build_pdf(list(range(100, 110)))


@pytest.fixture()
def empty_pdf() -> bytes:
    return _build_pdf([])


@pytest.fixture()
def page_widths() -> Callable[[bytes], list[int]]:
    """Return the page widths of a PDF, in page order."""

    def _widths(data: bytes) -> list[int]:
        reader = PdfReader(io.BytesIO(data))
        return [int(float(page.mediabox.width)) for page in reader.pages]

    return _widths


@pytest.fixture()
def read_metadata() -> Callable[[bytes], dict[str, str]]:
    def _metadata(data: bytes) -> dict[str, str]:
        reader = PdfReader(io.BytesIO(data))
        return {key: str(value) for key, value in (reader.metadata or {}).items()}

    return _metadata
