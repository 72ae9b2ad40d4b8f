from __future__ import annotations

import pytest

from mergesplit import STAMPED_METADATA, merge_documents
from mergesplit import document
from mergesplit.exceptions import ProcessingError, ValidationError
from mergesplit.merge.exceptions import NotEnoughDocumentsError, PdfMergeError


def test_merge_documents_concatenates_pages_in_order(pdf_factory, page_widths) -> None:
    first = pdf_factory([100, 101])
    second = pdf_factory([200])
    third = pdf_factory([300, 301, 302])

    merged = merge_documents([first, second, third])

    assert page_widths(merged) == [100, 101, 200, 300, 301, 302]


def test_merge_documents_stamps_metadata(sample_pdf, pdf_factory, read_metadata) -> None:
    merged = merge_documents([sample_pdf, pdf_factory([150])])

    metadata = read_metadata(merged)
    for key, value in STAMPED_METADATA.items():
        assert metadata[key] == value


def test_merge_documents_accepts_empty_inputs(empty_pdf, sample_pdf, page_widths) -> None:
    merged = merge_documents([empty_pdf, sample_pdf])
    assert page_widths(merged) == [100, 101, 102, 103, 104]


@pytest.mark.parametrize("count", [0, 1])
def test_merge_documents_requires_two_inputs(
    monkeypatch: pytest.MonkeyPatch, sample_pdf: bytes, count: int
) -> None:
    def fail_reader(*args, **kwargs):
        raise AssertionError("PDF engine must not be called")

    monkeypatch.setattr(document, "PdfReader", fail_reader)

    with pytest.raises(NotEnoughDocumentsError) as excinfo:
        merge_documents([sample_pdf] * count)

    assert str(excinfo.value) == "Upload at least 2 PDFs"
    assert isinstance(excinfo.value, ValidationError)


def test_merge_documents_rejects_invalid_pdf(sample_pdf: bytes) -> None:
    with pytest.raises(PdfMergeError) as excinfo:
        merge_documents([sample_pdf, b"not a pdf"])

    assert isinstance(excinfo.value, ProcessingError)
    assert str(excinfo.value)
