"""Streaming ZIP output for split results."""

from __future__ import annotations

import io
import logging
import zipfile
from typing import Iterable, Iterator, List, Tuple

LOGGER = logging.getLogger("mergesplit.split")

COMPRESSION_LEVEL = 9


class _ChunkSink(io.RawIOBase):
    """Unseekable write target that hands written bytes back in chunks."""

    def __init__(self) -> None:
        super().__init__()
        self._chunks: List[bytes] = []

    def writable(self) -> bool:
        return True

    def write(self, data) -> int:  # type: ignore[override]
        self._chunks.append(bytes(data))
        return len(data)

    def drain(self) -> Iterator[bytes]:
        chunks, self._chunks = self._chunks, []
        for chunk in chunks:
            if chunk:
                yield chunk


def stream_zip(
    entries: Iterable[Tuple[str, bytes]],
    *,
    compresslevel: int = COMPRESSION_LEVEL,
) -> Iterator[bytes]:
    """Yield a deflated ZIP archive holding ``entries`` as it is written.

    Entries are consumed lazily, one at a time, and their compressed bytes
    are yielded before the next entry is requested. The central directory
    is yielded last, once ``entries`` is exhausted.
    """

    sink = _ChunkSink()
    count = 0
    with zipfile.ZipFile(
        sink,
        mode="w",
        compression=zipfile.ZIP_DEFLATED,
        compresslevel=compresslevel,
    ) as archive:
        for name, data in entries:
            archive.writestr(name, data)
            count += 1
            LOGGER.debug("Appended %s (%d bytes) to archive", name, len(data))
            yield from sink.drain()
    yield from sink.drain()
    LOGGER.info("Finalized archive with %d entries", count)


__all__ = ["COMPRESSION_LEVEL", "stream_zip"]
