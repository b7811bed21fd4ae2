"""In-memory model of a PNG chunk stream.

A :class:`Png` holds the ordered chunks of a PNG file after the 8-byte
signature. It does not decode pixels or check what individual chunks mean.
It only splits the byte stream into CRC-verified records, lets callers add,
look up and remove chunks, and writes the stream back out byte for byte.
"""

from __future__ import annotations

import logging
import struct
from typing import Iterable, Iterator

from .chunk import RECORD_OVERHEAD, Chunk
from .chunk_type import ChunkType
from .errors import BadSignature, ChunkNotFound, TruncatedChunk

logger = logging.getLogger(__name__)

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


class Png:
    """The signature plus the chunks of a PNG file, in file order."""

    def __init__(self) -> None:
        self._chunks: list[Chunk] = []

    @classmethod
    def from_chunks(cls, chunks: Iterable[Chunk]) -> "Png":
        png = cls()
        png._chunks.extend(chunks)
        return png

    @classmethod
    def parse(cls, data: bytes) -> "Png":
        """Split ``data`` into chunks and return the resulting stream.

        The signature must be present. Each record after it must fit in the
        remaining bytes, and the records must end exactly at the end of the
        data. A stream with no chunks at all is accepted.
        """

        data = bytes(data)
        if data[: len(PNG_SIGNATURE)] != PNG_SIGNATURE:
            raise BadSignature("Data does not start with the PNG signature")

        offset = len(PNG_SIGNATURE)
        chunks: list[Chunk] = []
        while offset < len(data):
            remaining = len(data) - offset
            if remaining < RECORD_OVERHEAD:
                raise TruncatedChunk(
                    f"{remaining} trailing bytes at offset {offset} cannot form a chunk"
                )
            (length,) = struct.unpack(">I", data[offset : offset + 4])
            if length + RECORD_OVERHEAD > remaining:
                raise TruncatedChunk(
                    f"Chunk at offset {offset} declares {length} data bytes but only "
                    f"{remaining - RECORD_OVERHEAD} are available"
                )
            end = offset + length + RECORD_OVERHEAD
            chunk = Chunk.parse(data[offset + 4 : end])
            logger.debug("parsed %s chunk (%d bytes) at offset %d", chunk.chunk_type, length, offset)
            chunks.append(chunk)
            offset = end

        return cls.from_chunks(chunks)

    @property
    def header(self) -> bytes:
        return PNG_SIGNATURE

    @property
    def chunks(self) -> tuple[Chunk, ...]:
        return tuple(self._chunks)

    def append_chunk(self, chunk: Chunk) -> None:
        self._chunks.append(chunk)
        logger.debug("appended %s chunk (%d bytes)", chunk.chunk_type, chunk.length())

    def chunk_by_type(self, chunk_type: str | ChunkType) -> Chunk | None:
        """Return the first chunk whose type is ``chunk_type``, or ``None``."""

        wanted = str(chunk_type)
        for chunk in self._chunks:
            if str(chunk.chunk_type) == wanted:
                return chunk
        return None

    def remove_first_chunk(self, chunk_type: str | ChunkType) -> Chunk:
        """Remove and return the first chunk whose type is ``chunk_type``.

        The remaining chunks keep their order. When nothing matches, the
        stream is left untouched and :class:`ChunkNotFound` is raised.
        """

        wanted = str(chunk_type)
        for index, chunk in enumerate(self._chunks):
            if str(chunk.chunk_type) == wanted:
                del self._chunks[index]
                logger.debug("removed %s chunk at position %d", wanted, index)
                return chunk
        raise ChunkNotFound(f"No {wanted!r} chunk in PNG data")

    def as_bytes(self) -> bytes:
        data = PNG_SIGNATURE + b"".join(chunk.as_bytes() for chunk in self._chunks)
        logger.debug("serialised %d chunks into %d bytes", len(self._chunks), len(data))
        return data

    def __bytes__(self) -> bytes:
        return self.as_bytes()

    def __iter__(self) -> Iterator[Chunk]:
        return iter(self.chunks)

    def __len__(self) -> int:
        return len(self._chunks)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Png):
            return NotImplemented
        return self._chunks == other._chunks

    def __repr__(self) -> str:
        return f"Png(chunks={self._chunks!r})"

    def __str__(self) -> str:
        return "\n".join(str(chunk) for chunk in self._chunks)


def parse_png(data: bytes) -> Png:
    """Parse raw PNG bytes into a :class:`Png`."""

    return Png.parse(data)


__all__ = ["PNG_SIGNATURE", "Png", "parse_png"]
