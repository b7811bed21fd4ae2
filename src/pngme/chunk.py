"""Length-prefixed, CRC-protected PNG chunk records."""

from __future__ import annotations

import binascii
import struct
from dataclasses import dataclass

from .chunk_type import ChunkType
from .errors import ChecksumMismatch, InvalidUtf8, TooShort, TruncatedChunk

_LENGTH = struct.Struct(">I")
_CRC = struct.Struct(">I")

# length + type + crc around the payload of an on-disk record
RECORD_OVERHEAD = 12


def crc32(chunk_type: ChunkType, data: bytes) -> int:
    """Return the CRC-32 (ISO-HDLC) of a chunk type followed by its payload."""

    return binascii.crc32(data, binascii.crc32(chunk_type.bytes())) & 0xFFFFFFFF


@dataclass(frozen=True)
class Chunk:
    """A single chunk: its type and the opaque payload bytes.

    The length and CRC fields of the wire form are derived from the type and
    data every time they are needed, so a chunk can never carry a stale
    checksum.
    """

    chunk_type: ChunkType
    data: bytes = b""

    def __post_init__(self) -> None:
        if not isinstance(self.data, bytes):
            object.__setattr__(self, "data", bytes(self.data))

    def length(self) -> int:
        return len(self.data)

    def crc(self) -> int:
        return crc32(self.chunk_type, self.data)

    def data_as_string(self) -> str:
        try:
            return self.data.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise InvalidUtf8(f"{self.chunk_type} payload is not valid UTF-8: {exc}") from exc

    def as_bytes(self) -> bytes:
        """Serialise the chunk to its on-disk form.

        The record is the big-endian payload length, the four type bytes, the
        payload and the big-endian CRC, in that order.
        """

        return b"".join(
            (
                _LENGTH.pack(self.length()),
                self.chunk_type.bytes(),
                self.data,
                _CRC.pack(self.crc()),
            )
        )

    @classmethod
    def parse(cls, body: bytes) -> "Chunk":
        """Parse a chunk body made of the type, the payload and the CRC.

        The leading length field is not part of ``body``; the caller has
        already used it to find where the record ends. The type is validated
        before the checksum, so a bad type is reported as such even when the
        CRC happens to match.
        """

        body = bytes(body)
        if len(body) < 8:
            raise TooShort(f"Chunk body of {len(body)} bytes is shorter than 8 bytes")
        chunk_type = ChunkType.from_bytes(body[:4])
        chunk = cls(chunk_type, body[4:-4])
        (stored_crc,) = _CRC.unpack(body[-4:])
        if chunk.crc() != stored_crc:
            raise ChecksumMismatch(
                f"{chunk_type} chunk stores CRC {stored_crc:#010x}, computed {chunk.crc():#010x}"
            )
        return chunk

    @classmethod
    def from_bytes(cls, record: bytes) -> "Chunk":
        """Parse one complete on-disk record, length prefix included."""

        record = bytes(record)
        if len(record) < RECORD_OVERHEAD:
            raise TooShort(f"Chunk record of {len(record)} bytes is shorter than {RECORD_OVERHEAD} bytes")
        (length,) = _LENGTH.unpack(record[:4])
        if length + RECORD_OVERHEAD != len(record):
            raise TruncatedChunk(
                f"Chunk declares {length} data bytes but the record holds {len(record) - RECORD_OVERHEAD}"
            )
        return cls.parse(record[4:])

    def __bytes__(self) -> bytes:
        return self.as_bytes()

    def __str__(self) -> str:
        return f"[{self.chunk_type}] {self.data!r}"


__all__ = ["Chunk", "RECORD_OVERHEAD", "crc32"]
