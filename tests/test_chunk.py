from __future__ import annotations

import binascii
import struct

import pytest

from pngme import (
    ChecksumMismatch,
    Chunk,
    ChunkType,
    InvalidChunkType,
    InvalidUtf8,
    TooShort,
    TruncatedChunk,
)

MESSAGE = b"This is where your secret message will be!"
MESSAGE_CRC = 2882656334


def make_body(chunk_type: bytes, data: bytes, crc: int) -> bytes:
    return chunk_type + data + struct.pack(">I", crc)


def make_record(chunk_type: bytes, data: bytes, crc: int) -> bytes:
    return struct.pack(">I", len(data)) + make_body(chunk_type, data, crc)


def testing_chunk() -> Chunk:
    return Chunk.parse(make_body(b"RuSt", MESSAGE, MESSAGE_CRC))


def test_new_chunk() -> None:
    chunk = Chunk(ChunkType.from_str("RuSt"), MESSAGE)
    assert chunk.length() == 42
    assert chunk.crc() == MESSAGE_CRC


def test_chunk_accessors() -> None:
    chunk = testing_chunk()
    assert chunk.length() == 42
    assert str(chunk.chunk_type) == "RuSt"
    assert chunk.data == MESSAGE
    assert chunk.crc() == MESSAGE_CRC


def test_chunk_data_as_string() -> None:
    assert testing_chunk().data_as_string() == "This is where your secret message will be!"


def test_chunk_data_as_string_rejects_invalid_utf8() -> None:
    chunk = Chunk(ChunkType.from_str("ruSt"), b"\xff\xfe")
    with pytest.raises(InvalidUtf8):
        chunk.data_as_string()
    assert chunk.data == b"\xff\xfe"


def test_chunk_crc_matches_independent_checksum() -> None:
    for code, data in [("IEND", b""), ("ruSt", b"hidden"), ("tEXt", bytes(range(256)))]:
        chunk = Chunk(ChunkType.from_str(code), data)
        assert chunk.crc() == binascii.crc32(code.encode("ascii") + data) & 0xFFFFFFFF


def test_chunk_as_bytes_layout() -> None:
    chunk = Chunk(ChunkType.from_str("RuSt"), MESSAGE)
    assert chunk.as_bytes() == make_record(b"RuSt", MESSAGE, MESSAGE_CRC)
    assert bytes(chunk) == chunk.as_bytes()


def test_empty_chunk_as_bytes() -> None:
    chunk = Chunk(ChunkType.from_str("IEND"))
    assert chunk.as_bytes() == bytes.fromhex("0000000049454e44ae426082")


def test_chunk_record_round_trip() -> None:
    chunk = Chunk(ChunkType.from_str("ruSt"), b"hidden")
    assert Chunk.from_bytes(chunk.as_bytes()) == chunk


def test_invalid_crc_is_rejected() -> None:
    with pytest.raises(ChecksumMismatch):
        Chunk.parse(make_body(b"RuSt", MESSAGE, MESSAGE_CRC - 1))


def test_flipped_payload_byte_is_rejected() -> None:
    record = bytearray(Chunk(ChunkType.from_str("RuSt"), MESSAGE).as_bytes())
    record[8 + 5] ^= 0x01
    with pytest.raises(ChecksumMismatch):
        Chunk.from_bytes(bytes(record))


def test_invalid_type_is_reported_before_checksum() -> None:
    data = b"payload"
    crc = binascii.crc32(b"Ru1t" + data) & 0xFFFFFFFF
    with pytest.raises(InvalidChunkType):
        Chunk.parse(make_body(b"Ru1t", data, crc))


@pytest.mark.parametrize("body", [b"", b"RuSt", b"RuSt\x00\x00\x00"])
def test_short_body_is_rejected(body: bytes) -> None:
    with pytest.raises(TooShort):
        Chunk.parse(body)


def test_record_with_wrong_declared_length_is_rejected() -> None:
    record = make_record(b"RuSt", MESSAGE, MESSAGE_CRC)
    with pytest.raises(TruncatedChunk):
        Chunk.from_bytes(record[:-1])
    with pytest.raises(TooShort):
        Chunk.from_bytes(record[:11])


def test_chunk_display() -> None:
    chunk = Chunk(ChunkType.from_str("ruSt"), b"hidden")
    assert str(chunk) == "[ruSt] b'hidden'"
