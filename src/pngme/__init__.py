"""Read, modify and write the chunk stream of PNG files."""

from .chunk import Chunk
from .chunk_type import ChunkType
from .errors import (
    BadSignature,
    ChecksumMismatch,
    ChunkNotFound,
    FormatError,
    InvalidChunkType,
    InvalidLength,
    InvalidUtf8,
    TooShort,
    TruncatedChunk,
)
from .png import PNG_SIGNATURE, Png, parse_png
from .storage import load_png, save_png

__all__ = [
    "BadSignature",
    "ChecksumMismatch",
    "Chunk",
    "ChunkNotFound",
    "ChunkType",
    "FormatError",
    "InvalidChunkType",
    "InvalidLength",
    "InvalidUtf8",
    "PNG_SIGNATURE",
    "Png",
    "TooShort",
    "TruncatedChunk",
    "load_png",
    "parse_png",
    "save_png",
]
