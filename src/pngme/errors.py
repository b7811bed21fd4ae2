"""Exceptions raised by the PNG chunk codec.

Every failure the codec can report is a subclass of :class:`FormatError`, so
callers may either catch the whole family or single out one kind of failure.
"""

from __future__ import annotations


class FormatError(ValueError):
    """Base class for every malformed-input error raised by :mod:`pngme`."""


class BadSignature(FormatError):
    """The data does not start with the 8-byte PNG signature."""


class TruncatedChunk(FormatError):
    """A chunk record runs past the end of the available data."""


class TooShort(TruncatedChunk):
    """A chunk body is too short to hold a type and a CRC."""


class InvalidChunkType(FormatError):
    """A chunk type contains a byte that is not an ASCII letter."""


class InvalidLength(FormatError):
    """A chunk type was given with a length other than four bytes."""


class ChecksumMismatch(FormatError):
    """The stored CRC of a chunk does not match its contents."""


class InvalidUtf8(FormatError):
    """A chunk payload was requested as text but is not valid UTF-8."""


class ChunkNotFound(FormatError):
    """No chunk with the requested type exists in the stream."""


__all__ = [
    "BadSignature",
    "ChecksumMismatch",
    "ChunkNotFound",
    "FormatError",
    "InvalidChunkType",
    "InvalidLength",
    "InvalidUtf8",
    "TooShort",
    "TruncatedChunk",
]
