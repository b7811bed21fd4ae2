"""Four-letter PNG chunk type codes and their property bits."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import InvalidChunkType, InvalidLength

# Bit 5 of each byte is the ASCII case bit; it carries the chunk properties.
PROPERTY_BIT = 0b0010_0000


def _is_alpha(byte: int) -> bool:
    return 65 <= byte <= 90 or 97 <= byte <= 122


def _property_bit_set(byte: int) -> bool:
    return bool(byte & PROPERTY_BIT)


@dataclass(frozen=True, order=True)
class ChunkType:
    """A validated 4-byte chunk type such as ``IHDR`` or ``ruSt``.

    Instances compare, sort and hash on their raw bytes. Use
    :meth:`from_bytes` or :meth:`from_str` to build one; both reject codes
    containing anything other than ASCII letters.
    """

    code: bytes

    @classmethod
    def from_bytes(cls, raw: bytes) -> "ChunkType":
        raw = bytes(raw)
        if len(raw) != 4:
            raise InvalidLength(f"Chunk type must be 4 bytes, got {len(raw)}")
        if not all(_is_alpha(byte) for byte in raw):
            raise InvalidChunkType(f"Chunk type {raw!r} contains non-alphabetic bytes")
        return cls(raw)

    @classmethod
    def from_str(cls, text: str) -> "ChunkType":
        try:
            raw = text.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise InvalidChunkType(f"Chunk type {text!r} cannot be encoded: {exc}") from exc
        if len(raw) != 4:
            raise InvalidLength(f"Chunk type {text!r} is {len(raw)} bytes long, expected 4")
        return cls.from_bytes(raw)

    def bytes(self) -> bytes:
        return self.code

    def is_critical(self) -> bool:
        return not _property_bit_set(self.code[0])

    def is_public(self) -> bool:
        return not _property_bit_set(self.code[1])

    def is_reserved_bit_valid(self) -> bool:
        return not _property_bit_set(self.code[2])

    def is_safe_to_copy(self) -> bool:
        return _property_bit_set(self.code[3])

    def is_valid(self) -> bool:
        """Return ``True`` when the code conforms to the current PNG version.

        Alphabetic bytes are already enforced on construction, which leaves
        the reserved bit as the only rule to check.
        """

        return self.is_reserved_bit_valid()

    def __bytes__(self) -> bytes:
        return self.code

    def __str__(self) -> str:
        return self.code.decode("ascii")


__all__ = ["ChunkType", "PROPERTY_BIT"]
