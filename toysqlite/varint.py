"""Low-level readers for the big-endian, variable-length encodings used on disk."""

from __future__ import annotations

from typing import BinaryIO

__all__ = ["read_exact", "read_varint"]


def read_exact(reader: BinaryIO, size: int) -> bytes:
    """Read exactly ``size`` bytes from ``reader`` or raise ``EOFError``."""
    data = reader.read(size)
    if len(data) != size:
        raise EOFError(f"expected {size} bytes, got {len(data)}")
    return data


def read_varint(reader: BinaryIO) -> tuple[int, int]:
    """Read a variable-length integer.

    Each byte contributes its low seven bits; a set high bit means another
    byte follows. Returns the decoded value and the number of bytes consumed.
    """
    result = 0
    bytes_read = 0
    while True:
        (byte,) = read_exact(reader, 1)
        bytes_read += 1
        result = (result << 7) | (byte & 0x7F)
        if not byte & 0x80:
            return result, bytes_read