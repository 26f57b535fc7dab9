"""Serial types of record columns and decoding of their values."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from decimal import Decimal
from typing import BinaryIO, Union

from toysqlite.varint import read_exact

__all__ = [
    "SerialTypeKind",
    "SerialType",
    "SerialValue",
    "deserialize_value",
    "format_value",
]

SerialValue = Union[None, int, float, str, bytes]


class SerialTypeKind(enum.Enum):
    """The storage class a serial type code stands for."""

    NULL = "null"
    INT8 = "int8"
    INT16 = "int16"
    INT24 = "int24"
    INT32 = "int32"
    INT48 = "int48"
    INT64 = "int64"
    FLOAT64 = "float64"
    ZERO = "zero"
    ONE = "one"
    BLOB = "blob"
    TEXT = "text"


_FIXED_CODES = {
    0: SerialTypeKind.NULL,
    1: SerialTypeKind.INT8,
    2: SerialTypeKind.INT16,
    3: SerialTypeKind.INT24,
    4: SerialTypeKind.INT32,
    5: SerialTypeKind.INT48,
    6: SerialTypeKind.INT64,
    7: SerialTypeKind.FLOAT64,
    8: SerialTypeKind.ZERO,
    9: SerialTypeKind.ONE,
}

_FIXED_SIZES = {
    SerialTypeKind.INT8: 1,
    SerialTypeKind.INT16: 2,
    SerialTypeKind.INT24: 3,
    SerialTypeKind.INT32: 4,
    SerialTypeKind.INT48: 6,
    SerialTypeKind.INT64: 8,
    SerialTypeKind.FLOAT64: 8,
    SerialTypeKind.ZERO: 0,
    SerialTypeKind.ONE: 0,
}

_INTEGER_KINDS = frozenset(
    {
        SerialTypeKind.INT8,
        SerialTypeKind.INT16,
        SerialTypeKind.INT24,
        SerialTypeKind.INT32,
        SerialTypeKind.INT48,
        SerialTypeKind.INT64,
    }
)


@dataclass(frozen=True)
class SerialType:
    """A column's serial type; ``length`` is used by blobs and text only."""

    kind: SerialTypeKind
    length: int = 0

    @classmethod
    def from_code(cls, code: int) -> "SerialType":
        """Decode a serial type code from a record header."""
        if code in _FIXED_CODES:
            return cls(_FIXED_CODES[code])
        if code in (10, 11):
            raise ValueError(f"serial type {code} is reserved for internal use")
        if code >= 12 and code % 2 == 0:
            return cls(SerialTypeKind.BLOB, (code - 12) // 2)
        if code >= 13 and code % 2 == 1:
            return cls(SerialTypeKind.TEXT, (code - 13) // 2)
        raise ValueError(f"invalid serial type encoding {code}")

    def size(self) -> int:
        """Number of bytes the value occupies in the record body."""
        if self.kind in (SerialTypeKind.BLOB, SerialTypeKind.TEXT):
            return self.length
        if self.kind in _FIXED_SIZES:
            return _FIXED_SIZES[self.kind]
        raise ValueError(f"invalid serial type {self.kind.value} has no size")


def deserialize_value(reader: BinaryIO, serial_type: SerialType) -> SerialValue:
    """Read one column value of the given serial type from ``reader``."""
    kind = serial_type.kind
    if kind is SerialTypeKind.NULL:
        return None
    if kind is SerialTypeKind.ZERO:
        return 0
    if kind is SerialTypeKind.ONE:
        return 1
    if kind in _INTEGER_KINDS:
        size = serial_type.size()
        # Narrower integers are zero-extended; only the 8-byte form is signed.
        return int.from_bytes(read_exact(reader, size), "big", signed=size == 8)
    if kind is SerialTypeKind.FLOAT64:
        import struct

        (value,) = struct.unpack(">d", read_exact(reader, 8))
        return value
    if kind is SerialTypeKind.BLOB:
        return read_exact(reader, serial_type.length)
    return read_exact(reader, serial_type.length).decode("utf-8")


def _format_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value.is_integer():
        return str(int(value))
    text = repr(value)
    if "e" in text or "E" in text:
        return format(Decimal(text), "f")
    return text


def format_value(value: SerialValue) -> str:
    """Render a column value as text for query output."""
    if value is None:
        return ""
    if isinstance(value, float):
        return _format_float(value)
    if isinstance(value, (bytes, bytearray)):
        return "[" + ", ".join(str(b) for b in value) + "]"
    return str(value)