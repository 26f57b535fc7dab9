"""Records: a header of serial types followed by the column values."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import BinaryIO

from toysqlite.serial import SerialType, SerialValue, deserialize_value
from toysqlite.varint import read_varint

__all__ = ["RecordHeader", "Record"]


@dataclass
class RecordHeader:
    """Record header; ``size`` counts the header bytes including itself."""

    size: int
    column_types: list[SerialType] = field(default_factory=list)

    @classmethod
    def read(cls, reader: BinaryIO) -> "RecordHeader":
        size, bytes_read = read_varint(reader)
        column_types: list[SerialType] = []
        while bytes_read < size:
            code, consumed = read_varint(reader)
            bytes_read += consumed
            column_types.append(SerialType.from_code(code))
        if bytes_read != size:
            raise ValueError(
                f"record header declared {size} bytes but {bytes_read} were read"
            )
        return cls(size, column_types)


@dataclass
class Record:
    """A decoded record: its header and one value per column."""

    header: RecordHeader
    values: list[SerialValue] = field(default_factory=list)

    @classmethod
    def read(cls, reader: BinaryIO) -> "Record":
        header = RecordHeader.read(reader)
        values = [deserialize_value(reader, t) for t in header.column_types]
        return cls(header, values)