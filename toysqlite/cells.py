"""The four kinds of b-tree cell."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import BinaryIO

from toysqlite.record import Record
from toysqlite.varint import read_exact, read_varint

__all__ = [
    "RowHeader",
    "TableLeafCell",
    "TableInteriorCell",
    "IndexLeafCell",
    "IndexInteriorCell",
]


def _read_child_pointer(reader: BinaryIO) -> int:
    (left_child,) = struct.unpack(">I", read_exact(reader, 4))
    return left_child


def _index_row_id(record: Record) -> int:
    if not record.values:
        raise ValueError("index record should end with a row id")
    row_id = record.values[-1]
    if not isinstance(row_id, int):
        raise ValueError("final value in an index cell should be an integer row id")
    return row_id


@dataclass
class RowHeader:
    """Payload size (excluding this header) and row id of a table leaf cell."""

    size: int
    row_id: int

    @classmethod
    def read(cls, reader: BinaryIO) -> "RowHeader":
        size, _ = read_varint(reader)
        row_id, _ = read_varint(reader)
        return cls(size, row_id)


@dataclass
class TableLeafCell:
    """A table row: its row header and record."""

    row_header: RowHeader
    record: Record

    @classmethod
    def read(cls, reader: BinaryIO) -> "TableLeafCell":
        row_header = RowHeader.read(reader)
        return cls(row_header, Record.read(reader))

    def row_id(self) -> int:
        return self.row_header.row_id


@dataclass
class TableInteriorCell:
    """Pointer to a left subtree whose keys are at most ``row_id``."""

    left_child: int
    row_id: int

    @classmethod
    def read(cls, reader: BinaryIO) -> "TableInteriorCell":
        left_child = _read_child_pointer(reader)
        row_id, _ = read_varint(reader)
        return cls(left_child, row_id)


@dataclass
class IndexLeafCell:
    """An index entry: indexed values followed by the row id."""

    size: int
    record: Record

    @classmethod
    def read(cls, reader: BinaryIO) -> "IndexLeafCell":
        size, _ = read_varint(reader)
        return cls(size, Record.read(reader))

    def row_id(self) -> int:
        return _index_row_id(self.record)


@dataclass
class IndexInteriorCell:
    """An index entry that also points to a left subtree."""

    left_child: int
    size: int
    record: Record

    @classmethod
    def read(cls, reader: BinaryIO) -> "IndexInteriorCell":
        left_child = _read_child_pointer(reader)
        size, _ = read_varint(reader)
        return cls(left_child, size, Record.read(reader))

    def row_id(self) -> int:
        return _index_row_id(self.record)