"""Rows of the schema table describing every table, index, view and trigger."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import BinaryIO

from toysqlite.cells import TableLeafCell

__all__ = ["DbObject", "SchemaRecord"]


class DbObject(enum.Enum):
    TABLE = "table"
    INDEX = "index"
    VIEW = "view"
    TRIGGER = "trigger"


def _text(values: list, position: int) -> str:
    value = values[position]
    if not isinstance(value, str):
        raise ValueError(f"expected column value[{position}] to be of type Text")
    return value


@dataclass
class SchemaRecord:
    """One schema row; ``rootpage`` is a 1-indexed page number."""

    db_object: DbObject
    name: str
    tbl_name: str
    rootpage: int
    sql: str

    @classmethod
    def from_cell(cls, cell: TableLeafCell) -> "SchemaRecord":
        values = cell.record.values
        if len(values) != 5:
            raise ValueError(f"schema record must have 5 values, found {len(values)}")
        object_type = _text(values, 0)
        try:
            db_object = DbObject(object_type)
        except ValueError:
            raise ValueError(f"unknown schema object type {object_type!r}") from None
        rootpage = values[3]
        if not isinstance(rootpage, int):
            raise ValueError("expected column value[3] to be of type Int")
        return cls(
            db_object=db_object,
            name=_text(values, 1),
            tbl_name=_text(values, 2),
            rootpage=rootpage & 0xFFFFFFFF,
            sql=_text(values, 4),
        )

    @classmethod
    def read(cls, reader: BinaryIO) -> "SchemaRecord":
        return cls.from_cell(TableLeafCell.read(reader))