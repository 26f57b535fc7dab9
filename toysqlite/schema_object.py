"""Schema rows with their CREATE statement parsed into column names."""

from __future__ import annotations

from dataclasses import dataclass, field

from toysqlite.column import get_column_names
from toysqlite.schema import SchemaRecord

__all__ = ["SchemaObject"]


@dataclass
class SchemaObject:
    """A table or index with its columns in definition order."""

    rootpage: int
    tbl_name: str
    name: str
    columns: list[str] = field(default_factory=list)

    @classmethod
    def from_record(cls, record: SchemaRecord) -> "SchemaObject":
        return cls(
            rootpage=record.rootpage,
            tbl_name=record.tbl_name,
            name=record.name,
            columns=get_column_names(record.sql),
        )