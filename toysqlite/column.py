"""Column definitions extracted from CREATE TABLE statements."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Sequence

from toysqlite.schema import SchemaRecord

__all__ = [
    "ColumnDefinition",
    "ColumnNotFoundError",
    "is_integer_primary_key",
    "get_column_definitions",
    "get_column_names",
    "find_column_index",
]

_COLUMNS_PATTERN = re.compile(r"\((.*)\)")
_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


class ColumnNotFoundError(LookupError):
    """Raised when a column name or index does not exist on a table."""


@dataclass(frozen=True)
class ColumnDefinition:
    """A column name and the rest of its definition, both lower-cased."""

    name: str
    type_def: str


def get_column_definitions(create_table_sql: str) -> list[ColumnDefinition]:
    """Extract the column definitions from a CREATE TABLE statement."""
    normalized = create_table_sql.replace("\n", " ").replace("\t", " ").strip()
    match = _COLUMNS_PATTERN.search(normalized)
    if match is None:
        raise ValueError("invalid CREATE TABLE syntax")
    definitions = []
    for col_def in match.group(1).split(","):
        name, _, type_def = col_def.strip().partition(" ")
        definitions.append(ColumnDefinition(name.lower(), type_def.lower()))
    return definitions


def get_column_names(create_table_sql: str) -> list[str]:
    """Return the column names of a CREATE TABLE statement, in order."""
    return [d.name for d in get_column_definitions(create_table_sql)]


def is_integer_primary_key(table_record: SchemaRecord, col_idx: int) -> bool:
    """Whether the column at ``col_idx`` is an INTEGER PRIMARY KEY."""
    definitions = get_column_definitions(table_record.sql)
    if not 0 <= col_idx < len(definitions):
        raise ColumnNotFoundError(
            f"no column at index {col_idx} found on table {table_record.name}"
        )
    type_def = definitions[col_idx].type_def
    return "primary key" in type_def and "int" in type_def


def find_column_index(ordered_column_names: Sequence[str], name: str) -> int:
    """Position of ``name`` among the columns, compared ignoring ASCII case."""
    wanted = name.translate(_ASCII_LOWER)
    for index, column_name in enumerate(ordered_column_names):
        if column_name.translate(_ASCII_LOWER) == wanted:
            return index
    raise ColumnNotFoundError(f"column '{name}' not found")