"""Predicates that select records matching a WHERE comparison."""

from __future__ import annotations

import re
from typing import Callable, Iterable, Sequence

from toysqlite.column import find_column_index
from toysqlite.parser import Comparison, Operator
from toysqlite.record import Record
from toysqlite.serial import SerialValue

__all__ = [
    "check_equality",
    "greater_than",
    "create_record_filter",
    "filter_items",
]

_INTEGER = re.compile(r"[+-]?[0-9]+")
_FLOAT_FORBIDDEN = re.compile(r"[\s_]")


def _parse_int(text: str) -> int:
    if not _INTEGER.fullmatch(text):
        raise ValueError(f"cannot compare an integer with {text!r}")
    return int(text)


def _parse_float(text: str) -> float:
    if not text or _FLOAT_FORBIDDEN.search(text):
        raise ValueError(f"cannot compare a float with {text!r}")
    try:
        return float(text)
    except ValueError:
        raise ValueError(f"cannot compare a float with {text!r}") from None


def check_equality(value: SerialValue, comparison_value: str) -> bool:
    """Whether a column value equals the textual comparison value."""
    if value is None:
        return comparison_value.lower() == "null" and comparison_value.isascii()
    if isinstance(value, (bytes, bytearray)):
        raise TypeError("blobs cannot be compared for equality")
    if isinstance(value, int):
        return value == _parse_int(comparison_value)
    if isinstance(value, float):
        return value == _parse_float(comparison_value)
    return value == comparison_value


def greater_than(value: SerialValue, comparison_value: str) -> bool:
    """Whether a column value is greater than or equal to the comparison value."""
    if value is None:
        return False
    if isinstance(value, (bytes, bytearray)):
        raise TypeError("blobs cannot be ordered")
    if isinstance(value, int):
        return value >= _parse_int(comparison_value)
    if isinstance(value, float):
        return value >= _parse_float(comparison_value)
    return value >= comparison_value


def create_record_filter(
    ordered_column_names: Sequence[str], comparison: Comparison
) -> Callable[[Record], bool]:
    """Build a predicate on records for the given comparison."""
    idx = find_column_index(ordered_column_names, comparison.column)

    def predicate(record: Record) -> bool:
        if idx >= len(record.values):
            return False
        if comparison.operator is Operator.EQUALS:
            try:
                return check_equality(record.values[idx], comparison.value)
            except ValueError:
                return False
        return False

    return predicate


def filter_items(
    items: Iterable[Record],
    ordered_column_names: Sequence[str],
    comparison: Comparison,
) -> list[Record]:
    """Return the records matching the comparison, in their original order."""
    predicate = create_record_filter(ordered_column_names, comparison)
    return [item for item in items if predicate(item)]