"""Query execution over the b-trees of a database file."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional, Sequence

from toysqlite.cells import (
    IndexInteriorCell,
    IndexLeafCell,
    TableInteriorCell,
    TableLeafCell,
)
from toysqlite.column import find_column_index, is_integer_primary_key
from toysqlite.filter import greater_than
from toysqlite.ordered_set import OrderedSet
from toysqlite.page import Page, PageType
from toysqlite.pager import Pager
from toysqlite.parser import ColumnKind, Comparison, SelectQuery
from toysqlite.record import Record
from toysqlite.schema import DbObject, SchemaRecord
from toysqlite.schema_object import SchemaObject
from toysqlite.serial import SerialValue, format_value
from toysqlite.table import CellTable

__all__ = ["QueryEngine"]


def _rightmost(page: Page) -> int:
    pointer = page.header.rightmost_pointer
    if pointer is None:
        raise ValueError("interior page header is missing the right-most pointer")
    return pointer


def _first_value(record: Record) -> SerialValue:
    if not record.values:
        raise ValueError("index record has no values")
    return record.values[0]


class QueryEngine:
    """Runs parsed SELECT queries against the pages a pager provides."""

    def __init__(self, pager: Pager) -> None:
        self.pager = pager

    def run_query(self, query: SelectQuery) -> str:
        """Run ``query`` and return its rows, columns joined by ``|``."""
        table_record = self.get_table_rec(query.table)
        table = SchemaObject.from_record(table_record)

        if any(column.kind is ColumnKind.COUNT_ALL for column in query.columns):
            return str(self._count_rows(table))

        queried: OrderedSet[int] = OrderedSet()
        for column in query.columns:
            if column.kind is ColumnKind.REGULAR:
                queried.add(find_column_index(table.columns, column.name or ""))
            elif column.kind is ColumnKind.ALL:
                for name in table.columns:
                    queried.add(find_column_index(table.columns, name))

        records = self._matching_rows(table, query)

        # An INTEGER PRIMARY KEY column is stored as NULL and aliases the rowid.
        rowid_aliases = {
            idx for idx in queried if is_integer_primary_key(table_record, idx)
        }

        lines = []
        for cell in records:
            fields = []
            for idx in queried:
                if idx >= len(cell.record.values):
                    raise LookupError(
                        f"row {cell.row_id()} has no value for column index {idx}"
                    )
                value = cell.record.values[idx]
                if value is None and idx in rowid_aliases:
                    value = cell.row_id()
                fields.append(format_value(value))
            lines.append("|".join(fields))
        return "\n".join(lines)

    def _matching_rows(
        self, table: SchemaObject, query: SelectQuery
    ) -> list[TableLeafCell]:
        if query.where_clause is not None:
            index = self.find_index(query)
            if index is not None:
                return self.search_with_index(table, index, query.where_clause)
        return self.table_db_scan(table, query)

    def _count_rows(self, table: SchemaObject) -> int:
        page, _ = self.pager.read_page(table.rootpage)
        if page.header.page_type is PageType.TABLE_LEAF:
            return page.header.cell_count
        return sum(1 for _ in self._scan(table.rootpage, table.columns, None))

    def get_table_rec(self, table_name: str) -> SchemaRecord:
        """Return the first schema row whose table name is ``table_name``."""
        for record in self.pager.schema_table.cells:
            if record.tbl_name == table_name:
                return record
        raise LookupError(f"couldn't find table: {table_name}")

    def find_index(self, query: SelectQuery) -> Optional[SchemaObject]:
        """Find an index on the query's table whose first column is the WHERE column."""
        if query.where_clause is None:
            return None
        column = query.where_clause.column
        for record in self.pager.schema_table.cells:
            if record.db_object is not DbObject.INDEX or record.tbl_name != query.table:
                continue
            index = SchemaObject.from_record(record)
            if index.columns and index.columns[0] == column:
                return index
        return None

    def search_with_index(
        self, table: SchemaObject, index: SchemaObject, comparison: Comparison
    ) -> list[TableLeafCell]:
        """Look up matching row ids in the index, then fetch those rows."""
        entries = self.index_binary_search(index.rootpage, comparison, index)
        return self.table_binary_search(table, [entry.row_id() for entry in entries])

    def index_binary_search(
        self, page_number: int, comparison: Comparison, index: SchemaObject
    ) -> list[IndexLeafCell]:
        """Collect the index leaf entries below ``page_number`` that match."""
        return list(self._index_search(page_number, comparison, index))

    def _index_search(
        self, page_number: int, comparison: Comparison, index: SchemaObject
    ) -> Iterator[IndexLeafCell]:
        page, reader = self.pager.read_page(page_number)
        page_type = page.header.page_type
        if page_type is PageType.INDEX_INTERIOR:
            cells = CellTable.read(reader, page.cell_pointers, IndexInteriorCell).cells
            for cell in cells:
                if greater_than(_first_value(cell.record), comparison.value):
                    yield from self._index_search(cell.left_child, comparison, index)
            rightmost = _rightmost(page)
            if not cells:
                raise ValueError("interior index page holds no cells")
            if not greater_than(_first_value(cells[-1].record), comparison.value):
                yield from self._index_search(rightmost, comparison, index)
        elif page_type is PageType.INDEX_LEAF:
            leaf = CellTable.read(reader, page.cell_pointers, IndexLeafCell)
            yield from leaf.filter_cells(index.columns, comparison)
        else:
            raise ValueError("found a table page while traversing an index b-tree")

    def table_db_scan(
        self, table: SchemaObject, query: SelectQuery
    ) -> list[TableLeafCell]:
        """Walk the whole table b-tree, keeping rows that match the WHERE clause."""
        return list(self._scan(table.rootpage, table.columns, query.where_clause))

    def _scan(
        self,
        page_number: int,
        columns: Sequence[str],
        comparison: Optional[Comparison],
    ) -> Iterator[TableLeafCell]:
        page, reader = self.pager.read_page(page_number)
        page_type = page.header.page_type
        if page_type is PageType.TABLE_INTERIOR:
            cells = CellTable.read(reader, page.cell_pointers, TableInteriorCell).cells
            for cell in cells:
                yield from self._scan(cell.left_child, columns, comparison)
            yield from self._scan(_rightmost(page), columns, comparison)
        elif page_type is PageType.TABLE_LEAF:
            leaf = CellTable.read(reader, page.cell_pointers, TableLeafCell)
            if comparison is None:
                yield from leaf.cells
            else:
                yield from leaf.filter_cells(columns, comparison)
        else:
            raise ValueError("found an index page while traversing a table b-tree")

    def table_binary_search(
        self, table: SchemaObject, row_ids: Iterable[int]
    ) -> list[TableLeafCell]:
        """Fetch the rows with the given row ids by descending the table b-tree."""
        remaining = list(row_ids)
        records: list[TableLeafCell] = []
        while remaining:
            before = len(remaining)
            self._binary_search(table.rootpage, remaining, records)
            if len(remaining) == before:
                raise LookupError(
                    f"rows {remaining} not found in table {table.tbl_name}"
                )
        return records

    def _binary_search(
        self, page_number: int, remaining: list[int], records: list[TableLeafCell]
    ) -> None:
        page, reader = self.pager.read_page(page_number)
        if not remaining:
            return
        row_id = remaining[0]
        page_type = page.header.page_type
        if page_type is PageType.TABLE_INTERIOR:
            cells = CellTable.read(reader, page.cell_pointers, TableInteriorCell).cells
            for cell in cells:
                if cell.row_id >= row_id:
                    self._binary_search(cell.left_child, remaining, records)
            rightmost = _rightmost(page)
            if not cells:
                raise ValueError("interior table page holds no cells")
            if cells[-1].row_id <= row_id:
                self._binary_search(rightmost, remaining, records)
        elif page_type is PageType.TABLE_LEAF:
            by_id: dict[int, TableLeafCell] = {}
            for cell in CellTable.read(reader, page.cell_pointers, TableLeafCell).cells:
                by_id.setdefault(cell.row_id(), cell)
            records.extend(by_id[r] for r in remaining if r in by_id)
            found = {record.row_id() for record in records}
            remaining[:] = [r for r in remaining if r not in found]
        else:
            raise ValueError("found an index page while traversing a table b-tree")