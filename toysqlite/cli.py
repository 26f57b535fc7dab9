"""Command line entry point: inspect a database file or run a query on it."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from toysqlite.engine import QueryEngine
from toysqlite.header import DbHeader
from toysqlite.page import Page
from toysqlite.pager import Pager
from toysqlite.parser import parse_sql
from toysqlite.schema import SchemaRecord
from toysqlite.table import CellTable

__all__ = ["dbinfo", "tables", "main"]


def dbinfo(db_header: DbHeader, root_page: Page) -> None:
    """Print the page size and the number of schema entries."""
    print(f"database page size: {db_header.page_size}")
    print(f"number of tables: {root_page.header.cell_count}")


def tables(schema_table: CellTable[SchemaRecord]) -> None:
    """Print the table names of the schema, leaving out internal tables."""
    # Internal schema tables go by names such as sqlite_schema or sqlite_sequence.
    names = (
        record.tbl_name
        for record in schema_table.cells
        if not record.tbl_name.startswith("sql")
    )
    print(" ".join(names))


def _fail(message: str) -> int:
    print(f"Error: {message}", file=sys.stderr)
    return 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run ``<database path> <command>``; return the process exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return _fail("Missing <database path> and <command>")
    if len(args) == 1:
        return _fail("Missing <command>")
    path, command = args[0], args[1]

    try:
        with open(path, "rb") as file:
            pager = Pager(file)
            if command == ".dbinfo":
                dbinfo(pager.db_header, pager.root_page)
            elif command == ".tables":
                tables(pager.schema_table)
            elif command:
                print(QueryEngine(pager).run_query(parse_sql(command)))
            else:
                return _fail(f"Missing or invalid command passed: {command}")
    except (OSError, EOFError, ValueError, LookupError) as exc:
        return _fail(str(exc))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())