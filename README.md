# toysqlite

A small, read-only reader for SQLite database files. It decodes the file
format directly (database header, b-tree pages, cells and records) and runs
a minimal subset of `SELECT` queries against the tables it finds. It has no
dependencies outside the standard library.

## Installation

```
pip install .
```

## Command line

```
toysqlite <database path> <command>
```

The command is one of:

- `.dbinfo`: prints the page size and the number of entries in the schema
  (`number of tables: N`).
- `.tables`: prints the table names from the schema, separated by spaces,
  leaving out names that start with `sql` (internal tables).
- a `SELECT` query, for example:

```
toysqlite sample.db .dbinfo
toysqlite sample.db .tables
toysqlite sample.db "SELECT COUNT(*) FROM apples"
toysqlite sample.db "SELECT name, color FROM apples"
toysqlite sample.db "SELECT * FROM apples WHERE color = 'Yellow'"
toysqlite companies.db "SELECT id, name FROM companies WHERE country = 'rwanda'"
```

Rows are printed one per line, with column values separated by `|`. NULL
values print as an empty field, whole-number floats without a fractional
part, and blobs as a list of byte values such as `[1, 2, 3]`.

On failure (missing arguments, unreadable file, bad query, unknown table or
column) a message starting with `Error:` is written to standard error and
the command exits with status 1.

### Supported SQL

- `SELECT COUNT(*) FROM <table>`: the number of rows in the table. When the
  table's root page is a leaf, its cell count is used; otherwise the table
  b-tree is walked.
- `SELECT <col>, <col>, ... FROM <table>` and `SELECT * FROM <table>`.
  Column names are matched ignoring ASCII case; a column listed twice is
  output once.
- A single `WHERE <column> = '<value>'` condition, with the value as a
  quoted string. Text columns are compared exactly; integer and float
  columns compare against the value read as a number, and rows whose value
  cannot be read that way do not match. When the table has an index whose
  first column is the compared column, the index b-tree is searched and the
  matching rows are fetched by row id; otherwise the whole table is scanned.

Keywords (`SELECT`, `FROM`, `WHERE`, `COUNT(*)`) are case-insensitive. An
`INTEGER PRIMARY KEY` column is reported with the row id it aliases.

## Library use

```python
from toysqlite.pager import Pager
from toysqlite.engine import QueryEngine
from toysqlite.parser import parse_sql

with open("sample.db", "rb") as file:
    engine = QueryEngine(Pager(file))
    print(engine.run_query(parse_sql("SELECT * FROM apples")))
```

`Pager` reads the header and schema when it is created and caches each page
it reads by number. `QueryEngine` also offers `get_table_rec`, `find_index`,
`table_db_scan`, `search_with_index`, `index_binary_search` and
`table_binary_search` for working with the b-trees directly.

Lower-level pieces are also available: `toysqlite.varint.read_varint`,
`toysqlite.header.DbHeader.read`, `toysqlite.page.Page.read`,
`toysqlite.cells.TableLeafCell.read`, `toysqlite.record.Record.read`,
`toysqlite.column.get_column_definitions` and `toysqlite.lexer.lex`.
Query syntax errors raise `toysqlite.lexer.SqlSyntaxError` (a `ValueError`);
unknown columns raise `toysqlite.column.ColumnNotFoundError` (a
`LookupError`).

## What it does not do

- It only reads: there is no `INSERT`, `UPDATE`, `DELETE` or `CREATE`, and
  no transactions or journal handling.
- Queries are limited to the forms above: no other operators, no `AND`/`OR`,
  no numeric literals, no joins, `ORDER BY`, `GROUP BY` or other functions.
- Records whose payload spills onto overflow pages are not followed.
- Views and triggers are listed in the schema but cannot be queried.

## Running the tests

```
pip install ".[test]"
pytest
```