import sqlite3

import pytest

from toysqlite.cli import dbinfo, main, tables
from toysqlite.header import DbHeader
from toysqlite.page import Page, PageHeader, PageType
from toysqlite.schema import DbObject, SchemaRecord
from toysqlite.table import CellTable

APPLES = [
    ("Granny Smith", "Light Green"),
    ("Fuji", "Red"),
    ("Honeycrisp", "Blush Red"),
    ("Golden Delicious", "Yellow"),
]


@pytest.fixture
def sample_db(tmp_path):
    path = tmp_path / "sample.db"
    conn = sqlite3.connect(str(path))
    conn.execute("PRAGMA page_size = 4096")
    conn.execute(
        "CREATE TABLE apples (id integer primary key autoincrement, "
        "name text, color text)"
    )
    conn.execute("CREATE TABLE oranges (id integer primary key, name text)")
    conn.executemany("INSERT INTO apples (name, color) VALUES (?, ?)", APPLES)
    conn.commit()
    conn.close()
    return str(path)


def _schema(tbl_name, db_object=DbObject.TABLE):
    return SchemaRecord(db_object, tbl_name, tbl_name, 2, "CREATE TABLE t (a)")


def test_main_without_arguments_fails(capsys):
    assert main([]) == 1
    assert "Missing <database path> and <command>" in capsys.readouterr().err


def test_main_without_command_fails(sample_db, capsys):
    assert main([sample_db]) == 1
    assert "Missing <command>" in capsys.readouterr().err


def test_main_with_empty_command_fails(sample_db, capsys):
    assert main([sample_db, ""]) == 1
    assert "Missing or invalid command passed" in capsys.readouterr().err


def test_main_dbinfo(sample_db, capsys):
    assert main([sample_db, ".dbinfo"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "database page size: 4096"
    # apples, sqlite_sequence and oranges
    assert lines[1] == "number of tables: 3"


def test_main_tables_hides_internal_tables(sample_db, capsys):
    assert main([sample_db, ".tables"]) == 0
    assert capsys.readouterr().out.strip() == "apples oranges"


def test_main_runs_query(sample_db, capsys):
    assert main([sample_db, "SELECT COUNT(*) FROM apples"]) == 0
    assert capsys.readouterr().out.strip() == str(len(APPLES))


def test_main_query_rows(sample_db, capsys):
    assert main([sample_db, "SELECT name FROM apples"]) == 0
    assert capsys.readouterr().out.splitlines() == [name for name, _ in APPLES]


def test_main_bad_query_fails(sample_db, capsys):
    assert main([sample_db, "SELECT FROM apples"]) == 1
    assert capsys.readouterr().err.startswith("Error:")


def test_main_missing_file_fails(tmp_path, capsys):
    assert main([str(tmp_path / "absent.db"), ".tables"]) == 1
    assert capsys.readouterr().err.startswith("Error:")


def test_dbinfo_prints_header_values(capsys):
    header = PageHeader(PageType.TABLE_LEAF, 0, 7, 0, 0)
    dbinfo(DbHeader(1024), Page(header, []))
    assert capsys.readouterr().out.splitlines() == [
        "database page size: 1024",
        "number of tables: 7",
    ]


def test_tables_prints_referenced_table_names(capsys):
    schema = CellTable(
        [
            _schema("apples"),
            _schema("sqlite_sequence"),
            _schema("apples", DbObject.INDEX),
            _schema("oranges"),
        ]
    )
    tables(schema)
    assert capsys.readouterr().out == "apples apples oranges\n"