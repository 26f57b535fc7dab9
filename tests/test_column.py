import pytest

from toysqlite.column import (
    ColumnDefinition,
    ColumnNotFoundError,
    find_column_index,
    get_column_definitions,
    get_column_names,
    is_integer_primary_key,
)
from toysqlite.schema import DbObject, SchemaRecord

EMPLOYEES_SQL = """
        CREATE TABLE employees (
            id INT PRIMARY KEY,
            name VARCHAR(100),
            age INT,
            department VARCHAR(50)
        );
    """


def _table(tbl_name, sql):
    return SchemaRecord(DbObject.TABLE, "", tbl_name, 1, sql)


def test_integer_primary_key():
    table = _table("test", "CREATE TABLE test (id INTEGER PRIMARY KEY, name TEXT)")
    assert is_integer_primary_key(table, 0) is True


def test_integer_not_primary_key():
    table = _table("test", "CREATE TABLE TEST (id INTEGER, name TEXT)")
    assert is_integer_primary_key(table, 0) is False


def test_primary_key_not_integer():
    table = _table("test", "CREATE TABLE test (id TEXT PRIMARY KEY, name TEXT)")
    assert is_integer_primary_key(table, 0) is False


def test_out_of_bounds():
    table = _table("test", "CREATE TABLE test (id INTEGER PRIMARY KEY)")
    with pytest.raises(ColumnNotFoundError):
        is_integer_primary_key(table, 1)


def test_find_column_index():
    columns = get_column_names(EMPLOYEES_SQL)
    assert find_column_index(columns, "name") == 1


def test_find_column_index_ignores_case():
    columns = get_column_names(EMPLOYEES_SQL)
    assert find_column_index(columns, "DEPARTMENT") == 3


def test_find_column_index_missing_raises():
    with pytest.raises(ColumnNotFoundError):
        find_column_index(["id", "name"], "colour")


def test_column_names_in_order():
    assert get_column_names(EMPLOYEES_SQL) == ["id", "name", "age", "department"]


def test_column_definitions_lowercased():
    definitions = get_column_definitions(
        "CREATE TABLE test (id INTEGER PRIMARY KEY, name TEXT)"
    )
    assert definitions == [
        ColumnDefinition("id", "integer primary key"),
        ColumnDefinition("name", "text"),
    ]


def test_column_without_type():
    assert get_column_definitions("CREATE TABLE t (a, b)") == [
        ColumnDefinition("a", ""),
        ColumnDefinition("b", ""),
    ]


def test_invalid_create_table_raises():
    with pytest.raises(ValueError):
        get_column_definitions("CREATE TABLE broken")