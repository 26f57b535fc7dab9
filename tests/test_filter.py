import pytest

from toysqlite.column import ColumnNotFoundError
from toysqlite.filter import (
    check_equality,
    create_record_filter,
    filter_items,
    greater_than,
)
from toysqlite.parser import Comparison, Operator
from toysqlite.record import Record, RecordHeader
from toysqlite.serial import SerialType, SerialTypeKind


def _float_records():
    return [
        Record(
            RecordHeader(2, [SerialType(SerialTypeKind.FLOAT64)]),
            [34.0],
        )
    ]


def test_apply_filter():
    cmp = Comparison(column="numbers", value="34", operator=Operator.EQUALS)
    filtered = filter_items(_float_records(), ["numbers"], cmp)
    assert len(filtered) == 1


def test_apply_filter_removes_value():
    cmp = Comparison(column="numbers", value="1", operator=Operator.EQUALS)
    filtered = filter_items(_float_records(), ["numbers"], cmp)
    assert len(filtered) == 0


def test_filter_text_column_keeps_order():
    records = [
        Record(RecordHeader(0, []), [None, "Fuji", "Red"]),
        Record(RecordHeader(0, []), [None, "Gala", "Yellow"]),
        Record(RecordHeader(0, []), [None, "Braeburn", "Red"]),
    ]
    cmp = Comparison(column="color", value="Red")
    filtered = filter_items(records, ["id", "name", "color"], cmp)
    assert [r.values[1] for r in filtered] == ["Fuji", "Braeburn"]


def test_filter_unknown_column_raises():
    with pytest.raises(ColumnNotFoundError):
        create_record_filter(["a"], Comparison(column="b", value="x"))


def test_predicate_false_for_missing_value_or_bad_number():
    predicate = create_record_filter(["a", "b"], Comparison(column="b", value="x"))
    assert predicate(Record(RecordHeader(0, []), [1])) is False
    assert predicate(Record(RecordHeader(0, []), [1, 5])) is False


def test_check_equality_variants():
    assert check_equality(None, "NULL") is True
    assert check_equality(None, "x") is False
    assert check_equality(7, "7") is True
    assert check_equality(7, "8") is False
    assert check_equality(12.5, "12.5") is True
    assert check_equality("Fuji", "Fuji") is True
    assert check_equality("Fuji", "fuji") is False


def test_check_equality_bad_number_raises():
    with pytest.raises(ValueError):
        check_equality(7, "seven")


def test_check_equality_blob_raises():
    with pytest.raises(TypeError):
        check_equality(b"\x01", "1")


def test_greater_than_is_inclusive():
    assert greater_than(5, "3") is True
    assert greater_than(5, "5") is True
    assert greater_than(5, "6") is False
    assert greater_than(None, "0") is False
    assert greater_than("rwanda", "rwanda") is True
    assert greater_than("albania", "rwanda") is False
    assert greater_than(2.5, "2") is True


def test_greater_than_bad_number_raises():
    with pytest.raises(ValueError):
        greater_than(5, "five")