import io

import pytest

from toysqlite.serial import SerialType, SerialTypeKind, deserialize_value, format_value


def test_parse_value_int8():
    value = deserialize_value(io.BytesIO(bytes([0x01])), SerialType(SerialTypeKind.INT8))
    assert value == 1


def test_parse_value_int64():
    reader = io.BytesIO(bytes([127, 255, 255, 255, 255, 255, 255, 255]))
    value = deserialize_value(reader, SerialType(SerialTypeKind.INT64))
    assert value == 9223372036854775807


def test_parse_value_float():
    reader = io.BytesIO(bytes([0x40, 0x29, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00]))
    value = deserialize_value(reader, SerialType(SerialTypeKind.FLOAT64))
    assert value == 12.5


def test_parse_value_blob():
    reader = io.BytesIO(bytes([0x01, 0x02, 0x03, 0x04]))
    value = deserialize_value(reader, SerialType(SerialTypeKind.BLOB, 4))
    assert value == bytes([0x01, 0x02, 0x03, 0x04])


def test_parse_value_text():
    reader = io.BytesIO(bytes([0x48, 0x65, 0x6C, 0x6C, 0x6F]))
    value = deserialize_value(reader, SerialType(SerialTypeKind.TEXT, 5))
    assert value == "Hello"


def test_parse_value_null():
    value = deserialize_value(io.BytesIO(b""), SerialType(SerialTypeKind.NULL))
    assert value is None


def test_zero_and_one_consume_nothing():
    reader = io.BytesIO(b"\x09")
    assert deserialize_value(reader, SerialType(SerialTypeKind.ZERO)) == 0
    assert deserialize_value(reader, SerialType(SerialTypeKind.ONE)) == 1
    assert reader.read() == b"\x09"


def test_parse_value_int16():
    value = deserialize_value(io.BytesIO(bytes([0x01, 0x00])), SerialType(SerialTypeKind.INT16))
    assert value == 256


def test_short_read_raises():
    with pytest.raises(EOFError):
        deserialize_value(io.BytesIO(b"\x01"), SerialType(SerialTypeKind.INT32))


@pytest.mark.parametrize(
    "code, expected",
    [
        (0, SerialType(SerialTypeKind.NULL)),
        (1, SerialType(SerialTypeKind.INT8)),
        (6, SerialType(SerialTypeKind.INT64)),
        (7, SerialType(SerialTypeKind.FLOAT64)),
        (8, SerialType(SerialTypeKind.ZERO)),
        (9, SerialType(SerialTypeKind.ONE)),
        (12, SerialType(SerialTypeKind.BLOB, 0)),
        (13, SerialType(SerialTypeKind.TEXT, 0)),
        (0x1B, SerialType(SerialTypeKind.TEXT, 7)),
    ],
)
def test_from_code(code, expected):
    assert SerialType.from_code(code) == expected


@pytest.mark.parametrize("code", [10, 11])
def test_from_code_reserved_raises(code):
    with pytest.raises(ValueError):
        SerialType.from_code(code)


def test_size_of_types():
    assert SerialType(SerialTypeKind.INT24).size() == 3
    assert SerialType(SerialTypeKind.INT48).size() == 6
    assert SerialType(SerialTypeKind.FLOAT64).size() == 8
    assert SerialType(SerialTypeKind.ZERO).size() == 0
    assert SerialType(SerialTypeKind.TEXT, 7).size() == 7


def test_size_of_null_raises():
    with pytest.raises(ValueError):
        SerialType(SerialTypeKind.NULL).size()


def test_format_values():
    assert format_value(None) == ""
    assert format_value(4) == "4"
    assert format_value("Fuji") == "Fuji"
    assert format_value(12.5) == "12.5"
    assert format_value(34.0) == "34"
    assert format_value(bytes([1, 2, 3])) == "[1, 2, 3]"