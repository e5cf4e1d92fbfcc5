from decimal import Decimal

import pytest

from sparkconnect.arrow import (
    ArrowTable,
    ArrowTypeId,
    ChunkedColumn,
    UnsupportedArrowTypeError,
    read_arrow_column,
    read_arrow_table,
)


def test_show_string_batch_data():
    table = ArrowTable(
        [ChunkedColumn("show_string", ArrowTypeId.STRING, [["str1a\nstr1b", "str2"]])]
    )
    values = read_arrow_table(table)
    assert len(values) == 2
    assert values[0] == ["str1a\nstr1b"]
    assert values[1] == ["str2"]


def _full_table():
    spec = [
        ("boolean_column", ArrowTypeId.BOOL, [False, True]),
        ("int8_column", ArrowTypeId.INT8, [1, 2]),
        ("int16_column", ArrowTypeId.INT16, [10, 20]),
        ("int32_column", ArrowTypeId.INT32, [100, 200]),
        ("int64_column", ArrowTypeId.INT64, [1000, 2000]),
        ("float16_column", ArrowTypeId.FLOAT16, [10000.0, 20000.0]),
        ("float32_column", ArrowTypeId.FLOAT32, [100000.1, 200000.1]),
        ("float64_column", ArrowTypeId.FLOAT64, [1000000.1, 2000000.1]),
        ("decimal128_column", ArrowTypeId.DECIMAL128, [Decimal(10000000), Decimal(20000000)]),
        ("decimal256_column", ArrowTypeId.DECIMAL256, [Decimal(100000000), Decimal(200000000)]),
        ("string_column", ArrowTypeId.STRING, ["str1", "str2"]),
        ("binary_column", ArrowTypeId.BINARY, [bytearray(b"bytes1"), b"bytes2"]),
        ("timestamp_column", ArrowTypeId.TIMESTAMP, [1686981953115000, 1686981953116000]),
        ("date64_column", ArrowTypeId.DATE64, [1686981953117000, 1686981953118000]),
    ]
    return ArrowTable([ChunkedColumn(name, tid, [vals]) for name, tid, vals in spec])


def test_read_arrow_record():
    values = read_arrow_table(_full_table())
    assert len(values) == 2
    assert values[0] == [
        False, 1, 10, 100, 1000, 10000.0, 100000.1, 1000000.1,
        Decimal(10000000), Decimal(100000000), "str1", b"bytes1",
        1686981953115000, 1686981953117000,
    ]
    assert values[1] == [
        True, 2, 20, 200, 2000, 20000.0, 200000.1, 2000000.1,
        Decimal(20000000), Decimal(200000000), "str2", b"bytes2",
        1686981953116000, 1686981953118000,
    ]


def test_binary_values_become_bytes():
    values = read_arrow_table(_full_table())
    # A set only accepts hashable values, so a bytearray left in place would fail here.
    assert {values[0][11], values[1][11]} == {b"bytes1", b"bytes2"}


def test_unsupported_type_raises():
    table = ArrowTable(
        [ChunkedColumn("unsupported_type_column", ArrowTypeId.INTERVAL_MONTHS, [[1]])]
    )
    with pytest.raises(UnsupportedArrowTypeError) as info:
        read_arrow_table(table)
    assert info.value.column_index == 0
    assert "month_interval" in str(info.value)


def test_multiple_chunks_keep_row_order():
    table = ArrowTable(
        [
            ChunkedColumn("a", ArrowTypeId.INT64, [[1, 2], [3]]),
            ChunkedColumn("b", ArrowTypeId.STRING, [["x"], ["y", "z"]]),
        ]
    )
    assert read_arrow_table(table) == [[1, "x"], [2, "y"], [3, "z"]]
    assert read_arrow_column(table, 0) == [1, 2, 3]


def test_table_dimensions():
    table = _full_table()
    assert table.num_rows == 2
    assert table.num_cols == 14


def test_empty_table_has_no_rows():
    assert read_arrow_table(ArrowTable()) == []


def test_columns_of_differing_length_rejected():
    with pytest.raises(ValueError):
        ArrowTable(
            [
                ChunkedColumn("a", ArrowTypeId.INT8, [[1, 2]]),
                ChunkedColumn("b", ArrowTypeId.INT8, [[1]]),
            ]
        )