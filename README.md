# sparkconnect

Client-side building blocks for working with Spark Connect results and plans,
with no dependencies beyond the standard library.

## Modules

- `sparkconnect.datatypes` holds the Spark SQL data types `BooleanType`, `ByteType`,
  `ShortType`, `IntegerType`, `LongType`, `FloatType`, `DoubleType`,
  `DecimalType`, `StringType`, `BinaryType`, `TimestampType`,
  `TimestampNtzType`, `DateType` and `UnsupportedType`. All of them derive from
  `DataType`.
  - `type_name()` returns the class name without its `Type` suffix, for example
    `"Integer"` or `"TimestampNtz"`.
  - `is_numeric()` is true for the byte, short, integer, long, float, double and
    decimal types.
  - `UnsupportedType` keeps whatever it was given in `type_info`.
  - `StructField` has `name`, `data_type` and `nullable`, where `nullable`
    defaults to `True`. `StructType` has a list of `fields` and a `type_name`.
- `sparkconnect.arrow` reads columnar tables into rows of Python values.
  - An `ArrowTable` is made of `ChunkedColumn`s. Each column has a `name`, an
    `ArrowTypeId` and a list of chunks. Building a table whose columns differ
    in length raises `ValueError`.
  - `read_arrow_column(table, index)` returns one column's values, in order
    across its chunks.
  - `read_arrow_table(table)` returns a list of rows, with one value per column.
  - Binary values given as `bytearray` or `memoryview` come back as `bytes`.
  - The readable types are bool, the int8 to int64 types, float16/32/64,
    decimal128/256, string, binary, timestamp and date64. Any other type raises
    `UnsupportedArrowTypeError`, which is a `ValueError`. The error carries
    `type_id` and `column_index`.
- `sparkconnect.row` defines `Row`, which pairs a sequence of `values` with an
  optional `StructType` `schema`. A row can be iterated, measured with `len()`
  and indexed. `new_row_with_schema(values, schema)` creates one.
- `sparkconnect.plan` builds logical plan relations as plain dictionaries.
  - `new_plan_id()` returns ids that increase by one on every call, and is
    thread-safe. `reset_plan_id_for_testing()` starts them again at 1.
  - `new_read_table_relation(table)` builds a named-table read and gives it a
    new plan id.
  - `new_read_with_format_and_path(path, format)` builds a data-source read.
    It has no plan id.
- `sparkconnect.check` provides `warn_on_error(func, handler)`. It calls `func`,
  and if `func` raises, it passes the exception to `handler` instead of
  raising it.

## Installation

```
pip install .
```

## Example

```python
from sparkconnect.arrow import ArrowTable, ArrowTypeId, ChunkedColumn, read_arrow_table
from sparkconnect.datatypes import LongType, StringType, StructField, StructType
from sparkconnect.plan import new_read_table_relation
from sparkconnect.row import new_row_with_schema

table = ArrowTable(columns=[
    ChunkedColumn("id", ArrowTypeId.INT64, [[1, 2], [3]]),
    ChunkedColumn("name", ArrowTypeId.STRING, [["a", "b", "c"]]),
])
schema = StructType(fields=[
    StructField("id", LongType()),
    StructField("name", StringType()),
])
rows = [new_row_with_schema(values, schema) for values in read_arrow_table(table)]
print(rows[2].values)                      # [3, 'c']
print(LongType().type_name())              # Long

print(new_read_table_relation("people"))
# {'common': {'plan_id': 1}, 'read': {'named_table': {'unparsed_identifier': 'people'}}}
```

## What it does not do

This package does not connect to a Spark Connect server. It has no session and
no DataFrame API, and it does not run queries. It does not decode Arrow IPC
byte streams: `read_arrow_table` works on `ArrowTable` objects that are already
in memory. It also has no conversion from wire-level type descriptions into
the types in `sparkconnect.datatypes`. You build those types directly.

## Running the tests

```
pip install .[test]
pytest
```