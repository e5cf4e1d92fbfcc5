"""Reading columnar Arrow-style tables into rows of Python values."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator, Sequence


class ArrowTypeId(Enum):
    """Identifiers of the Arrow column types a table may hold."""

    BOOL = "bool"
    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    FLOAT16 = "halffloat"
    FLOAT32 = "float"
    FLOAT64 = "double"
    DECIMAL128 = "decimal128"
    DECIMAL256 = "decimal256"
    STRING = "utf8"
    BINARY = "binary"
    TIMESTAMP = "timestamp"
    DATE32 = "date32"
    DATE64 = "date64"
    INTERVAL_MONTHS = "month_interval"
    INTERVAL_DAY_TIME = "day_time_interval"
    LIST = "list"
    STRUCT = "struct"
    MAP = "map"

    def __str__(self) -> str:
        return self.value


_SUPPORTED_TYPES = frozenset(
    {
        ArrowTypeId.BOOL,
        ArrowTypeId.INT8,
        ArrowTypeId.INT16,
        ArrowTypeId.INT32,
        ArrowTypeId.INT64,
        ArrowTypeId.FLOAT16,
        ArrowTypeId.FLOAT32,
        ArrowTypeId.FLOAT64,
        ArrowTypeId.DECIMAL128,
        ArrowTypeId.DECIMAL256,
        ArrowTypeId.STRING,
        ArrowTypeId.BINARY,
        ArrowTypeId.TIMESTAMP,
        ArrowTypeId.DATE64,
    }
)


class UnsupportedArrowTypeError(ValueError):
    """Raised when a column has a type that cannot be read into Python values."""

    def __init__(self, type_id: ArrowTypeId, column_index: int) -> None:
        super().__init__(f"unsupported arrow data type {type_id} in column {column_index}")
        self.type_id = type_id
        self.column_index = column_index


@dataclass
class ChunkedColumn:
    """A named column whose values are stored in one or more chunks."""

    name: str
    type_id: ArrowTypeId
    chunks: list[Sequence[Any]] = field(default_factory=list)

    def __len__(self) -> int:
        return sum(len(chunk) for chunk in self.chunks)

    def __iter__(self) -> Iterator[Any]:
        for chunk in self.chunks:
            yield from chunk


@dataclass
class ArrowTable:
    """A table made of chunked columns that all have the same length."""

    columns: list[ChunkedColumn] = field(default_factory=list)

    def __post_init__(self) -> None:
        lengths = {len(column) for column in self.columns}
        if len(lengths) > 1:
            raise ValueError(f"columns have differing lengths: {sorted(lengths)}")

    @property
    def num_rows(self) -> int:
        return len(self.columns[0]) if self.columns else 0

    @property
    def num_cols(self) -> int:
        return len(self.columns)

    def column(self, index: int) -> ChunkedColumn:
        return self.columns[index]


def _convert(type_id: ArrowTypeId, value: Any) -> Any:
    if type_id is ArrowTypeId.BINARY and isinstance(value, (bytearray, memoryview)):
        return bytes(value)
    return value


def read_arrow_column(table: ArrowTable, column_index: int) -> list[Any]:
    """Return all values of one column, in row order across its chunks.

    Raises UnsupportedArrowTypeError for column types that cannot be read.
    """
    column = table.column(column_index)
    if column.type_id not in _SUPPORTED_TYPES:
        raise UnsupportedArrowTypeError(column.type_id, column_index)
    return [_convert(column.type_id, value) for value in column]


def read_arrow_table(table: ArrowTable) -> list[list[Any]]:
    """Return the table as a list of rows, each a list with one value per column."""
    columns = [read_arrow_column(table, index) for index in range(table.num_cols)]
    return [list(row) for row in zip(*columns)]