"""Spark SQL data types and struct schemas."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar


@dataclass(frozen=True)
class DataType:
    """Base class of every Spark SQL data type."""

    _numeric: ClassVar[bool] = False

    def type_name(self) -> str:
        """Return the short name of the type, e.g. ``Integer`` for IntegerType."""
        return type(self).__name__.removesuffix("Type")

    def is_numeric(self) -> bool:
        """Return whether values of this type are numbers."""
        return self._numeric


@dataclass(frozen=True)
class BooleanType(DataType):
    pass


@dataclass(frozen=True)
class ByteType(DataType):
    _numeric: ClassVar[bool] = True


@dataclass(frozen=True)
class ShortType(DataType):
    _numeric: ClassVar[bool] = True


@dataclass(frozen=True)
class IntegerType(DataType):
    _numeric: ClassVar[bool] = True


@dataclass(frozen=True)
class LongType(DataType):
    _numeric: ClassVar[bool] = True


@dataclass(frozen=True)
class FloatType(DataType):
    _numeric: ClassVar[bool] = True


@dataclass(frozen=True)
class DoubleType(DataType):
    _numeric: ClassVar[bool] = True


@dataclass(frozen=True)
class DecimalType(DataType):
    _numeric: ClassVar[bool] = True


@dataclass(frozen=True)
class StringType(DataType):
    pass


@dataclass(frozen=True)
class BinaryType(DataType):
    pass


@dataclass(frozen=True)
class TimestampType(DataType):
    pass


@dataclass(frozen=True)
class TimestampNtzType(DataType):
    pass


@dataclass(frozen=True)
class DateType(DataType):
    pass


@dataclass(frozen=True)
class UnsupportedType(DataType):
    """A type that has no dedicated representation; keeps the original kind."""

    type_info: Any = None


@dataclass
class StructField:
    """A named, typed field of a struct."""

    name: str
    data_type: DataType
    nullable: bool = True


@dataclass
class StructType:
    """An ordered collection of struct fields."""

    fields: list[StructField] = field(default_factory=list)
    type_name: str = ""