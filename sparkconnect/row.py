"""Rows of a DataFrame."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Sequence

from sparkconnect.datatypes import StructType


@dataclass
class Row:
    """A row of values together with the schema that describes them."""

    values: Sequence[Any]
    schema: StructType | None = None

    def __iter__(self) -> Iterator[Any]:
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.values)

    def __getitem__(self, index: int) -> Any:
        return self.values[index]


def new_row_with_schema(values: Sequence[Any], schema: StructType | None) -> Row:
    """Create a row holding ``values`` described by ``schema``."""
    return Row(values=values, schema=schema)