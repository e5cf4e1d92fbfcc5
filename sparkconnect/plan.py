"""Plan identifiers and the relations that read tables and data sources."""

from __future__ import annotations

import threading
from typing import Any

_lock = threading.Lock()
_last_plan_id = 0


def new_plan_id() -> int:
    """Return a fresh plan id; ids increase by one on every call."""
    global _last_plan_id
    with _lock:
        _last_plan_id += 1
        return _last_plan_id


def reset_plan_id_for_testing() -> None:
    """Restart plan ids so that the next one is 1."""
    global _last_plan_id
    with _lock:
        _last_plan_id = 0


def new_read_table_relation(table: str) -> dict[str, Any]:
    """Build a relation that reads the named table, with a new plan id."""
    return {
        "common": {"plan_id": new_plan_id()},
        "read": {"named_table": {"unparsed_identifier": table}},
    }


def new_read_with_format_and_path(path: str, format: str) -> dict[str, Any]:
    """Build a relation that reads a data source of ``format`` at ``path``."""
    return {
        "read": {"data_source": {"format": format, "paths": [path]}},
    }