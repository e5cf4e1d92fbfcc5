"""Helpers for reporting errors that should not stop the caller."""

from __future__ import annotations

from typing import Any, Callable


def warn_on_error(func: Callable[[], Any], handler: Callable[[BaseException], Any]) -> None:
    """Call ``func``; if it raises, pass the exception to ``handler`` instead."""
    try:
        func()
    except Exception as exc:  # noqa: BLE001 - the handler decides what to do
        handler(exc)