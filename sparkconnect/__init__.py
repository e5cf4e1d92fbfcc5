"""Client-side Spark Connect data types, columnar result reading, rows, plan relations and error helpers."""

__version__ = "0.1.0"

__all__ = ["arrow", "check", "datatypes", "plan", "row"]