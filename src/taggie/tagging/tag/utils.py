"""Utility functions for tag conversion."""

from typing import Any


def conv_string(value: Any) -> str:
    """Convert a value (or list of values) to a comma-separated string."""
    if not isinstance(value, (list, tuple)):
        value = [value]
    return ", ".join(str(v) for v in value)
