"""Rendering of scalar values as SQL literals."""

from typing import Any
from .escaper import escape_string


def format_value(value: Any) -> str:
    """Render a scalar as SQL text: bools as 1/0, None as NULL, strings quoted."""
    if isinstance(value, bool):
        return '1' if value else '0'
    if value is None:
        return 'NULL'
    if isinstance(value, str):
        return f"'{escape_string(value)}'"
    return str(value)
