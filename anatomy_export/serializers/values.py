"""
Scalar value formatting for the nested-text (YAML style) format.
"""

from __future__ import annotations

from typing import Any

# Characters that force a string to be quoted
_RESERVED = (":", "#", "\n")


def _needs_quotes(value: str) -> bool:
    return any(char in value for char in _RESERVED) or value.startswith(" ") or value.endswith(" ")


def format_yaml_value(value: Any) -> str:
    """
    Render a scalar as a nested-text literal.

    Examples:
        None -> "null"
        True -> "true"
        16.0 -> "16"
        "a: b" -> '"a: b"'

    Args:
        value: String, boolean, number or None

    Returns:
        Literal text for the value
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, str):
        if _needs_quotes(value):
            escaped = value.replace('"', '\\"')
            return f'"{escaped}"'
        return value
    return str(value)
