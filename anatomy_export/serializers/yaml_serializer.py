"""
Nested-text (YAML style) serializer.

Walks the metadata recursively with two spaces per nesting level:

    Button:
      props:
        size:
          type: enum
          values:
            - sm
            - md
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..config import OutputFormat
from .base import SchemaSerializer
from .values import format_yaml_value

INDENT = "  "


def _item_mapping(item: Any) -> Mapping[Any, Any]:
    # Nested sequences are written like mappings keyed by position
    if isinstance(item, Mapping):
        return item
    if isinstance(item, (list, tuple)):
        return dict(enumerate(item))
    return {}


def items_to_nested_text(items: list[Any] | tuple[Any, ...], indent: int = 0) -> str:
    """
    Serialize sequence items as ``- item`` lines.

    Scalars go on the dash line. Mappings, nested sequences and nulls get a
    bare ``-`` line with their body two levels deeper.
    """
    indent_str = INDENT * indent
    result = ""
    for item in items:
        if item is None or isinstance(item, (Mapping, list, tuple)):
            result += f"{indent_str}-\n"
            result += to_nested_text(_item_mapping(item), indent + 2)
        else:
            result += f"{indent_str}- {format_yaml_value(item)}\n"
    return result


def to_nested_text(data: Mapping[str, Any], indent: int = 0) -> str:
    """
    Serialize a mapping as nested text.

    Args:
        data: Mapping whose values are scalars, mappings or sequences
        indent: Nesting level of the mapping's keys

    Returns:
        One line per scalar, each terminated by a newline
    """
    indent_str = INDENT * indent
    result = ""

    for key, value in data.items():
        if value is None:
            result += f"{indent_str}{key}: null\n"
        elif isinstance(value, Mapping):
            result += f"{indent_str}{key}:\n"
            result += to_nested_text(value, indent + 1)
        elif isinstance(value, (list, tuple)):
            result += f"{indent_str}{key}:\n"
            result += items_to_nested_text(value, indent + 1)
        else:
            result += f"{indent_str}{key}: {format_yaml_value(value)}\n"

    return result


class YamlSerializer(SchemaSerializer):
    """Nested-text output of the full metadata mapping."""

    FORMAT = OutputFormat.YAML

    def serialize(self, data: Mapping[str, Any]) -> str:
        return to_nested_text(data)
