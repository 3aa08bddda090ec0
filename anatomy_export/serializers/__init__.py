"""
Serializers - component metadata to text.

Each output format is a SchemaSerializer. The typed formats (TypeScript,
JSDoc, Markdown) share one property type mapping and render through Jinja2
templates; the JSON and nested-text formats dump the metadata as is.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..config import OutputFormat
from .base import SchemaSerializer, TemplateSerializer
from .jsdoc_serializer import JsDocSerializer
from .json_serializer import JsonSerializer
from .markdown_serializer import MarkdownSerializer
from .type_mapping import PropKind, PropType, resolve_prop_type
from .typescript_serializer import TypeScriptSerializer
from .values import format_yaml_value
from .yaml_serializer import YamlSerializer, to_nested_text

SERIALIZERS: dict[OutputFormat, type[SchemaSerializer]] = {
    OutputFormat.JSON: JsonSerializer,
    OutputFormat.YAML: YamlSerializer,
    OutputFormat.TYPESCRIPT: TypeScriptSerializer,
    OutputFormat.JSDOC: JsDocSerializer,
    OutputFormat.MARKDOWN: MarkdownSerializer,
}


def get_serializer(output_format: OutputFormat | str) -> SchemaSerializer:
    """Instantiate the serializer registered for a format."""
    return SERIALIZERS[OutputFormat(output_format)]()


def serialize(data: Mapping[str, Any], output_format: OutputFormat | str) -> str:
    """Serialize a component name -> metadata mapping."""
    return get_serializer(output_format).serialize(data)


def serialize_component(name: str, metadata: Mapping[str, Any], output_format: OutputFormat | str) -> str:
    """Serialize a single component's metadata."""
    return serialize({name: metadata}, output_format)


__all__ = [
    "SERIALIZERS",
    "SchemaSerializer",
    "TemplateSerializer",
    "JsonSerializer",
    "YamlSerializer",
    "TypeScriptSerializer",
    "JsDocSerializer",
    "MarkdownSerializer",
    "PropKind",
    "PropType",
    "resolve_prop_type",
    "format_yaml_value",
    "to_nested_text",
    "get_serializer",
    "serialize",
    "serialize_component",
]
