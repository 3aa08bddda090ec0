"""
JSDoc serializer.

Emits the same four logical blocks as the TypeScript serializer, written as
``@typedef`` documentation comments with one ``@property`` tag per field.
"""

from __future__ import annotations

import jinja2

from ..config import OutputFormat
from .base import TemplateSerializer
from .type_mapping import PropKind


def braced(type_expression: str) -> str:
    return "{" + type_expression + "}"


def _quote(value: str) -> str:
    escaped = str(value).replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"


class JsDocSerializer(TemplateSerializer):
    """Documentation-comment typedef blocks."""

    FORMAT = OutputFormat.JSDOC
    TEMPLATE_LANG = "jsdoc"
    TEMPLATE_NAME = "typedefs.js.jinja2"

    TYPE_MAP = {
        PropKind.BOOLEAN: "boolean",
        PropKind.STRING: "string",
        PropKind.INSTANCE: "ReactNode",
        PropKind.NUMBER: "number",
        PropKind.UNSPECIFIED: "*",
    }

    def _add_filters(self, env: jinja2.Environment) -> None:
        env.filters["braced"] = braced

    def translate_enum(self, values: list[str]) -> str:
        return "(" + "|".join(_quote(value) for value in values) + ")"
