"""
TypeScript serializer.

Emits up to four interfaces per component (Props, Anatomy, Styles, Tokens).
"""

from __future__ import annotations

import jinja2

from ..config import OutputFormat
from .base import TemplateSerializer, is_identifier
from .type_mapping import PropKind


def ts_literal(value: str) -> str:
    """Single-quoted TypeScript string literal."""
    escaped = str(value).replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"


def ts_key(name: str) -> str:
    """Member name, quoted when it is not a valid identifier."""
    name = str(name)
    return name if is_identifier(name) else ts_literal(name)


class TypeScriptSerializer(TemplateSerializer):
    """Typed interface declarations."""

    FORMAT = OutputFormat.TYPESCRIPT
    TEMPLATE_LANG = "typescript"
    TEMPLATE_NAME = "interfaces.ts.jinja2"

    TYPE_MAP = {
        PropKind.BOOLEAN: "boolean",
        PropKind.STRING: "string",
        PropKind.INSTANCE: "React.ReactNode",
        PropKind.NUMBER: "number",
        PropKind.UNSPECIFIED: "any",
    }

    def _add_filters(self, env: jinja2.Environment) -> None:
        env.filters["ts_key"] = ts_key
        env.filters["ts_literal"] = ts_literal

    def translate_enum(self, values: list[str]) -> str:
        return " | ".join(ts_literal(value) for value in values)
