"""
Markdown serializer.

Renders a documentation page: an optional table of contents, then one
section per component with a props table, the anatomy and the style and
token data as code blocks.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import jinja2

from ..config import OutputFormat
from ..utils import markdown_anchor
from .base import TemplateSerializer
from .type_mapping import PropKind
from .yaml_serializer import items_to_nested_text, to_nested_text

DEFAULT_TITLE = "Component Export"


def _nested_text(value: Any) -> str:
    if isinstance(value, Mapping):
        text = to_nested_text(value)
    elif isinstance(value, (list, tuple)):
        text = items_to_nested_text(value)
    else:
        text = ""
    return text.rstrip("\n")


def values_cell(values: list[str]) -> str:
    """Comma-separated enum values for a table cell, pipes escaped."""
    return ", ".join(value.replace("|", "\\|") for value in values)


class MarkdownSerializer(TemplateSerializer):
    """Markdown documentation for one or more components."""

    FORMAT = OutputFormat.MARKDOWN
    TEMPLATE_LANG = "markdown"
    TEMPLATE_NAME = "document.md.jinja2"

    TYPE_MAP = {
        PropKind.BOOLEAN: "boolean",
        PropKind.STRING: "string",
        PropKind.INSTANCE: "instance",
        PropKind.NUMBER: "number",
        PropKind.UNSPECIFIED: "any",
    }

    def __init__(self, include_table_of_contents: bool | None = None, title: str | None = None):
        """
        Initialize the serializer.

        Args:
            include_table_of_contents: None adds one when several components are exported
            title: Document title; defaults to the component name for single exports
        """
        self.include_table_of_contents = include_table_of_contents
        self.title = title
        super().__init__()

    def _add_filters(self, env: jinja2.Environment) -> None:
        env.filters["anchor"] = markdown_anchor
        env.filters["values_cell"] = values_cell

    def translate_enum(self, values: list[str]) -> str:
        # Pipes are escaped so the union stays inside one table cell
        return " \\| ".join(f"`{value}`" for value in values)

    def _prepare_component_context(self, component_name: str, component: Mapping[str, Any]) -> dict[str, Any]:
        context = super()._prepare_component_context(component_name, component)
        anatomy = component.get("anatomy")
        context.update(
            {
                "description": component.get("description") or "",
                "anatomy_text": "" if isinstance(anatomy, str) else _nested_text(anatomy),
                "styles_text": _nested_text(component.get("elementStyles")),
                "figma_styles_text": _nested_text(component.get("figmaStyles")),
                "tokens_text": _nested_text(component.get("tokens")),
            }
        )
        return context

    def serialize(self, data: Mapping[str, Any]) -> str:
        components = [
            self._prepare_component_context(str(name), component) for name, component in data.items() if isinstance(component, Mapping)
        ]

        table_of_contents = self.include_table_of_contents
        if table_of_contents is None:
            table_of_contents = len(components) > 1

        title = self.title
        if title is None:
            title = components[0]["TITLE"] if len(components) == 1 else DEFAULT_TITLE

        document = self.template.render(title=title, table_of_contents=table_of_contents, components=components)
        return document.rstrip("\n") + "\n"
