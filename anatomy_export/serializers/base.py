"""
Base classes for schema serializers.

Defines the interface that all output formats implement, plus the shared
template machinery used by the typed formats.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import jinja2

from ..anatomy import is_variant_anatomy, normalize_anatomy
from ..config import OutputFormat
from ..utils import sanitize_component_name
from .type_mapping import PropKind, PropType, resolve_prop_type

# Style attributes understood by the typed formats, in declaration order
STYLE_ATTRIBUTES: dict[str, PropKind] = {
    "fills": PropKind.UNSPECIFIED,
    "strokes": PropKind.UNSPECIFIED,
    "effects": PropKind.UNSPECIFIED,
    "fontSize": PropKind.NUMBER,
    "fontWeight": PropKind.NUMBER,
    "width": PropKind.NUMBER,
    "height": PropKind.NUMBER,
    "padding": PropKind.NUMBER,
    "cornerRadius": PropKind.NUMBER,
}


class SchemaSerializer(ABC):
    """Abstract base class for output formats."""

    FORMAT: OutputFormat

    @abstractmethod
    def serialize(self, data: Mapping[str, Any]) -> str:
        """
        Serialize exported components.

        Args:
            data: Component name -> component metadata

        Returns:
            The document text
        """


class TemplateSerializer(SchemaSerializer):
    """Serializer rendering each component through a Jinja2 template."""

    # Type mapping from property kinds to the format's type syntax
    TYPE_MAP: dict[PropKind, str] = {}

    # Template directory name and file name
    TEMPLATE_LANG: str = ""
    TEMPLATE_NAME: str = ""

    def __init__(self):
        self._setup_templates()

    def _setup_templates(self) -> None:
        """Set up Jinja2 templates."""
        template_dir = Path(__file__).parent.parent / "templates" / self.TEMPLATE_LANG
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(template_dir)),
            lstrip_blocks=True,
            trim_blocks=True,
        )
        self._add_filters(self.jinja_env)
        self.template = self.jinja_env.get_template(self.TEMPLATE_NAME)

    def _add_filters(self, env: jinja2.Environment) -> None:
        """Hook for format-specific filters."""

    @abstractmethod
    def translate_enum(self, values: list[str]) -> str:
        """
        Translate a non-empty list of enum literals to a union type.

        Args:
            values: Allowed literal values

        Returns:
            Format-specific union type string
        """

    def translate_type(self, prop_type: PropType) -> str:
        """Translate a resolved property type to the format's type syntax."""
        if prop_type.kind == PropKind.ENUM and prop_type.values:
            return self.translate_enum(prop_type.values)
        if prop_type.kind == PropKind.ENUM:
            return self.TYPE_MAP[PropKind.STRING]
        return self.TYPE_MAP[prop_type.kind]

    def serialize(self, data: Mapping[str, Any]) -> str:
        result = ""
        for component_name, component in data.items():
            if not isinstance(component, Mapping):
                continue
            result += self.template.render(self._prepare_component_context(str(component_name), component))
        return result

    def _prepare_component_context(self, component_name: str, component: Mapping[str, Any]) -> dict[str, Any]:
        """
        Prepare the template context for one component.

        Args:
            component_name: Name as exported (used verbatim in titles)
            component: Component metadata

        Returns:
            Dictionary of template variables
        """
        anatomy = component.get("anatomy") or {}

        return {
            "TITLE": component_name,
            "NAME": sanitize_component_name(component_name),
            "props": self._prepare_props(component.get("props") or {}),
            "anatomy": [] if isinstance(anatomy, str) else anatomy_fields(anatomy),
            "anatomy_tree": anatomy.strip("\n").split("\n") if isinstance(anatomy, str) and anatomy.strip() else [],
            "styles": self._prepare_styles(component.get("elementStyles") or {}),
            "tokens": self._prepare_tokens(component.get("tokens") or {}),
        }

    def _prepare_props(self, props: Any) -> list[dict[str, Any]]:
        if not isinstance(props, Mapping):
            return []
        fields = []
        for prop_name, descriptor in props.items():
            prop_type = resolve_prop_type(descriptor)
            fields.append(
                {
                    "name": prop_name,
                    "kind": prop_type.kind.value,
                    "type": self.translate_type(prop_type),
                    "literals": prop_type.values,
                }
            )
        return fields

    def _prepare_styles(self, element_styles: Any) -> list[dict[str, Any]]:
        if not isinstance(element_styles, Mapping):
            return []
        styles = []
        for element_name, style in element_styles.items():
            if not isinstance(style, Mapping):
                continue
            attributes = [
                {"name": attribute, "type": self.TYPE_MAP[kind]}
                for attribute, kind in STYLE_ATTRIBUTES.items()
                if style.get(attribute) is not None
            ]
            styles.append({"name": element_name, "attributes": attributes})
        return styles

    def _prepare_tokens(self, tokens: Any) -> list[dict[str, Any]]:
        if not isinstance(tokens, Mapping):
            return []
        entries = []
        for element_name, element_tokens in tokens.items():
            if not element_tokens:
                continue
            keys = list(element_tokens) if isinstance(element_tokens, Mapping) else None
            entries.append({"name": element_name, "token_keys": keys})
        return entries


def anatomy_fields(anatomy: Any) -> list[dict[str, str]]:
    """
    Flatten anatomy into one field per element name, in key order.

    Variant anatomy contributes the elements of every variant; the first
    occurrence of an element name wins.
    """
    if is_variant_anatomy(anatomy):
        records = [record for variant in anatomy.values() for record in normalize_anatomy(variant, canonical_order=False)]
    else:
        records = normalize_anatomy(anatomy, canonical_order=False)

    fields: dict[str, dict[str, str]] = {}
    for record in records:
        fields.setdefault(record.name, {"name": record.name, "type": record.type, "path": record.path})
    return list(fields.values())


_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


def is_identifier(name: str) -> bool:
    """Whether a name can be used as a bare member name."""
    return bool(_IDENTIFIER.match(name))
