"""
Property type mapping shared by every schema format.

Declared property kinds are resolved once into a PropType; each serializer
then translates it with its own TYPE_MAP so the semantics stay identical
while the surface syntax differs.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class PropKind(Enum):
    """Kind of a component property."""

    BOOLEAN = "boolean"
    STRING = "string"
    ENUM = "enum"  # Union of literal values
    INSTANCE = "instance"  # Opaque reference to another component
    NUMBER = "number"
    UNSPECIFIED = "unspecified"  # Open / untyped


@dataclass
class PropType:
    """A resolved property type."""

    kind: PropKind = PropKind.UNSPECIFIED

    # Allowed literal values, enums only
    values: list[str] = field(default_factory=list)


def resolve_prop_type(descriptor: Any) -> PropType:
    """
    Resolve a property descriptor to its mapped type.

    Args:
        descriptor: Mapping such as {"type": "enum", "values": ["sm", "md"]}

    Returns:
        The resolved type; unknown or missing kinds resolve to UNSPECIFIED
    """
    if not isinstance(descriptor, Mapping):
        return PropType()

    declared = descriptor.get("type", descriptor.get("kind"))
    try:
        kind = PropKind(declared)
    except ValueError:
        return PropType()

    if kind == PropKind.ENUM:
        values = descriptor.get("values") or []
        return PropType(kind=kind, values=[str(v) for v in values])

    return PropType(kind=kind)
