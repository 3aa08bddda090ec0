"""
Anatomy node definitions.

These nodes represent a component's child-element structure once it has
been normalized from one of the accepted wire shapes.
"""

from __future__ import annotations

import json
from collections.abc import Iterator
from dataclasses import dataclass, field

# Separator used by the extractor to join element names into a path
PATH_SEPARATOR = " > "


@dataclass
class ElementRecord:
    """One element of a component's anatomy."""

    name: str = ""
    type: str = ""  # Element category, e.g. "FRAME", "TEXT"
    path: str = ""  # Full ancestry joined with PATH_SEPARATOR
    parent_path: str = ""  # Empty for root elements

    @property
    def segments(self) -> list[str]:
        """Path split into element names."""
        return self.path.split(PATH_SEPARATOR) if self.path else []

    @property
    def triple(self) -> tuple[str, str, str]:
        return (self.name, self.type, self.path)


@dataclass
class TreeNode:
    """An element record with its ordered children."""

    name: str = ""
    type: str = ""
    path: str = ""
    parent_path: str = ""
    children: list[TreeNode] = field(default_factory=list)

    @staticmethod
    def from_record(record: ElementRecord) -> TreeNode:
        return TreeNode(
            name=record.name,
            type=record.type,
            path=record.path,
            parent_path=record.parent_path,
        )

    def walk(self) -> Iterator[TreeNode]:
        """Yield this node and its descendants, depth first."""
        yield self
        for child in self.children:
            yield from child.walk()


@dataclass
class VariantGroup:
    """Variants sharing one structural signature.

    Attributes:
        triples: Ordered (name, type, path) triples of the group's anatomy
        variants: Member variant names in first-seen order
    """

    triples: tuple[tuple[str, str, str], ...] = ()
    variants: list[str] = field(default_factory=list)

    @property
    def signature(self) -> str:
        """Serialized form of the structural signature."""
        return json.dumps([list(triple) for triple in self.triples], ensure_ascii=False)

    @property
    def representative(self) -> str:
        return self.variants[0]


@dataclass
class VariantGrouping:
    """Ordered partition of a component's variants by anatomy shape."""

    groups: list[VariantGroup] = field(default_factory=list)

    @property
    def is_uniform(self) -> bool:
        # Every variant shares one shape, so the anatomy is shown once
        return len(self.groups) == 1

    def variant_names(self) -> list[str]:
        return [name for group in self.groups for name in group.variants]
