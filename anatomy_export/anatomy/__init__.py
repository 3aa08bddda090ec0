"""
Anatomy - tree reconstruction for component child elements.

1. Normalizer: accept the flat-mapping or record-list anatomy shape
2. Tree builder: build the parent/child forest from canonical records
3. Grouper: partition variants by identical structure
4. Renderer: render forests and variant groups as box-drawing text
"""

from __future__ import annotations

from .grouper import anatomy_signature, group_variants
from .nodes import PATH_SEPARATOR, ElementRecord, TreeNode, VariantGroup, VariantGrouping
from .normalizer import is_variant_anatomy, normalize_anatomy, normalize_variants
from .renderer import render_anatomy_tree, render_forest, render_variant_groups
from .tree_builder import build_tree

__all__ = [
    "PATH_SEPARATOR",
    "ElementRecord",
    "TreeNode",
    "VariantGroup",
    "VariantGrouping",
    "normalize_anatomy",
    "normalize_variants",
    "is_variant_anatomy",
    "build_tree",
    "anatomy_signature",
    "group_variants",
    "render_forest",
    "render_variant_groups",
    "render_anatomy_tree",
]
