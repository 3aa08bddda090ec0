"""Component Anatomy Exporter

A Python package for turning extracted design component metadata into text.
Rebuilds child-element anatomy trees, groups structurally identical variants,
and serializes props, anatomy, styles and tokens as JSON, YAML-style nested
text, TypeScript interfaces, JSDoc typedefs or Markdown documentation.
"""

__version__ = "1.0.0"

from .anatomy import (
    ElementRecord,
    TreeNode,
    VariantGroup,
    VariantGrouping,
    build_tree,
    group_variants,
    normalize_anatomy,
    render_anatomy_tree,
    render_forest,
)
from .config import AnatomyView, ExportConfig, OutputFormat
from .export import ComponentExporter, ExportError, apply_anatomy_view, export_components
from .serializers import get_serializer, serialize, serialize_component

__all__ = [
    "ElementRecord",
    "TreeNode",
    "VariantGroup",
    "VariantGrouping",
    "normalize_anatomy",
    "build_tree",
    "group_variants",
    "render_forest",
    "render_anatomy_tree",
    "AnatomyView",
    "ExportConfig",
    "OutputFormat",
    "ComponentExporter",
    "ExportError",
    "apply_anatomy_view",
    "export_components",
    "get_serializer",
    "serialize",
    "serialize_component",
]
