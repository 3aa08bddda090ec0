"""
Export pipeline.

Ties the anatomy tree renderer and the serializers together:

1. Optionally replace each component's anatomy with its rendered tree
2. Serialize the metadata in the selected output format
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from .anatomy import render_anatomy_tree
from .config import AnatomyView, ExportConfig, OutputFormat
from .serializers import MarkdownSerializer, get_serializer
from .utils import unique_filenames

logger = logging.getLogger(__name__)


class ExportError(Exception):
    """Raised when export input cannot be processed.

    This can happen when:
    - The exported data is not a component name -> metadata mapping
    - The requested output format or anatomy view is unknown
    """

    pass


def _has_anatomy(component: Any) -> bool:
    return isinstance(component, Mapping) and bool(component.get("anatomy"))


def apply_anatomy_view(data: Mapping[str, Any], anatomy_view: AnatomyView | str) -> dict[str, Any]:
    """
    Present anatomy the way the selected view requires.

    For the tree view, components with anatomy get a shallow copy whose
    anatomy is replaced by the rendered tree text (prefixed by a newline so
    the tree starts on its own line). The input is never modified.

    Args:
        data: Component name -> metadata
        anatomy_view: "yaml" keeps anatomy data, "tree" renders it

    Returns:
        Component name -> metadata, ready for serialization
    """
    if AnatomyView(anatomy_view) != AnatomyView.TREE:
        return dict(data)

    result: dict[str, Any] = {}
    for name, component in data.items():
        if _has_anatomy(component):
            component = dict(component)
            component["anatomy"] = "\n" + render_anatomy_tree(component["anatomy"])
        result[name] = component
    return result


class ComponentExporter:
    """Exports component metadata according to an ExportConfig."""

    def __init__(self, data: Mapping[str, Any], config: ExportConfig | None = None):
        """
        Initialize the exporter.

        Args:
            data: Component name -> metadata, as produced by the extractor
            config: Export configuration (defaults to ExportConfig())

        Raises:
            ExportError: If data is not a mapping
        """
        if not isinstance(data, Mapping):
            raise ExportError(f"Expected a mapping of component name to metadata, got {type(data).__name__}")
        self.data = data
        self.config = config or ExportConfig()

    def _serializer(self, output_format: OutputFormat):
        if output_format == OutputFormat.MARKDOWN:
            return MarkdownSerializer(include_table_of_contents=self.config.include_table_of_contents)
        return get_serializer(output_format)

    def export(self) -> str:
        """Serialize all components in the configured format."""
        try:
            output_format = OutputFormat(self.config.output_format)
            anatomy_view = AnatomyView(self.config.anatomy_view)
        except ValueError as e:
            raise ExportError(str(e)) from e

        logger.debug("Exporting %d components as %s (anatomy view: %s)", len(self.data), output_format.value, anatomy_view.value)
        prepared = apply_anatomy_view(self.data, anatomy_view)
        return self._serializer(output_format).serialize(prepared)

    def split_markdown(self) -> list[tuple[str, str]]:
        """
        Render one Markdown document per component.

        Returns:
            (file name, document) pairs; file names are sanitized, unique and
            carry the ``.md`` extension
        """
        try:
            prepared = apply_anatomy_view(self.data, self.config.anatomy_view)
        except ValueError as e:
            raise ExportError(str(e)) from e
        filenames = unique_filenames([str(name) for name in prepared])

        documents = []
        for (name, component), filename in zip(prepared.items(), filenames):
            serializer = MarkdownSerializer(include_table_of_contents=False, title=str(name))
            documents.append((f"{filename}.md", serializer.serialize({name: component})))
        return documents


def export_components(data: Mapping[str, Any], config: ExportConfig | None = None) -> str:
    """Serialize component metadata with the given configuration."""
    return ComponentExporter(data, config).export()
