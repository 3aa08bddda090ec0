"""
Configuration for component metadata export.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class OutputFormat(str, Enum):
    """Target text format of an export."""

    JSON = "json"
    YAML = "yaml"
    TYPESCRIPT = "typescript"
    JSDOC = "jsdoc"
    MARKDOWN = "markdown"


class AnatomyView(str, Enum):
    """How anatomy is presented inside the exported document."""

    YAML = "yaml"  # Anatomy kept as nested data
    TREE = "tree"  # Anatomy replaced by box-drawing tree text


@dataclass
class ExportConfig:
    """Configuration options for an export."""

    # Format produced by export_components
    output_format: OutputFormat = OutputFormat.YAML

    # Presentation of anatomy data
    anatomy_view: AnatomyView = AnatomyView.YAML

    # Markdown only: None = table of contents when exporting several components
    include_table_of_contents: bool | None = None

    @staticmethod
    def from_dict(d: dict) -> ExportConfig:
        """Create a config from a dictionary."""
        if not isinstance(d, dict):
            raise ValueError(f"expected a JSON object, got {type(d).__name__}")
        config = ExportConfig()
        for k, v in d.items():
            if hasattr(config, k):
                setattr(config, k, v)
        config.output_format = OutputFormat(config.output_format)
        config.anatomy_view = AnatomyView(config.anatomy_view)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "output_format": self.output_format.value,
            "anatomy_view": self.anatomy_view.value,
            "include_table_of_contents": self.include_table_of_contents,
        }
