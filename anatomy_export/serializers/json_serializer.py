"""
JSON serializer: a structural dump of the metadata mapping.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from ..config import OutputFormat
from .base import SchemaSerializer


class JsonSerializer(SchemaSerializer):
    """Pretty-printed JSON with two-space indentation."""

    FORMAT = OutputFormat.JSON

    def serialize(self, data: Mapping[str, Any]) -> str:
        return json.dumps(data, indent=2, ensure_ascii=False)
