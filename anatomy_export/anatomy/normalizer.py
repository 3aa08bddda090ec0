"""
Anatomy normalizer.

The extractor has emitted anatomy in two shapes over time:

1. A flat mapping keyed by element name, each value holding ``type`` and a
   chevron-joined ``path`` (the legacy shape).
2. An ordered list of records carrying ``name``, ``type``, ``path`` and
   ``parentPath`` in document order.

Both are turned into one canonical list of ElementRecord here so that the
tree builder and variant grouper never branch on the shape.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .nodes import PATH_SEPARATOR, ElementRecord


def _join_path(path: Any) -> str:
    """Accept a path as a joined string or as a list of names."""
    if path is None:
        return ""
    if isinstance(path, (list, tuple)):
        return PATH_SEPARATOR.join(str(segment) for segment in path)
    return str(path)


def _type_name(value: Any) -> str:
    return "" if value is None else str(value)


def _parent_of(path: str) -> str:
    segments = path.split(PATH_SEPARATOR)
    return PATH_SEPARATOR.join(segments[:-1])


def _canonical_key(record: ElementRecord) -> tuple[str, ...]:
    # Tuple comparison orders segment by segment and puts a prefix before any
    # longer path sharing it, so parents always precede their children.
    return tuple(record.segments)


def _from_mapping(anatomy: Mapping[str, Any]) -> list[ElementRecord]:
    records = []
    for name, data in anatomy.items():
        if not isinstance(data, Mapping):
            continue
        path = _join_path(data.get("path")) or str(name)
        records.append(
            ElementRecord(
                name=str(name),
                type=_type_name(data.get("type")),
                path=path,
                parent_path=_parent_of(path),
            )
        )
    return records


def _from_sequence(anatomy: list[Any]) -> list[ElementRecord]:
    records = []
    for item in anatomy:
        if not isinstance(item, Mapping):
            continue
        name = _type_name(item.get("name"))
        parent_path = item.get("parentPath", item.get("parent_path"))
        records.append(
            ElementRecord(
                name=name,
                type=_type_name(item.get("type")),
                path=_join_path(item.get("path")) or name,
                parent_path=_join_path(parent_path),
            )
        )
    return records


def normalize_anatomy(anatomy: Any, canonical_order: bool = True) -> list[ElementRecord]:
    """
    Convert anatomy data in either accepted shape to canonical records.

    Args:
        anatomy: Flat mapping keyed by element name, or an ordered list of records
        canonical_order: Sort flat-mapping records by path; False keeps key order

    Returns:
        Records in canonical order (empty for absent or malformed input)
    """
    if isinstance(anatomy, Mapping):
        records = _from_mapping(anatomy)
        return sorted(records, key=_canonical_key) if canonical_order else records
    if isinstance(anatomy, (list, tuple)):
        return _from_sequence(list(anatomy))
    return []


def is_variant_anatomy(anatomy: Any) -> bool:
    """
    Check whether anatomy is keyed by variant name rather than element name.

    A variant mapping holds per-variant element data: either a record list,
    or a nested mapping that has neither ``type`` nor ``path`` of its own.
    """
    if not isinstance(anatomy, Mapping) or not anatomy:
        return False
    first_value = next(iter(anatomy.values()))
    if isinstance(first_value, (list, tuple)):
        return True
    return isinstance(first_value, Mapping) and "type" not in first_value and "path" not in first_value


def normalize_variants(anatomy: Mapping[str, Any]) -> dict[str, list[ElementRecord]]:
    """Normalize every variant of a variant mapping, keeping variant order."""
    return {str(variant): normalize_anatomy(data) for variant, data in anatomy.items()}
