"""
Variant grouper.

Partitions the variants of a multi-shape component into groups whose
anatomies are structurally identical, so each distinct shape is rendered
once.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from .nodes import ElementRecord, VariantGroup, VariantGrouping
from .normalizer import normalize_anatomy

logger = logging.getLogger(__name__)


def anatomy_signature(records: Iterable[ElementRecord]) -> tuple[tuple[str, str, str], ...]:
    """Ordered (name, type, path) triples of an anatomy."""
    return tuple(record.triple for record in records)


def group_variants(variants: Mapping[str, Any]) -> VariantGrouping:
    """
    Group variants whose normalized anatomies match.

    Each candidate is compared against the first member of every existing
    group in creation order and joins the first match; otherwise it opens a
    new group. Two anatomies match when they have the same length and the
    same triple at every position.

    Args:
        variants: Variant name -> anatomy data (either accepted shape)

    Returns:
        Groups in first-seen order, members in first-seen order
    """
    grouping = VariantGrouping()

    for variant_name, anatomy in variants.items():
        triples = anatomy_signature(normalize_anatomy(anatomy))

        for group in grouping.groups:
            if group.triples == triples:
                group.variants.append(str(variant_name))
                break
        else:
            grouping.groups.append(VariantGroup(triples=triples, variants=[str(variant_name)]))

    logger.debug("Grouped %d variants into %d anatomy shapes", len(variants), len(grouping.groups))
    return grouping
