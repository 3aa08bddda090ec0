"""
Tree builder.

Turns canonical element records into a forest in a single pass. Ancestors
must precede descendants in the input, which the normalizer guarantees.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .nodes import ElementRecord, TreeNode

logger = logging.getLogger(__name__)


def build_tree(records: Iterable[ElementRecord]) -> list[TreeNode]:
    """
    Build the ordered forest for a list of element records.

    Records whose parent path has not been seen yet are kept as extra roots
    instead of being dropped.

    Args:
        records: Element records in canonical order

    Returns:
        Root nodes in input order
    """
    roots: list[TreeNode] = []
    nodes_by_path: dict[str, TreeNode] = {}

    for record in records:
        node = TreeNode.from_record(record)
        # Later duplicates take over the path so their children attach to them
        nodes_by_path[record.path] = node

        if not record.parent_path:
            roots.append(node)
            continue

        parent = nodes_by_path.get(record.parent_path)
        if parent is None or parent is node:
            logger.debug("Parent %r of element %r not found, keeping it as a root", record.parent_path, record.name)
            roots.append(node)
        else:
            parent.children.append(node)

    return roots
