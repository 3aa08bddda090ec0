"""
Tree renderer.

Renders anatomy forests as box-drawing text:

    📦 Frame
       └─ type: FRAME
       ├─ Icon (INSTANCE)
       └─ Label (TEXT)

Components with several structural variants get one section per group of
identical variants, separated by a horizontal rule.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .grouper import group_variants
from .nodes import TreeNode, VariantGroup, VariantGrouping
from .normalizer import is_variant_anatomy, normalize_anatomy
from .tree_builder import build_tree

ROOT_ICON = "📦"
BRANCH = "├─ "
LAST_BRANCH = "└─ "
PIPE = "│  "
SPACE = "   "
RULE_CHAR = "─"
RULE_WIDTH = 60
UNKNOWN_TYPE = "UNKNOWN"


def _render_node(node: TreeNode, prefix: str, is_last: bool, lines: list[str]) -> None:
    connector = LAST_BRANCH if is_last else BRANCH
    lines.append(f"{prefix}{connector}{node.name} ({node.type or UNKNOWN_TYPE})")

    child_prefix = prefix + (SPACE if is_last else PIPE)
    _render_children(node, child_prefix, lines)


def _render_children(node: TreeNode, prefix: str, lines: list[str]) -> None:
    last_index = len(node.children) - 1
    for index, child in enumerate(node.children):
        _render_node(child, prefix, index == last_index, lines)


def _render_root(root: TreeNode, lines: list[str]) -> None:
    lines.append(f"{ROOT_ICON} {root.name}")
    lines.append(f"{SPACE}{LAST_BRANCH}type: {root.type or UNKNOWN_TYPE}")
    _render_children(root, SPACE, lines)


def render_forest(roots: list[TreeNode]) -> str:
    """
    Render a forest, one block per root separated by a blank line.

    Args:
        roots: Root nodes in display order

    Returns:
        Rendered text without a trailing newline
    """
    lines: list[str] = []
    for index, root in enumerate(roots):
        if index > 0:
            lines.append("")
        _render_root(root, lines)
    return "\n".join(lines)


def _group_header(group: VariantGroup) -> str:
    if len(group.variants) == 1:
        return f"[Variant: {group.variants[0]}]"
    return f"[Variants: {', '.join(group.variants)}]"


def render_variant_groups(grouping: VariantGrouping, forests: Mapping[str, list[TreeNode]]) -> str:
    """
    Render one section per variant group.

    Args:
        grouping: Variant groups in display order
        forests: Variant name -> forest; only each group's first member is used

    Returns:
        Rendered text with a header line per group
    """
    lines: list[str] = []
    for index, group in enumerate(grouping.groups):
        if index > 0:
            lines.extend(["", RULE_CHAR * RULE_WIDTH, ""])
        lines.append(_group_header(group))
        lines.append("")
        lines.append(render_forest(forests.get(group.representative, [])))
    return "\n".join(lines)


def render_anatomy_tree(anatomy: Any) -> str:
    """
    Render anatomy data in any accepted shape as tree text.

    Args:
        anatomy: Element mapping, element list, or variant name -> element data

    Returns:
        Tree text, or an empty string for absent or malformed anatomy
    """
    if not isinstance(anatomy, (Mapping, list, tuple)) or not anatomy:
        return ""

    if not is_variant_anatomy(anatomy):
        return render_forest(build_tree(normalize_anatomy(anatomy)))

    grouping = group_variants(anatomy)
    if grouping.is_uniform:
        first_variant = next(iter(anatomy))
        return render_forest(build_tree(normalize_anatomy(anatomy[first_variant])))

    forests = {group.representative: build_tree(normalize_anatomy(anatomy[group.representative])) for group in grouping.groups}
    return render_variant_groups(grouping, forests)
