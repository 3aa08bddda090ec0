import pytest

from anatomy_export.anatomy import ElementRecord, build_tree, normalize_anatomy


def _records(*rows):
    return [ElementRecord(name, type_, path, parent) for name, type_, path, parent in rows]


def _all_nodes(roots):
    return [node for root in roots for node in root.walk()]


class TestBuildTree:
    """Test cases for single-pass tree construction"""

    def test_single_root_with_children(self):
        roots = build_tree(
            _records(
                ("Frame", "FRAME", "Frame", ""),
                ("Icon", "INSTANCE", "Frame > Icon", "Frame"),
                ("Label", "TEXT", "Frame > Label", "Frame"),
            )
        )
        assert [r.name for r in roots] == ["Frame"]
        assert [c.name for c in roots[0].children] == ["Icon", "Label"]

    def test_multiple_roots_in_input_order(self):
        roots = build_tree(_records(("B", "FRAME", "B", ""), ("A", "FRAME", "A", "")))
        assert [r.name for r in roots] == ["B", "A"]

    def test_orphan_becomes_root(self):
        roots = build_tree(
            _records(
                ("Frame", "FRAME", "Frame", ""),
                ("Lost", "TEXT", "Missing > Lost", "Missing"),
            )
        )
        assert [r.name for r in roots] == ["Frame", "Lost"]
        assert roots[1].children == []

    def test_child_before_parent_is_kept_as_root(self):
        roots = build_tree(
            _records(
                ("Label", "TEXT", "Frame > Label", "Frame"),
                ("Frame", "FRAME", "Frame", ""),
            )
        )
        assert [r.name for r in roots] == ["Label", "Frame"]

    def test_self_referencing_parent_does_not_cycle(self):
        roots = build_tree(_records(("Loop", "FRAME", "Loop", "Loop")))
        assert [r.name for r in roots] == ["Loop"]
        assert roots[0].children == []

    def test_duplicate_sibling_names_are_distinct_nodes(self):
        roots = build_tree(
            _records(
                ("Root", "FRAME", "Root", ""),
                ("Item", "FRAME", "Root > Item", "Root"),
                ("Dot", "ELLIPSE", "Root > Item > Dot", "Root > Item"),
                ("Item", "FRAME", "Root > Item", "Root"),
                ("Text", "TEXT", "Root > Item > Text", "Root > Item"),
            )
        )
        items = roots[0].children
        assert [c.name for c in items] == ["Item", "Item"]
        # Children follow the most recent node with their parent path
        assert [c.name for c in items[0].children] == ["Dot"]
        assert [c.name for c in items[1].children] == ["Text"]

    def test_empty_input(self):
        assert build_tree([]) == []


@pytest.mark.parametrize(
    "anatomy",
    [
        {
            "Frame": {"type": "FRAME", "path": "Frame"},
            "Body": {"type": "FRAME", "path": "Frame > Body"},
            "Title": {"type": "TEXT", "path": "Frame > Body > Title"},
            "Footer": {"type": "FRAME", "path": "Frame > Footer"},
            "Aside": {"type": "FRAME", "path": "Aside"},
        },
        [
            {"name": "Card", "type": "FRAME", "path": "Card", "parentPath": ""},
            {"name": "Media", "type": "RECTANGLE", "path": "Card > Media", "parentPath": "Card"},
            {"name": "Content", "type": "FRAME", "path": "Card > Content", "parentPath": "Card"},
            {"name": "Title", "type": "TEXT", "path": "Card > Content > Title", "parentPath": "Card > Content"},
            {"name": "Body", "type": "TEXT", "path": "Card > Content > Body", "parentPath": "Card > Content"},
        ],
    ],
    ids=["flat_mapping", "record_list"],
)
def test_every_node_reachable_once_with_matching_parent(anatomy):
    records = normalize_anatomy(anatomy)
    roots = build_tree(records)

    nodes = _all_nodes(roots)
    assert len(nodes) == len(records)
    assert len({id(node) for node in nodes}) == len(nodes)

    for root in roots:
        for node in root.walk():
            for child in node.children:
                assert child.parent_path == node.path


def test_record_list_depth_first_order_matches_input():
    anatomy = [
        {"name": "Root", "type": "FRAME", "path": "Root", "parentPath": ""},
        {"name": "Zeta", "type": "FRAME", "path": "Root > Zeta", "parentPath": "Root"},
        {"name": "Inner", "type": "TEXT", "path": "Root > Zeta > Inner", "parentPath": "Root > Zeta"},
        {"name": "Alpha", "type": "TEXT", "path": "Root > Alpha", "parentPath": "Root"},
    ]
    roots = build_tree(normalize_anatomy(anatomy))
    assert [node.name for node in _all_nodes(roots)] == ["Root", "Zeta", "Inner", "Alpha"]


def test_flat_mapping_siblings_in_lexicographic_order():
    anatomy = {
        "Root": {"type": "FRAME", "path": "Root"},
        "Zeta": {"type": "TEXT", "path": "Root > Zeta"},
        "Alpha": {"type": "TEXT", "path": "Root > Alpha"},
        "Mid": {"type": "TEXT", "path": "Root > Mid"},
    }
    roots = build_tree(normalize_anatomy(anatomy))
    assert [c.name for c in roots[0].children] == ["Alpha", "Mid", "Zeta"]
