"""
Tests for the TypeScript and JSDoc serializers.
"""

import difflib
import json
from pathlib import Path

import pytest

from anatomy_export.serializers import JsDocSerializer, TypeScriptSerializer, serialize, serialize_component

TEST_DATA = Path(__file__).parent / "test_data"


def load_components():
    with open(TEST_DATA / "components.json", encoding="utf-8") as f:
        return json.load(f)


def assert_matches_reference(generated, reference_name):
    with open(TEST_DATA / "reference" / reference_name, encoding="utf-8") as f:
        reference = f.read()

    generated_normalized = generated.replace("\r\n", "\n").strip()
    reference_normalized = reference.replace("\r\n", "\n").strip()

    if generated_normalized != reference_normalized:
        diff = difflib.unified_diff(
            reference_normalized.splitlines(keepends=True),
            generated_normalized.splitlines(keepends=True),
            fromfile="reference",
            tofile="generated",
            lineterm="",
        )
        pytest.fail(f"Output does not match {reference_name}\n\nDiff:\n{''.join(diff)}")


@pytest.mark.parametrize(
    "output_format, reference_name",
    [("typescript", "icon_button.ts"), ("jsdoc", "icon_button.js")],
)
def test_reference_output(output_format, reference_name):
    components = load_components()
    generated = serialize_component("Icon Button", components["Icon Button"], output_format)
    assert_matches_reference(generated, reference_name)


class TestTypeScriptSerializer:
    """Test cases for interface declarations"""

    def test_enum_union(self):
        out = serialize_component("Chip", {"props": {"size": {"type": "enum", "values": ["sm", "md", "lg"]}}}, "typescript")
        assert "  size: 'sm' | 'md' | 'lg';" in out

    def test_enum_without_values_is_string(self):
        out = serialize_component("Chip", {"props": {"size": {"type": "enum"}}}, "typescript")
        assert "  size: string;" in out

    def test_kind_alias(self):
        out = serialize_component("Chip", {"props": {"count": {"kind": "number"}}}, "typescript")
        assert "  count: number;" in out

    def test_empty_sections_omitted(self):
        out = serialize_component("Chip", {"props": {"on": {"type": "boolean"}}, "anatomy": {}, "elementStyles": {}, "tokens": {}}, "typescript")
        assert out == "interface ChipProps {\n  on: boolean;\n}\n\n"

    def test_no_sections(self):
        assert serialize_component("Chip", {}, "typescript") == ""

    def test_component_name_whitespace_stripped(self):
        out = serialize_component("Text  Field\tLarge", {"props": {"value": {"type": "string"}}}, "typescript")
        assert out.startswith("interface TextFieldLargeProps {")

    def test_non_identifier_member_quoted(self):
        out = serialize_component("Chip", {"props": {"Show Icon": {"type": "boolean"}}}, "typescript")
        assert "  'Show Icon': boolean;" in out

    def test_record_list_anatomy_in_input_order(self):
        anatomy = [
            {"name": "Root", "type": "FRAME", "path": "Root", "parentPath": ""},
            {"name": "Zeta", "type": "TEXT", "path": "Root > Zeta", "parentPath": "Root"},
            {"name": "Alpha", "type": "TEXT", "path": "Root > Alpha", "parentPath": "Root"},
        ]
        out = serialize_component("Chip", {"anatomy": anatomy}, "typescript")
        assert out == (
            "interface ChipAnatomy {\n"
            "  Root: 'FRAME'; // Root\n"
            "  Zeta: 'TEXT'; // Root > Zeta\n"
            "  Alpha: 'TEXT'; // Root > Alpha\n"
            "}\n\n"
        )

    def test_variant_anatomy_merges_elements(self):
        components = load_components()
        out = serialize_component("Badge", components["Badge"], "typescript")
        assert "  Root: 'FRAME'; // Root\n" in out
        assert "  Text: 'TEXT'; // Root > Text\n" in out
        assert "  Dot: 'ELLIPSE'; // Root > Dot\n" in out
        assert out.count("  Root: 'FRAME';") == 1

    def test_tree_anatomy_rendered_as_comment(self):
        out = serialize_component("Card", {"anatomy": "\n📦 Card\n   └─ type: FRAME\n\n📦 Extra\n   └─ type: TEXT"}, "typescript")
        assert out == (
            "/**\n"
            " * CardAnatomy\n"
            " *\n"
            " * 📦 Card\n"
            " *    └─ type: FRAME\n"
            " *\n"
            " * 📦 Extra\n"
            " *    └─ type: TEXT\n"
            " */\n\n"
        )

    def test_style_attributes_only_when_present(self):
        styles = {"Box": {"width": 10, "height": None, "padding": 4}}
        out = serialize_component("Chip", {"elementStyles": styles}, "typescript")
        assert out == "interface ChipStyles {\n  Box: {\n    width?: number;\n    padding?: number;\n  };\n}\n\n"

    def test_token_list_is_untyped(self):
        out = serialize_component("Chip", {"tokens": {"colors": [{"node": "Box", "variableName": "bg"}]}}, "typescript")
        assert "  colors: any;" in out

    def test_literal_escaping(self):
        out = serialize_component("Chip", {"props": {"mode": {"type": "enum", "values": ["it's"]}}}, "typescript")
        assert "  mode: 'it\\'s';" in out

    def test_multiple_components(self):
        out = serialize(load_components(), "typescript")
        assert out.index("interface IconButtonProps") < out.index("interface BadgeProps")
        assert "interface BadgeProps {\n  Size: 'sm' | 'md' | 'lg';\n}" in out

    def test_non_mapping_component_skipped(self):
        assert TypeScriptSerializer().serialize({"Broken": "text", "Chip": {"props": {"on": {"type": "boolean"}}}}).startswith("interface ChipProps")


class TestJsDocSerializer:
    """Test cases for documentation-comment typedefs"""

    def test_enum_parenthesized(self):
        out = serialize_component("Chip", {"props": {"size": {"type": "enum", "values": ["sm", "md", "lg"]}}}, "jsdoc")
        assert " * @property {('sm'|'md'|'lg')} size\n" in out

    def test_unknown_kind(self):
        out = serialize_component("Chip", {"props": {"slot": {"type": "SLOT"}}}, "jsdoc")
        assert " * @property {*} slot\n" in out

    def test_instance(self):
        out = serialize_component("Chip", {"props": {"icon": {"type": "instance"}}}, "jsdoc")
        assert " * @property {ReactNode} icon\n" in out

    def test_empty_sections_omitted(self):
        out = serialize_component("Chip", {"props": {}, "tokens": {"Box": {"fill": "$bg"}}}, "jsdoc")
        assert out == "/**\n * @typedef {Object} ChipTokens\n * @property {Object} Box\n */\n\n"

    def test_tree_anatomy(self):
        out = JsDocSerializer().serialize({"Card": {"anatomy": "\n📦 Card\n   └─ type: FRAME"}})
        assert out == "/**\n * @typedef {string} CardAnatomy\n *\n * 📦 Card\n *    └─ type: FRAME\n */\n\n"
