"""
Tests for the token flattener.
"""

import pytest
from pydantic import ValidationError

from chuk_mcp_design.constants import TokenCategory
from chuk_mcp_design.tokens import color_subcategory, flatten, is_leaf, unwrap

PALETTE = {
    "primary-01": {
        "100": {"value": "#EAF3F9"},
        "500": {"value": "#0B96CC", "description": "Brand"},
    },
    "grey": {
        "dark": {
            "900": {"value": "#191919"},
        },
    },
    "white": {"value": "#FFF"},
}


class TestIsLeaf:
    """Tests for leaf detection."""

    def test_string_value_is_leaf(self):
        assert is_leaf({"value": "#FFF"})
        assert is_leaf({"value": "#FFF", "description": "White"})

    def test_group_is_not_leaf(self):
        assert not is_leaf({"500": {"value": "#FFF"}})

    def test_non_string_value_is_not_leaf(self):
        assert not is_leaf({"value": 12})
        assert not is_leaf("value")


class TestFlatten:
    """Tests for flatten()."""

    def test_paths_and_names(self):
        """Paths accumulate parent.key; names are hyphenated."""
        tokens = flatten(PALETTE, TokenCategory.COLOR, "properties/color/palette.json")
        assert [t.path for t in tokens] == [
            "color.primary-01.100",
            "color.primary-01.500",
            "color.grey.dark.900",
            "color.white",
        ]
        assert [t.name for t in tokens] == [
            "primary-01-100",
            "primary-01-500",
            "grey-dark-900",
            "white",
        ]

    def test_leaf_not_descended(self):
        """A leaf's own keys never become tokens."""
        tree = {"brand": {"value": "#123456", "description": "not a token"}}
        tokens = flatten(tree, TokenCategory.COLOR)
        assert len(tokens) == 1
        assert tokens[0].path == "color.brand"
        assert tokens[0].description == "not a token"

    def test_values_parsed(self):
        tokens = flatten(PALETTE, TokenCategory.COLOR)
        assert tokens[0].value_raw == "#EAF3F9"
        assert tokens[0].value_unit == "hex"
        assert tokens[0].value_number is None

    def test_numeric_leaf_values(self):
        tokens = flatten({"gap": {"value": "12px"}}, TokenCategory.SPACING, subcategory="gap")
        assert tokens[0].value_number == 12.0
        assert tokens[0].value_unit == "px"
        assert tokens[0].subcategory == "gap"

    def test_color_subcategory(self):
        """Colors strip a trailing numeric suffix from the first segment."""
        tokens = flatten(PALETTE, TokenCategory.COLOR)
        assert tokens[0].subcategory == "primary"
        assert tokens[2].subcategory == "grey"
        assert tokens[3].subcategory is None

    def test_source_file_recorded(self):
        tokens = flatten(PALETTE, TokenCategory.COLOR, "properties/color/palette.json")
        assert all(t.source_file == "properties/color/palette.json" for t in tokens)

    def test_variables_derived(self):
        token = flatten(PALETTE, TokenCategory.COLOR)[1]
        assert token.css_variable == "--color-primary-01-500"
        assert token.scss_variable == "$color-primary-01-500"

    def test_idempotent(self):
        """Flattening the same tree twice gives identical tokens."""
        first = flatten(PALETTE, TokenCategory.COLOR, "a.json")
        second = flatten(PALETTE, TokenCategory.COLOR, "a.json")
        assert first == second

    def test_deep_nesting(self):
        """Depth is not limited by recursion."""
        tree: dict = {"value": "#000"}
        for i in range(2000):
            tree = {f"l{i}": tree}
        tokens = flatten(tree, TokenCategory.COLOR)
        assert len(tokens) == 1
        assert tokens[0].path.count(".") == 2000

    def test_non_mapping_input(self):
        assert flatten(["not", "a", "tree"], TokenCategory.COLOR) == []
        assert flatten(None, TokenCategory.COLOR) == []

    def test_ignores_scalars_in_groups(self):
        tree = {"primary": {"500": {"value": "#000"}, "comment": "ignored"}}
        assert [t.path for t in flatten(tree, TokenCategory.COLOR)] == ["color.primary.500"]


class TestUnwrap:
    """Tests for outer key stripping."""

    def test_wrapped_and_unwrapped_match(self):
        wrapped = flatten(unwrap({"color": PALETTE}, "color"), TokenCategory.COLOR)
        unwrapped = flatten(unwrap(PALETTE, "color"), TokenCategory.COLOR)
        assert wrapped == unwrapped

    def test_other_keys_untouched(self):
        assert unwrap({"shadow": {}}, "color") == {"shadow": {}}


class TestColorSubcategory:
    """Tests for the color subcategory rule."""

    @pytest.mark.parametrize(
        "path,expected",
        [
            ("primary-01.500", "primary"),
            ("secondary-02.100", "secondary"),
            ("grey.900", "grey"),
            ("danger-600.100", "danger"),
            ("white", None),
        ],
    )
    def test_rule(self, path, expected):
        assert color_subcategory(path) == expected


class TestTokenModel:
    """Tests for Token invariants."""

    def test_variables_cannot_be_set(self):
        token = flatten(PALETTE, TokenCategory.COLOR)[0]
        with pytest.raises((ValidationError, AttributeError, TypeError)):
            token.css_variable = "--other"

    def test_empty_path_rejected(self):
        from chuk_mcp_design.models import Token

        with pytest.raises(ValidationError):
            Token(category=TokenCategory.COLOR, name="x", path="", value_raw="#000")
