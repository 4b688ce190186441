"""
Tests for the SQLite design index.

Tests cover:
- Building the index and reading it back
- Full-text search over tokens, documentation and icons
- Error mapping for rejected expressions and missing files
"""

from pathlib import Path

import pytest

from chuk_mcp_design.constants import TokenCategory
from chuk_mcp_design.errors import IndexQuerySyntaxError, StoreError, StoreUnavailableError
from chuk_mcp_design.search import SearchExecutor
from chuk_mcp_design.store import DesignStore, IndexBuilder, escape_like
from chuk_mcp_design.tokens import collect_tokens


class TestOpen:
    """Tests for opening the store."""

    def test_missing_file(self, temp_dir: Path):
        with pytest.raises(StoreUnavailableError, match="chuk-mcp-design-index"):
            DesignStore(temp_dir / "missing.db")

    def test_unavailable_is_a_store_error(self, temp_dir: Path):
        with pytest.raises(StoreError):
            DesignStore(temp_dir / "missing.db")

    def test_context_manager(self, db_path: Path):
        with DesignStore(db_path) as store:
            assert store.get_stats()["documentation"] == 3

    def test_read_only(self, store: DesignStore):
        with pytest.raises(StoreError):
            store._fetch("DELETE FROM tokens")


class TestTokens:
    """Tests for token queries."""

    def test_stats(self, store: DesignStore, tokens_path: Path):
        stats = store.get_stats()
        assert stats["tokens"] == len(collect_tokens(tokens_path).tokens)
        assert stats["documentation"] == 3
        assert stats["icons"] == 5
        assert stats["components"] == 3
        assert stats["css_utilities"] == 2

    def test_get_by_category_in_build_order(self, store: DesignStore):
        tokens = store.get_tokens(TokenCategory.COLOR)
        assert [t.path for t in tokens][:3] == [
            "color.grey.000",
            "color.grey.900",
            "color.white",
        ]
        assert all(t.category == TokenCategory.COLOR for t in tokens)

    def test_get_by_category_string(self, store: DesignStore):
        assert len(store.get_tokens("radius")) == 3

    def test_get_all(self, store: DesignStore):
        categories = {t.category for t in store.get_tokens("all")}
        assert categories == set(TokenCategory)

    def test_round_trip_fields(self, store: DesignStore):
        token = store.get_token_by_path("typography.font.05")
        assert token is not None
        assert token.value_raw == "1.125"
        assert token.value_number == 1.125
        assert token.value_unit == "rem"
        assert token.value_computed == "18px"
        assert token.description == "Body large"
        assert token.source_file == "properties/size/font.json"
        assert token.css_variable == "--typography-font-05"

    def test_missing_path(self, store: DesignStore):
        assert store.get_token_by_path("color.nope") is None

    def test_shadow_properties_keep_order(self, store: DesignStore):
        shadow = store.get_token_by_path("shadow.s")
        assert [p.property for p in shadow.properties] == ["x", "y", "blur", "spread", "opacity"]
        assert shadow.properties[2].value_number == 5.0

    def test_by_subcategory(self, store: DesignStore):
        gutters = store.get_tokens_by_subcategory(TokenCategory.GRID, "gutter")
        assert [t.name for t in gutters] == ["gutter-s", "gutter-m", "gutter-l"]

    def test_search(self, store: DesignStore):
        tokens = store.search_tokens("primary*")
        assert tokens
        assert all(t.path.startswith("color.primary") for t in tokens)

    def test_search_limit(self, store: DesignStore):
        assert len(store.search_tokens("mu*", limit=2)) == 2


class TestDocumentation:
    """Tests for documentation queries."""

    def test_exact_phrase(self, store: DesignStore):
        results = store.search_documentation('"button variants"')
        assert [r.path for r in results] == ["/components/buttons/variants/"]
        assert "<mark>" in results[0].snippet

    def test_get_by_path(self, store: DesignStore):
        page = store.get_documentation_by_path("/components/buttons/variants/")
        assert page.title == "Button variants"
        assert page.keywords == ("button", "cta")
        assert store.get_documentation_by_path("/components/buttons/").keywords == ()
        assert store.get_documentation_by_path("/nope/") is None

    def test_unterminated_phrase_rejected(self, store: DesignStore):
        with pytest.raises(IndexQuerySyntaxError) as exc_info:
            store.search_documentation('"button')
        assert exc_info.value.expression == '"button'

    def test_hyphenated_prefix_rejected(self, store: DesignStore):
        with pytest.raises(IndexQuerySyntaxError):
            store.search_tokens("font-size*")


class TestIcons:
    """Tests for icon queries."""

    def test_search(self, store: DesignStore):
        icons = store.search_icons("cart*")
        assert sorted(i.name for i in icons) == ["Cart16", "Cart24", "Cart64"]

    def test_size_filter(self, store: DesignStore):
        icons = store.search_icons("cart*", size=24)
        assert [i.name for i in icons] == ["Cart24"]

    def test_type_filter(self, store: DesignStore):
        assert store.search_icons("cart*", icon_type="navigation") == []
        assert len(store.search_icons("cart*", icon_type="shopping")) == 3

    def test_get_by_name_ignores_case(self, store: DesignStore):
        icon = store.get_icon_by_name("cart24")
        assert icon.name == "Cart24"
        assert icon.view_box == "0 0 24 24"
        assert store.get_icon_by_name("Spaceship16") is None

    def test_find_like(self, store: DesignStore):
        assert [i.name for i in store.find_icons_like("art")] == ["Cart16", "Cart24", "Cart64"]

    def test_find_like_wildcards_are_literal(self, store: DesignStore):
        assert store.find_icons_like("%") == []
        assert store.find_icons_like("_") == []
        assert store.find_icons_like("C_rt") == []

    def test_escape_like(self):
        assert escape_like("50%_off") == "50\\%\\_off"
        assert escape_like("a\\b") == "a\\\\b"

    def test_types(self, store: DesignStore):
        assert store.list_icon_types() == [("account", 1), ("navigation", 1), ("shopping", 3)]


class TestComponents:
    """Tests for component queries."""

    def test_list_all_ordered_by_category(self, store: DesignStore):
        assert [c.name for c in store.list_components()] == ["MButton", "MModal", "MTextInput"]

    def test_list_by_category(self, store: DesignStore):
        assert [c.slug for c in store.list_components("form")] == ["text-input"]
        assert [c.slug for c in store.list_components("FORM")] == ["text-input"]
        assert store.list_components("charts") == []

    @pytest.mark.parametrize("name", ["button", "Button", "MButton", "mbutton", " button "])
    def test_get_by_any_spelling(self, store: DesignStore, name):
        assert store.get_component(name).name == "MButton"

    def test_get_hyphenated_slug(self, store: DesignStore):
        assert store.get_component("text-input").name == "MTextInput"
        assert store.get_component("TextInput").name == "MTextInput"

    def test_m_prefixed_word_is_not_stripped(self, store: DesignStore):
        assert store.get_component("modal").name == "MModal"
        assert store.get_component("Modal").name == "MModal"

    def test_nested_lists_round_trip(self, store: DesignStore):
        button = store.get_component("button")
        assert button.props[0].default_value == "solid"
        assert button.props[0].options == ("solid", "bordered", "text")
        assert button.props[1].required
        assert button.events[0].payload == "MouseEvent"
        assert [ex.framework for ex in button.examples] == ["vue", "react"]
        assert button.css_classes == ("mc-button", "mc-button--bordered")
        assert button.frameworks == ("vue", "react")

    def test_empty_lists(self, store: DesignStore):
        modal = store.get_component("modal")
        assert modal.props == ()
        assert modal.description is None

    def test_missing(self, store: DesignStore):
        assert store.get_component("carousel") is None

    def test_find_like(self, store: DesignStore):
        assert [c.slug for c in store.find_components_like("input")] == ["text-input"]
        assert store.find_components_like("%") == []


class TestCssUtilities:
    """Tests for CSS utility queries."""

    def test_list(self, store: DesignStore):
        assert [u.name for u in store.list_css_utilities()] == ["Flexy", "Margin"]
        assert [u.name for u in store.list_css_utilities("layout")] == ["Flexy"]

    def test_default_category(self, store: DesignStore):
        assert store.get_css_utility("margin").category == "utility"

    def test_get_ignores_case(self, store: DesignStore):
        flexy = store.get_css_utility("FLEXY")
        assert flexy.classes == ("ml-flexy", "ml-flexy__col", "ml-flexy__col--fill")
        assert flexy.examples[0].title == "Two columns"

    def test_missing(self, store: DesignStore):
        assert store.get_css_utility("ratio") is None


class TestCascadeAgainstIndex:
    """The search cascade over a real FTS5 index."""

    def test_exact_phrase_preferred(self, store: DesignStore):
        outcome = SearchExecutor(store).search_documentation("button variants")
        assert [r.path for r in outcome.results] == ["/components/buttons/variants/"]
        assert outcome.strategy == "exact_phrase"
        assert "**" in outcome.results[0].snippet

    def test_all_terms_when_phrase_misses(self, store: DesignStore):
        outcome = SearchExecutor(store).search_documentation("variants buttons")
        assert outcome.strategy == "all_terms"
        assert {r.path for r in outcome.results} == {
            "/components/buttons/variants/",
            "/components/buttons/",
        }

    def test_rejected_expression_gives_empty_outcome(self, store: DesignStore):
        outcome = SearchExecutor(store).search_tokens("font-size")
        assert outcome.results == []
        assert len(outcome.errors) == 1

    def test_icon_groups(self, store: DesignStore):
        outcome = SearchExecutor(store).search_icons("cart")
        assert len(outcome.groups) == 1
        assert outcome.groups[0].available_sizes == (16, 24, 64)


class TestBuilder:
    """Tests for IndexBuilder."""

    def test_creates_parent_directories(self, temp_dir: Path):
        path = temp_dir / "nested" / "dir" / "design.db"
        with IndexBuilder(path):
            pass
        assert path.exists()

    def test_clear(self, db_path: Path):
        with IndexBuilder(db_path) as builder:
            builder.clear()
        with DesignStore(db_path) as store:
            assert set(store.get_stats().values()) == {0}
            assert store.search_icons("cart*") == []
