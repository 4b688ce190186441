"""
Tests for the offline index build.
"""

import sys
from pathlib import Path

import pytest

from chuk_mcp_design.indexer import build_index, icon_from_record, main
from chuk_mcp_design.store import DesignStore

from conftest import write_json

DOC_RECORDS = [
    {
        "title": "Tabs",
        "path": "/components/tabs/",
        "content": "Tabs organise content into views.",
        "category": "components",
        "keywords": ["tabs", "navigation"],
    },
    {"title": "No content", "path": "/broken/"},
]

ICON_RECORDS = [
    {"name": "Cart24", "type": "shopping", "paths": '[{"tagName": "path"}]'},
    {"name": "Home", "type": "navigation", "size": 32},
    {"type": "nameless"},
]

COMPONENT_RECORDS = [
    {
        "name": "MTabs",
        "category": "navigation",
        "props": [{"name": "align", "defaultValue": "left", "options": ["left", "center"]}],
        "cssClasses": ["mc-tabs"],
    },
    {"name": "MTabs", "category": "layout"},
    {"category": "nameless"},
    {"name": "MCard", "props": "not a list"},
]

UTILITY_RECORDS = [
    {"name": "Container", "category": "layout", "classes": ["ml-container"]},
    {"name": "Ratio", "slug": "aspect-ratio"},
]


class TestIconFromRecord:
    """Tests for icon_from_record()."""

    def test_size_from_name(self):
        icon = icon_from_record({"name": "Cart24", "type": "shopping"})
        assert icon.icon_name == "Cart"
        assert icon.size == 24
        assert icon.view_box == "0 0 24 24"

    def test_explicit_fields(self):
        icon = icon_from_record(
            {"name": "Cart16", "iconName": "Basket16", "size": 16, "viewBox": "0 0 20 20"}
        )
        assert icon.icon_name == "Basket"
        assert icon.view_box == "0 0 20 20"
        assert icon.type == "unknown"

    def test_non_string_paths(self):
        icon = icon_from_record({"name": "Cart16", "paths": [{"tagName": "path"}]})
        assert icon.paths == "[]"

    def test_missing_name(self):
        with pytest.raises(KeyError):
            icon_from_record({"type": "shopping"})


class TestBuildIndex:
    """Tests for build_index()."""

    def test_tokens_only(self, tokens_path: Path, temp_dir: Path):
        output = temp_dir / "out" / "design.db"
        batch = build_index(tokens_path, output)

        assert batch.ok
        with DesignStore(output) as store:
            stats = store.get_stats()
        assert stats == {
            "tokens": len(batch.tokens),
            "documentation": 0,
            "icons": 0,
            "components": 0,
            "css_utilities": 0,
        }

    def test_with_docs_and_icons(self, tokens_path: Path, temp_dir: Path):
        docs = write_json(temp_dir / "docs.json", DOC_RECORDS)
        icons = write_json(temp_dir / "icons.json", ICON_RECORDS)
        output = temp_dir / "design.db"

        batch = build_index(tokens_path, output, docs_path=docs, icons_path=icons)

        # one invalid document and one nameless icon
        assert len(batch.warnings) == 2
        with DesignStore(output) as store:
            assert store.get_stats()["documentation"] == 1
            assert store.get_documentation_by_path("/components/tabs/").keywords == (
                "tabs",
                "navigation",
            )
            home = store.get_icon_by_name("Home")
            assert home.size == 32
            assert home.type == "navigation"

    def test_with_components_and_utilities(self, tokens_path: Path, temp_dir: Path):
        components = write_json(temp_dir / "components.json", COMPONENT_RECORDS)
        utilities = write_json(temp_dir / "utilities.json", UTILITY_RECORDS)
        output = temp_dir / "design.db"

        batch = build_index(
            tokens_path, output, components_path=components, utilities_path=utilities
        )

        # duplicate MTabs, nameless record, non-list props
        assert len(batch.warnings) == 3
        assert any("duplicate" in w.message for w in batch.warnings)
        with DesignStore(output) as store:
            tabs = store.get_component("tabs")
            assert tabs.category == "navigation"
            assert tabs.props[0].default_value == "left"
            assert tabs.props[0].options == ("left", "center")
            assert tabs.css_classes == ("mc-tabs",)
            assert store.get_stats()["components"] == 1
            assert store.get_css_utility("aspect-ratio").name == "Ratio"
            assert store.get_css_utility("container").classes == ("ml-container",)

    def test_rebuild_replaces_contents(self, tokens_path: Path, temp_dir: Path):
        output = temp_dir / "design.db"
        icons = write_json(temp_dir / "icons.json", ICON_RECORDS[:1])

        build_index(tokens_path, output, icons_path=icons)
        first = DesignStore(output)
        first_stats = first.get_stats()
        first.close()

        build_index(tokens_path, output, icons_path=icons)
        with DesignStore(output) as store:
            assert store.get_stats() == first_stats

    def test_unusable_records_file(self, tokens_path: Path, temp_dir: Path):
        docs = write_json(temp_dir / "docs.json", {"not": "a list"})
        batch = build_index(tokens_path, temp_dir / "design.db", docs_path=docs)
        assert len(batch.warnings) == 1
        assert "list" in batch.warnings[0].message

    def test_missing_records_file(self, tokens_path: Path, temp_dir: Path):
        batch = build_index(
            tokens_path, temp_dir / "design.db", icons_path=temp_dir / "missing.json"
        )
        assert len(batch.warnings) == 1
        assert batch.tokens


class TestMain:
    """Tests for the command-line entry point."""

    def test_builds_index(self, tokens_path: Path, temp_dir: Path, monkeypatch):
        output = temp_dir / "cli.db"
        monkeypatch.setattr(
            sys, "argv", ["chuk-mcp-design-index", "--tokens", str(tokens_path), "--output", str(output)]
        )
        main()
        assert output.exists()

    def test_component_records(self, tokens_path: Path, temp_dir: Path, monkeypatch):
        output = temp_dir / "cli.db"
        components = write_json(temp_dir / "components.json", COMPONENT_RECORDS[:1])
        monkeypatch.setattr(
            sys,
            "argv",
            [
                "chuk-mcp-design-index",
                "--tokens",
                str(tokens_path),
                "--components",
                str(components),
                "--output",
                str(output),
            ],
        )
        main()
        with DesignStore(output) as store:
            assert store.get_component("MTabs") is not None

    def test_missing_tokens_path(self, temp_dir: Path, monkeypatch):
        monkeypatch.setattr(
            sys, "argv", ["chuk-mcp-design-index", "--tokens", str(temp_dir / "nope")]
        )
        with pytest.raises(SystemExit) as exc_info:
            main()
        assert exc_info.value.code == 1
