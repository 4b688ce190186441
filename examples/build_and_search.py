#!/usr/bin/env python3
"""
Example: Building and Querying a Design Index.

This demonstrates the full offline-then-online flow: a small tokens
checkout is normalized into an index, then tokens, documentation and
icons are looked up the way the MCP tools do it, followed by a component
and its install command.

Usage:
    python examples/build_and_search.py
"""

import json
import tempfile
from pathlib import Path

from chuk_mcp_design.constants import TokenCategory
from chuk_mcp_design.formatters import format_tokens, install_info, render_svg
from chuk_mcp_design.indexer import build_index
from chuk_mcp_design.search import SearchExecutor, plan
from chuk_mcp_design.store import DesignStore


def write_checkout(root: Path) -> None:
    """Write a minimal tokens checkout plus doc, icon and component records."""
    color_dir = root / "tokens" / "properties" / "color"
    color_dir.mkdir(parents=True)
    (color_dir / "primary.json").write_text(
        json.dumps(
            {
                "color": {
                    "primary-01": {
                        "100": {"value": "#EAF3F9"},
                        "500": {"value": "#0B96CC", "description": "Primary brand color"},
                    }
                }
            }
        )
    )

    size_dir = root / "tokens" / "properties" / "size"
    size_dir.mkdir(parents=True)
    (size_dir / "grid.json").write_text(
        json.dumps({"size": {"gutter": {"screen": {"s": {"value": 1}, "m": {"value": 1.5}}}}})
    )

    (root / "docs.json").write_text(
        json.dumps(
            [
                {
                    "title": "Button variants",
                    "path": "/components/buttons/variants/",
                    "content": "Buttons come in several button variants: solid, bordered and text.",
                },
                {
                    "title": "Buttons",
                    "path": "/components/buttons/",
                    "content": "A button triggers an action. Variants are listed separately.",
                },
            ]
        )
    )
    (root / "components.json").write_text(
        json.dumps(
            [
                {
                    "name": "MButton",
                    "category": "action",
                    "props": [{"name": "theme", "defaultValue": "solid"}],
                    "examples": [{"framework": "vue", "code": '<MButton label="Save" />'}],
                }
            ]
        )
    )
    (root / "icons.json").write_text(
        json.dumps(
            [
                {"name": "Cart16", "type": "shopping", "paths": '[{tagName: "path", attrs: {d: "M1 1h14v14H1z"}}]'},
                {"name": "Cart24", "type": "shopping"},
            ]
        )
    )


def main() -> None:
    """Demonstrate building and querying the index."""
    print("CHUK Design Index Demo")
    print("=" * 40)
    print()

    with tempfile.TemporaryDirectory() as tmp:
        root = Path(tmp)
        write_checkout(root)

        db_path = root / "design.db"
        batch = build_index(
            root / "tokens",
            db_path,
            docs_path=root / "docs.json",
            icons_path=root / "icons.json",
            components_path=root / "components.json",
        )
        print(f"Indexed {len(batch.tokens)} tokens ({len(batch.warnings)} warnings)")
        print()

        with DesignStore(db_path) as store:
            print(f"Index contents: {store.get_stats()}")
            print()

            # Tokens as CSS
            print("Color tokens as CSS:")
            print(format_tokens(store.get_tokens(TokenCategory.COLOR), "css"))
            print()

            # Grid gutters computed from magic units
            print("Grid gutters:")
            for token in store.get_tokens_by_subcategory(TokenCategory.GRID, "gutter"):
                print(f"  {token.path}: {token.value_raw} = {token.value_computed}")
            print()

            executor = SearchExecutor(store)

            # Cascading documentation search
            query = "button variants"
            print(f"Plan for {query!r}: {plan(query)}")
            outcome = executor.search_documentation(query)
            print(f"  Matched with {outcome.strategy}:")
            for result in outcome.results:
                print(f"    {result.title} ({result.path})")
                print(f"      {result.snippet}")
            print()

            # Icon search grouped by name
            icons = executor.search_icons("cart")
            for group in icons.groups:
                print(f"Icon {group.icon_name}: sizes {list(group.available_sizes)}")
            print()

            icon = store.get_icon_by_name("Cart16")
            if icon:
                print("Cart16 as SVG:")
                print(render_svg(icon))
            print()

            button = store.get_component("button")
            if button:
                print(f"{button.name} props: {[p.name for p in button.props]}")
                print(install_info(button, "react", "pnpm")["installCommand"])


if __name__ == "__main__":
    main()
