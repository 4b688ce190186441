"""
Pytest configuration and shared fixtures.
"""

import json
import tempfile
from pathlib import Path

import pytest

from chuk_mcp_design.models import (
    CodeExample,
    Component,
    ComponentEvent,
    ComponentProp,
    ComponentSlot,
    CssUtility,
    Documentation,
    IconMatch,
)
from chuk_mcp_design.store import DesignStore, IndexBuilder
from chuk_mcp_design.tokens import collect_tokens

COLOR_PRIMARY = {
    "color": {
        "primary-01": {
            "100": {"value": "#EAF3F9"},
            "500": {"value": "#0B96CC", "description": "Primary brand color"},
        },
        "primary-02": {
            "600": {"value": "#188803"},
        },
    }
}

COLOR_GREY = {
    "grey": {
        "000": {"value": "#FFFFFF"},
        "900": {"value": "rgba(0, 0, 0, 0.9)"},
    },
    "white": {"value": "#FFF"},
}

SHADOWS = {
    "shadow": {
        "s": {
            "x": {"value": "0"},
            "y": {"value": "1px"},
            "blur": {"value": "5px"},
            "spread": {"value": "0"},
            "opacity": {"value": "0.2"},
        },
        "m": {
            "x": {"value": "0"},
            "y": {"value": "2px"},
            "blur": {"value": "10px"},
            "spread": {"value": "0"},
            "opacity": {"value": "0.2"},
        },
    }
}

BORDERS = {"border": {"1": {"value": 1}, "2": {"value": "2"}, "3": {"value": 3}}}

RADII = {"radius": {"s": {"value": 2}, "m": {"value": "4px"}, "l": {"value": 8}}}

SCREENS = {
    "screen": {
        "s": {"value": 0},
        "m": {"value": "680px"},
        "l-medium": {"value": "1024px", "comment": "Large medium"},
        "xl-large": {"value": 1920},
    }
}

FONT = {
    "size": {
        "font": {
            "01": {"value": 0.75},
            "05": {"value": "1.125", "comment": "Body large"},
        },
        "line": {
            "01": {"s": {"value": 1.125}, "m": {"value": 1.25}},
        },
    }
}

GRID = {
    "size": {
        "gutter": {
            "screen": {
                "s": {"value": 1},
                "m": {"value": 1.5},
                "l": {"value": 2},
            }
        }
    }
}

BASE = {"magic-unit": {"value": 1}, "local-rem-value": {"value": 16}}

DOCUMENTS = [
    Documentation(
        title="Button variants",
        path="/components/buttons/variants/",
        content="Buttons come in several button variants: solid, bordered and text.",
        category="components",
        keywords=("button", "cta"),
    ),
    Documentation(
        title="Buttons",
        path="/components/buttons/",
        content="A button triggers an action. Variants are listed separately.",
        category="components",
    ),
    Documentation(
        title="Colors",
        path="/foundations/colors/",
        content="The color palette defines primary and secondary colors.",
        category="foundations",
        keywords=("palette",),
    ),
]

ICONS = [
    IconMatch(name="Cart16", icon_name="Cart", type="shopping", size=16, view_box="0 0 16 16"),
    IconMatch(name="Cart64", icon_name="Cart", type="shopping", size=64, view_box="0 0 64 64"),
    IconMatch(name="Cart24", icon_name="Cart", type="shopping", size=24, view_box="0 0 24 24"),
    IconMatch(
        name="ArrowArrowBottom16",
        icon_name="ArrowArrowBottom",
        type="navigation",
        size=16,
        paths='[{tagName: "path", attrs: {d: "M8 11L3 6h10z"}}]',
    ),
    IconMatch(name="User32", icon_name="User", type="account", size=32),
]

COMPONENTS = [
    Component(
        name="MButton",
        category="action",
        description="Triggers an action",
        frameworks=("vue", "react"),
        props=(
            ComponentProp(
                name="theme",
                type="string",
                default_value="solid",
                options=("solid", "bordered", "text"),
            ),
            ComponentProp(name="label", type="string", required=True),
        ),
        slots=(ComponentSlot(name="default"),),
        events=(ComponentEvent(name="click", payload="MouseEvent"),),
        examples=(
            CodeExample(title="Solid", code='<MButton label="Save" />', framework="vue"),
            CodeExample(title="Solid", code='<MButton label="Save" />', framework="react"),
        ),
        css_classes=("mc-button", "mc-button--bordered"),
    ),
    Component(name="MTextInput", category="form", description="Single-line text field"),
    Component(name="MModal", category="feedback"),
]

CSS_UTILITIES = [
    CssUtility(
        name="Flexy",
        category="layout",
        description="Flexbox grid",
        classes=("ml-flexy", "ml-flexy__col", "ml-flexy__col--fill"),
        examples=(CodeExample(title="Two columns", code='<div class="ml-flexy"></div>'),),
    ),
    CssUtility(name="Margin", classes=("mu-m-100", "mu-mt-100")),
]


def write_json(path: Path, data: object) -> Path:
    """Write a JSON file, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data))
    return path


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def tokens_path(temp_dir: Path) -> Path:
    """A small but complete tokens checkout."""
    root = temp_dir / "tokens"
    props = root / "properties"
    write_json(props / "color" / "primary.json", COLOR_PRIMARY)
    write_json(props / "color" / "neutral" / "grey.json", COLOR_GREY)
    write_json(props / "shadow" / "shadows.json", SHADOWS)
    write_json(props / "border" / "border.json", BORDERS)
    write_json(props / "radius" / "radius.json", RADII)
    write_json(props / "size" / "screens.json", SCREENS)
    write_json(props / "size" / "font.json", FONT)
    write_json(props / "size" / "grid.json", GRID)
    write_json(props / "size" / "base.json", BASE)
    return root


@pytest.fixture
def db_path(temp_dir: Path, tokens_path: Path) -> Path:
    """An index built from the sample checkout and every record type."""
    path = temp_dir / "data" / "design.db"
    batch = collect_tokens(tokens_path)
    with IndexBuilder(path) as builder:
        builder.insert_tokens(batch.tokens)
        builder.insert_documents(DOCUMENTS)
        builder.insert_icons(ICONS)
        builder.insert_components(COMPONENTS)
        builder.insert_css_utilities(CSS_UTILITIES)
    return path


@pytest.fixture
def store(db_path: Path) -> DesignStore:
    """Read-only store over the sample index."""
    design_store = DesignStore(db_path)
    yield design_store
    design_store.close()
