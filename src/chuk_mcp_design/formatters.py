"""
Output formatters for tokens and icons.

Token lists render as JSON records, a CSS :root block, SCSS variable
lines or a nested JS object. Icons render as SVG markup and React/Vue
usage snippets. Components render as API summaries and install guides.
"""

from __future__ import annotations

import json
import re
from typing import Any

from chuk_mcp_design.constants import (
    FRAMEWORK_PACKAGES,
    ICONS_PACKAGE,
    ICONS_ROOT_PACKAGE,
    PACKAGE_MANAGERS,
    REACT_PACKAGE,
    STYLES_PACKAGE,
    VUE_PACKAGE,
    TokenFormat,
)
from chuk_mcp_design.core import pascal_case
from chuk_mcp_design.models import Component, CssUtility, IconMatch, Token

TOKEN_FORMATS: tuple[str, ...] = ("json", "css", "scss", "js")

# Unquoted object keys in JS-style path data: {tagName: "path"}
JS_OBJECT_KEY = re.compile(r"(\w+):")
PATH_D_ATTR = re.compile(r'"d":\s*"([^"]+)"')


def token_to_dict(token: Token) -> dict[str, Any]:
    """Camel-cased JSON record for a token, without empty fields."""
    record: dict[str, Any] = {
        "category": token.category.value,
        "subcategory": token.subcategory,
        "name": token.name,
        "path": token.path,
        "cssVariable": token.css_variable,
        "scssVariable": token.scss_variable,
        "valueRaw": token.value_raw,
        "valueNumber": token.value_number,
        "valueUnit": token.value_unit,
        "valueComputed": token.value_computed,
        "description": token.description,
    }
    if token.properties:
        record["properties"] = [
            {
                k: v
                for k, v in {
                    "property": p.property,
                    "value": p.value,
                    "valueNumber": p.value_number,
                    "valueUnit": p.value_unit,
                }.items()
                if v is not None
            }
            for p in token.properties
        ]
    return {k: v for k, v in record.items() if v is not None}


def format_css(tokens: list[Token]) -> str:
    """CSS custom properties in a :root block."""
    lines = [":root {"]
    lines.extend(f"  {t.css_variable}: {t.value_raw};" for t in tokens)
    lines.append("}")
    return "\n".join(lines)


def format_scss(tokens: list[Token]) -> str:
    """One SCSS variable per line."""
    return "\n".join(f"{t.scss_variable}: {t.value_raw};" for t in tokens)


def format_js(tokens: list[Token]) -> str:
    """Nested JS object keyed by path segments."""
    tree: dict[str, Any] = {}
    for token in tokens:
        *parents, leaf = token.path.split(".")
        node = tree
        for part in parents:
            child = node.get(part)
            if not isinstance(child, dict):
                child = node[part] = {}
            node = child
        node[leaf] = token.value_raw
    return f"export const tokens = {json.dumps(tree, indent=2)};"


def format_json(tokens: list[Token]) -> str:
    """JSON array of token records."""
    return json.dumps([token_to_dict(t) for t in tokens], indent=2)


def format_tokens(tokens: list[Token], fmt: TokenFormat | str = "json") -> str:
    """
    Render tokens in the requested format.

    Raises:
        ValueError: If the format is unknown
    """
    if fmt == "css":
        return format_css(tokens)
    if fmt == "scss":
        return format_scss(tokens)
    if fmt == "js":
        return format_js(tokens)
    if fmt == "json":
        return format_json(tokens)
    raise ValueError(f"Unknown format: {fmt}")


def _parse_paths(paths: str) -> list[dict[str, Any]] | None:
    for candidate in (paths, JS_OBJECT_KEY.sub(r'"\1":', paths).replace("'", '"')):
        try:
            parsed = json.loads(candidate)
        except json.JSONDecodeError:
            continue
        if isinstance(parsed, list):
            return [el for el in parsed if isinstance(el, dict)]
    return None


def _render_element(element: dict[str, Any], indent: str = "  ") -> str:
    tag = element.get("tagName", "path")
    attrs = " ".join(f'{k}="{v}"' for k, v in (element.get("attrs") or {}).items())
    opening = f"{tag} {attrs}" if attrs else tag

    children = [c for c in element.get("children") or [] if isinstance(c, dict)]
    if children:
        inner = "\n".join(_render_element(c, indent + "  ") for c in children)
        return f"{indent}<{opening}>\n{inner}\n{indent}</{tag}>"
    return f'{indent}<{opening} fill="currentColor"/>'


def render_svg(icon: IconMatch) -> str:
    """
    Render SVG markup from an icon's serialized path elements.

    Falls back to a single path from the first "d" attribute, then to an
    empty svg, when the path data cannot be decoded.
    """
    open_tag = f'<svg viewBox="{icon.view_box}" xmlns="http://www.w3.org/2000/svg">'
    elements = _parse_paths(icon.paths)

    if elements is None:
        match = PATH_D_ATTR.search(icon.paths)
        if match:
            return f'{open_tag}\n  <path d="{match.group(1)}" fill="currentColor"/>\n</svg>'
        return f"{open_tag}</svg>"

    body = "\n".join(_render_element(el) for el in elements)
    return f"{open_tag}\n{body}\n</svg>"


def react_usage(name: str) -> str:
    """React snippet for an icon export name."""
    return (
        f'import {{ MIcon }} from "{REACT_PACKAGE}";\n\n'
        f'<MIcon name="{name}" />\n\n'
        f'// Or import directly from the icons package\n'
        f'import {{ {name} }} from "{ICONS_PACKAGE}";'
    )


def vue_usage(name: str) -> str:
    """Vue single-file-component snippet for an icon export name."""
    return (
        "<template>\n"
        f'  <MIcon name="{name}" />\n'
        "</template>\n\n"
        "<script setup>\n"
        f'import {{ MIcon }} from "{VUE_PACKAGE}";\n'
        "</script>"
    )


def icon_import(name: str) -> dict[str, str]:
    """One-line React and Vue usage hints for search results."""
    return {
        "react": f'import {{ {name} }} from "{ICONS_PACKAGE}"',
        "vue": f'<MIcon name="{name}" />',
    }


def basic_example(component: Component, framework: str) -> str:
    """Placeholder usage for a component that ships no example."""
    if framework == "html":
        return f'<div class="mc-{component.slug}">Content</div>'
    tag = f"M{pascal_case(component.slug)}"
    return f"<{tag}>Content</{tag}>"


def component_to_dict(component: Component, framework: str = "vue") -> dict[str, Any]:
    """
    API summary of a component with examples for one framework.

    Examples not tagged with a framework are shared by all of them. A
    basic usage line stands in when nothing matches.
    """
    examples = [
        {"title": ex.title, "code": ex.code}
        for ex in component.examples
        if ex.framework in (None, framework)
    ]
    if not examples:
        examples.append({"title": "Basic Usage", "code": basic_example(component, framework)})

    return {
        "name": component.name,
        "slug": component.slug,
        "category": component.category,
        "description": component.description,
        "frameworks": list(component.frameworks),
        "props": [
            {
                "name": p.name,
                "type": p.type,
                "default": p.default_value,
                "required": p.required,
                "options": list(p.options) or None,
                "description": p.description,
            }
            for p in component.props
        ],
        "slots": [s.name for s in component.slots],
        "events": [e.name for e in component.events],
        "examples": examples,
        "cssClasses": list(component.css_classes),
    }


def utility_to_dict(utility: CssUtility, include_classes: bool = True) -> dict[str, Any]:
    """Class names and examples of a CSS utility."""
    return {
        "name": utility.name,
        "slug": utility.slug,
        "category": utility.category,
        "description": utility.description,
        "classes": list(utility.classes) if include_classes else [],
        "classCount": len(utility.classes),
        "examples": [{"title": ex.title, "code": ex.code} for ex in utility.examples],
    }


def install_command(package: str, manager: str = "npm") -> str:
    """
    Command that adds a package with the given package manager.

    Raises:
        KeyError: If the package manager is unknown
    """
    return f"{PACKAGE_MANAGERS[manager]} {package}"


def install_info(
    component: Component, framework: str = "vue", manager: str = "npm"
) -> dict[str, Any]:
    """
    Install command, imports and quick start for a component.

    Raises:
        KeyError: If the framework or package manager is unknown
    """
    package, peers = FRAMEWORK_PACKAGES[framework]
    name = f"M{pascal_case(component.slug)}"
    styles_import = f"{STYLES_PACKAGE}/lib/index.css"

    if framework == "vue":
        quick_start = {
            "setup": (
                "// main.ts\n"
                'import { createApp } from "vue";\n'
                'import App from "./App.vue";\n'
                f'import "{styles_import}";\n\n'
                'createApp(App).mount("#app");'
            ),
            "usage": (
                "<template>\n"
                f"  <{name} />\n"
                "</template>\n\n"
                '<script setup lang="ts">\n'
                f'import {{ {name} }} from "{package}";\n'
                "</script>"
            ),
        }
    else:
        quick_start = {
            "setup": f'// index.tsx\nimport "{styles_import}";',
            "usage": (
                f'import {{ {name} }} from "{package}";\n\n'
                "function MyComponent() {\n"
                f"  return <{name} />;\n"
                "}"
            ),
        }

    return {
        "component": name,
        "componentSlug": component.slug,
        "framework": framework,
        "package": package,
        "installCommand": install_command(package, manager),
        "imports": {
            "component": f'import {{ {name} }} from "{package}";',
            "styles": f'@import "{styles_import}";',
        },
        "peerDependencies": list(peers),
        "relatedPackages": {
            "styles": {
                "name": STYLES_PACKAGE,
                "installCommand": install_command(STYLES_PACKAGE, manager),
                "description": "Required CSS styles for the components",
            },
            "icons": {
                "name": ICONS_ROOT_PACKAGE,
                "installCommand": install_command(ICONS_ROOT_PACKAGE, manager),
                "description": "SVG icons library (optional)",
            },
        },
        "quickStart": quick_start,
    }
