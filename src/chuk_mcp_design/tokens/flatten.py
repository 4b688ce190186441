"""
Token flattener - nested property trees to flat token records.

Source trees nest groups to arbitrary depth and end in leaf objects:

    {"primary-01": {"100": {"value": "#EAF3F9"}, "500": {"value": "#0B96CC"}}}

A leaf is any mapping with a string "value". The leaf check runs before
the group check, so a leaf is never descended into even though it is a
mapping itself.
"""

from __future__ import annotations

import re
from typing import Any

from chuk_mcp_design.constants import TokenCategory
from chuk_mcp_design.core import parse_value
from chuk_mcp_design.models import Token

NUMERIC_SUFFIX = re.compile(r"-\d+$")


def is_leaf(node: Any) -> bool:
    """True if the node is a token leaf ({"value": "<str>", ...})."""
    return isinstance(node, dict) and isinstance(node.get("value"), str)


def color_subcategory(relative_path: str) -> str | None:
    """
    Subcategory of a color path: the first segment minus any numeric suffix.

    "primary-01.500" -> "primary". Single-segment paths have none.
    """
    parts = relative_path.split(".")
    if len(parts) < 2:
        return None
    return NUMERIC_SUFFIX.sub("", parts[0])


def flatten(
    tree: Any,
    category: TokenCategory,
    source_file: str | None = None,
    subcategory: str | None = None,
) -> list[Token]:
    """
    Flatten a property tree into tokens.

    Traversal is depth-first in source key order, using an explicit
    stack rather than recursion.

    Args:
        tree: Nested mapping of groups and leaves
        category: Category for every emitted token
        source_file: Source path recorded on each token
        subcategory: Fixed subcategory; colors derive their own when omitted

    Returns:
        Tokens in source order (empty if tree is not a mapping)
    """
    if not isinstance(tree, dict):
        return []

    tokens: list[Token] = []
    stack: list[tuple[tuple[str, ...], Any]] = [
        ((str(key),), value) for key, value in reversed(list(tree.items()))
    ]

    while stack:
        segments, node = stack.pop()

        if is_leaf(node):
            tokens.append(_leaf_token(node, segments, category, source_file, subcategory))
        elif isinstance(node, dict):
            stack.extend(
                ((*segments, str(key)), value) for key, value in reversed(list(node.items()))
            )

    return tokens


def _leaf_token(
    leaf: dict[str, Any],
    segments: tuple[str, ...],
    category: TokenCategory,
    source_file: str | None,
    subcategory: str | None,
) -> Token:
    relative = ".".join(segments)
    parsed = parse_value(leaf["value"])

    if subcategory is None and category == TokenCategory.COLOR:
        subcategory = color_subcategory(relative)

    description = leaf.get("description") or leaf.get("comment")

    return Token(
        category=category,
        subcategory=subcategory,
        name=relative.replace(".", "-"),
        path=f"{category.value}.{relative}",
        value_raw=parsed.raw,
        value_number=parsed.number,
        value_unit=parsed.unit,
        description=str(description) if description else None,
        source_file=source_file,
    )
