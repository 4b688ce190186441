"""
Shadow normalizer.

Shadows are composite: each entry has x, y, blur, spread and opacity
sub-objects. The token's raw value is the CSS-style "x y blur spread"
string; all five sub-values are kept as ordered properties.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from chuk_mcp_design.constants import SHADOW_PROPERTIES, TokenCategory
from chuk_mcp_design.core import parse_value
from chuk_mcp_design.models import Token, TokenProperty
from chuk_mcp_design.tokens.normalizers.base import load_each, properties_dir
from chuk_mcp_design.tokens.sources import TokenBatch, find_source_files, unwrap

logger = logging.getLogger(__name__)

# Sub-properties joined into the raw value, in order
SHADOW_VALUE_PARTS = ("x", "y", "blur", "spread")


def _sub_value(definition: dict[str, Any], key: str) -> str | None:
    part = definition.get(key)
    if isinstance(part, dict) and "value" in part:
        return str(part["value"])
    return None


def shadow_token(name: str, definition: dict[str, Any], source: str) -> Token | None:
    """
    Build a shadow token, or None if a sub-property is missing.
    """
    values = {key: _sub_value(definition, key) for key in SHADOW_PROPERTIES}
    if any(v is None for v in values.values()):
        return None

    properties = []
    for key in SHADOW_PROPERTIES:
        parsed = parse_value(values[key])
        properties.append(
            TokenProperty(
                property=key,
                value=values[key],
                value_number=parsed.number,
                value_unit=parsed.unit,
            )
        )

    return Token(
        category=TokenCategory.SHADOW,
        name=name,
        path=f"shadow.{name}",
        value_raw=" ".join(values[key] for key in SHADOW_VALUE_PARTS),
        description=f"Shadow size {name}",
        source_file=source,
        properties=tuple(properties),
    )


def normalize_shadows(tokens_path: Path) -> TokenBatch:
    """
    Normalize shadow tokens from properties/shadow.

    Args:
        tokens_path: Root of the tokens checkout

    Returns:
        Composite shadow tokens
    """
    batch = TokenBatch()
    shadow_path = properties_dir(tokens_path, "shadow")

    if not shadow_path.is_dir():
        logger.warning(f"Shadow tokens path not found: {shadow_path}")
        return batch

    for source, data in load_each(find_source_files(shadow_path), tokens_path, batch):
        group = unwrap(data, TokenCategory.SHADOW.value)
        if not isinstance(group, dict):
            batch.warn(source, "expected an object of shadow definitions")
            continue

        for name, definition in group.items():
            if not isinstance(definition, dict) or "x" not in definition:
                continue
            token = shadow_token(str(name), definition, source)
            if token is None:
                batch.warn(source, f"shadow '{name}' is missing one of {', '.join(SHADOW_PROPERTIES)}")
                continue
            batch.tokens.append(token)

    return batch
