"""
Screen breakpoint normalizer (properties/size/screens.json).
"""

from __future__ import annotations

import logging
from pathlib import Path

from chuk_mcp_design.constants import TokenCategory
from chuk_mcp_design.core import format_number, parse_value
from chuk_mcp_design.tokens.normalizers.base import (
    SIZE_DIR,
    entry_text,
    leaf_entries,
    load_each,
    make_token,
    properties_dir,
)
from chuk_mcp_design.tokens.sources import TokenBatch, unwrap

logger = logging.getLogger(__name__)

SCREENS_FILE = "screens.json"
DEFAULT_SCREEN_SUBCATEGORY = "breakpoint"


def screen_subcategory(name: str) -> str:
    """
    Subcategory for a breakpoint name.

    "s-medium" -> "s"; names without a hyphen -> "breakpoint".
    """
    if "-" in name:
        return name.split("-", 1)[0]
    return DEFAULT_SCREEN_SUBCATEGORY


def normalize_screens(tokens_path: Path) -> TokenBatch:
    """
    Normalize screen breakpoints.

    Args:
        tokens_path: Root of the tokens checkout

    Returns:
        Screen tokens, unit defaulting to px
    """
    batch = TokenBatch()
    screens_file = properties_dir(tokens_path, SIZE_DIR, SCREENS_FILE)

    if not screens_file.exists():
        logger.warning(f"Screen tokens not found: {screens_file}")
        return batch

    for source, data in load_each([screens_file], tokens_path, batch):
        group = unwrap(data, TokenCategory.SCREEN.value)
        if not isinstance(group, dict):
            batch.warn(source, "expected an object of screen breakpoints")
            continue

        for name, definition in leaf_entries(group):
            value = definition["value"]
            raw = format_number(value) if isinstance(value, (int, float)) else str(value)
            parsed = parse_value(value)
            token = make_token(
                batch,
                source,
                category=TokenCategory.SCREEN,
                subcategory=screen_subcategory(name),
                name=name,
                path=f"screen.{name}",
                value_raw=raw,
                value_number=parsed.number,
                value_unit=parsed.unit or "px",
                value_computed=raw,
                description=entry_text(definition, "comment") or f"Screen breakpoint {name}",
                source_file=source,
            )
            if token:
                batch.tokens.append(token)

    return batch
