"""
Typography normalizer (properties/size/font.json).

Font sizes live under size.font.<name>; line heights one level deeper
under size.line.<name>.<variant>. Both are rem magnitudes and get a
rounded pixel equivalent.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from chuk_mcp_design.constants import TokenCategory
from chuk_mcp_design.core import format_number, rem_to_px, to_number
from chuk_mcp_design.models import Token
from chuk_mcp_design.tokens.normalizers.base import (
    SIZE_DIR,
    entry_text,
    leaf_entries,
    load_each,
    make_token,
    properties_dir,
)
from chuk_mcp_design.tokens.sources import TokenBatch, dig

logger = logging.getLogger(__name__)

FONT_FILE = "font.json"


def _rem_token(
    definition: dict[str, Any],
    subcategory: str,
    name: str,
    relative_path: str,
    default_description: str,
    source: str,
    batch: TokenBatch,
) -> Token | None:
    value = definition["value"]
    number = to_number(value)
    if number is None:
        batch.warn(source, f"typography '{relative_path}' has non-numeric value {value!r}")
        return None

    return make_token(
        batch,
        source,
        category=TokenCategory.TYPOGRAPHY,
        subcategory=subcategory,
        name=name,
        path=f"typography.{relative_path}",
        value_raw=format_number(value) if isinstance(value, (int, float)) else str(value),
        value_number=number,
        value_unit="rem",
        value_computed=rem_to_px(number),
        description=entry_text(definition, "comment") or default_description,
        source_file=source,
    )


def normalize_typography(tokens_path: Path) -> TokenBatch:
    """
    Normalize font sizes and line heights.

    Args:
        tokens_path: Root of the tokens checkout

    Returns:
        Font-size tokens followed by line-height tokens
    """
    batch = TokenBatch()
    font_file = properties_dir(tokens_path, SIZE_DIR, FONT_FILE)

    if not font_file.exists():
        logger.warning(f"Typography tokens not found: {font_file}")
        return batch

    for source, data in load_each([font_file], tokens_path, batch):
        for size, definition in leaf_entries(dig(data, "size", "font")):
            token = _rem_token(
                definition,
                "font-size",
                f"font-{size}",
                f"font.{size}",
                f"Font size {size}",
                source,
                batch,
            )
            if token:
                batch.tokens.append(token)

        for size, variants in dig(data, "size", "line").items():
            if not isinstance(variants, dict):
                continue
            for variant, definition in leaf_entries(variants):
                token = _rem_token(
                    definition,
                    "line-height",
                    f"line-{size}-{variant}",
                    f"line.{size}.{variant}",
                    f"Line height {size} {variant}",
                    source,
                    batch,
                )
                if token:
                    batch.tokens.append(token)

    return batch
