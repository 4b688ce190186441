"""
Border and radius normalizer.

Two independent source directories map to two token categories:
properties/border (widths) and properties/radius (corner radii).
Values are pixel magnitudes given as numbers or numeric strings.
"""

from __future__ import annotations

import logging
from pathlib import Path

from chuk_mcp_design.constants import TokenCategory
from chuk_mcp_design.core import format_number, to_number
from chuk_mcp_design.tokens.normalizers.base import (
    entry_text,
    leaf_entries,
    load_each,
    make_token,
    properties_dir,
)
from chuk_mcp_design.tokens.sources import TokenBatch, find_source_files, unwrap

logger = logging.getLogger(__name__)

DESCRIPTIONS = {
    TokenCategory.BORDER: "Border width {name}",
    TokenCategory.RADIUS: "Border radius {name}",
}

SUBCATEGORIES = {
    TokenCategory.BORDER: "width",
    TokenCategory.RADIUS: None,
}


def _normalize_pixel_category(tokens_path: Path, category: TokenCategory) -> TokenBatch:
    batch = TokenBatch()
    directory = properties_dir(tokens_path, category.value)

    if not directory.is_dir():
        logger.info(f"No {category.value} tokens at {directory}")
        return batch

    for source, data in load_each(find_source_files(directory), tokens_path, batch):
        group = unwrap(data, category.value)
        if not isinstance(group, dict):
            batch.warn(source, f"expected an object of {category.value} values")
            continue

        for name, definition in leaf_entries(group):
            value = definition["value"]
            number = to_number(value)
            if number is None:
                batch.warn(source, f"{category.value} '{name}' has non-numeric value {value!r}")
                continue

            token = make_token(
                batch,
                source,
                category=category,
                subcategory=SUBCATEGORIES[category],
                name=name,
                path=f"{category.value}.{name}",
                value_raw=format_number(value) if isinstance(value, (int, float)) else str(value),
                value_number=number,
                value_unit="px",
                value_computed=f"{format_number(number)}px",
                description=entry_text(definition, "description")
                or DESCRIPTIONS[category].format(name=name),
                source_file=source,
            )
            if token:
                batch.tokens.append(token)

    return batch


def normalize_borders(tokens_path: Path) -> TokenBatch:
    """
    Normalize border widths and corner radii.

    Args:
        tokens_path: Root of the tokens checkout

    Returns:
        Border tokens followed by radius tokens
    """
    batch = _normalize_pixel_category(tokens_path, TokenCategory.BORDER)
    batch.extend(_normalize_pixel_category(tokens_path, TokenCategory.RADIUS))
    return batch
