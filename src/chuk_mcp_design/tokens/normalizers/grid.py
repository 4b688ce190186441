"""
Grid normalizer.

properties/size/grid.json holds gutter sizes in magic units per screen;
properties/size/base.json holds the magic unit and the local rem value.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from chuk_mcp_design.constants import MAGIC_UNIT_PX, TokenCategory
from chuk_mcp_design.core import format_number, to_number
from chuk_mcp_design.models import Token
from chuk_mcp_design.tokens.normalizers.base import (
    SIZE_DIR,
    leaf_entries,
    load_each,
    properties_dir,
)
from chuk_mcp_design.tokens.sources import TokenBatch, dig

logger = logging.getLogger(__name__)

GRID_FILE = "grid.json"
BASE_FILE = "base.json"


def _gutter_tokens(data: Any, source: str, batch: TokenBatch) -> None:
    for screen, definition in leaf_entries(dig(data, "size", "gutter", "screen")):
        mu = to_number(definition["value"])
        if mu is None:
            batch.warn(source, f"gutter '{screen}' has non-numeric value {definition['value']!r}")
            continue
        px = format_number(mu * MAGIC_UNIT_PX)
        mu_text = format_number(mu)
        batch.tokens.append(
            Token(
                category=TokenCategory.GRID,
                subcategory="gutter",
                name=f"gutter-{screen}",
                path=f"grid.gutter.screen.{screen}",
                value_raw=f"{mu_text}mu",
                value_number=mu,
                value_unit="mu",
                value_computed=f"{px}px",
                description=(
                    f"Grid gutter for {screen} screens ({mu_text} magic units = {px}px)"
                ),
                source_file=source,
            )
        )


def _base_value(data: dict[str, Any], key: str) -> float | None:
    entry = data.get(key)
    if not isinstance(entry, dict):
        return None
    return to_number(entry.get("value"))


def _base_tokens(data: Any, source: str, batch: TokenBatch) -> None:
    if not isinstance(data, dict):
        batch.warn(source, "expected an object of base values")
        return

    mu = _base_value(data, "magic-unit")
    if mu is not None:
        batch.tokens.append(
            Token(
                category=TokenCategory.GRID,
                subcategory="base",
                name="magic-unit",
                path="grid.magic-unit",
                value_raw=format_number(mu),
                value_number=mu,
                value_computed=f"{format_number(mu * MAGIC_UNIT_PX)}px",
                description=f"Base magic unit multiplier (1mu = {MAGIC_UNIT_PX}px)",
                source_file=source,
            )
        )

    rem = _base_value(data, "local-rem-value")
    if rem is not None:
        rem_text = format_number(rem)
        batch.tokens.append(
            Token(
                category=TokenCategory.GRID,
                subcategory="base",
                name="local-rem-value",
                path="grid.local-rem-value",
                value_raw=f"{rem_text}px",
                value_number=rem,
                value_unit="px",
                value_computed=f"{rem_text}px",
                description=f"Base rem value (1rem = {rem_text}px)",
                source_file=source,
            )
        )


def normalize_grid(tokens_path: Path) -> TokenBatch:
    """
    Normalize grid gutters and base units.

    Args:
        tokens_path: Root of the tokens checkout

    Returns:
        Gutter tokens followed by base unit tokens
    """
    batch = TokenBatch()
    size_path = properties_dir(tokens_path, SIZE_DIR)

    if not size_path.is_dir():
        logger.warning(f"Size tokens path not found: {size_path}")
        return batch

    grid_file = size_path / GRID_FILE
    if grid_file.exists():
        for source, data in load_each([grid_file], tokens_path, batch):
            _gutter_tokens(data, source, batch)

    base_file = size_path / BASE_FILE
    if base_file.exists():
        for source, data in load_each([base_file], tokens_path, batch):
            _base_tokens(data, source, batch)

    return batch
