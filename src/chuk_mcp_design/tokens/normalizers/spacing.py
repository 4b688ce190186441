"""
Spacing normalizer.

Spacing is not read from property files: it is a fixed series of
magic-unit multipliers (see constants.SPACING_MULTIPLIERS). The SCSS file
defining the series is only checked for presence.
"""

from __future__ import annotations

import logging
from pathlib import Path

from chuk_mcp_design.constants import MAGIC_UNIT_PX, SPACING_MULTIPLIERS, TokenCategory
from chuk_mcp_design.core import format_number
from chuk_mcp_design.models import Token
from chuk_mcp_design.tokens.sources import TokenBatch

logger = logging.getLogger(__name__)

SPACING_SOURCE = "settings-tools/_s.magic-unit.scss"


def spacing_token(name: str, multiplier: float) -> Token:
    """Build the token for one step of the magic-unit series."""
    px = format_number(multiplier * MAGIC_UNIT_PX)
    rem = format_number(multiplier)
    return Token(
        category=TokenCategory.SPACING,
        subcategory="magic-unit",
        name=name,
        path=f"spacing.{name}",
        value_raw=f"{rem}rem",
        value_number=multiplier,
        value_unit="rem",
        value_computed=f"{px}px",
        description=f"{rem} × magic-unit ({px}px)",
        source_file=SPACING_SOURCE,
    )


def base_unit_token() -> Token:
    """The magic unit itself."""
    return Token(
        category=TokenCategory.SPACING,
        subcategory="base",
        name="magic-unit",
        path="spacing.magic-unit",
        value_raw=f"{MAGIC_UNIT_PX}px",
        value_number=MAGIC_UNIT_PX,
        value_unit="px",
        value_computed=f"{MAGIC_UNIT_PX}px",
        description="Base magic unit value",
        source_file=SPACING_SOURCE,
    )


def normalize_spacing(
    styles_path: Path | None = None,
    multipliers: tuple[tuple[str, float], ...] = SPACING_MULTIPLIERS,
) -> TokenBatch:
    """
    Generate spacing tokens from the magic-unit series.

    Args:
        styles_path: Optional styles checkout holding the reference SCSS file
        multipliers: (name, multiplier) pairs

    Returns:
        One token per multiplier, followed by the base unit token
    """
    if styles_path is not None and not (styles_path / SPACING_SOURCE).exists():
        logger.info(f"Magic unit SCSS not found under {styles_path}, using predefined series")

    batch = TokenBatch()
    batch.tokens.extend(spacing_token(name, m) for name, m in multipliers)
    batch.tokens.append(base_unit_token())
    return batch
