"""
Color normalizer.

Every source file under properties/color (recursively) is flattened.
Files may wrap their content in a top-level "color" key.
"""

from __future__ import annotations

import logging
from pathlib import Path

from chuk_mcp_design.constants import TokenCategory
from chuk_mcp_design.tokens.flatten import flatten
from chuk_mcp_design.tokens.normalizers.base import load_each, properties_dir
from chuk_mcp_design.tokens.sources import TokenBatch, find_source_files, unwrap

logger = logging.getLogger(__name__)


def normalize_colors(tokens_path: Path) -> TokenBatch:
    """
    Normalize color tokens.

    Args:
        tokens_path: Root of the tokens checkout

    Returns:
        Color tokens with subcategories derived from their palette name
    """
    batch = TokenBatch()
    color_path = properties_dir(tokens_path, "color")

    if not color_path.is_dir():
        logger.warning(f"Color tokens path not found: {color_path}")
        return batch

    files = find_source_files(color_path, recursive=True)
    for source, data in load_each(files, tokens_path, batch):
        tree = unwrap(data, TokenCategory.COLOR.value)
        if not isinstance(tree, dict):
            batch.warn(source, "expected an object of color groups")
            continue
        batch.tokens.extend(flatten(tree, TokenCategory.COLOR, source_file=source))

    return batch
