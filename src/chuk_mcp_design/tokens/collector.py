"""
Token collector - runs every normalizer over a tokens checkout.

The collector is the offline build pass: it produces the complete token
list for the index plus every warning raised along the way.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from chuk_mcp_design.models import Token
from chuk_mcp_design.tokens.normalizers import (
    normalize_borders,
    normalize_colors,
    normalize_grid,
    normalize_screens,
    normalize_shadows,
    normalize_spacing,
    normalize_typography,
)
from chuk_mcp_design.tokens.sources import TokenBatch

logger = logging.getLogger(__name__)


class TokenCollector:
    """
    Collects normalized tokens from all categories.

    Normalizers run in a fixed order. A normalizer that fails outright is
    reported as a warning and the remaining ones still run.
    """

    def __init__(self, tokens_path: Path, styles_path: Path | None = None):
        """
        Initialize the collector.

        Args:
            tokens_path: Root of the tokens checkout (contains properties/)
            styles_path: Optional styles checkout used by the spacing series
        """
        self.tokens_path = tokens_path
        self.styles_path = styles_path

    def normalizers(self) -> list[tuple[str, Callable[[], TokenBatch]]]:
        """Named normalizer calls in build order."""
        path = self.tokens_path
        return [
            ("color", lambda: normalize_colors(path)),
            ("spacing", lambda: normalize_spacing(self.styles_path)),
            ("shadow", lambda: normalize_shadows(path)),
            ("border", lambda: normalize_borders(path)),
            ("screen", lambda: normalize_screens(path)),
            ("typography", lambda: normalize_typography(path)),
            ("grid", lambda: normalize_grid(path)),
        ]

    def collect(self) -> TokenBatch:
        """
        Run all normalizers.

        Returns:
            All tokens (duplicate paths dropped) and all warnings
        """
        result = TokenBatch()

        for name, run in self.normalizers():
            try:
                batch = run()
            except Exception as e:
                logger.exception(f"Normalizer '{name}' failed")
                result.warn(name, f"normalizer failed: {e}")
                continue

            logger.info(f"  {name}: {len(batch.tokens)} tokens, {len(batch.warnings)} warnings")
            result.extend(batch)

        result.tokens = self._drop_duplicates(result)
        return result

    @staticmethod
    def _drop_duplicates(batch: TokenBatch) -> list[Token]:
        seen: set[tuple[str, str]] = set()
        unique: list[Token] = []
        for token in batch.tokens:
            key = (token.category.value, token.path)
            if key in seen:
                source = token.source_file or token.category.value
                batch.warn(source, f"duplicate token path {token.path}")
                continue
            seen.add(key)
            unique.append(token)
        return unique


def collect_tokens(tokens_path: Path, styles_path: Path | None = None) -> TokenBatch:
    """Convenience wrapper around TokenCollector.collect()."""
    return TokenCollector(tokens_path, styles_path).collect()
