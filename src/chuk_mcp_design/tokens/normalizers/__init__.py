"""
Category-specific token normalizers.

Each normalizer reads its own slice of a tokens checkout and returns a
TokenBatch. Missing files contribute nothing; malformed files become
warnings on the batch.
"""

from chuk_mcp_design.tokens.normalizers.border import normalize_borders
from chuk_mcp_design.tokens.normalizers.color import normalize_colors
from chuk_mcp_design.tokens.normalizers.grid import normalize_grid
from chuk_mcp_design.tokens.normalizers.screen import normalize_screens, screen_subcategory
from chuk_mcp_design.tokens.normalizers.shadow import normalize_shadows
from chuk_mcp_design.tokens.normalizers.spacing import normalize_spacing
from chuk_mcp_design.tokens.normalizers.typography import normalize_typography

__all__ = [
    "normalize_borders",
    "normalize_colors",
    "normalize_grid",
    "normalize_screens",
    "normalize_shadows",
    "normalize_spacing",
    "normalize_typography",
    "screen_subcategory",
]
