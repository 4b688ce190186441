"""
Token normalization pipeline.

Turns a design tokens checkout into flat, typed Token records:
- sources: file discovery/loading and the TokenBatch result type
- flatten: nested property trees to tokens
- normalizers: per-category conversion rules
- collector: the full build pass
"""

from chuk_mcp_design.tokens.collector import TokenCollector, collect_tokens
from chuk_mcp_design.tokens.flatten import color_subcategory, flatten, is_leaf
from chuk_mcp_design.tokens.sources import (
    SourceWarning,
    TokenBatch,
    find_source_files,
    read_source,
    unwrap,
)

__all__ = [
    "SourceWarning",
    "TokenBatch",
    "TokenCollector",
    "collect_tokens",
    "color_subcategory",
    "find_source_files",
    "flatten",
    "is_leaf",
    "read_source",
    "unwrap",
]
