"""
SQLite storage for the design index.

- DesignStore: read-only queries used at serve time
- IndexBuilder: offline writer used by the indexer
"""

from chuk_mcp_design.store.builder import IndexBuilder
from chuk_mcp_design.store.database import DesignStore, escape_like, is_fts_syntax_error

__all__ = [
    "DesignStore",
    "IndexBuilder",
    "escape_like",
    "is_fts_syntax_error",
]
