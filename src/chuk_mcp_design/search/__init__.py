"""
Cascading full-text search.

- planner: query text to ordered index expressions
- executor: runs the plan against the store and shapes results
"""

from chuk_mcp_design.search.executor import (
    Attempt,
    IconSearchOutcome,
    SearchBackend,
    SearchExecutor,
    SearchOutcome,
    clean_snippet,
    group_icons,
)
from chuk_mcp_design.search.planner import PlannedExpression, extract_terms, iter_plan, plan

__all__ = [
    "Attempt",
    "IconSearchOutcome",
    "PlannedExpression",
    "SearchBackend",
    "SearchExecutor",
    "SearchOutcome",
    "clean_snippet",
    "extract_terms",
    "group_icons",
    "iter_plan",
    "plan",
]
