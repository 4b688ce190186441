"""
Search executor - runs a search plan against the index.

Each plan step is tried in order. The first step that returns rows wins;
a step the engine rejects as malformed is recorded and skipped. When the
plan is exhausted the outcome is simply empty - search never raises for
query problems. Store failures other than query syntax do propagate.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Generic, Protocol, TypeVar

from chuk_mcp_design.constants import (
    DEFAULT_DOCS_LIMIT,
    DEFAULT_ICONS_LIMIT,
    DEFAULT_TOKENS_LIMIT,
    SNIPPET_MAX_LENGTH,
)
from chuk_mcp_design.errors import IndexQuerySyntaxError
from chuk_mcp_design.models import IconGroup, IconMatch, SearchResult, Token
from chuk_mcp_design.search.planner import iter_plan

logger = logging.getLogger(__name__)

T = TypeVar("T")

WHITESPACE = re.compile(r"\s+")


class SearchBackend(Protocol):
    """Read capability the executor needs from the store."""

    def search_documentation(self, expression: str, limit: int) -> list[SearchResult]: ...

    def search_icons(
        self,
        expression: str,
        icon_type: str | None = None,
        size: int | None = None,
        limit: int = DEFAULT_ICONS_LIMIT,
    ) -> list[IconMatch]: ...

    def search_tokens(self, expression: str, limit: int) -> list[Token]: ...


@dataclass(frozen=True)
class Attempt:
    """Record of one plan step."""

    strategy: str
    expression: str
    row_count: int = 0
    error: str | None = None


@dataclass
class SearchOutcome(Generic[T]):
    """Result of running a search plan."""

    query: str
    results: list[T] = field(default_factory=list)
    strategy: str | None = None
    expression: str | None = None
    attempts: list[Attempt] = field(default_factory=list)

    @property
    def found(self) -> bool:
        return bool(self.results)

    @property
    def errors(self) -> list[Attempt]:
        """Attempts the engine rejected."""
        return [a for a in self.attempts if a.error is not None]


@dataclass
class IconSearchOutcome(SearchOutcome[IconMatch]):
    """Icon search result with matches grouped by base name."""

    groups: list[IconGroup] = field(default_factory=list)


def clean_snippet(snippet: str | None, max_length: int = SNIPPET_MAX_LENGTH) -> str:
    """
    Tidy an FTS highlight snippet for display.

    <mark> tags become markdown bold, whitespace is collapsed and the
    text is cut to max_length characters followed by "...".
    """
    if not snippet:
        return ""

    cleaned = snippet.replace("<mark>", "**").replace("</mark>", "**")
    cleaned = WHITESPACE.sub(" ", cleaned).strip()

    if len(cleaned) > max_length:
        cleaned = cleaned[:max_length] + "..."
    return cleaned


def group_icons(icons: Sequence[IconMatch]) -> list[IconGroup]:
    """
    Collapse icon matches by base name.

    Groups keep first-seen order; sizes are deduplicated and ascending.
    """
    types: dict[str, str] = {}
    sizes: dict[str, set[int]] = {}

    for icon in icons:
        if icon.icon_name not in types:
            types[icon.icon_name] = icon.type
            sizes[icon.icon_name] = set()
        sizes[icon.icon_name].add(icon.size)

    return [
        IconGroup(icon_name=name, type=types[name], available_sizes=tuple(sorted(sizes[name])))
        for name in types
    ]


class SearchExecutor:
    """
    Runs cascading full-text searches against a store.

    The executor holds no per-search state; one instance can serve
    concurrent calls.
    """

    def __init__(self, store: SearchBackend):
        """
        Initialize the executor.

        Args:
            store: Backend providing the raw index queries
        """
        self.store = store

    def run(
        self,
        query: str,
        fetch: Callable[[str], list[T]],
        outcome: SearchOutcome[T] | None = None,
    ) -> SearchOutcome[T]:
        """
        Try each plan step until one returns rows.

        Args:
            query: Free-text query
            fetch: Runs one index expression, may raise IndexQuerySyntaxError
            outcome: Outcome object to fill (a fresh SearchOutcome by default)

        Returns:
            The filled outcome; empty if no step matched
        """
        if outcome is None:
            outcome = SearchOutcome(query=query)

        if not query or not query.strip():
            return outcome

        for step in iter_plan(query):
            try:
                rows = fetch(step.expression)
            except IndexQuerySyntaxError as e:
                logger.debug(f"Search step {step.strategy} rejected: {e.reason}")
                outcome.attempts.append(
                    Attempt(step.strategy, step.expression, error=e.reason)
                )
                continue

            outcome.attempts.append(Attempt(step.strategy, step.expression, row_count=len(rows)))
            if rows:
                outcome.results = rows
                outcome.strategy = step.strategy
                outcome.expression = step.expression
                return outcome

        return outcome

    def search_documentation(
        self, query: str, limit: int = DEFAULT_DOCS_LIMIT
    ) -> SearchOutcome[SearchResult]:
        """
        Search documentation pages.

        Snippets in the results are cleaned for display.
        """
        outcome = self.run(query, lambda expr: self.store.search_documentation(expr, limit))
        outcome.results = [
            result.model_copy(update={"snippet": clean_snippet(result.snippet)})
            for result in outcome.results
        ]
        return outcome

    def search_icons(
        self,
        query: str,
        icon_type: str | None = None,
        size: int | None = None,
        limit: int = DEFAULT_ICONS_LIMIT,
    ) -> IconSearchOutcome:
        """
        Search icons, optionally filtered by type and size.

        The outcome's groups collapse sizes of the same icon.
        """
        outcome = IconSearchOutcome(query=query)
        self.run(
            query,
            lambda expr: self.store.search_icons(expr, icon_type=icon_type, size=size, limit=limit),
            outcome,
        )
        outcome.groups = group_icons(outcome.results)
        return outcome

    def search_tokens(
        self, query: str, limit: int = DEFAULT_TOKENS_LIMIT
    ) -> SearchOutcome[Token]:
        """Search tokens by name, path and description."""
        return self.run(query, lambda expr: self.store.search_tokens(expr, limit))
