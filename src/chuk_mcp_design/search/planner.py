"""
Search query planner.

Turns free text into an ordered list of FTS5 index expressions, strictest
first. Multi-word queries try the exact phrase, then every term as a
prefix (AND), then any term as a prefix (OR):

    "button variants" -> ['"button variants"',
                          'button* AND variants*',
                          'button* OR variants*']

Strategies are pure builders evaluated lazily, so an executor that stops
at the first hit never builds the looser expressions.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from dataclasses import dataclass

# Anything that is not a word character, whitespace or hyphen
NON_TERM_CHARS = re.compile(r"[^\w\s-]")

MIN_TERM_LENGTH = 2


@dataclass(frozen=True)
class PlannedExpression:
    """One step of a search plan."""

    strategy: str
    expression: str


def extract_terms(query: str) -> list[str]:
    """Split a query into search terms, dropping punctuation and 1-char terms."""
    cleaned = NON_TERM_CHARS.sub(" ", query)
    return [term for term in cleaned.split() if len(term) >= MIN_TERM_LENGTH]


def exact_phrase(terms: list[str]) -> str:
    return '"' + " ".join(terms) + '"'


def all_terms(terms: list[str]) -> str:
    return " AND ".join(f"{term}*" for term in terms)


def any_term(terms: list[str]) -> str:
    return " OR ".join(f"{term}*" for term in terms)


MULTI_TERM_STRATEGIES: tuple[tuple[str, Callable[[list[str]], str]], ...] = (
    ("exact_phrase", exact_phrase),
    ("all_terms", all_terms),
    ("any_term", any_term),
)


def iter_plan(query: str) -> Iterator[PlannedExpression]:
    """
    Lazily yield the plan for a query, strictest expression first.

    Args:
        query: Free-text search query

    Yields:
        PlannedExpression for each strategy that applies
    """
    terms = extract_terms(query)

    if not terms:
        # Best effort: hand the query to the engine as-is
        yield PlannedExpression("literal", query.strip())
        return

    if len(terms) == 1:
        yield PlannedExpression("prefix", f"{terms[0]}*")
        return

    for name, build in MULTI_TERM_STRATEGIES:
        yield PlannedExpression(name, build(terms))


def plan(query: str) -> list[str]:
    """
    Build the full ordered list of index expressions for a query.

    Example:
        >>> plan("color")
        ['color*']
    """
    return [step.expression for step in iter_plan(query)]
