"""
Exception types for the design index.

Only StoreError (and its subclasses other than IndexQuerySyntaxError)
is meant to reach callers of the core. The others are recovered where
they are raised: SourceReadError per source file during normalization,
IndexQuerySyntaxError per attempt in the search cascade.
"""

from __future__ import annotations

from pathlib import Path


class DesignError(Exception):
    """Base class for all design index errors."""


class SourceReadError(DesignError):
    """A token source file is missing, unreadable or malformed."""

    def __init__(self, path: Path | str, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Could not parse {self.path}: {reason}")


class StoreError(DesignError):
    """The backing store failed for a reason other than query syntax."""


class StoreUnavailableError(StoreError):
    """The backing store could not be opened."""


class IndexQuerySyntaxError(StoreError):
    """The full-text engine rejected an index expression."""

    def __init__(self, expression: str, reason: str):
        self.expression = expression
        self.reason = reason
        super().__init__(f"Invalid index expression {expression!r}: {reason}")
