"""
Design store - read-only access to the prebuilt SQLite index.

The store is opened once per process and shared by all tool calls. It
never writes. Full-text queries that the FTS5 engine rejects raise
IndexQuerySyntaxError so the search cascade can move on; any other
SQLite failure raises StoreError.
"""

from __future__ import annotations

import json
import logging
import sqlite3
from pathlib import Path
from typing import Any

from chuk_mcp_design.constants import (
    DEFAULT_DOCS_LIMIT,
    DEFAULT_ICONS_LIMIT,
    DEFAULT_TOKENS_LIMIT,
    ErrorMessages,
    TokenCategory,
)
from chuk_mcp_design.core import component_slug
from chuk_mcp_design.errors import IndexQuerySyntaxError, StoreError, StoreUnavailableError
from chuk_mcp_design.models import (
    Component,
    CssUtility,
    Documentation,
    IconMatch,
    SearchResult,
    Token,
    TokenProperty,
)

logger = logging.getLogger(__name__)

# Fragments of sqlite3.OperationalError messages caused by a bad MATCH expression
FTS_ERROR_MARKERS = (
    "fts5",
    "syntax error",
    "no such column",
    "unterminated string",
    "unknown special query",
)

ALL_CATEGORIES = "all"


def is_fts_syntax_error(error: sqlite3.Error) -> bool:
    """True if an SQLite error was caused by the MATCH expression."""
    message = str(error).lower()
    return any(marker in message for marker in FTS_ERROR_MARKERS)


def escape_like(fragment: str) -> str:
    """Escape LIKE wildcards so a fragment matches literally (ESCAPE '\\')."""
    return fragment.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def json_list(text: str | None) -> list[Any]:
    """Decode a JSON array column; NULL reads as empty."""
    return json.loads(text) if text else []


class DesignStore:
    """
    Read-only queries over the design index.

    Tokens are returned with their composite properties attached;
    documentation and icon searches take a prepared FTS5 expression
    (see chuk_mcp_design.search.planner).
    """

    def __init__(self, db_path: Path):
        """
        Open the index.

        Args:
            db_path: Path to the SQLite file built by IndexBuilder

        Raises:
            StoreUnavailableError: If the file is missing or cannot be opened
        """
        self.db_path = Path(db_path)

        if not self.db_path.is_file():
            raise StoreUnavailableError(ErrorMessages.STORE_NOT_FOUND.format(path=self.db_path))

        try:
            self._conn = sqlite3.connect(
                f"{self.db_path.resolve().as_uri()}?mode=ro",
                uri=True,
                check_same_thread=False,
            )
        except sqlite3.Error as e:
            raise StoreUnavailableError(f"Could not open {self.db_path}: {e}") from e

        self._conn.row_factory = sqlite3.Row
        logger.info(f"Opened design index {self.db_path}")

    def close(self) -> None:
        """Close the underlying connection."""
        self._conn.close()

    def __enter__(self) -> DesignStore:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def _fetch(self, sql: str, params: tuple[Any, ...] = ()) -> list[sqlite3.Row]:
        try:
            return self._conn.execute(sql, params).fetchall()
        except sqlite3.Error as e:
            raise StoreError(str(e)) from e

    def _match(self, sql: str, expression: str, params: tuple[Any, ...]) -> list[sqlite3.Row]:
        try:
            return self._conn.execute(sql, (expression, *params)).fetchall()
        except sqlite3.OperationalError as e:
            if is_fts_syntax_error(e):
                raise IndexQuerySyntaxError(expression, str(e)) from e
            raise StoreError(str(e)) from e
        except sqlite3.Error as e:
            raise StoreError(str(e)) from e

    def _row_to_token(self, row: sqlite3.Row) -> Token:
        properties = self._fetch(
            "SELECT property, value, value_number, value_unit FROM token_properties "
            "WHERE token_id = ? ORDER BY position",
            (row["id"],),
        )
        return Token(
            category=TokenCategory(row["category"]),
            subcategory=row["subcategory"],
            name=row["name"],
            path=row["path"],
            value_raw=row["value_raw"],
            value_number=row["value_number"],
            value_unit=row["value_unit"],
            value_computed=row["value_computed"],
            description=row["description"],
            platform=row["platform"] or "all",
            source_file=row["source_file"],
            properties=tuple(
                TokenProperty(
                    property=p["property"],
                    value=p["value"],
                    value_number=p["value_number"],
                    value_unit=p["value_unit"],
                )
                for p in properties
            ),
        )

    def get_tokens(self, category: TokenCategory | str = ALL_CATEGORIES) -> list[Token]:
        """
        Get tokens in a category, in build order.

        Args:
            category: A TokenCategory, or "all"
        """
        if category == ALL_CATEGORIES:
            rows = self._fetch("SELECT * FROM tokens ORDER BY id")
        else:
            value = category.value if isinstance(category, TokenCategory) else category
            rows = self._fetch("SELECT * FROM tokens WHERE category = ? ORDER BY id", (value,))
        return [self._row_to_token(row) for row in rows]

    def get_tokens_by_subcategory(
        self, category: TokenCategory | str, subcategory: str
    ) -> list[Token]:
        """Get tokens in one subcategory of a category."""
        value = category.value if isinstance(category, TokenCategory) else category
        rows = self._fetch(
            "SELECT * FROM tokens WHERE category = ? AND subcategory = ? ORDER BY id",
            (value, subcategory),
        )
        return [self._row_to_token(row) for row in rows]

    def get_token_by_path(self, path: str) -> Token | None:
        """Get a single token by its canonical path."""
        rows = self._fetch("SELECT * FROM tokens WHERE path = ? ORDER BY id LIMIT 1", (path,))
        return self._row_to_token(rows[0]) if rows else None

    def search_tokens(self, expression: str, limit: int = DEFAULT_TOKENS_LIMIT) -> list[Token]:
        """Full-text search over token names, paths and descriptions."""
        rows = self._match(
            """
            SELECT t.*
            FROM tokens_fts
            JOIN tokens t ON tokens_fts.rowid = t.id
            WHERE tokens_fts MATCH ?
            ORDER BY rank
            LIMIT ?
            """,
            expression,
            (limit,),
        )
        return [self._row_to_token(row) for row in rows]

    def search_documentation(
        self, expression: str, limit: int = DEFAULT_DOCS_LIMIT
    ) -> list[SearchResult]:
        """Full-text search over documentation, with highlighted snippets."""
        rows = self._match(
            """
            SELECT
              d.title,
              d.path,
              d.category,
              snippet(docs_fts, 1, '<mark>', '</mark>', '...', 64) AS snippet
            FROM docs_fts
            JOIN documentation d ON docs_fts.rowid = d.id
            WHERE docs_fts MATCH ?
            ORDER BY rank
            LIMIT ?
            """,
            expression,
            (limit,),
        )
        return [
            SearchResult(
                title=row["title"],
                path=row["path"],
                snippet=row["snippet"] or "",
                category=row["category"],
            )
            for row in rows
        ]

    def get_documentation_by_path(self, path: str) -> Documentation | None:
        """Get a documentation page by path."""
        rows = self._fetch("SELECT * FROM documentation WHERE path = ?", (path,))
        if not rows:
            return None
        row = rows[0]
        return Documentation(
            title=row["title"],
            path=row["path"],
            content=row["content"],
            category=row["category"],
            keywords=tuple(json.loads(row["keywords"])) if row["keywords"] else (),
        )

    @staticmethod
    def _row_to_icon(row: sqlite3.Row) -> IconMatch:
        return IconMatch(
            name=row["name"],
            icon_name=row["icon_name"],
            type=row["type"] or "unknown",
            size=row["size"] or 16,
            view_box=row["view_box"] or "0 0 16 16",
            paths=row["paths"] or "[]",
        )

    def search_icons(
        self,
        expression: str,
        icon_type: str | None = None,
        size: int | None = None,
        limit: int = DEFAULT_ICONS_LIMIT,
    ) -> list[IconMatch]:
        """
        Full-text search over icon names and types.

        Args:
            expression: FTS5 expression
            icon_type: Optional exact type filter
            size: Optional exact size filter
            limit: Maximum rows
        """
        filters = ""
        params: list[Any] = []
        if icon_type:
            filters += " AND i.type = ?"
            params.append(icon_type)
        if size:
            filters += " AND i.size = ?"
            params.append(size)
        params.append(limit)

        rows = self._match(
            f"""
            SELECT i.*
            FROM icons_fts
            JOIN icons i ON icons_fts.rowid = i.id
            WHERE icons_fts MATCH ?{filters}
            ORDER BY rank
            LIMIT ?
            """,
            expression,
            tuple(params),
        )
        return [self._row_to_icon(row) for row in rows]

    def get_icon_by_name(self, name: str) -> IconMatch | None:
        """Get an icon by its exact export name (case-insensitive)."""
        rows = self._fetch("SELECT * FROM icons WHERE name = ? COLLATE NOCASE LIMIT 1", (name,))
        return self._row_to_icon(rows[0]) if rows else None

    def find_icons_like(self, fragment: str, limit: int = 5) -> list[IconMatch]:
        """Icons whose name contains a fragment (case-insensitive)."""
        pattern = f"%{escape_like(fragment)}%"
        rows = self._fetch(
            "SELECT * FROM icons WHERE name LIKE ? ESCAPE '\\' OR icon_name LIKE ? ESCAPE '\\' "
            "ORDER BY name LIMIT ?",
            (pattern, pattern, limit),
        )
        return [self._row_to_icon(row) for row in rows]

    def list_icon_types(self) -> list[tuple[str, int]]:
        """Icon types with the number of icons of each."""
        rows = self._fetch(
            "SELECT type, COUNT(*) AS count FROM icons GROUP BY type ORDER BY type"
        )
        return [(row["type"], row["count"]) for row in rows]

    @staticmethod
    def _row_to_component(row: sqlite3.Row) -> Component:
        return Component(
            name=row["name"],
            slug=row["slug"],
            category=row["category"],
            description=row["description"],
            frameworks=json_list(row["frameworks"]),
            props=json_list(row["props"]),
            slots=json_list(row["slots"]),
            events=json_list(row["events"]),
            examples=json_list(row["examples"]),
            css_classes=json_list(row["css_classes"]),
        )

    def list_components(self, category: str | None = None) -> list[Component]:
        """Components, optionally in one category, ordered by category and name."""
        if category:
            rows = self._fetch(
                "SELECT * FROM components WHERE category = ? COLLATE NOCASE ORDER BY name",
                (category,),
            )
        else:
            rows = self._fetch("SELECT * FROM components ORDER BY category, name")
        return [self._row_to_component(row) for row in rows]

    def get_component(self, name: str) -> Component | None:
        """
        Get a component by slug or name, ignoring case.

        "MTextInput", "TextInput" and "text-input" all find the same row.
        """
        rows = self._fetch(
            "SELECT * FROM components WHERE lower(slug) IN (?, ?) OR name = ? COLLATE NOCASE "
            "ORDER BY id LIMIT 1",
            (component_slug(name), name.strip().lower(), name.strip()),
        )
        return self._row_to_component(rows[0]) if rows else None

    def find_components_like(self, fragment: str, limit: int = 5) -> list[Component]:
        """Components whose slug or name contains a fragment (case-insensitive)."""
        pattern = f"%{escape_like(component_slug(fragment))}%"
        rows = self._fetch(
            "SELECT * FROM components WHERE slug LIKE ? ESCAPE '\\' OR name LIKE ? ESCAPE '\\' "
            "ORDER BY name LIMIT ?",
            (pattern, pattern, limit),
        )
        return [self._row_to_component(row) for row in rows]

    @staticmethod
    def _row_to_utility(row: sqlite3.Row) -> CssUtility:
        return CssUtility(
            name=row["name"],
            slug=row["slug"],
            category=row["category"],
            description=row["description"],
            classes=json_list(row["classes"]),
            examples=json_list(row["examples"]),
        )

    def list_css_utilities(self, category: str | None = None) -> list[CssUtility]:
        """CSS utilities, optionally in one category, ordered by category and name."""
        if category:
            rows = self._fetch(
                "SELECT * FROM css_utilities WHERE category = ? COLLATE NOCASE ORDER BY name",
                (category,),
            )
        else:
            rows = self._fetch("SELECT * FROM css_utilities ORDER BY category, name")
        return [self._row_to_utility(row) for row in rows]

    def get_css_utility(self, name: str) -> CssUtility | None:
        """Get a CSS utility by slug or name, ignoring case."""
        rows = self._fetch(
            "SELECT * FROM css_utilities WHERE lower(slug) IN (?, ?) OR name = ? COLLATE NOCASE "
            "ORDER BY id LIMIT 1",
            (component_slug(name), name.strip().lower(), name.strip()),
        )
        return self._row_to_utility(rows[0]) if rows else None

    def get_stats(self) -> dict[str, int]:
        """Row counts per table."""
        stats = {}
        for table in ("tokens", "documentation", "icons", "components", "css_utilities"):
            stats[table] = self._fetch(f"SELECT COUNT(*) FROM {table}")[0][0]
        return stats
