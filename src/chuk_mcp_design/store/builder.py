"""
Index builder - writes the design index offline.

The builder is the only writer of the SQLite file. It runs once per
build pass (see chuk_mcp_design.indexer); the server then opens the
result read-only through DesignStore.
"""

from __future__ import annotations

import json
import logging
import sqlite3
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from chuk_mcp_design.models import Component, CssUtility, Documentation, IconMatch, Token
from chuk_mcp_design.store.schema import SCHEMA

logger = logging.getLogger(__name__)


def dump_models(items: Iterable[Any]) -> str | None:
    """JSON array of pydantic models, or None when empty."""
    records = [item.model_dump(exclude_none=True) for item in items]
    return json.dumps(records) if records else None


class IndexBuilder:
    """
    Creates the schema and bulk-inserts records.

    Each insert_* call runs in its own transaction.
    """

    def __init__(self, db_path: Path):
        """
        Open (or create) the index for writing.

        Args:
            db_path: Destination SQLite file; parent directories are created
        """
        self.db_path = Path(db_path)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self.conn = sqlite3.connect(self.db_path)
        self.conn.execute("PRAGMA foreign_keys = ON")
        self.conn.executescript(SCHEMA)
        self.conn.commit()

    def close(self) -> None:
        """Commit and close the connection."""
        self.conn.commit()
        self.conn.close()

    def __enter__(self) -> IndexBuilder:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def clear(self) -> None:
        """Delete every row (FTS tables follow via triggers)."""
        with self.conn:
            self.conn.executescript(
                """
                DELETE FROM token_properties;
                DELETE FROM tokens;
                DELETE FROM documentation;
                DELETE FROM icons;
                DELETE FROM components;
                DELETE FROM css_utilities;
                """
            )

    def insert_tokens(self, tokens: Iterable[Token]) -> int:
        """
        Insert tokens and their composite properties.

        Returns:
            Number of tokens written
        """
        count = 0
        with self.conn:
            for token in tokens:
                cursor = self.conn.execute(
                    """
                    INSERT INTO tokens (
                      category, subcategory, name, path, css_variable, scss_variable,
                      value_raw, value_number, value_unit, value_computed,
                      description, platform, source_file
                    ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                    """,
                    (
                        token.category.value,
                        token.subcategory,
                        token.name,
                        token.path,
                        token.css_variable,
                        token.scss_variable,
                        token.value_raw,
                        token.value_number,
                        token.value_unit,
                        token.value_computed,
                        token.description,
                        token.platform,
                        token.source_file,
                    ),
                )
                for position, prop in enumerate(token.properties):
                    self.conn.execute(
                        """
                        INSERT INTO token_properties
                          (token_id, position, property, value, value_number, value_unit)
                        VALUES (?, ?, ?, ?, ?, ?)
                        """,
                        (
                            cursor.lastrowid,
                            position,
                            prop.property,
                            prop.value,
                            prop.value_number,
                            prop.value_unit,
                        ),
                    )
                count += 1
        logger.info(f"Indexed {count} tokens")
        return count

    def insert_documents(self, documents: Iterable[Documentation]) -> int:
        """Insert documentation pages. Returns the number written."""
        count = 0
        with self.conn:
            for doc in documents:
                self.conn.execute(
                    """
                    INSERT INTO documentation (title, path, content, category, keywords)
                    VALUES (?, ?, ?, ?, ?)
                    """,
                    (
                        doc.title,
                        doc.path,
                        doc.content,
                        doc.category,
                        json.dumps(list(doc.keywords)) if doc.keywords else None,
                    ),
                )
                count += 1
        logger.info(f"Indexed {count} documentation pages")
        return count

    def insert_icons(self, icons: Iterable[IconMatch]) -> int:
        """Insert icons (one row per size). Returns the number written."""
        count = 0
        with self.conn:
            for icon in icons:
                self.conn.execute(
                    """
                    INSERT INTO icons (name, icon_name, type, size, view_box, paths)
                    VALUES (?, ?, ?, ?, ?, ?)
                    """,
                    (icon.name, icon.icon_name, icon.type, icon.size, icon.view_box, icon.paths),
                )
                count += 1
        logger.info(f"Indexed {count} icons")
        return count

    def insert_components(self, components: Iterable[Component]) -> int:
        """Insert components with their props, slots, events and examples."""
        count = 0
        with self.conn:
            for component in components:
                self.conn.execute(
                    """
                    INSERT INTO components (
                      name, slug, category, description, frameworks,
                      props, slots, events, examples, css_classes
                    ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                    """,
                    (
                        component.name,
                        component.slug,
                        component.category,
                        component.description,
                        json.dumps(list(component.frameworks)) if component.frameworks else None,
                        dump_models(component.props),
                        dump_models(component.slots),
                        dump_models(component.events),
                        dump_models(component.examples),
                        json.dumps(list(component.css_classes)) if component.css_classes else None,
                    ),
                )
                count += 1
        logger.info(f"Indexed {count} components")
        return count

    def insert_css_utilities(self, utilities: Iterable[CssUtility]) -> int:
        """Insert CSS utilities. Returns the number written."""
        count = 0
        with self.conn:
            for utility in utilities:
                self.conn.execute(
                    """
                    INSERT INTO css_utilities (name, slug, category, description, classes, examples)
                    VALUES (?, ?, ?, ?, ?, ?)
                    """,
                    (
                        utility.name,
                        utility.slug,
                        utility.category,
                        utility.description,
                        json.dumps(list(utility.classes)) if utility.classes else None,
                        dump_models(utility.examples),
                    ),
                )
                count += 1
        logger.info(f"Indexed {count} CSS utilities")
        return count
