#!/usr/bin/env python3
"""
Offline index builder for the CHUK Design MCP Server.

Normalizes a design tokens checkout and writes it, together with
optional documentation, icon, component and CSS utility records, into
the SQLite index the server reads.

Record inputs are JSON or YAML lists:

    [{"title": "Buttons", "path": "/components/buttons/", "content": "..."}]
    [{"name": "Cart24", "type": "shopping", "viewBox": "0 0 24 24", "paths": "[...]"}]
    [{"name": "MButton", "category": "action", "props": [{"name": "size", "defaultValue": "m"}]}]
    [{"name": "Flexy", "category": "layout", "classes": ["ml-flexy", "ml-flexy__col"]}]
"""

import argparse
import logging
import re
import sys
from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from chuk_mcp_design.errors import SourceReadError
from chuk_mcp_design.models import Component, CssUtility, Documentation, IconMatch
from chuk_mcp_design.store import IndexBuilder
from chuk_mcp_design.tokens import TokenBatch, collect_tokens, read_source

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

SIZE_SUFFIX = re.compile(r"(\d+)$")

RecordModel = TypeVar("RecordModel", bound=BaseModel)


def icon_from_record(record: dict[str, Any]) -> IconMatch:
    """
    Build an icon from a source record.

    The base name and size default to the export name split at its
    trailing digits ("Cart24" -> "Cart", 24).
    """
    name = str(record["name"])
    base = str(record.get("iconName") or record.get("icon_name") or name)
    match = SIZE_SUFFIX.search(name)
    size = record.get("size")
    if not isinstance(size, int):
        size = int(match.group(1)) if match else 16

    return IconMatch(
        name=name,
        icon_name=SIZE_SUFFIX.sub("", base),
        type=record.get("type") or "unknown",
        size=size,
        view_box=record.get("viewBox") or record.get("view_box") or f"0 0 {size} {size}",
        paths=record.get("paths") if isinstance(record.get("paths"), str) else "[]",
    )


def load_records(path: Path, label: str, batch: TokenBatch) -> list[dict[str, Any]]:
    """Load a list of records, recording a warning if the file is unusable."""
    try:
        data = read_source(path)
    except SourceReadError as e:
        batch.warn(path, e.reason)
        return []
    if not isinstance(data, list):
        batch.warn(path, f"expected a list of {label} records")
        return []
    return [r for r in data if isinstance(r, dict)]


def validate_records(
    path: Path, label: str, model: type[RecordModel], batch: TokenBatch
) -> list[RecordModel]:
    """
    Validate records into models, skipping invalid ones and duplicate names.

    Each skipped record becomes a warning; the rest still load.
    """
    items: list[RecordModel] = []
    seen: set[str] = set()
    for record in load_records(path, label, batch):
        try:
            item = model.model_validate(record)
        except ValidationError as e:
            batch.warn(path, f"invalid {label} record: {e.errors()[0]['msg']}")
            continue
        key = getattr(item, "name", None) or getattr(item, "path", None)
        if key in seen:
            batch.warn(path, f"duplicate {label} '{key}' dropped")
            continue
        seen.add(key)
        items.append(item)
    return items


def build_index(
    tokens_path: Path,
    output: Path,
    styles_path: Path | None = None,
    docs_path: Path | None = None,
    icons_path: Path | None = None,
    components_path: Path | None = None,
    utilities_path: Path | None = None,
) -> TokenBatch:
    """
    Run a full build pass.

    Args:
        tokens_path: Root of the tokens checkout
        output: SQLite file to (re)write
        styles_path: Optional styles checkout
        docs_path: Optional documentation records file
        icons_path: Optional icon records file
        components_path: Optional component records file
        utilities_path: Optional CSS utility records file

    Returns:
        The token batch, including warnings from every stage
    """
    logger.info(f"Normalizing tokens from {tokens_path}")
    batch = collect_tokens(tokens_path, styles_path)

    documents = (
        validate_records(docs_path, "documentation", Documentation, batch) if docs_path else []
    )

    icons: list[IconMatch] = []
    if icons_path:
        for record in load_records(icons_path, "icon", batch):
            try:
                icons.append(icon_from_record(record))
            except (KeyError, ValueError) as e:
                batch.warn(icons_path, f"invalid icon record: {e}")

    components = (
        validate_records(components_path, "component", Component, batch) if components_path else []
    )
    utilities = (
        validate_records(utilities_path, "CSS utility", CssUtility, batch) if utilities_path else []
    )

    with IndexBuilder(output) as builder:
        builder.clear()
        builder.insert_tokens(batch.tokens)
        builder.insert_documents(documents)
        builder.insert_icons(icons)
        builder.insert_components(components)
        builder.insert_css_utilities(utilities)

    return batch


def main() -> None:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(description="Build the CHUK Design index")
    parser.add_argument("--tokens", type=Path, required=True, help="Tokens checkout root")
    parser.add_argument("--styles", type=Path, help="Styles checkout root")
    parser.add_argument("--docs", type=Path, help="Documentation records (JSON/YAML)")
    parser.add_argument("--icons", type=Path, help="Icon records (JSON/YAML)")
    parser.add_argument("--components", type=Path, help="Component records (JSON/YAML)")
    parser.add_argument("--utilities", type=Path, help="CSS utility records (JSON/YAML)")
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("data") / "design.db",
        help="Index file to write (default: data/design.db)",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    args = parser.parse_args()

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    if not args.tokens.is_dir():
        logger.error(f"Tokens path not found: {args.tokens}")
        sys.exit(1)

    batch = build_index(
        args.tokens,
        args.output,
        args.styles,
        args.docs,
        args.icons,
        args.components,
        args.utilities,
    )

    logger.info(f"Wrote {len(batch.tokens)} tokens to {args.output}")
    if batch.warnings:
        logger.warning(f"{len(batch.warnings)} warnings:")
        for warning in batch.warnings:
            logger.warning(f"  {warning.source}: {warning.message}")


if __name__ == "__main__":
    main()
