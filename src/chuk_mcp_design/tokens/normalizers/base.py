"""
Shared plumbing for category normalizers.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from chuk_mcp_design.errors import SourceReadError
from chuk_mcp_design.models import Token
from chuk_mcp_design.tokens.sources import TokenBatch, read_source, relative_source

PROPERTIES_DIR = "properties"
SIZE_DIR = "size"


def properties_dir(tokens_path: Path, *parts: str) -> Path:
    """Directory under <tokens_path>/properties."""
    return tokens_path.joinpath(PROPERTIES_DIR, *parts)


def load_each(
    files: Iterable[Path],
    tokens_path: Path,
    batch: TokenBatch,
) -> Iterator[tuple[str, Any]]:
    """
    Yield (relative source, decoded document) for each readable file.

    Unreadable or malformed files are recorded on the batch as warnings
    and skipped, so one bad file never stops its siblings.
    """
    for path in files:
        source = relative_source(path, tokens_path)
        try:
            data = read_source(path)
        except SourceReadError as e:
            batch.warn(source, e.reason)
            continue
        yield source, data


def leaf_entries(group: dict[str, Any]) -> Iterator[tuple[str, dict[str, Any]]]:
    """Entries of a flat group that carry a "value" key (of any type)."""
    for name, definition in group.items():
        if isinstance(definition, dict) and "value" in definition:
            yield str(name), definition


def entry_text(definition: dict[str, Any], key: str) -> str | None:
    """A free-text field of a source entry, as a string if present."""
    value = definition.get(key)
    return str(value) if value not in (None, "") else None


def make_token(batch: TokenBatch, source: str, **fields: Any) -> Token | None:
    """
    Build a token, or record a warning and return None if it is invalid.

    One bad entry costs only that entry, never its siblings.
    """
    try:
        return Token(**fields)
    except ValidationError as e:
        batch.warn(source, f"invalid token {fields.get('path')}: {e.errors()[0]['msg']}")
        return None
