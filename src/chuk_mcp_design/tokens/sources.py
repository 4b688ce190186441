"""
Token source discovery and loading.

Sources come from a design tokens checkout laid out as:

    <tokens_path>/properties/color/**/*.json
    <tokens_path>/properties/shadow/*.json
    <tokens_path>/properties/border/*.json
    <tokens_path>/properties/radius/*.json
    <tokens_path>/properties/size/{screens,font,grid,base}.json

JSON is the native format; YAML files (.yaml/.yml) are accepted too.
A file that cannot be read never aborts a build pass: loaders raise
SourceReadError and normalizers turn it into a SourceWarning.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from chuk_mcp_design.errors import SourceReadError
from chuk_mcp_design.models import Token

logger = logging.getLogger(__name__)

SOURCE_SUFFIXES = (".json", ".yaml", ".yml")


@dataclass(frozen=True)
class SourceWarning:
    """A non-fatal problem with one source unit."""

    source: str
    message: str


@dataclass
class TokenBatch:
    """Tokens produced by a normalizer plus any per-source warnings."""

    tokens: list[Token] = field(default_factory=list)
    warnings: list[SourceWarning] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        """True when every source unit was read cleanly."""
        return not self.warnings

    def extend(self, other: TokenBatch) -> None:
        """Merge another batch into this one, preserving order."""
        self.tokens.extend(other.tokens)
        self.warnings.extend(other.warnings)

    def warn(self, source: Path | str, message: str) -> None:
        """Record a warning and log it."""
        logger.warning(f"{source}: {message}")
        self.warnings.append(SourceWarning(source=str(source), message=message))


def read_source(path: Path) -> Any:
    """
    Load a token source file.

    Args:
        path: JSON or YAML file

    Returns:
        The decoded document

    Raises:
        SourceReadError: If the file is missing, unreadable, not UTF-8 or malformed
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SourceReadError(path, str(e)) from e

    try:
        if path.suffix in (".yaml", ".yml"):
            return yaml.safe_load(text)
        return json.loads(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise SourceReadError(path, str(e)) from e


def find_source_files(directory: Path, recursive: bool = False) -> list[Path]:
    """
    List source files in a directory, sorted for a stable build order.

    Returns an empty list if the directory does not exist.
    """
    if not directory.is_dir():
        return []
    pattern = "**/*" if recursive else "*"
    return sorted(
        p for p in directory.glob(pattern) if p.is_file() and p.suffix in SOURCE_SUFFIXES
    )


def relative_source(path: Path, tokens_path: Path) -> str:
    """Path of a source file relative to the tokens checkout, POSIX style."""
    try:
        return path.relative_to(tokens_path).as_posix()
    except ValueError:
        return path.as_posix()


def unwrap(data: Any, key: str) -> Any:
    """
    Strip a redundant outer key.

    {"color": {...}} and {...} normalize identically when key == "color".
    """
    if isinstance(data, dict) and isinstance(data.get(key), dict):
        return data[key]
    return data


def dig(data: Any, *keys: str) -> dict[str, Any]:
    """Follow nested keys, returning {} as soon as a level is missing."""
    current = data
    for key in keys:
        if not isinstance(current, dict):
            return {}
        current = current.get(key)
    return current if isinstance(current, dict) else {}
