"""
Value parsing for design token sources.

Source files mix bare numbers, unit-suffixed strings ("12px", "1.5rem"),
colors ("#FF00AA", "rgba(0, 0, 0, .5)") and free-form expressions.
parse_value() classifies a raw scalar into a number and unit where it can
and falls back to the raw text otherwise. Parsing never fails.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass

from chuk_mcp_design.constants import MAGIC_UNIT_PX

NUMBER_WITH_UNIT = re.compile(r"(-?[0-9]+(?:\.[0-9]+)?)(px|rem|em|%|vw|vh|s|ms)?")
HEX_COLOR = re.compile(r"#[0-9a-fA-F]{3,8}")
RGB_COLOR = re.compile(r"^rgba?\(")
COMPONENT_PREFIX = re.compile(r"^M(?=[A-Z])")
CASE_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")
WORD_SEPARATORS = re.compile(r"[-_\s]+")


@dataclass(frozen=True)
class ParsedValue:
    """A raw value with its optional numeric part and unit."""

    raw: str
    number: float | None = None
    unit: str | None = None

    @property
    def is_numeric(self) -> bool:
        return self.number is not None


def parse_value(value: str | int | float) -> ParsedValue:
    """
    Parse a raw token value.

    Args:
        value: String or number from a token source

    Returns:
        ParsedValue with number/unit populated when recognised

    Example:
        >>> parse_value("12px")
        ParsedValue(raw='12px', number=12.0, unit='px')
        >>> parse_value("#FF00AA")
        ParsedValue(raw='#FF00AA', number=None, unit='hex')
    """
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return ParsedValue(raw=format_number(value), number=value)

    raw = str(value)

    match = NUMBER_WITH_UNIT.fullmatch(raw)
    if match:
        return ParsedValue(raw=raw, number=float(match.group(1)), unit=match.group(2))

    if HEX_COLOR.fullmatch(raw):
        return ParsedValue(raw=raw, unit="hex")

    if RGB_COLOR.match(raw):
        return ParsedValue(raw=raw, unit="rgb")

    return ParsedValue(raw=raw)


def to_number(value: object) -> float | None:
    """
    Coerce a source value to a number.

    Numbers pass through; strings are float-parsed from their leading
    numeric prefix ("2px" -> 2.0). Returns None when nothing numeric
    can be read.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return None if isinstance(value, float) and math.isnan(value) else value
    match = re.match(r"^\s*(-?(?:[0-9]+\.?[0-9]*|\.[0-9]+))", str(value))
    if not match:
        return None
    return float(match.group(1))


def format_number(value: int | float) -> str:
    """Render a number without a trailing '.0' for whole values."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _variable_suffix(category: str, path: str) -> str:
    prefix = f"{category}."
    if path.startswith(prefix):
        path = path[len(prefix) :]
    return path.replace(".", "-").lower()


def path_to_css_variable(category: str, path: str) -> str:
    """
    Derive the CSS custom property name for a token.

    The category prefix of the path is not repeated:
    ("color", "color.primary-01.500") -> "--color-primary-01-500"
    """
    return f"--{category}-{_variable_suffix(category, path)}"


def path_to_scss_variable(category: str, path: str) -> str:
    """Derive the SCSS variable name for a token ("$color-primary-01-500")."""
    return f"${category}-{_variable_suffix(category, path)}"


def rem_to_px(rem: float) -> str:
    """Convert a rem magnitude to a rounded pixel string (1.5 -> "24px")."""
    # half-up rounding, not banker's rounding
    return f"{math.floor(rem * MAGIC_UNIT_PX + 0.5)}px"


def component_slug(name: str) -> str:
    """
    Derive the lookup slug for a component or utility name.

    The "M" export prefix is dropped and camel case is hyphenated:
    "MTextInput" -> "text-input", "Modal" -> "modal", "flexy" -> "flexy".
    """
    name = COMPONENT_PREFIX.sub("", name.strip())
    name = CASE_BOUNDARY.sub("-", name)
    return WORD_SEPARATORS.sub("-", name).lower()


def pascal_case(slug: str) -> str:
    """Join slug words in Pascal case ("text-input" -> "TextInput")."""
    return "".join(word[:1].upper() + word[1:].lower() for word in WORD_SEPARATORS.split(slug))
