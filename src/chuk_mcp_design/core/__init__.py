"""
Core value primitives.

Pure functions that depend only on constants:
- parse_value: raw scalar to number/unit
- path_to_css_variable / path_to_scss_variable: variable name derivation
- rem_to_px / format_number: unit conversion and rendering
- component_slug / pascal_case: component name normalization
"""

from chuk_mcp_design.core.values import (
    ParsedValue,
    component_slug,
    format_number,
    parse_value,
    path_to_css_variable,
    path_to_scss_variable,
    pascal_case,
    rem_to_px,
    to_number,
)

__all__ = [
    "ParsedValue",
    "component_slug",
    "format_number",
    "parse_value",
    "path_to_css_variable",
    "path_to_scss_variable",
    "pascal_case",
    "rem_to_px",
    "to_number",
]
