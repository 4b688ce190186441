"""
Pydantic models for the design index.

This module provides:
- Token: Normalized design token
- TokenProperty: Sub-value of a composite token
- SearchResult: Documentation search hit
- Documentation: Stored documentation page
- IconMatch: Single icon at one size
- IconGroup: Icons grouped by base name
- Component: Vue/React component with props, slots, events and examples
- CssUtility: CSS-only utility and its class names
"""

from chuk_mcp_design.models.component import (
    CodeExample,
    Component,
    ComponentEvent,
    ComponentProp,
    ComponentSlot,
    CssUtility,
)
from chuk_mcp_design.models.search import Documentation, IconGroup, IconMatch, SearchResult
from chuk_mcp_design.models.token import Token, TokenProperty

__all__ = [
    "CodeExample",
    "Component",
    "ComponentEvent",
    "ComponentProp",
    "ComponentSlot",
    "CssUtility",
    "Documentation",
    "IconGroup",
    "IconMatch",
    "SearchResult",
    "Token",
    "TokenProperty",
]
