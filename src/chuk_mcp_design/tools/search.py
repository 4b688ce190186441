"""
Search tools - MCP tools for documentation and icon lookup.

Free-text searches run through the cascading planner, so multi-word
queries first try the exact phrase and then looser prefix matches.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_design.constants import (
    DEFAULT_DOCS_LIMIT,
    DEFAULT_ICONS_LIMIT,
    DOCS_BASE_URL,
    ICON_SIZES,
    ErrorMessages,
    NotFoundMessages,
)
from chuk_mcp_design.formatters import icon_import, react_usage, render_svg, vue_usage
from chuk_mcp_design.models import IconMatch
from chuk_mcp_design.search import SearchExecutor
from chuk_mcp_design.store import DesignStore

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)

ICON_FORMATS = ("svg", "react", "vue", "all")


def find_icon(store: DesignStore, name: str) -> IconMatch | None:
    """Exact icon name first, then the name with each standard size appended."""
    icon = store.get_icon_by_name(name)
    if icon is not None:
        return icon
    for size in ICON_SIZES:
        icon = store.get_icon_by_name(f"{name}{size}")
        if icon is not None:
            return icon
    return None


def register_search_tools(mcp: ChukMCPServer, store: DesignStore) -> dict[str, Any]:
    """
    Register documentation and icon tools with the MCP server.

    Args:
        mcp: The MCP server instance
        store: The design index

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}
    executor = SearchExecutor(store)

    @mcp.tool  # type: ignore[arg-type]
    async def design_search_documentation(query: str, limit: int = DEFAULT_DOCS_LIMIT) -> str:
        """
        Search design system documentation.

        Args:
            query: Search query (e.g., 'button variants', 'form validation', 'color tokens')
            limit: Maximum number of results to return

        Returns:
            JSON string with matching pages and highlighted snippets

        Example:
            design_search_documentation(query="button variants")
        """
        try:
            if not query or not query.strip():
                return json.dumps({"status": "error", "message": ErrorMessages.EMPTY_QUERY})

            outcome = executor.search_documentation(query, limit=limit)
            if not outcome.found:
                return json.dumps(
                    {
                        "status": "success",
                        "query": query,
                        "resultCount": 0,
                        "results": [],
                        "message": NotFoundMessages.NO_DOCS.format(query=query),
                    }
                )

            return json.dumps(
                {
                    "status": "success",
                    "query": query,
                    "strategy": outcome.strategy,
                    "resultCount": len(outcome.results),
                    "results": [
                        {
                            "title": r.title,
                            "path": r.path,
                            "category": r.category,
                            "snippet": r.snippet,
                            "url": f"{DOCS_BASE_URL}{r.path}",
                        }
                        for r in outcome.results
                    ],
                }
            )
        except Exception as e:
            logger.exception("Failed to search documentation")
            return json.dumps({"status": "error", "message": str(e)})

    tools["design_search_documentation"] = design_search_documentation

    @mcp.tool  # type: ignore[arg-type]
    async def design_search_icons(
        query: str,
        type: str | None = None,
        size: int | None = None,
        limit: int = DEFAULT_ICONS_LIMIT,
    ) -> str:
        """
        Search icons by name, optionally filtered by type and size.

        Args:
            query: Icon name query (e.g., 'arrow', 'cart', 'user')
            type: Optional icon type (e.g., 'navigation', 'media', 'social')
            size: Optional size in pixels (16, 24, 32, 48 or 64)
            limit: Maximum number of icon rows to consider

        Returns:
            JSON string with icons grouped by name and their available sizes

        Example:
            design_search_icons(query="arrow", type="navigation")
        """
        try:
            if not query or not query.strip():
                return json.dumps(
                    {
                        "status": "error",
                        "message": ErrorMessages.EMPTY_QUERY,
                        "types": [f"{t} ({n} icons)" for t, n in store.list_icon_types()],
                    }
                )

            outcome = executor.search_icons(query, icon_type=type, size=size, limit=limit)
            filters = {"type": type or "all", "size": size or "all"}

            if not outcome.found:
                return json.dumps(
                    {
                        "status": "success",
                        "query": query,
                        "filters": filters,
                        "resultCount": 0,
                        "icons": [],
                        "message": NotFoundMessages.NO_ICONS.format(query=query),
                        "availableTypes": [t for t, _ in store.list_icon_types()],
                    }
                )

            return json.dumps(
                {
                    "status": "success",
                    "query": query,
                    "filters": filters,
                    "resultCount": len(outcome.results),
                    "uniqueIcons": len(outcome.groups),
                    "icons": [
                        {
                            "name": g.icon_name,
                            "type": g.type,
                            "availableSizes": list(g.available_sizes),
                            "usage": icon_import(g.smallest_name),
                        }
                        for g in outcome.groups
                    ],
                }
            )
        except Exception as e:
            logger.exception("Failed to search icons")
            return json.dumps({"status": "error", "message": str(e)})

    tools["design_search_icons"] = design_search_icons

    @mcp.tool  # type: ignore[arg-type]
    async def design_get_icon(name: str, format: str = "all") -> str:
        """
        Get an icon with SVG markup and React/Vue usage code.

        Args:
            name: Icon name, with or without size (e.g., 'Cart24', 'ArrowArrowBottom')
            format: 'svg', 'react', 'vue' or 'all'

        Returns:
            JSON string with the icon and the requested renderings

        Example:
            design_get_icon(name="Cart24", format="svg")
        """
        try:
            if not name or not name.strip():
                return json.dumps({"status": "error", "message": ErrorMessages.EMPTY_ICON_NAME})
            if format not in ICON_FORMATS:
                return json.dumps(
                    {
                        "status": "error",
                        "message": ErrorMessages.UNKNOWN_FORMAT.format(
                            format=format, expected=", ".join(ICON_FORMATS)
                        ),
                    }
                )

            icon = find_icon(store, name.strip())
            if icon is None:
                similar = store.find_icons_like(name.strip())
                return json.dumps(
                    {
                        "status": "success",
                        "icon": None,
                        "message": NotFoundMessages.NO_ICON.format(name=name),
                        "suggestions": [i.name for i in similar],
                    }
                )

            result: dict[str, Any] = {
                "name": icon.name,
                "iconName": icon.icon_name,
                "type": icon.type,
                "size": icon.size,
                "viewBox": icon.view_box,
            }
            if format in ("svg", "all"):
                result["svg"] = render_svg(icon)
            if format in ("react", "all"):
                result["react"] = react_usage(icon.name)
            if format in ("vue", "all"):
                result["vue"] = vue_usage(icon.name)
            if format == "all":
                result["rawPaths"] = icon.paths

            return json.dumps({"status": "success", "icon": result})
        except Exception as e:
            logger.exception("Failed to get icon")
            return json.dumps({"status": "error", "message": str(e)})

    tools["design_get_icon"] = design_get_icon

    return tools
