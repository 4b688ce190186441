"""
Token tools - MCP tools for design token lookup.

Tools for listing tokens by category in several output formats, looking
up a single token by path and searching tokens by name.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_design.constants import (
    CATEGORY_ALIASES,
    DEFAULT_TOKENS_LIMIT,
    ErrorMessages,
    NotFoundMessages,
    TokenCategory,
)
from chuk_mcp_design.formatters import TOKEN_FORMATS, format_tokens, token_to_dict
from chuk_mcp_design.search import SearchExecutor
from chuk_mcp_design.store import DesignStore

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def resolve_categories(category: str) -> tuple[TokenCategory, ...] | None:
    """
    Map a public category name to token categories.

    Accepts the plural aliases ("colors", "borders"...), the singular
    category values ("color", "radius"...) and "all".
    Returns None for unknown names.
    """
    if category == "all":
        return tuple(TokenCategory)
    if category in CATEGORY_ALIASES:
        return CATEGORY_ALIASES[category]
    try:
        return (TokenCategory(category),)
    except ValueError:
        return None


def register_token_tools(mcp: ChukMCPServer, store: DesignStore) -> dict[str, Any]:
    """
    Register design token tools with the MCP server.

    Args:
        mcp: The MCP server instance
        store: The design index

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}
    executor = SearchExecutor(store)

    @mcp.tool  # type: ignore[arg-type]
    async def design_get_tokens(category: str, format: str = "json") -> str:
        """
        Get design tokens for a category.

        Args:
            category: 'colors', 'typography', 'spacing', 'shadows', 'borders',
                'screens', 'grid' or 'all'
            format: Output format - 'json', 'css', 'scss' or 'js'

        Returns:
            JSON string with the tokens (json) or the rendered stylesheet/module

        Example:
            design_get_tokens(category="spacing", format="css")
        """
        try:
            categories = resolve_categories(category)
            if categories is None:
                expected = ", ".join([*CATEGORY_ALIASES, "all"])
                return json.dumps(
                    {
                        "status": "error",
                        "message": ErrorMessages.UNKNOWN_CATEGORY.format(
                            category=category, expected=expected
                        ),
                    }
                )
            if format not in TOKEN_FORMATS:
                return json.dumps(
                    {
                        "status": "error",
                        "message": ErrorMessages.UNKNOWN_FORMAT.format(
                            format=format, expected=", ".join(TOKEN_FORMATS)
                        ),
                    }
                )

            tokens = []
            for cat in categories:
                tokens.extend(store.get_tokens(cat))

            if not tokens:
                return json.dumps(
                    {
                        "status": "success",
                        "category": category,
                        "count": 0,
                        "message": NotFoundMessages.NO_TOKENS.format(category=category),
                    }
                )

            result: dict[str, Any] = {
                "status": "success",
                "category": category,
                "format": format,
                "count": len(tokens),
            }
            if format == "json":
                result["tokens"] = [token_to_dict(t) for t in tokens]
            else:
                result["output"] = format_tokens(tokens, format)
            return json.dumps(result)
        except Exception as e:
            logger.exception("Failed to get tokens")
            return json.dumps({"status": "error", "message": str(e)})

    tools["design_get_tokens"] = design_get_tokens

    @mcp.tool  # type: ignore[arg-type]
    async def design_get_token(path: str) -> str:
        """
        Get a single design token by its path.

        Args:
            path: Canonical token path (e.g., 'color.primary-01.500', 'spacing.mu100')

        Returns:
            JSON string with the token, including CSS/SCSS variable names

        Example:
            design_get_token(path="shadow.s")
        """
        try:
            token = store.get_token_by_path(path)
            if token is None:
                return json.dumps(
                    {
                        "status": "success",
                        "token": None,
                        "message": NotFoundMessages.NO_TOKEN.format(path=path),
                    }
                )
            return json.dumps({"status": "success", "token": token_to_dict(token)})
        except Exception as e:
            logger.exception("Failed to get token")
            return json.dumps({"status": "error", "message": str(e)})

    tools["design_get_token"] = design_get_token

    @mcp.tool  # type: ignore[arg-type]
    async def design_search_tokens(query: str, limit: int = DEFAULT_TOKENS_LIMIT) -> str:
        """
        Search design tokens by name, path or description.

        Args:
            query: Free-text query (e.g., 'primary', 'font size')
            limit: Maximum number of tokens to return

        Returns:
            JSON string with matching tokens

        Example:
            design_search_tokens(query="primary")
        """
        try:
            if not query or not query.strip():
                return json.dumps({"status": "error", "message": ErrorMessages.EMPTY_QUERY})

            outcome = executor.search_tokens(query, limit=limit)
            if not outcome.found:
                return json.dumps(
                    {
                        "status": "success",
                        "query": query,
                        "count": 0,
                        "tokens": [],
                        "message": NotFoundMessages.NO_TOKEN_MATCHES.format(query=query),
                    }
                )

            return json.dumps(
                {
                    "status": "success",
                    "query": query,
                    "strategy": outcome.strategy,
                    "count": len(outcome.results),
                    "tokens": [token_to_dict(t) for t in outcome.results],
                }
            )
        except Exception as e:
            logger.exception("Failed to search tokens")
            return json.dumps({"status": "error", "message": str(e)})

    tools["design_search_tokens"] = design_search_tokens

    return tools
