#!/usr/bin/env python3
"""
Async Design System MCP Server using chuk-mcp-server

This server provides MCP tools over a prebuilt design-system index:
normalized design tokens, documentation pages, icons, components and
CSS utilities.

The server provides tools for:
- Getting design tokens by category as JSON, CSS, SCSS or JS
- Looking up and searching individual tokens
- Searching documentation with phrase-then-prefix fallback
- Searching icons and rendering SVG / React / Vue snippets
- Listing components and CSS utilities, with install instructions
"""

import logging
import os
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_design.store import DesignStore
from chuk_mcp_design.tools import (
    register_component_tools,
    register_search_tools,
    register_token_tools,
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-design")

# Paths - the index is built offline by chuk-mcp-design-index
BASE_PATH = Path.cwd()
DEFAULT_DB_PATH = BASE_PATH / "data" / "design.db"
DB_PATH = Path(os.environ.get("CHUK_MCP_DESIGN_DB", str(DEFAULT_DB_PATH)))

# Open the read-only store, shared by every tool call
store = DesignStore(DB_PATH)

# Register all tools
token_tools = register_token_tools(mcp, store)
search_tools = register_search_tools(mcp, store)
component_tools = register_component_tools(mcp, store)

# Export tool functions for direct access
design_get_tokens = token_tools["design_get_tokens"]
design_get_token = token_tools["design_get_token"]
design_search_tokens = token_tools["design_search_tokens"]

design_search_documentation = search_tools["design_search_documentation"]
design_search_icons = search_tools["design_search_icons"]
design_get_icon = search_tools["design_get_icon"]

design_list_components = component_tools["design_list_components"]
design_get_component = component_tools["design_get_component"]
design_list_css_utilities = component_tools["design_list_css_utilities"]
design_get_css_utility = component_tools["design_get_css_utility"]
design_get_install_info = component_tools["design_get_install_info"]

logger.info("CHUK Design MCP Server initialized")
logger.info(f"  Index: {DB_PATH}")
logger.info(f"  Contents: {store.get_stats()}")
