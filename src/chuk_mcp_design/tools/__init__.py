"""
MCP tool implementations.

Tools are organized by domain:
- tokens - Design token lookup and formatting
- search - Documentation and icon search
- components - Components, CSS utilities and install info
"""

from chuk_mcp_design.tools.components import register_component_tools
from chuk_mcp_design.tools.search import register_search_tools
from chuk_mcp_design.tools.tokens import register_token_tools

__all__ = [
    "register_component_tools",
    "register_search_tools",
    "register_token_tools",
]
