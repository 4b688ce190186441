#!/usr/bin/env python3
"""
Entry point for the CHUK Design MCP Server.

This module provides the main entry point for the MCP server,
supporting multiple transport modes (stdio, http).
"""

import argparse
import asyncio
import logging
import os
import sys

from chuk_mcp_design.errors import StoreUnavailableError

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def main() -> None:
    """Main entry point with transport detection."""
    parser = argparse.ArgumentParser(description="CHUK Design MCP Server")
    parser.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default="stdio",
        help="Transport mode (default: stdio)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="HTTP port (only for http transport)",
    )
    parser.add_argument(
        "--db",
        help="Path to the design index (default: $CHUK_MCP_DESIGN_DB or ./data/design.db)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args()

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.db:
        os.environ["CHUK_MCP_DESIGN_DB"] = args.db

    # Import after argument parsing so the index path is settled
    try:
        from chuk_mcp_design.async_server import mcp
    except StoreUnavailableError as e:
        logger.error(str(e))
        sys.exit(1)

    if args.transport == "stdio":
        logger.info("Starting CHUK Design MCP Server (stdio)")
        asyncio.run(mcp.run_stdio())
    else:
        logger.info(f"Starting CHUK Design MCP Server (http:{args.port})")
        asyncio.run(mcp.run_http(port=args.port))


if __name__ == "__main__":
    main()
