#!/usr/bin/env python3
"""
Entry point for the CHUK Keymap MCP Server.

This module provides the main entry point for the MCP server,
supporting multiple transport modes (stdio, http).

Directories can be set on the command line or through the
CHUK_KEYMAP_KEYMAPS_DIR / CHUK_KEYMAP_OUTPUT_DIR environment variables.
"""

import argparse
import asyncio
import logging
import os

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def main() -> None:
    """Main entry point with transport detection."""
    parser = argparse.ArgumentParser(description="CHUK Keymap MCP Server")
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
        "--keymaps-dir",
        help="Directory keymap files are resolved against (default: ./keymaps)",
    )
    parser.add_argument(
        "--output-dir",
        help="Directory rendered SVG files are written to (default: ./output)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args()

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)
    if args.keymaps_dir:
        os.environ["CHUK_KEYMAP_KEYMAPS_DIR"] = args.keymaps_dir
    if args.output_dir:
        os.environ["CHUK_KEYMAP_OUTPUT_DIR"] = args.output_dir

    # Import after argument parsing so the server sees the configured paths
    from chuk_mcp_keymap.async_server import mcp

    if args.transport == "stdio":
        logger.info("Starting CHUK Keymap MCP Server (stdio)")
        asyncio.run(mcp.run_stdio())
    else:
        logger.info(f"Starting CHUK Keymap MCP Server (http:{args.port})")
        asyncio.run(mcp.run_http(port=args.port))


if __name__ == "__main__":
    main()
