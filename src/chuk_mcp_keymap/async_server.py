#!/usr/bin/env python3
"""
Async Keymap MCP Server using chuk-mcp-server

This server provides MCP tools for harmonic keymaps and the color wheel
that visualizes them. A harmonic keymap maps a scale onto an equal
division of the octave; the wheel draws one colored wedge per pitch
class with the scale as a constellation in the middle.

The server provides tools for:
- Rendering N-division color wheels as wedge data or SVG
- Validating keymap definitions
- Classifying keys as active or inactive
- Rendering keymaps as SVG
"""

import logging
import os
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_keymap.keymaps import KeymapLoader
from chuk_mcp_keymap.tools import register_keymap_tools, register_wheel_tools

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-keymap")

# Paths - use standard project structure unless overridden
BASE_PATH = Path.cwd()
KEYMAPS_DIR = Path(os.environ.get("CHUK_KEYMAP_KEYMAPS_DIR", BASE_PATH / "keymaps"))
OUTPUT_DIR = Path(os.environ.get("CHUK_KEYMAP_OUTPUT_DIR", BASE_PATH / "output"))

# Create loader
keymap_loader = KeymapLoader(base_path=KEYMAPS_DIR)

# Register all tools
wheel_tools = register_wheel_tools(mcp)
keymap_tools = register_keymap_tools(mcp, keymap_loader, OUTPUT_DIR)

# Export tool functions for direct access
keymap_render_wheel = wheel_tools["keymap_render_wheel"]
keymap_wheel_svg = wheel_tools["keymap_wheel_svg"]

keymap_validate = keymap_tools["keymap_validate"]
keymap_classify = keymap_tools["keymap_classify"]
keymap_render_svg = keymap_tools["keymap_render_svg"]

logger.info("CHUK Keymap MCP Server initialized")
logger.info(f"  Keymaps dir: {KEYMAPS_DIR}")
logger.info(f"  Output dir: {OUTPUT_DIR}")
