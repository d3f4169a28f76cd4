"""
MCP tool implementations.

Tools are organized by domain:
- wheel - Color wheel rendering
- keymaps - Keymap validation, classification and rendering
"""

from chuk_mcp_keymap.tools.keymaps import register_keymap_tools
from chuk_mcp_keymap.tools.wheel import register_wheel_tools

__all__ = [
    "register_keymap_tools",
    "register_wheel_tools",
]
