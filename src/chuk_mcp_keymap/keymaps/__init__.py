"""
Keymap loading and classification.

This module provides:
- KeymapLoader: Parses YAML keymap definitions
- classify_keys: Active/inactive state per pitch class
"""

from chuk_mcp_keymap.keymaps.classifier import KeyState, classify_keys
from chuk_mcp_keymap.keymaps.loader import KeymapLoader

__all__ = [
    "KeyState",
    "KeymapLoader",
    "classify_keys",
]
