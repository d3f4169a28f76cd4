"""
Pydantic models for the keymap system.

This module provides:
- Keymap: Tagged union of the keymap variants
- HarmonicKeymap: Tuning + scale keymap
- FreeformKeymap: Per-key keymap (opaque for now)
- parse_keymap: Build the right variant from a mapping
"""

from chuk_mcp_keymap.models.keymap import (
    FreeformKeymap,
    HarmonicKeymap,
    Keymap,
    KeymapBase,
    parse_keymap,
)

__all__ = [
    "FreeformKeymap",
    "HarmonicKeymap",
    "Keymap",
    "KeymapBase",
    "parse_keymap",
]
