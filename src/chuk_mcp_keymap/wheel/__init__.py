"""
Color wheel rendering.

Turns a tuning (or a harmonic keymap) into drawable data:
- WheelRenderer: wedges + rim mask for N divisions
- render_constellation: scale-tone lines inside the hole
- render_keymap: wheel + constellation for a keymap
- wheel_to_svg: standalone SVG document
"""

from chuk_mcp_keymap.wheel.constellation import ConstellationLine, render_constellation
from chuk_mcp_keymap.wheel.keymap_wheel import KeymapWheel, render_keymap
from chuk_mcp_keymap.wheel.renderer import (
    RimMask,
    WedgeDescriptor,
    Wheel,
    WheelRenderer,
    render_wheel,
)
from chuk_mcp_keymap.wheel.svg import keymap_wheel_to_svg, wheel_to_svg

__all__ = [
    "ConstellationLine",
    "KeymapWheel",
    "RimMask",
    "WedgeDescriptor",
    "Wheel",
    "WheelRenderer",
    "keymap_wheel_to_svg",
    "render_constellation",
    "render_keymap",
    "render_wheel",
    "wheel_to_svg",
]
