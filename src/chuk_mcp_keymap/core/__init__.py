"""
Core keymap primitives.

These are the pure value types everything else composes on:
- Tuning: An N-way equal division of the octave
- PitchClass: One step of a tuning (0 to N-1)
- Color: An HSL color with hex output
- Palette: Evenly spaced hues, one per pitch class
- Point: A planar coordinate
- polar_to_cartesian / describe_arc / line_to / wedge_path: SVG path math
"""

from chuk_mcp_keymap.core.geometry import (
    Point,
    describe_arc,
    format_number,
    line_to,
    polar_to_cartesian,
    wedge_path,
)
from chuk_mcp_keymap.core.palette import Color, Palette
from chuk_mcp_keymap.core.tuning import PitchClass, Tuning

__all__ = [
    # Tuning
    "Tuning",
    "PitchClass",
    # Palette
    "Color",
    "Palette",
    # Geometry
    "Point",
    "polar_to_cartesian",
    "describe_arc",
    "line_to",
    "wedge_path",
    "format_number",
]
