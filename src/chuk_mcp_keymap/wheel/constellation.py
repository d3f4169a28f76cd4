"""
Pitch constellation - the star drawn inside the wheel's hole.

One line runs from the wheel center toward each scale tone, in that
tone's color, so the shape of the scale can be read at a glance.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from fractions import Fraction
from numbers import Real
from typing import Any

from chuk_mcp_keymap.constants import CONSTELLATION_OPACITY, CONSTELLATION_STROKE_RATIO
from chuk_mcp_keymap.core.geometry import Point, polar_to_cartesian
from chuk_mcp_keymap.core.palette import Color, Palette
from chuk_mcp_keymap.core.tuning import Tuning


@dataclass(frozen=True)
class ConstellationLine:
    """A line from the wheel center toward one scale tone."""

    index: int
    start: Point
    end: Point
    color: Color
    stroke_width: float
    opacity: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "index": self.index,
            "start": [self.start.x, self.start.y],
            "end": [self.end.x, self.end.y],
            "color": self.color.hex,
            "stroke_width": self.stroke_width,
            "opacity": self.opacity,
        }


def render_constellation(
    center: Point,
    radius: float,
    tuning: Tuning,
    scale_pitches: Iterable[int],
    palette: Palette,
    rotation_offset: Real = 0,
) -> tuple[ConstellationLine, ...]:
    """
    Build the constellation lines for a scale.

    Args:
        center: Wheel center
        radius: Line length (usually the wheel's hole radius)
        tuning: Tuning the scale belongs to
        scale_pitches: Pitch class indices in the scale
        palette: Colors per index
        rotation_offset: Same offset the wheel was rendered with

    Returns:
        One line per scale tone, ordered by ascending index
    """
    arc = Fraction(360, tuning.divisions)
    stroke_width = radius * CONSTELLATION_STROKE_RATIO
    lines = []
    for value in sorted(set(scale_pitches)):
        pitch_class = tuning.pitch_class(value)
        angle = arc * pitch_class.value + rotation_offset
        lines.append(
            ConstellationLine(
                index=pitch_class.value,
                start=center,
                end=polar_to_cartesian(center, radius, angle),
                color=palette.primary(pitch_class.value),
                stroke_width=stroke_width,
                opacity=CONSTELLATION_OPACITY,
            )
        )
    return tuple(lines)
