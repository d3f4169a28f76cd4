"""
Wheel renderer - tuning + palette + geometry -> colored wedges.

The wheel is a chromatic circle: one pie-slice wedge per pitch class,
masked down to an outer rim. Each wedge path is drawn around the 0
degree direction and placed with a rotation, so every wedge shares the
same outline.

Everything here is derived on demand from the renderer's inputs. There
is no cache; rendering twice with the same inputs gives equal results.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from fractions import Fraction
from numbers import Real
from typing import Any

from chuk_mcp_keymap.constants import (
    DEFAULT_HOLE_RATIO,
    LABEL_RADIUS_RATIO,
    ErrorMessages,
)
from chuk_mcp_keymap.core.geometry import Point, format_number, polar_to_cartesian, wedge_path
from chuk_mcp_keymap.core.palette import Color, Palette
from chuk_mcp_keymap.core.tuning import Tuning

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WedgeDescriptor:
    """
    One wedge of the wheel, ready to draw.

    `path` is in the wedge's local frame (centered on 0 degrees);
    `transform` rotates it into place around the wheel center.
    """

    index: int
    rotation_degrees: Real
    arc_degrees: Fraction
    fill_color: Color
    stroke_color: Color
    text_color: Color
    label: str
    path: str
    center: Point
    label_point: Point

    @property
    def transform(self) -> str:
        """SVG transform placing the wedge on the wheel."""
        return (
            f"rotate({format_number(self.rotation_degrees)}, "
            f"{format_number(self.center.x)}, {format_number(self.center.y)})"
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "index": self.index,
            "rotation_degrees": float(self.rotation_degrees),
            "arc_degrees": float(self.arc_degrees),
            "fill_color": self.fill_color.hex,
            "stroke_color": self.stroke_color.hex,
            "text_color": self.text_color.hex,
            "label": self.label,
            "path": self.path,
            "transform": self.transform,
            "label_point": [self.label_point.x, self.label_point.y],
        }


@dataclass(frozen=True)
class RimMask:
    """
    Annular mask: a disc with a concentric hole cut out.

    Only the part of the wheel between inner_radius and outer_radius
    is visible.
    """

    center: Point
    outer_radius: float
    inner_radius: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "center": [self.center.x, self.center.y],
            "outer_radius": self.outer_radius,
            "inner_radius": self.inner_radius,
        }


@dataclass(frozen=True)
class Wheel:
    """The result of one render pass."""

    center: Point
    radius: float
    hole_radius: float
    wedges: tuple[WedgeDescriptor, ...]
    mask: RimMask

    @property
    def divisions(self) -> int:
        return len(self.wedges)

    def to_dict(self) -> dict[str, Any]:
        return {
            "center": [self.center.x, self.center.y],
            "radius": self.radius,
            "hole_radius": self.hole_radius,
            "divisions": self.divisions,
            "wedges": [w.to_dict() for w in self.wedges],
            "mask": self.mask.to_dict(),
        }


class WheelRenderer:
    """
    Builds the wedges and rim mask of a color wheel.

    Inputs are fixed at construction, except `rotation_offset`, which may
    be changed to turn the wheel (e.g. to bring a tonic to 0 degrees).
    Every derived value is recomputed from the inputs when read.
    """

    def __init__(
        self,
        radius: float,
        divisions: int,
        palette: Palette | None = None,
        hole_ratio: float = DEFAULT_HOLE_RATIO,
        rotation_offset: Real = 0,
        labels: Sequence[str] | None = None,
    ):
        """
        Initialize the renderer.

        Args:
            radius: Outer radius of the wheel
            divisions: Number of wedges (the tuning's division count)
            palette: Colors per index (default: Palette(divisions))
            hole_ratio: Radius of the hole as a fraction of the radius, in (0, 1)
            rotation_offset: Degrees added to every wedge rotation
            labels: Optional wedge labels (default: the index as a string)

        Raises:
            InvalidTuning: if divisions is not a whole number >= 1
            ValueError: if radius, hole_ratio, labels or the palette size are invalid
        """
        self._tuning = Tuning(divisions)
        if not radius > 0:
            raise ValueError(ErrorMessages.INVALID_RADIUS.format(radius=radius))
        if not 0 < hole_ratio < 1:
            raise ValueError(ErrorMessages.INVALID_HOLE_RATIO.format(hole_ratio=hole_ratio))
        if labels is not None and len(labels) != divisions:
            raise ValueError(ErrorMessages.LABEL_COUNT.format(divisions=divisions, count=len(labels)))

        if palette is not None and palette.divisions != divisions:
            raise ValueError(
                ErrorMessages.PALETTE_MISMATCH.format(
                    palette_divisions=palette.divisions, divisions=divisions
                )
            )

        self._radius = radius
        self._palette = palette or Palette(divisions)
        self._hole_ratio = hole_ratio
        self._labels = tuple(labels) if labels is not None else None
        self.rotation_offset = rotation_offset

    @property
    def tuning(self) -> Tuning:
        return self._tuning

    @property
    def divisions(self) -> int:
        return self._tuning.divisions

    @property
    def radius(self) -> float:
        return self._radius

    @property
    def palette(self) -> Palette:
        return self._palette

    @property
    def hole_ratio(self) -> float:
        return self._hole_ratio

    @property
    def center(self) -> Point:
        """Wheel center; the wheel fits a square of side 2 * radius."""
        return Point(self._radius, self._radius)

    @property
    def hole_radius(self) -> float:
        return self._radius * self._hole_ratio

    @property
    def arc_degrees(self) -> Fraction:
        """Angle covered by each wedge. Exact, so the wedges sum to 360."""
        return Fraction(360, self.divisions)

    def rotation_for(self, index: int) -> Real:
        """Rotation of a wedge, computed from its index (no accumulated drift)."""
        return self.arc_degrees * index + self.rotation_offset

    def label_for(self, index: int) -> str:
        if self._labels is not None:
            return self._labels[index]
        return str(index)

    def wedge(self, index: int) -> WedgeDescriptor:
        """Build the descriptor for one pitch class index."""
        pitch_class = self._tuning.pitch_class(index)
        center = self.center
        color = self._palette.primary(pitch_class.value)
        return WedgeDescriptor(
            index=pitch_class.value,
            rotation_degrees=self.rotation_for(pitch_class.value),
            arc_degrees=self.arc_degrees,
            fill_color=color,
            stroke_color=color,
            text_color=self._palette.text_color(pitch_class.value),
            label=self.label_for(pitch_class.value),
            path=wedge_path(center, self._radius, self.arc_degrees),
            center=center,
            label_point=polar_to_cartesian(center, self._radius * LABEL_RADIUS_RATIO, 0),
        )

    @property
    def wedges(self) -> tuple[WedgeDescriptor, ...]:
        """All wedges, ordered by ascending index."""
        return tuple(self.wedge(pc.value) for pc in self._tuning.pitch_classes())

    @property
    def mask(self) -> RimMask:
        return RimMask(center=self.center, outer_radius=self._radius, inner_radius=self.hole_radius)

    def render(self) -> Wheel:
        """Run one render pass."""
        logger.debug(
            "Rendering %d-division wheel (radius=%s, rotation=%s)",
            self.divisions,
            self._radius,
            self.rotation_offset,
        )
        return Wheel(
            center=self.center,
            radius=self._radius,
            hole_radius=self.hole_radius,
            wedges=self.wedges,
            mask=self.mask,
        )


def render_wheel(
    radius: float,
    divisions: int,
    palette: Palette | None = None,
    hole_ratio: float = DEFAULT_HOLE_RATIO,
    rotation_offset: Real = 0,
    labels: Sequence[str] | None = None,
) -> Wheel:
    """Convenience wrapper: build a renderer and run one pass."""
    return WheelRenderer(
        radius,
        divisions,
        palette=palette,
        hole_ratio=hole_ratio,
        rotation_offset=rotation_offset,
        labels=labels,
    ).render()
