"""
Palette primitives - Color and Palette.

A Palette spreads N hues evenly around the color wheel, one per pitch
class. Hues are kept as exact Fractions so the complementary hue is
always exactly 180 degrees away.
"""

from __future__ import annotations

import colorsys
from dataclasses import dataclass
from fractions import Fraction

from chuk_mcp_keymap.constants import (
    DEFAULT_LIGHTNESS,
    DEFAULT_SATURATION,
    TEXT_LIGHTNESS_DELTA,
)
from chuk_mcp_keymap.core.tuning import Tuning


@dataclass(frozen=True)
class Color:
    """
    An HSL color.

    Hue is in degrees [0, 360); saturation and lightness are in [0, 1].
    """

    hue: Fraction
    saturation: float
    lightness: float

    @property
    def rgb(self) -> tuple[int, int, int]:
        """8-bit RGB components."""
        r, g, b = colorsys.hls_to_rgb(float(self.hue) / 360, self.lightness, self.saturation)
        return round(r * 255), round(g * 255), round(b * 255)

    @property
    def hex(self) -> str:
        """CSS hex string with `#` prefix."""
        return "#{:02x}{:02x}{:02x}".format(*self.rgb)

    def __str__(self) -> str:
        return self.hex


class Palette:
    """
    Deterministic colors for the pitch classes of an N-division tuning.

    Every color is a pure function of (index, divisions) - the same pair
    always yields the same color.
    """

    def __init__(
        self,
        divisions: int,
        saturation: float = DEFAULT_SATURATION,
        lightness: float = DEFAULT_LIGHTNESS,
    ) -> None:
        self._divisions = Tuning(divisions).divisions
        self._saturation = saturation
        self._lightness = lightness

    @property
    def divisions(self) -> int:
        """Number of hues in the palette."""
        return self._divisions

    def hue(self, index: int) -> Fraction:
        """Hue in degrees for an index, wrapping at the division count."""
        return Fraction((index % self._divisions) * 360, self._divisions)

    def primary(self, index: int) -> Color:
        """The main color for a pitch class index."""
        return Color(self.hue(index), self._saturation, self._lightness)

    def complementary(self, index: int, lightness_delta: float = 0.0) -> Color:
        """
        The color opposite the primary on the hue circle.

        Args:
            index: Pitch class index
            lightness_delta: Signed shift applied to the lightness, clamped to [0, 1]

        Returns:
            Color with hue rotated by 180 degrees
        """
        hue = (self.hue(index) + 180) % 360
        lightness = min(1.0, max(0.0, self._lightness + lightness_delta))
        return Color(hue, self._saturation, lightness)

    def text_color(self, index: int) -> Color:
        """Label color drawn on top of the primary color."""
        return self.complementary(index, TEXT_LIGHTNESS_DELTA)

    def colors(self) -> list[Color]:
        """All primary colors in index order."""
        return [self.primary(i) for i in range(self._divisions)]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Palette):
            return NotImplemented
        return (self._divisions, self._saturation, self._lightness) == (
            other._divisions,
            other._saturation,
            other._lightness,
        )

    def __hash__(self) -> int:
        return hash((self._divisions, self._saturation, self._lightness))

    def __repr__(self) -> str:
        return (
            f"Palette({self._divisions}, saturation={self._saturation}, "
            f"lightness={self._lightness})"
        )
