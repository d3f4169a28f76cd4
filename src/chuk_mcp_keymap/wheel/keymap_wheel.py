"""
Keymap wheel - renders a keymap as a color wheel with its constellation.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from numbers import Real
from typing import Any, assert_never

from chuk_mcp_keymap.constants import DEFAULT_HOLE_RATIO, ErrorMessages
from chuk_mcp_keymap.core.palette import Palette
from chuk_mcp_keymap.errors import UnsupportedKeymap
from chuk_mcp_keymap.models.keymap import FreeformKeymap, HarmonicKeymap
from chuk_mcp_keymap.wheel.constellation import ConstellationLine, render_constellation
from chuk_mcp_keymap.wheel.renderer import Wheel, WheelRenderer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class KeymapWheel:
    """A rendered wheel plus the constellation of the keymap's scale."""

    keymap_id: str
    wheel: Wheel
    constellation: tuple[ConstellationLine, ...]

    def to_dict(self) -> dict[str, Any]:
        return {
            "keymap_id": self.keymap_id,
            "wheel": self.wheel.to_dict(),
            "constellation": [line.to_dict() for line in self.constellation],
        }


def render_keymap(
    keymap: HarmonicKeymap | FreeformKeymap,
    radius: float,
    palette: Palette | None = None,
    hole_ratio: float = DEFAULT_HOLE_RATIO,
    rotation_offset: Real = 0,
) -> KeymapWheel:
    """
    Render a keymap's wheel.

    Args:
        keymap: The keymap to render
        radius: Outer radius of the wheel
        palette: Colors per index (default: Palette(tuning divisions))
        hole_ratio: Radius of the hole as a fraction of the radius
        rotation_offset: Degrees added to every wedge rotation

    Returns:
        KeymapWheel with wedges, rim mask and constellation

    Raises:
        UnsupportedKeymap: for freeform keymaps
        ValueError: if the palette size differs from the tuning's
    """
    if isinstance(keymap, HarmonicKeymap):
        renderer = WheelRenderer(
            radius,
            keymap.tuning.divisions,
            palette=palette,
            hole_ratio=hole_ratio,
            rotation_offset=rotation_offset,
        )
        wheel = renderer.render()
        constellation = render_constellation(
            wheel.center,
            wheel.hole_radius,
            keymap.tuning,
            keymap.scale_pitches,
            renderer.palette,
            rotation_offset=rotation_offset,
        )
        logger.debug("Rendered keymap '%s' (%d scale tones)", keymap.id, len(constellation))
        return KeymapWheel(keymap_id=keymap.id, wheel=wheel, constellation=constellation)
    elif isinstance(keymap, FreeformKeymap):
        raise UnsupportedKeymap(
            ErrorMessages.UNSUPPORTED_KEYMAP.format(id=keymap.id, type=keymap.type)
        )
    else:
        assert_never(keymap)
