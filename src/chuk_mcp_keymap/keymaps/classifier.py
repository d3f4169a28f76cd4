"""
Key classification - which pitch classes of a keymap are active.

This is the data a device driver needs to light and enable keys: for
each pitch class, whether it is in the scale, its color, and what to do
with it when it is not.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, assert_never

from chuk_mcp_keymap.constants import ErrorMessages, InactiveKeyBehavior
from chuk_mcp_keymap.core.palette import Color, Palette
from chuk_mcp_keymap.core.tuning import PitchClass
from chuk_mcp_keymap.errors import UnsupportedKeymap
from chuk_mcp_keymap.models.keymap import FreeformKeymap, HarmonicKeymap


@dataclass(frozen=True)
class KeyState:
    """The state of every key mapped to one pitch class."""

    pitch_class: PitchClass
    active: bool
    color: Color
    behaviors: tuple[InactiveKeyBehavior, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "pitch_class": self.pitch_class.value,
            "active": self.active,
            "color": self.color.hex,
            "behaviors": [b.value for b in self.behaviors],
        }


def classify_keys(
    keymap: HarmonicKeymap | FreeformKeymap,
    palette: Palette | None = None,
) -> list[KeyState]:
    """
    Classify every pitch class of a keymap as active or inactive.

    Args:
        keymap: The keymap to classify
        palette: Colors per index (default: Palette(tuning divisions))

    Returns:
        One KeyState per pitch class, ascending

    Raises:
        UnsupportedKeymap: for freeform keymaps
        ValueError: if the palette size differs from the tuning's
    """
    if isinstance(keymap, HarmonicKeymap):
        divisions = keymap.tuning.divisions
        if palette is not None and palette.divisions != divisions:
            raise ValueError(
                ErrorMessages.PALETTE_MISMATCH.format(
                    palette_divisions=palette.divisions, divisions=divisions
                )
            )
        palette = palette or Palette(divisions)
        states = []
        for pitch_class in keymap.tuning.pitch_classes():
            active = keymap.contains(pitch_class)
            states.append(
                KeyState(
                    pitch_class=pitch_class,
                    active=active,
                    color=palette.primary(pitch_class.value),
                    behaviors=() if active else keymap.non_scale_tone_behaviors,
                )
            )
        return states
    elif isinstance(keymap, FreeformKeymap):
        raise UnsupportedKeymap(
            ErrorMessages.UNSUPPORTED_KEYMAP.format(id=keymap.id, type=keymap.type)
        )
    else:
        assert_never(keymap)
