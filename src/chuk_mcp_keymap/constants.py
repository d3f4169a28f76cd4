"""
Constants and enums for the keymap system.

No magic strings - use enums for constrained values.
"""

from enum import Enum


class InactiveKeyBehavior(str, Enum):
    """How a key outside the active scale should appear or behave."""

    MIDI_OFF = "midi-off"  # Key sends no MIDI
    LIGHT_DIM = "light-dim"  # Key LED is dimmed


# Tuning
DEFAULT_DIVISIONS = 12

# Palette
DEFAULT_SATURATION = 1.0
DEFAULT_LIGHTNESS = 0.5
TEXT_LIGHTNESS_DELTA = -0.8

# Wheel geometry (fractions of the wheel radius)
DEFAULT_HOLE_RATIO = 0.8
LABEL_RADIUS_RATIO = 0.9

# Pitch constellation (fractions of the constellation radius)
CONSTELLATION_STROKE_RATIO = 0.25
CONSTELLATION_OPACITY = 0.6

# SVG
RIM_MASK_ID = "rim-clip"


class ErrorMessages:
    """Standardized error messages."""

    INVALID_TUNING = "Tuning must have a whole number of divisions, at least 1, got {divisions!r}."
    PITCH_CLASS_OUT_OF_RANGE = "Pitch class {value} is outside [0, {divisions})."
    INVALID_SCALE = "Scale pitches {pitches} are outside [0, {divisions}) for keymap '{id}'."
    FOREIGN_PITCH_CLASS = (
        "Pitch class {pitch} belongs to {pitch_divisions} EDO, not {divisions} EDO,"
        " in keymap '{id}'."
    )
    UNSUPPORTED_KEYMAP = "Keymap '{id}' of type '{type}' has no per-key structure to render."
    INVALID_RADIUS = "Radius must be positive, got {radius}."
    INVALID_HOLE_RATIO = "Hole ratio must be in (0, 1), got {hole_ratio}."
    LABEL_COUNT = "Expected {divisions} labels, got {count}."
    PALETTE_MISMATCH = "Palette has {palette_divisions} divisions, expected {divisions}."
    INVALID_OUTPUT_NAME = "Output name must be a plain file name, got {name!r}."


class SuccessMessages:
    """Standardized success messages."""

    KEYMAP_VALID = "Keymap '{id}' is valid."
    WHEEL_RENDERED = "Rendered {divisions}-division wheel."
