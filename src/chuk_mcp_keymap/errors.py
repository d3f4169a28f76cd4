"""
Keymap errors.

All errors are raised when the offending value is constructed - nothing is
silently clamped. They derive from KeymapError rather than ValueError so that
pydantic validators let them through unwrapped.
"""


class KeymapError(Exception):
    """Base class for keymap and wheel errors."""


class InvalidTuning(KeymapError):
    """A tuning with fewer than one division."""


class PitchClassOutOfRange(KeymapError):
    """A pitch class index outside [0, divisions)."""


class InvalidScaleDefinition(KeymapError):
    """A harmonic keymap whose scale pitches do not fit its tuning."""


class UnsupportedKeymap(KeymapError):
    """A keymap variant that an operation cannot consume."""
