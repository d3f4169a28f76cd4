"""
Tuning primitives - Tuning and PitchClass.

A Tuning is an equal division of the octave (EDO) into N steps.
A PitchClass is one of those N steps and is only meaningful together
with the tuning it was taken from.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from chuk_mcp_keymap.constants import DEFAULT_DIVISIONS, ErrorMessages
from chuk_mcp_keymap.errors import InvalidTuning, PitchClassOutOfRange


@dataclass(frozen=True)
class Tuning:
    """
    An N-way equal division of the octave.

    Examples:
        Tuning(12) = standard chromatic tuning
        Tuning(31) = 31-EDO

    Immutable and hashable.
    """

    divisions: int

    def __post_init__(self) -> None:
        if type(self.divisions) is not int or self.divisions < 1:
            raise InvalidTuning(ErrorMessages.INVALID_TUNING.format(divisions=self.divisions))

    @classmethod
    def edo_12(cls) -> Tuning:
        """The default 12-division tuning."""
        return cls(DEFAULT_DIVISIONS)

    def pitch_class(self, value: int) -> PitchClass:
        """Get the pitch class at an index of this tuning."""
        return PitchClass(value, self.divisions)

    def pitch_classes(self) -> Iterator[PitchClass]:
        """Iterate over every pitch class in ascending order."""
        for value in range(self.divisions):
            yield PitchClass(value, self.divisions)

    def contains(self, value: int) -> bool:
        """Check whether an index names a pitch class of this tuning."""
        return 0 <= value < self.divisions

    def __str__(self) -> str:
        return f"{self.divisions} EDO"


@dataclass(frozen=True, order=True)
class PitchClass:
    """
    One step of an equal-division tuning (0 to divisions - 1).

    Carries its division count so it can never be read against the
    wrong tuning.
    """

    value: int
    divisions: int

    def __post_init__(self) -> None:
        if type(self.divisions) is not int or self.divisions < 1:
            raise InvalidTuning(ErrorMessages.INVALID_TUNING.format(divisions=self.divisions))
        if not 0 <= self.value < self.divisions:
            raise PitchClassOutOfRange(
                ErrorMessages.PITCH_CLASS_OUT_OF_RANGE.format(
                    value=self.value, divisions=self.divisions
                )
            )

    @property
    def tuning(self) -> Tuning:
        """The tuning this pitch class belongs to."""
        return Tuning(self.divisions)

    def transpose(self, steps: int) -> PitchClass:
        """Transpose by a number of steps (positive or negative), wrapping at the octave."""
        return PitchClass((self.value + steps) % self.divisions, self.divisions)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)
