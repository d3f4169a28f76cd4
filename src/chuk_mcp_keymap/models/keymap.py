"""
Keymap model - how a keyboard's keys are assigned.

A Keymap is a tagged union on `type`:
- HarmonicKeymap: generated from a tuning plus a set of active pitch classes
- FreeformKeymap: per-key assignment, structure not yet defined

Consumers dispatch on the concrete class, never on which fields happen
to be present.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import (
    BaseModel,
    Field,
    TypeAdapter,
    ValidationInfo,
    field_serializer,
    field_validator,
    model_validator,
)

from chuk_mcp_keymap.constants import ErrorMessages, InactiveKeyBehavior
from chuk_mcp_keymap.core.tuning import PitchClass, Tuning
from chuk_mcp_keymap.errors import InvalidScaleDefinition


class KeymapBase(BaseModel):
    """Fields shared by every keymap variant."""

    id: str = Field(..., min_length=1, description="Unique keymap id")
    name: str = Field(..., description="Display name")

    model_config = {"frozen": True, "populate_by_name": True, "arbitrary_types_allowed": True}


class HarmonicKeymap(KeymapBase):
    """
    A keymap defined by a tuning and a scale.

    Keys whose pitch class is in `scale_pitches` are active; every other
    key follows `non_scale_tone_behaviors`.

    Examples:
        HarmonicKeymap(id="c-major", name="C major", scale_pitches={0, 2, 4, 5, 7, 9, 11})
    """

    type: Literal["harmonic"] = "harmonic"
    tuning: Tuning = Field(default_factory=Tuning.edo_12, description="Tuning (default 12 EDO)")
    scale_pitches: frozenset[int] = Field(
        ..., alias="scalePitches", description="Active pitch classes"
    )
    non_scale_tone_behaviors: tuple[InactiveKeyBehavior, ...] = Field(
        (InactiveKeyBehavior.LIGHT_DIM,),
        alias="nonScaleToneBehaviors",
        description="What happens to keys outside the scale",
    )

    @field_validator("tuning", mode="before")
    @classmethod
    def coerce_tuning(cls, v: Any) -> Any:
        """Accept a Tuning, a division count, or a {'divisions': n} mapping."""
        if isinstance(v, Tuning):
            return v
        if isinstance(v, (int, float)):
            return Tuning(v)
        if isinstance(v, dict) and "divisions" in v:
            return Tuning(v["divisions"])
        return v

    @field_validator("scale_pitches", mode="before")
    @classmethod
    def coerce_pitch_classes(cls, v: Any, info: ValidationInfo) -> Any:
        """Reduce PitchClass values to their index, rejecting ones from another tuning."""
        if not isinstance(v, (set, frozenset, list, tuple)):
            return v
        tuning = info.data.get("tuning")
        values = []
        for p in v:
            if isinstance(p, PitchClass):
                if tuning is not None and p.divisions != tuning.divisions:
                    raise InvalidScaleDefinition(
                        ErrorMessages.FOREIGN_PITCH_CLASS.format(
                            pitch=p.value,
                            pitch_divisions=p.divisions,
                            divisions=tuning.divisions,
                            id=info.data.get("id"),
                        )
                    )
                p = p.value
            values.append(p)
        return values

    @model_validator(mode="after")
    def check_scale_fits_tuning(self) -> HarmonicKeymap:
        outside = sorted(p for p in self.scale_pitches if not self.tuning.contains(p))
        if outside:
            raise InvalidScaleDefinition(
                ErrorMessages.INVALID_SCALE.format(
                    pitches=outside, divisions=self.tuning.divisions, id=self.id
                )
            )
        return self

    @field_serializer("tuning")
    def dump_tuning(self, tuning: Tuning) -> dict[str, int]:
        return {"divisions": tuning.divisions}

    @field_serializer("scale_pitches")
    def dump_scale_pitches(self, pitches: frozenset[int]) -> list[int]:
        return sorted(pitches)

    def contains(self, pitch: int | PitchClass) -> bool:
        """Check if a pitch class is in the scale."""
        if isinstance(pitch, PitchClass):
            if pitch.divisions != self.tuning.divisions:
                return False
            pitch = pitch.value
        return pitch in self.scale_pitches

    def scale_pitch_classes(self) -> list[PitchClass]:
        """Scale tones as PitchClass values, ascending."""
        return [self.tuning.pitch_class(p) for p in sorted(self.scale_pitches)]

    def non_scale_pitch_classes(self) -> list[PitchClass]:
        """Pitch classes of the tuning that are not in the scale, ascending."""
        return [pc for pc in self.tuning.pitch_classes() if pc.value not in self.scale_pitches]


class FreeformKeymap(KeymapBase):
    """
    A keymap whose keys are assigned one by one.

    The per-key structure is not defined yet; `payload` carries it
    opaquely until it is.
    """

    type: Literal["freeform"] = "freeform"
    payload: dict[str, Any] | None = Field(None, description="Opaque per-key assignment")


Keymap = Annotated[HarmonicKeymap | FreeformKeymap, Field(discriminator="type")]

_keymap_adapter: TypeAdapter[HarmonicKeymap | FreeformKeymap] = TypeAdapter(Keymap)


def parse_keymap(data: dict[str, Any]) -> HarmonicKeymap | FreeformKeymap:
    """
    Build the keymap variant named by `data["type"]`.

    Raises:
        InvalidTuning / InvalidScaleDefinition: for harmonic keymaps that do not fit their tuning
        pydantic.ValidationError: for malformed documents
    """
    return _keymap_adapter.validate_python(data)
