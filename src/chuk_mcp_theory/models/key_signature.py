"""
KeySignature model - a fully spelled key.

Produced by keys.calculator; validated so that a malformed key can
never be constructed by accident.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

from chuk_mcp_theory.core.pitch import FLAT_ORDER, SHARP_ORDER, PitchClass
from chuk_mcp_theory.core.scale import Tonality
from chuk_mcp_theory.core.spelling import AccidentalType
from chuk_mcp_theory.models.sequence import NoteSequence


class KeySignature(BaseModel):
    """
    A tonic and tonality with its accidentals and spelled scale.

    Enharmonic keys (F♯ / G♭ major) are two different KeySignatures
    with the same pitch classes and different labels.
    """

    tonic: PitchClass = Field(..., description="Tonic pitch class")
    tonic_label: str = Field(..., description="Written name of the tonic")
    tonality: Tonality = Field(..., description="Scale type")
    accidentals: tuple[PitchClass, ...] = Field(
        default=(), description="Pitch classes altered by the key signature, in order"
    )
    accidental_type: AccidentalType = Field(..., description="natural, sharp or flat")
    scale_ascending: NoteSequence = Field(..., description="The seven spelled scale degrees")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _check_invariants(self) -> KeySignature:
        if len(self.scale_ascending) != 7:
            raise ValueError(f"scale must have 7 degrees, got {len(self.scale_ascending)}")
        if self.accidental_type is AccidentalType.NATURAL:
            order: tuple[PitchClass, ...] = ()
        elif self.accidental_type is AccidentalType.SHARP:
            order = SHARP_ORDER
        else:
            order = FLAT_ORDER
        if self.accidentals != order[: len(self.accidentals)]:
            raise ValueError(
                f"accidentals {list(self.accidentals)} are not a prefix of the "
                f"{self.accidental_type.value} order"
            )
        return self

    @property
    def name(self) -> str:
        """Conventional name, e.g. 'G♭ major' or 'C♯ harmonic minor'."""
        return f"{self.tonic_label} {self.tonality.display_name}"

    @property
    def accidental_count(self) -> int:
        return len(self.accidentals)

    @property
    def notes(self) -> tuple[PitchClass, ...]:
        return self.scale_ascending.notes

    @property
    def labels(self) -> tuple[str, ...]:
        return self.scale_ascending.labels

    def label_for(self, note: int) -> str | None:
        """This key's written name for a pitch class, or None if it is not in the scale."""
        note = int(note) % 12
        for scale_note, label in zip(self.notes, self.labels, strict=True):
            if scale_note == note:
                return label
        return None
