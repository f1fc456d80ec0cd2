"""
NoteSequence model - the spelled collection behind scales and chords.

Notes and labels are parallel tuples: notes[i] is written as labels[i].
"""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

from chuk_mcp_theory.core.pitch import PitchClass


class NoteSequence(BaseModel):
    """
    Pitch classes with their written labels.

    Immutable. Consumers that need a modified copy should use
    model_copy(update=...) rather than mutate in place.
    """

    notes: tuple[PitchClass, ...] = Field(..., description="Pitch classes (0-11)")
    labels: tuple[str, ...] = Field(..., description="Written names, one per note")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _check_parallel(self) -> NoteSequence:
        if len(self.notes) != len(self.labels):
            raise ValueError(
                f"notes and labels differ in length ({len(self.notes)} != {len(self.labels)})"
            )
        return self

    def __len__(self) -> int:
        return len(self.notes)

    def ascending(self, include_octave: bool = True) -> list[int]:
        """
        Semitone offsets forming a strictly rising run.

        Notes after the highest pitch class are lifted by an octave, so a
        scale starting on A gives [9, 11, 12, 14, 16, 17, 19, 21]. With
        include_octave the first note is repeated an octave up at the end.
        """
        if not self.notes:
            return []
        top = self.notes.index(max(self.notes))
        lower = [int(note) for note in self.notes[: top + 1]]
        upper = [int(note) + 12 for note in self.notes[top + 1 :]]
        run = [*lower, *upper]
        if include_octave:
            run.append(lower[0] + 12)
        return run

    def span(self, octaves: int = 1) -> list[int]:
        """
        The ascending run repeated over several octaves, ending on the
        first note `octaves` octaves up.
        """
        if octaves < 1:
            raise ValueError(f"octaves must be >= 1, got {octaves}")
        run = self.ascending(include_octave=False)
        pitches = [pitch + 12 * octave for octave in range(octaves) for pitch in run]
        if run:
            pitches.append(run[0] + 12 * octaves)
        return pitches
