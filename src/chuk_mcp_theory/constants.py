"""
Constants for the theory engine and its tool surface.

No magic strings - use enums and module constants for constrained values.
"""

from typing import Literal

# Playback defaults for MIDI rendering
DEFAULT_TEMPO_BPM = 100
DEFAULT_OCTAVE = 4
DEFAULT_VELOCITY = 96

# What a rendered MIDI file contains
MidiContent = Literal["scale", "chords"]


class ErrorMessages:
    """Standardized error messages."""

    NATURAL_SPELLING = "Pitch class {note} has no natural spelling."
    NO_SPELLING = "Cannot find a letter for pitch class {note} ({accidental_type})."
    ACCIDENTAL_RANGE = "Unsupported accidental difference: {difference}."
    SCALE_LENGTH = "Expected a 7-note scale, got {length} notes."
    UNKNOWN_SIGNATURE = "No chord quality matches interval signature {signature}."
    NOT_ON_CIRCLE = "Pitch class {note} not found in circle of fifths."
    CHORD_TONE_OUTSIDE_KEY = "Chord tone {note} is not in the scale of {key}."
    INVALID_LABEL = "Invalid note label: '{label}'."
    INVALID_TONALITY = (
        "Unknown tonality: '{name}'. Expected one of major, minor, natural_minor, "
        "harmonic_minor, melodic_minor."
    )
    INVALID_QUALITY = "Unknown chord quality: '{name}'."
    INVALID_SPELLING = "No {spelling} spelling exists for {key}."
