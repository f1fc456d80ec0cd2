"""
Scale primitives - Tonality, interval patterns and degree names.

A tonality is an interval pattern measured from the tonic (cumulative,
not step-by-step). Applying it to a tonic gives the seven pitch classes
of the scale.
"""

from __future__ import annotations

from enum import Enum

from chuk_mcp_theory.constants import ErrorMessages
from chuk_mcp_theory.errors import TheoryError

from .pitch import PitchClass, transpose


class Tonality(str, Enum):
    """The four supported scale types."""

    MAJOR = "major"
    NATURAL_MINOR = "natural_minor"
    HARMONIC_MINOR = "harmonic_minor"
    MELODIC_MINOR = "melodic_minor"  # ascending (jazz) form

    @property
    def intervals(self) -> tuple[int, ...]:
        """Semitone offsets of each degree from the tonic."""
        return TONALITY_INTERVALS[self]

    @property
    def is_minor(self) -> bool:
        return self is not Tonality.MAJOR

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @classmethod
    def parse(cls, name: str) -> Tonality:
        """
        Parse a tonality from a loose name.

        Accepts enum values and common spellings: 'major', 'minor',
        'natural minor', 'harmonic-minor', 'Melodic Minor', etc.
        """
        key = name.strip().lower().replace("-", "_").replace(" ", "_")
        tonality = _ALIASES.get(key)
        if tonality is None:
            raise TheoryError(ErrorMessages.INVALID_TONALITY.format(name=name))
        return tonality


TONALITY_INTERVALS: dict[Tonality, tuple[int, ...]] = {
    Tonality.MAJOR: (0, 2, 4, 5, 7, 9, 11),  # W W H W W W H
    Tonality.NATURAL_MINOR: (0, 2, 3, 5, 7, 8, 10),  # W H W W H W W
    Tonality.HARMONIC_MINOR: (0, 2, 3, 5, 7, 8, 11),  # raised 7th
    Tonality.MELODIC_MINOR: (0, 2, 3, 5, 7, 9, 11),  # raised 6th and 7th
}

_DISPLAY_NAMES: dict[Tonality, str] = {
    Tonality.MAJOR: "major",
    Tonality.NATURAL_MINOR: "minor",
    Tonality.HARMONIC_MINOR: "harmonic minor",
    Tonality.MELODIC_MINOR: "melodic minor",
}

_ALIASES: dict[str, Tonality] = {
    "major": Tonality.MAJOR,
    "ionian": Tonality.MAJOR,
    "minor": Tonality.NATURAL_MINOR,
    "natural_minor": Tonality.NATURAL_MINOR,
    "minor_natural": Tonality.NATURAL_MINOR,
    "aeolian": Tonality.NATURAL_MINOR,
    "harmonic_minor": Tonality.HARMONIC_MINOR,
    "minor_harmonic": Tonality.HARMONIC_MINOR,
    "melodic_minor": Tonality.MELODIC_MINOR,
    "minor_melodic": Tonality.MELODIC_MINOR,
}

# Index 7 is the octave, which repeats the tonic
DEGREE_NAMES: tuple[str, ...] = (
    "Tonic",
    "Supertonic",
    "Mediant",
    "Subdominant",
    "Dominant",
    "Submediant",
    "Leading tone",
    "Tonic",
)


def build_scale(tonic: int, tonality: Tonality) -> list[PitchClass]:
    """
    Get the seven pitch classes of a scale, starting from the tonic.

    Examples:
        build_scale(0, Tonality.MAJOR) == [0, 2, 4, 5, 7, 9, 11]
        build_scale(9, Tonality.HARMONIC_MINOR) == [9, 11, 0, 2, 4, 5, 8]
    """
    return [transpose(tonic, interval) for interval in TONALITY_INTERVALS[tonality]]


def degree_name(index: int) -> str:
    """Traditional name of a zero-based scale degree (0-7)."""
    return DEGREE_NAMES[index]
