"""
Chord primitives - ChordQuality, chord construction and quality derivation.

Chords are stacks of intervals measured from the root. Diatonic chord
qualities are not tabulated per tonality: they are read off the scale
itself by stacking thirds and matching the resulting interval signature.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum

from chuk_mcp_theory.constants import ErrorMessages
from chuk_mcp_theory.errors import TheoryError
from chuk_mcp_theory.utils import rotate

from .pitch import Interval, PitchClass, interval_between, transpose
from .scale import Tonality, build_scale


class ChordQuality(str, Enum):
    """Root-position triad and seventh-chord qualities."""

    MAJOR = "M"
    MINOR = "m"
    DIMINISHED = "d"
    AUGMENTED = "+"
    MAJOR_7 = "maj7"
    DOMINANT_7 = "7"
    MINOR_7 = "m7"
    HALF_DIMINISHED_7 = "dm7"
    DIMINISHED_7 = "d7"
    AUGMENTED_MAJOR_7 = "+maj7"
    AUGMENTED_7 = "+7"
    MINOR_MAJOR_7 = "mmaj7"

    @property
    def intervals(self) -> tuple[Interval, ...]:
        """Intervals from the root, ascending. The first is always P1."""
        return CHORD_QUALITY_INTERVALS[self]

    @property
    def is_seventh(self) -> bool:
        return len(self.intervals) == 4

    @property
    def symbol(self) -> str:
        """Suffix used in chord names: '' for major, 'm', 'dim', 'maj7', ..."""
        return _CHORD_SYMBOLS[self]

    @classmethod
    def parse(cls, name: str) -> ChordQuality:
        """Parse a quality from its value ('m7'), member name or chord symbol."""
        name = name.strip()
        for member in cls:
            if name == member.value or name.upper() == member.name or name == member.symbol:
                return member
        if name.lower() in ("major", "maj"):
            return cls.MAJOR
        if name.lower() in ("minor", "min"):
            return cls.MINOR
        raise TheoryError(ErrorMessages.INVALID_QUALITY.format(name=name))


_P1, _m3, _M3 = Interval.P1, Interval.m3, Interval.M3
_d5, _P5, _A5 = Interval.d5, Interval.P5, Interval.A5
_d7, _m7, _M7 = Interval.d7, Interval.m7, Interval.M7

CHORD_QUALITY_INTERVALS: dict[ChordQuality, tuple[Interval, ...]] = {
    ChordQuality.MAJOR: (_P1, _M3, _P5),
    ChordQuality.MINOR: (_P1, _m3, _P5),
    ChordQuality.DIMINISHED: (_P1, _m3, _d5),
    ChordQuality.AUGMENTED: (_P1, _M3, _A5),
    ChordQuality.MAJOR_7: (_P1, _M3, _P5, _M7),
    ChordQuality.DOMINANT_7: (_P1, _M3, _P5, _m7),
    ChordQuality.MINOR_7: (_P1, _m3, _P5, _m7),
    ChordQuality.HALF_DIMINISHED_7: (_P1, _m3, _d5, _m7),
    ChordQuality.DIMINISHED_7: (_P1, _m3, _d5, _d7),
    ChordQuality.AUGMENTED_MAJOR_7: (_P1, _M3, _A5, _M7),
    ChordQuality.AUGMENTED_7: (_P1, _M3, _A5, _m7),
    ChordQuality.MINOR_MAJOR_7: (_P1, _m3, _P5, _M7),
}

_CHORD_SYMBOLS: dict[ChordQuality, str] = {
    ChordQuality.MAJOR: "",
    ChordQuality.MINOR: "m",
    ChordQuality.DIMINISHED: "dim",
    ChordQuality.AUGMENTED: "aug",
    ChordQuality.MAJOR_7: "maj7",
    ChordQuality.DOMINANT_7: "7",
    ChordQuality.MINOR_7: "m7",
    ChordQuality.HALF_DIMINISHED_7: "m7b5",
    ChordQuality.DIMINISHED_7: "dim7",
    ChordQuality.AUGMENTED_MAJOR_7: "maj7#5",
    ChordQuality.AUGMENTED_7: "7#5",
    ChordQuality.MINOR_MAJOR_7: "m(maj7)",
}

# Interval signatures (semitones above the root) of stacked scale thirds
TRIAD_SIGNATURES: dict[tuple[int, int], ChordQuality] = {
    (4, 7): ChordQuality.MAJOR,
    (3, 7): ChordQuality.MINOR,
    (3, 6): ChordQuality.DIMINISHED,
    (4, 8): ChordQuality.AUGMENTED,
}
SEVENTH_SIGNATURES: dict[tuple[int, int, int], ChordQuality] = {
    (4, 7, 11): ChordQuality.MAJOR_7,
    (4, 7, 10): ChordQuality.DOMINANT_7,
    (3, 7, 10): ChordQuality.MINOR_7,
    (3, 6, 10): ChordQuality.HALF_DIMINISHED_7,
    (3, 6, 9): ChordQuality.DIMINISHED_7,
    (4, 8, 11): ChordQuality.AUGMENTED_MAJOR_7,
    (4, 8, 10): ChordQuality.AUGMENTED_7,
    (3, 7, 11): ChordQuality.MINOR_MAJOR_7,
}

# Natural minor is the major scale read from its sixth degree
_RELATIVE_MINOR_OFFSET = 5


def build_chord(root: int, quality: ChordQuality) -> list[PitchClass]:
    """
    Get the pitch classes of a root-position chord.

    Examples:
        build_chord(0, ChordQuality.MAJOR) == [0, 4, 7]
        build_chord(11, ChordQuality.MAJOR) == [11, 3, 6]
        build_chord(7, ChordQuality.DOMINANT_7) == [7, 11, 2, 5]
    """
    return [transpose(root, interval) for interval in quality.intervals]


def transpose_chord(chord: Sequence[int], interval: int | Interval) -> list[PitchClass]:
    """Transpose every note of a chord by the same interval."""
    return [transpose(note, interval) for note in chord]


def chord_inversions(chord: Sequence[int]) -> list[list[PitchClass]]:
    """
    All rotations of a chord, root position first.

    [0, 4, 7] -> [[0, 4, 7], [4, 7, 0], [7, 0, 4]]
    """
    notes = [PitchClass(int(note) % 12) for note in chord]
    return [rotate(notes, i) for i in range(len(notes))]


def _check_scale(scale: Sequence[int]) -> None:
    if len(scale) != 7:
        raise TheoryError(ErrorMessages.SCALE_LENGTH.format(length=len(scale)))


def quality_of_stack(scale: Sequence[int], degree: int, sevenths: bool = False) -> ChordQuality:
    """
    Derive the quality of the chord built in thirds on a scale degree.

    Takes degrees i, i+2, i+4 (and i+6 for sevenths), wrapping into the
    next octave, and looks the intervals above the root up in the
    signature tables. An unknown signature raises TheoryError.
    """
    _check_scale(scale)
    root = scale[degree % 7]
    stack = (2, 4, 6) if sevenths else (2, 4)
    signature = tuple(interval_between(root, scale[(degree + step) % 7]) for step in stack)
    table: dict = SEVENTH_SIGNATURES if sevenths else TRIAD_SIGNATURES
    quality = table.get(signature)
    if quality is None:
        raise TheoryError(ErrorMessages.UNKNOWN_SIGNATURE.format(signature=signature))
    return quality


def diatonic_chord_qualities(scale: Sequence[int], sevenths: bool = False) -> list[ChordQuality]:
    """Qualities of the seven chords stacked on each degree of a scale."""
    _check_scale(scale)
    return [quality_of_stack(scale, degree, sevenths) for degree in range(7)]


def diatonic_qualities_for(tonality: Tonality, sevenths: bool = False) -> list[ChordQuality]:
    """
    Diatonic chord qualities of a tonality.

    Natural minor reuses the major list rotated to the relative minor;
    every other tonality is derived from its own interval pattern.
    """
    if tonality is Tonality.NATURAL_MINOR:
        major = diatonic_qualities_for(Tonality.MAJOR, sevenths)
        return rotate(major, _RELATIVE_MINOR_OFFSET)
    return diatonic_chord_qualities(build_scale(PitchClass.C, tonality), sevenths)
