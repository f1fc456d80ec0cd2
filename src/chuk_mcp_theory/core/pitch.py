"""
Pitch primitives - PitchClass, Interval and the circle of fifths.

PitchClass represents the 12 chromatic pitches (octave-independent, C=0).
Interval represents a signed distance between pitches in semitones.
Spelling (which letter a pitch class is written with) lives in spelling.py.
"""

from __future__ import annotations

from enum import IntEnum
from functools import total_ordering
from typing import ClassVar

# ASCII names used for parsing and plain-text display
_SHARP_NAMES: tuple[str, ...] = (
    "C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B",
)  # fmt: skip
_FLAT_NAMES: tuple[str, ...] = (
    "C", "Db", "D", "Eb", "E", "F", "Gb", "G", "Ab", "A", "Bb", "B",
)  # fmt: skip


class PitchClass(IntEnum):
    """
    The 12 chromatic pitch classes (0-11).

    Enharmonic equivalents share the same value (C# == Db == 1).
    Arithmetic always re-normalizes into 0-11.
    """

    C = 0
    Cs = 1  # C# / Db
    D = 2
    Ds = 3  # D# / Eb
    E = 4
    F = 5
    Fs = 6  # F# / Gb
    G = 7
    Gs = 8  # G# / Ab
    A = 9
    As = 10  # A# / Bb
    B = 11

    def transpose(self, interval: int | Interval) -> PitchClass:
        """Transpose by a number of semitones (positive or negative)."""
        return transpose(self, interval)

    def interval_to(self, other: PitchClass) -> Interval:
        """Get the ascending interval from this pitch class to another."""
        return Interval(interval_between(self, other))

    def to_midi(self, octave: int = 4) -> int:
        """Convert to MIDI note number. C4 = 60."""
        return self.value + (octave + 1) * 12

    @classmethod
    def from_midi(cls, midi_note: int) -> PitchClass:
        """Extract pitch class from MIDI note number."""
        return cls(midi_note % 12)

    @classmethod
    def parse(cls, name: str) -> PitchClass:
        """Parse a pitch class from a plain name like 'C', 'C#', 'Db' or 'Cs'."""
        name = name.strip()
        if name in _SHARP_NAMES:
            return cls(_SHARP_NAMES.index(name))
        if name in _FLAT_NAMES:
            return cls(_FLAT_NAMES.index(name))
        for member in cls:
            if member.name.upper() == name.upper():
                return member
        raise ValueError(f"Unknown pitch class: {name}")


def _semitones(interval: int | Interval) -> int:
    return interval.semitones if isinstance(interval, Interval) else int(interval)


def transpose(note: int, interval: int | Interval) -> PitchClass:
    """
    Move a pitch class by a signed interval.

    Works for any integer distance, including negative values and
    multiples of an octave: transpose(0, -1) == B, transpose(11, 24) == B.
    """
    return PitchClass((int(note) + _semitones(interval)) % 12)


def interval_between(lower: int, upper: int) -> int:
    """Shortest ascending distance in semitones (0-11) from lower to upper."""
    return (int(upper) - int(lower)) % 12


@total_ordering
class Interval:
    """
    Signed distance between pitches in semitones.

    Enharmonic aliases share a value: Interval.A4 == Interval.d5 == TT.
    Immutable and hashable.
    """

    __slots__ = ("_semitones",)
    _semitones: int

    # Perfect, major and minor
    P1: ClassVar[Interval]
    m2: ClassVar[Interval]
    M2: ClassVar[Interval]
    m3: ClassVar[Interval]
    M3: ClassVar[Interval]
    P4: ClassVar[Interval]
    TT: ClassVar[Interval]
    P5: ClassVar[Interval]
    m6: ClassVar[Interval]
    M6: ClassVar[Interval]
    m7: ClassVar[Interval]
    M7: ClassVar[Interval]
    P8: ClassVar[Interval]

    # Augmented and diminished spellings
    d2: ClassVar[Interval]
    A1: ClassVar[Interval]
    d3: ClassVar[Interval]
    A2: ClassVar[Interval]
    d4: ClassVar[Interval]
    A3: ClassVar[Interval]
    A4: ClassVar[Interval]
    d5: ClassVar[Interval]
    d6: ClassVar[Interval]
    A5: ClassVar[Interval]
    d7: ClassVar[Interval]
    A6: ClassVar[Interval]
    d8: ClassVar[Interval]
    A7: ClassVar[Interval]

    def __init__(self, semitones: int) -> None:
        object.__setattr__(self, "_semitones", semitones)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("Interval is immutable")

    @property
    def semitones(self) -> int:
        """Number of semitones in this interval."""
        return self._semitones

    def invert(self) -> Interval:
        """
        Invert the interval within an octave.

        M3 (4) -> m6 (8), P5 (7) -> P4 (5), P1 (0) -> P8 (12).
        """
        return Interval(12 - (self._semitones % 12))

    def __int__(self) -> int:
        return self._semitones

    def __add__(self, other: Interval) -> Interval:
        if not isinstance(other, Interval):
            return NotImplemented
        return Interval(self._semitones + other._semitones)

    def __sub__(self, other: Interval) -> Interval:
        if not isinstance(other, Interval):
            return NotImplemented
        return Interval(self._semitones - other._semitones)

    def __neg__(self) -> Interval:
        return Interval(-self._semitones)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return self._semitones == other._semitones

    def __lt__(self, other: Interval) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return self._semitones < other._semitones

    def __hash__(self) -> int:
        return hash(self._semitones)

    def __repr__(self) -> str:
        return f"Interval({self._semitones})"

    def __str__(self) -> str:
        """Short name of the plain (non-aliased) spelling, e.g. 'm3'."""
        mod = self._semitones % 12
        octaves = self._semitones // 12
        base = _PLAIN_NAMES[mod]
        if octaves == 0:
            return base
        if octaves == 1 and mod == 0:
            return "P8"
        return f"{base}+{octaves}oct" if octaves > 0 else f"{base}{octaves}oct"


_PLAIN_NAMES = ("P1", "m2", "M2", "m3", "M3", "P4", "TT", "P5", "m6", "M6", "m7", "M7")

# Every quality name mapped to its semitone count; aliases share values
INTERVAL_SEMITONES: dict[str, int] = {
    "P1": 0, "d2": 0,
    "m2": 1, "A1": 1,
    "M2": 2, "d3": 2,
    "m3": 3, "A2": 3,
    "M3": 4, "d4": 4,
    "P4": 5, "A3": 5,
    "TT": 6, "A4": 6, "d5": 6,
    "P5": 7, "d6": 7,
    "m6": 8, "A5": 8,
    "M6": 9, "d7": 9,
    "m7": 10, "A6": 10,
    "M7": 11, "d8": 11,
    "P8": 12, "A7": 12,
}  # fmt: skip

for _name, _value in INTERVAL_SEMITONES.items():
    setattr(Interval, _name, Interval(_value))


# C, G, D, A, E, B, F#/Gb, C#/Db, G#/Ab, D#/Eb, A#/Bb, F
CIRCLE_OF_FIFTHS: tuple[PitchClass, ...] = tuple(
    transpose(PitchClass.C, Interval.P5.semitones * i) for i in range(12)
)

# Order in which accidentals are added to a key signature
SHARP_ORDER: tuple[PitchClass, ...] = (
    PitchClass.F,
    PitchClass.C,
    PitchClass.G,
    PitchClass.D,
    PitchClass.A,
    PitchClass.E,
    PitchClass.B,
)
FLAT_ORDER: tuple[PitchClass, ...] = tuple(reversed(SHARP_ORDER))
