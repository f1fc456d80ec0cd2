"""
Letter spelling - turning pitch classes into written note names.

A written note is a letter (C D E F G A B) plus an accidental. A spelled
scale uses each of the seven letters exactly once, in alphabetical order
from the tonic's letter, so the accidental of every degree follows from
the distance between the actual pitch and its letter's natural pitch.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from chuk_mcp_theory.constants import ErrorMessages
from chuk_mcp_theory.errors import TheoryError
from chuk_mcp_theory.utils import rotate

from .pitch import PitchClass, transpose
from .scale import TONALITY_INTERVALS, Tonality


class Letter(str, Enum):
    """The seven natural note letters, in alphabetical (cyclic) order."""

    C = "C"
    D = "D"
    E = "E"
    F = "F"
    G = "G"
    A = "A"
    B = "B"

    @property
    def natural_note(self) -> PitchClass:
        return letter_to_natural_note(self)


class AccidentalType(str, Enum):
    """Spelling convention of a whole key."""

    NATURAL = "natural"
    SHARP = "sharp"
    FLAT = "flat"


class Accidental(str, Enum):
    """Accidental symbols written after a letter."""

    NONE = ""
    SHARP = "♯"
    FLAT = "♭"
    NATURAL = "♮"
    DOUBLE_SHARP = "𝄪"
    DOUBLE_FLAT = "𝄫"

    @property
    def semitones(self) -> int:
        return _ACCIDENTAL_SEMITONES[self]

    @property
    def ascii(self) -> str:
        return _ACCIDENTAL_ASCII[self]


_ACCIDENTAL_SEMITONES: dict[Accidental, int] = {
    Accidental.NONE: 0,
    Accidental.NATURAL: 0,
    Accidental.SHARP: 1,
    Accidental.FLAT: -1,
    Accidental.DOUBLE_SHARP: 2,
    Accidental.DOUBLE_FLAT: -2,
}
_ACCIDENTAL_ASCII: dict[Accidental, str] = {
    Accidental.NONE: "",
    Accidental.NATURAL: "",
    Accidental.SHARP: "#",
    Accidental.FLAT: "b",
    Accidental.DOUBLE_SHARP: "##",
    Accidental.DOUBLE_FLAT: "bb",
}
_DIFFERENCE_TO_ACCIDENTAL: dict[int, Accidental] = {
    1: Accidental.SHARP,
    -1: Accidental.FLAT,
    2: Accidental.DOUBLE_SHARP,
    -2: Accidental.DOUBLE_FLAT,
}
_PARSE_ACCIDENTALS: dict[str, Accidental] = {
    "": Accidental.NONE,
    "♮": Accidental.NATURAL,
    "#": Accidental.SHARP,
    "♯": Accidental.SHARP,
    "b": Accidental.FLAT,
    "♭": Accidental.FLAT,
    "##": Accidental.DOUBLE_SHARP,
    "x": Accidental.DOUBLE_SHARP,
    "♯♯": Accidental.DOUBLE_SHARP,
    "𝄪": Accidental.DOUBLE_SHARP,
    "bb": Accidental.DOUBLE_FLAT,
    "♭♭": Accidental.DOUBLE_FLAT,
    "𝄫": Accidental.DOUBLE_FLAT,
}

LETTERS: tuple[Letter, ...] = tuple(Letter)
NATURAL_NOTES: tuple[PitchClass, ...] = tuple(
    PitchClass(n) for n in (0, 2, 4, 5, 7, 9, 11)
)

_LABEL_PATTERN = re.compile(r"^([A-Ga-g])(.*)$")


@dataclass(frozen=True)
class Spelling:
    """A letter with an accidental, e.g. F♯ or B♭. str() gives the label."""

    letter: Letter
    accidental: Accidental = Accidental.NONE

    @property
    def note(self) -> PitchClass:
        """The pitch class this spelling sounds as."""
        return transpose(self.letter.natural_note, self.accidental.semitones)

    @property
    def ascii(self) -> str:
        return f"{self.letter.value}{self.accidental.ascii}"

    def __str__(self) -> str:
        return f"{self.letter.value}{self.accidental.value}"


def get_base_letters(start: Letter) -> list[Letter]:
    """The seven letters in alphabetical order, starting from `start`."""
    return rotate(LETTERS, LETTERS.index(start))


def letter_to_natural_note(letter: Letter) -> PitchClass:
    """Pitch class of an unaltered letter: C=0, D=2, E=4, F=5, G=7, A=9, B=11."""
    return NATURAL_NOTES[LETTERS.index(Letter(letter))]


def find_letter_and_accidental(note: int, accidental_type: AccidentalType) -> Spelling:
    """
    Spell a single pitch class under a key's accidental convention.

    Sharp keys look for a letter one semitone below the note (so 5 in a
    sharp key is E♯), flat keys one semitone above (11 is C♭). When the
    note has no such spelling it must be a natural note and is written
    as the bare letter. Natural keys only accept natural notes.
    """
    note = PitchClass(int(note) % 12)
    if accidental_type is AccidentalType.SHARP:
        for letter in LETTERS:
            if transpose(letter.natural_note, 1) == note:
                return Spelling(letter, Accidental.SHARP)
    elif accidental_type is AccidentalType.FLAT:
        for letter in LETTERS:
            if transpose(letter.natural_note, -1) == note:
                return Spelling(letter, Accidental.FLAT)

    for letter in LETTERS:
        if letter.natural_note == note:
            return Spelling(letter)

    if accidental_type is AccidentalType.NATURAL:
        raise TheoryError(ErrorMessages.NATURAL_SPELLING.format(note=int(note)))
    raise TheoryError(
        ErrorMessages.NO_SPELLING.format(note=int(note), accidental_type=accidental_type.value)
    )


def spell_difference(actual: int, natural: int) -> int:
    """
    Signed semitone distance from a letter's natural pitch to the actual pitch.

    Wraps across the octave so that B (11) written on the letter C (0)
    gives -1, not +11. Results fall in -5..6; anything outside -2..2 is
    rejected later by accidental_symbol_for.
    """
    difference = (int(actual) - int(natural)) % 12
    if difference > 6:
        difference -= 12
    return difference


def accidental_symbol_for(difference: int, tonality: Tonality, degree: int) -> Accidental:
    """
    Accidental to write for a scale degree.

    An unaltered letter in a minor tonality still gets a natural sign
    when the degree is raised relative to natural minor (the leading
    tone of C harmonic minor is written B♮).
    """
    if difference == 0:
        if tonality is Tonality.MAJOR:
            return Accidental.NONE
        if TONALITY_INTERVALS[tonality][degree] != TONALITY_INTERVALS[Tonality.NATURAL_MINOR][degree]:
            return Accidental.NATURAL
        return Accidental.NONE

    accidental = _DIFFERENCE_TO_ACCIDENTAL.get(difference)
    if accidental is None:
        raise TheoryError(ErrorMessages.ACCIDENTAL_RANGE.format(difference=difference))
    return accidental


def spell_scale(
    scale_notes: Sequence[int],
    tonic: int,
    accidental_type: AccidentalType,
    tonality: Tonality,
) -> list[str]:
    """
    Label every degree of a scale, one letter per degree.

    Args:
        scale_notes: The seven pitch classes, tonic first
        tonic: Pitch class that anchors the letter sequence
        accidental_type: The key's spelling convention
        tonality: Used to decide where natural signs are needed

    Returns:
        Seven labels such as ['E♭', 'F', 'G', 'A♭', 'B♭', 'C', 'D']
    """
    if len(scale_notes) != 7:
        raise TheoryError(ErrorMessages.SCALE_LENGTH.format(length=len(scale_notes)))

    letters = get_base_letters(find_letter_and_accidental(tonic, accidental_type).letter)
    labels: list[str] = []
    for degree, (note, letter) in enumerate(zip(scale_notes, letters, strict=True)):
        difference = spell_difference(note, letter.natural_note)
        accidental = accidental_symbol_for(difference, tonality, degree)
        labels.append(str(Spelling(letter, accidental)))
    return labels


def parse_label(label: str) -> Spelling:
    """
    Parse a written note name.

    Accepts ASCII ('F#', 'Bb', 'Cx', 'Ebb') and Unicode ('F♯', 'B♭', 'C𝄪')
    accidentals, with a lower- or upper-case letter.
    """
    match = _LABEL_PATTERN.match(label.strip())
    if match is None:
        raise TheoryError(ErrorMessages.INVALID_LABEL.format(label=label))
    letter, suffix = match.groups()
    accidental = _PARSE_ACCIDENTALS.get(suffix)
    if accidental is None:
        raise TheoryError(ErrorMessages.INVALID_LABEL.format(label=label))
    return Spelling(Letter(letter.upper()), accidental)


def label_to_pitch(label: str) -> PitchClass:
    """Pitch class of a written note name ('C♭' -> 11, 'E#' -> 5)."""
    return parse_label(label).note
