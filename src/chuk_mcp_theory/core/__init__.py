"""
Core theory primitives.

The mathematical layer everything else composes on:
- PitchClass / Interval: the 12 chromatic pitch classes and distances
- Tonality: interval patterns of the four supported scales
- ChordQuality: interval stacks, plus quality derivation from a scale
- Letter / Accidental / Spelling: written note names
"""

from chuk_mcp_theory.core.chord import (
    ChordQuality,
    build_chord,
    chord_inversions,
    diatonic_chord_qualities,
    diatonic_qualities_for,
    quality_of_stack,
    transpose_chord,
)
from chuk_mcp_theory.core.pitch import (
    CIRCLE_OF_FIFTHS,
    FLAT_ORDER,
    SHARP_ORDER,
    Interval,
    PitchClass,
    interval_between,
    transpose,
)
from chuk_mcp_theory.core.scale import DEGREE_NAMES, Tonality, build_scale, degree_name
from chuk_mcp_theory.core.spelling import (
    Accidental,
    AccidentalType,
    Letter,
    Spelling,
    accidental_symbol_for,
    find_letter_and_accidental,
    get_base_letters,
    label_to_pitch,
    letter_to_natural_note,
    parse_label,
    spell_difference,
    spell_scale,
)

__all__ = [
    # Pitch
    "PitchClass",
    "Interval",
    "transpose",
    "interval_between",
    "CIRCLE_OF_FIFTHS",
    "SHARP_ORDER",
    "FLAT_ORDER",
    # Scale
    "Tonality",
    "DEGREE_NAMES",
    "build_scale",
    "degree_name",
    # Chord
    "ChordQuality",
    "build_chord",
    "transpose_chord",
    "chord_inversions",
    "quality_of_stack",
    "diatonic_chord_qualities",
    "diatonic_qualities_for",
    # Spelling
    "Letter",
    "Accidental",
    "AccidentalType",
    "Spelling",
    "get_base_letters",
    "letter_to_natural_note",
    "find_letter_and_accidental",
    "spell_difference",
    "accidental_symbol_for",
    "spell_scale",
    "parse_label",
    "label_to_pitch",
]
