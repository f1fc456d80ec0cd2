"""
Harmonic analysis - diatonic chords and Roman numerals.
"""

from chuk_mcp_theory.harmony.analysis import (
    build_diatonic_chords,
    build_diatonic_sevenths,
    build_diatonic_triads,
    chord_labels,
    diatonic_chords,
)
from chuk_mcp_theory.harmony.roman import QUALITY_SUFFIXES, RomanNumeral, roman_numerals_for

__all__ = [
    "RomanNumeral",
    "QUALITY_SUFFIXES",
    "roman_numerals_for",
    "chord_labels",
    "build_diatonic_chords",
    "build_diatonic_triads",
    "build_diatonic_sevenths",
    "diatonic_chords",
]
