"""
Roman numerals - key-independent chord labels.

A numeral is never stored on its own: it is derived from a scale degree
and a chord quality. Case shows the quality of the third (upper case for
major-third chords), and a suffix marks diminished, augmented and
seventh qualities.
"""

from __future__ import annotations

from dataclasses import dataclass

from chuk_mcp_theory.core.chord import ChordQuality, diatonic_qualities_for
from chuk_mcp_theory.core.scale import Tonality

_NUMERALS = ("i", "ii", "iii", "iv", "v", "vi", "vii")

_UPPER_CASE_QUALITIES = frozenset(
    {
        ChordQuality.MAJOR,
        ChordQuality.AUGMENTED,
        ChordQuality.MAJOR_7,
        ChordQuality.DOMINANT_7,
        ChordQuality.AUGMENTED_MAJOR_7,
        ChordQuality.AUGMENTED_7,
    }
)

QUALITY_SUFFIXES: dict[ChordQuality, str] = {
    ChordQuality.MAJOR: "",
    ChordQuality.MINOR: "",
    ChordQuality.DIMINISHED: "°",
    ChordQuality.AUGMENTED: "+",
    ChordQuality.MAJOR_7: "ᴹ⁷",
    ChordQuality.DOMINANT_7: "⁷",
    ChordQuality.MINOR_7: "⁷",
    ChordQuality.HALF_DIMINISHED_7: "𐞢⁷",
    ChordQuality.DIMINISHED_7: "°⁷",
    ChordQuality.AUGMENTED_MAJOR_7: "+ᴹ⁷",
    ChordQuality.AUGMENTED_7: "+⁷",
    ChordQuality.MINOR_MAJOR_7: "ᴹ⁷",
}


@dataclass(frozen=True)
class RomanNumeral:
    """
    A chord on a scale degree, written as a Roman numeral.

    Examples:
        str(RomanNumeral(1, ChordQuality.MAJOR)) == "I"
        str(RomanNumeral(7, ChordQuality.DIMINISHED)) == "vii°"
        str(RomanNumeral(3, ChordQuality.AUGMENTED)) == "III+"
    """

    degree: int  # 1-7
    quality: ChordQuality

    def __post_init__(self) -> None:
        if not 1 <= self.degree <= 7:
            raise ValueError(f"Degree must be 1-7, got {self.degree}")

    @property
    def base(self) -> str:
        numeral = _NUMERALS[self.degree - 1]
        return numeral.upper() if self.quality in _UPPER_CASE_QUALITIES else numeral

    def __str__(self) -> str:
        return f"{self.base}{QUALITY_SUFFIXES[self.quality]}"


def roman_numerals_for(tonality: Tonality, sevenths: bool = False) -> list[str]:
    """
    The seven diatonic Roman numerals of a tonality.

    roman_numerals_for(Tonality.HARMONIC_MINOR)
    == ['i', 'ii°', 'III+', 'iv', 'V', 'VI', 'vii°']
    """
    qualities = diatonic_qualities_for(tonality, sevenths)
    return [str(RomanNumeral(degree, quality)) for degree, quality in enumerate(qualities, 1)]
