"""
Tests for diatonic harmony and Roman numerals.
"""

import pytest

from chuk_mcp_theory.core import ChordQuality, PitchClass, Tonality
from chuk_mcp_theory.errors import TheoryError
from chuk_mcp_theory.harmony import (
    RomanNumeral,
    build_diatonic_sevenths,
    build_diatonic_triads,
    chord_labels,
    diatonic_chords,
    roman_numerals_for,
)
from chuk_mcp_theory.keys import get_key_signatures


def key(tonic: int, tonality: Tonality, index: int = 0):
    return get_key_signatures(tonic, tonality)[index]


class TestDiatonicTriads:
    """Tests for triads built on each degree."""

    def test_c_major(self) -> None:
        """White-key triads."""
        triads = build_diatonic_triads(key(0, Tonality.MAJOR))
        assert [list(t.labels) for t in triads] == [
            ["C", "E", "G"],
            ["D", "F", "A"],
            ["E", "G", "B"],
            ["F", "A", "C"],
            ["G", "B", "D"],
            ["A", "C", "E"],
            ["B", "D", "F"],
        ]

    def test_a_harmonic_minor_mediant(self) -> None:
        """The augmented III+ keeps the raised seventh."""
        triads = build_diatonic_triads(key(9, Tonality.HARMONIC_MINOR))
        assert triads[2].notes == (0, 4, 8)
        assert triads[2].labels == ("C", "E", "G♯")

    def test_g_major_dominant(self) -> None:
        """D F♯ A."""
        triads = build_diatonic_triads(key(7, Tonality.MAJOR))
        assert triads[4].labels == ("D", "F♯", "A")

    def test_c_harmonic_minor_dominant(self) -> None:
        """The natural sign carries into chords."""
        triads = build_diatonic_triads(key(0, Tonality.HARMONIC_MINOR))
        assert triads[4].labels == ("G", "B♮", "D")

    def test_g_sharp_harmonic_minor_dominant(self) -> None:
        """Double sharp in the dominant."""
        triads = build_diatonic_triads(key(8, Tonality.HARMONIC_MINOR))
        assert triads[4].labels == ("D♯", "F𝄪", "A♯")

    def test_sevenths(self) -> None:
        """G7 in C major."""
        sevenths = build_diatonic_sevenths(key(0, Tonality.MAJOR))
        assert len(sevenths) == 7
        assert sevenths[4].notes == (7, 11, 2, 5)
        assert sevenths[4].labels == ("G", "B", "D", "F")

    def test_chord_tones_use_key_labels(self, all_key_signatures) -> None:
        """Every chord tone is written as it is in the key."""
        for key_signature in all_key_signatures:
            pairs = dict(zip(key_signature.notes, key_signature.labels))
            chords = [
                *build_diatonic_triads(key_signature),
                *build_diatonic_sevenths(key_signature),
            ]
            for chord in chords:
                for note, label in zip(chord.notes, chord.labels):
                    assert pairs[note] == label

    def test_tone_outside_key_fails(self) -> None:
        """Chromatic tones cannot be labelled from the key."""
        with pytest.raises(TheoryError):
            chord_labels([0, 1, 7], key(0, Tonality.MAJOR))

    def test_idempotent(self) -> None:
        """Same key, same chords."""
        key_signature = key(3, Tonality.MELODIC_MINOR)
        assert build_diatonic_triads(key_signature) == build_diatonic_triads(key_signature)


class TestRomanNumerals:
    """Tests for Roman numeral labels."""

    def test_major(self) -> None:
        """I ii iii IV V vi vii°."""
        assert roman_numerals_for(Tonality.MAJOR) == ["I", "ii", "iii", "IV", "V", "vi", "vii°"]

    def test_natural_minor(self) -> None:
        """i ii° III iv v VI VII."""
        assert roman_numerals_for(Tonality.NATURAL_MINOR) == [
            "i", "ii°", "III", "iv", "v", "VI", "VII",
        ]  # fmt: skip

    def test_harmonic_minor(self) -> None:
        """i ii° III+ iv V VI vii°."""
        assert roman_numerals_for(Tonality.HARMONIC_MINOR) == [
            "i", "ii°", "III+", "iv", "V", "VI", "vii°",
        ]  # fmt: skip

    def test_melodic_minor(self) -> None:
        """i ii III+ IV V vi° vii°."""
        assert roman_numerals_for(Tonality.MELODIC_MINOR) == [
            "i", "ii", "III+", "IV", "V", "vi°", "vii°",
        ]  # fmt: skip

    def test_major_sevenths(self) -> None:
        """Seventh-chord suffixes."""
        assert roman_numerals_for(Tonality.MAJOR, sevenths=True) == [
            "Iᴹ⁷", "ii⁷", "iii⁷", "IVᴹ⁷", "V⁷", "vi⁷", "vii𐞢⁷",
        ]  # fmt: skip

    def test_harmonic_minor_sevenths(self) -> None:
        """Minor-major, augmented-major and fully diminished sevenths."""
        assert roman_numerals_for(Tonality.HARMONIC_MINOR, sevenths=True) == [
            "iᴹ⁷", "ii𐞢⁷", "III+ᴹ⁷", "iv⁷", "V⁷", "VIᴹ⁷", "vii°⁷",
        ]  # fmt: skip

    def test_numeral(self) -> None:
        """Case follows the third, the suffix follows the quality."""
        assert str(RomanNumeral(5, ChordQuality.DOMINANT_7)) == "V⁷"
        assert str(RomanNumeral(3, ChordQuality.AUGMENTED_7)) == "III+⁷"
        assert RomanNumeral(2, ChordQuality.MINOR).base == "ii"

    def test_invalid_degree(self) -> None:
        """Degrees run from 1 to 7."""
        with pytest.raises(ValueError):
            RomanNumeral(0, ChordQuality.MAJOR)
        with pytest.raises(ValueError):
            RomanNumeral(8, ChordQuality.MAJOR)


class TestDiatonicChords:
    """Tests for full harmonization."""

    def test_c_major(self) -> None:
        """Numerals, names and symbols line up."""
        chords = diatonic_chords(key(0, Tonality.MAJOR))
        assert [c.degree for c in chords] == list(range(1, 8))
        assert chords[0].degree_name == "Tonic"
        assert chords[4].symbol == "G"
        assert chords[1].symbol == "Dm"
        assert chords[6].symbol == "Bdim"
        assert chords[6].numeral == "vii°"
        assert chords[6].degree_name == "Leading tone"

    def test_sevenths(self) -> None:
        """Seventh chord symbols."""
        chords = diatonic_chords(key(0, Tonality.MAJOR), sevenths=True)
        assert chords[4].symbol == "G7"
        assert chords[6].symbol == "Bm7b5"
        assert chords[0].quality == ChordQuality.MAJOR_7

    def test_spelled_roots(self) -> None:
        """Symbols use the key's spelling of the root."""
        chords = diatonic_chords(key(PitchClass.Fs, Tonality.MAJOR, index=1))
        assert chords[0].symbol == "F♯"
        assert chords[6].symbol == "E♯dim"
