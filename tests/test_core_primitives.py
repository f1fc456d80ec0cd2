"""
Tests for core theory primitives.

Tests cover:
- PitchClass, Interval and the circle of fifths (pitch.py)
- Tonality and scale construction (scale.py)
- ChordQuality, chord construction and quality derivation (chord.py)
"""

import pytest

from chuk_mcp_theory.core import (
    CIRCLE_OF_FIFTHS,
    DEGREE_NAMES,
    FLAT_ORDER,
    SHARP_ORDER,
    ChordQuality,
    Interval,
    PitchClass,
    Tonality,
    build_chord,
    build_scale,
    chord_inversions,
    degree_name,
    diatonic_chord_qualities,
    diatonic_qualities_for,
    interval_between,
    quality_of_stack,
    transpose,
    transpose_chord,
)
from chuk_mcp_theory.errors import TheoryError
from chuk_mcp_theory.utils import rotate

M = ChordQuality.MAJOR
m = ChordQuality.MINOR
d = ChordQuality.DIMINISHED
A = ChordQuality.AUGMENTED


class TestPitchClass:
    """Tests for PitchClass and pitch arithmetic."""

    def test_pitch_values(self) -> None:
        """Pitch classes have correct values."""
        assert PitchClass.C == 0
        assert PitchClass.Fs == 6
        assert PitchClass.B == 11

    def test_transpose_up_and_wrap(self) -> None:
        """Transposing wraps around the octave."""
        assert transpose(0, 7) == PitchClass.G
        assert transpose(11, 1) == PitchClass.C
        assert transpose(11, 2) == PitchClass.Cs

    def test_transpose_negative(self) -> None:
        """Negative intervals are normalized into 0-11."""
        assert transpose(0, -1) == PitchClass.B
        assert transpose(2, -2) == PitchClass.C
        assert transpose(0, -13) == PitchClass.B

    def test_transpose_octave_multiples(self) -> None:
        """Whole octaves leave the pitch class unchanged."""
        for note in PitchClass:
            assert transpose(note, 12) == note
            assert transpose(note, -24) == note
            assert transpose(note, 36) == note

    def test_transpose_accepts_interval(self) -> None:
        """Interval objects work wherever semitones do."""
        assert transpose(0, Interval.P5) == PitchClass.G
        assert PitchClass.A.transpose(Interval.m3) == PitchClass.C

    def test_interval_between(self) -> None:
        """Shortest ascending distance."""
        assert interval_between(0, 7) == 7
        assert interval_between(7, 0) == 5
        assert interval_between(11, 0) == 1
        assert interval_between(4, 4) == 0

    def test_interval_to(self) -> None:
        """PitchClass.interval_to returns an Interval."""
        assert PitchClass.C.interval_to(PitchClass.E) == Interval.M3

    def test_midi_conversion(self) -> None:
        """Convert to and from MIDI note numbers."""
        assert PitchClass.C.to_midi(4) == 60
        assert PitchClass.A.to_midi(4) == 69
        assert PitchClass.from_midi(61) == PitchClass.Cs

    def test_parse(self) -> None:
        """Parse plain names."""
        assert PitchClass.parse("C") == PitchClass.C
        assert PitchClass.parse("Db") == PitchClass.Cs
        assert PitchClass.parse("F#") == PitchClass.Fs
        assert PitchClass.parse("gs") == PitchClass.Gs
        with pytest.raises(ValueError):
            PitchClass.parse("H")


class TestInterval:
    """Tests for Interval."""

    def test_enharmonic_aliases(self) -> None:
        """Aliases share a semitone value."""
        assert Interval.A4 == Interval.d5 == Interval.TT
        assert Interval.A4.semitones == 6
        assert Interval.d2 == Interval.P1
        assert Interval.A2 == Interval.m3
        assert Interval.d7 == Interval.M6
        assert Interval.A5 == Interval.m6
        assert Interval.A7 == Interval.P8

    def test_invert(self) -> None:
        """Inversion within the octave."""
        assert Interval.M3.invert() == Interval.m6
        assert Interval.P5.invert() == Interval.P4

    def test_arithmetic(self) -> None:
        """Intervals add, subtract and negate."""
        assert Interval.M3 + Interval.m3 == Interval.P5
        assert Interval.P5 - Interval.M3 == Interval.m3
        assert (-Interval.M2).semitones == -2
        assert int(Interval.M7) == 11

    def test_ordering_and_hash(self) -> None:
        """Intervals sort by size and are hashable."""
        assert Interval.m3 < Interval.M3
        assert len({Interval.A4, Interval.d5, Interval.TT}) == 1

    def test_str(self) -> None:
        """String form uses the plain spelling."""
        assert str(Interval(7)) == "P5"
        assert str(Interval(12)) == "P8"

    def test_immutable(self) -> None:
        """Intervals cannot be modified."""
        with pytest.raises(AttributeError):
            Interval.P5.foo = 1  # type: ignore[attr-defined]


class TestCircleOfFifths:
    """Tests for the circle of fifths and accidental orders."""

    def test_circle(self) -> None:
        """Twelve fifths from C visit every pitch class."""
        assert CIRCLE_OF_FIFTHS == (0, 7, 2, 9, 4, 11, 6, 1, 8, 3, 10, 5)
        assert sorted(CIRCLE_OF_FIFTHS) == list(range(12))

    def test_sharp_order(self) -> None:
        """F C G D A E B."""
        assert SHARP_ORDER == (5, 0, 7, 2, 9, 4, 11)

    def test_flat_order(self) -> None:
        """B E A D G C F, the reverse of the sharps."""
        assert FLAT_ORDER == (11, 4, 9, 2, 7, 0, 5)


class TestTonality:
    """Tests for Tonality and scale construction."""

    def test_interval_patterns(self) -> None:
        """Every pattern starts at 0, rises strictly and stays in the octave."""
        for tonality in Tonality:
            intervals = tonality.intervals
            assert len(intervals) == 7
            assert intervals[0] == 0
            assert all(a < b for a, b in zip(intervals, intervals[1:]))
            assert intervals[-1] <= 11

    def test_major_pattern(self) -> None:
        """Major is the white keys from C."""
        assert Tonality.MAJOR.intervals == (0, 2, 4, 5, 7, 9, 11)

    def test_build_scale(self) -> None:
        """Scales are patterns applied to a tonic."""
        assert build_scale(0, Tonality.MAJOR) == [0, 2, 4, 5, 7, 9, 11]
        assert build_scale(7, Tonality.MAJOR) == [7, 9, 11, 0, 2, 4, 6]
        assert build_scale(9, Tonality.NATURAL_MINOR) == [9, 11, 0, 2, 4, 5, 7]
        assert build_scale(9, Tonality.HARMONIC_MINOR) == [9, 11, 0, 2, 4, 5, 8]
        assert build_scale(0, Tonality.MELODIC_MINOR) == [0, 2, 3, 5, 7, 9, 11]

    def test_parse(self) -> None:
        """Loose names resolve to tonalities."""
        assert Tonality.parse("major") == Tonality.MAJOR
        assert Tonality.parse("minor") == Tonality.NATURAL_MINOR
        assert Tonality.parse("Harmonic Minor") == Tonality.HARMONIC_MINOR
        assert Tonality.parse("melodic-minor") == Tonality.MELODIC_MINOR
        with pytest.raises(TheoryError):
            Tonality.parse("dorian")

    def test_is_minor(self) -> None:
        """Only major is not minor."""
        assert not Tonality.MAJOR.is_minor
        assert Tonality.HARMONIC_MINOR.is_minor

    def test_degree_names(self) -> None:
        """Eight names, the octave repeats the tonic."""
        assert len(DEGREE_NAMES) == 8
        assert degree_name(0) == "Tonic"
        assert degree_name(4) == "Dominant"
        assert degree_name(6) == "Leading tone"
        assert degree_name(7) == "Tonic"


class TestBuildChord:
    """Tests for chord construction."""

    def test_major_triad(self) -> None:
        """C major."""
        assert build_chord(0, ChordQuality.MAJOR) == [0, 4, 7]

    def test_wraps_octave(self) -> None:
        """B major wraps past the octave boundary."""
        assert build_chord(11, ChordQuality.MAJOR) == [11, 3, 6]

    def test_sevenths(self) -> None:
        """Seventh chords have four notes."""
        assert build_chord(7, ChordQuality.DOMINANT_7) == [7, 11, 2, 5]
        assert build_chord(6, ChordQuality.MINOR_7) == [6, 9, 1, 4]
        assert build_chord(11, ChordQuality.DIMINISHED_7) == [11, 2, 5, 8]

    def test_other_triads(self) -> None:
        """Diminished and augmented triads."""
        assert build_chord(10, ChordQuality.DIMINISHED) == [10, 1, 4]
        assert build_chord(0, ChordQuality.AUGMENTED) == [0, 4, 8]

    def test_sizes_and_root(self) -> None:
        """Triads have 3 notes, sevenths 4, and the root comes first."""
        for quality in ChordQuality:
            for root in PitchClass:
                chord = build_chord(root, quality)
                assert len(chord) == (4 if quality.is_seventh else 3)
                assert chord[0] == root

    def test_transpose_chord(self) -> None:
        """Every note moves by the same interval."""
        assert transpose_chord([0, 4, 7], 2) == [2, 6, 9]
        assert transpose_chord([9, 0, 4], -3) == [6, 9, 1]

    def test_inversions(self) -> None:
        """Rotations, root position first."""
        assert chord_inversions([0, 4, 7]) == [[0, 4, 7], [4, 7, 0], [7, 0, 4]]
        assert len(chord_inversions([7, 11, 2, 5])) == 4

    def test_parse_quality(self) -> None:
        """Values, names and chord symbols all parse."""
        assert ChordQuality.parse("m7") == ChordQuality.MINOR_7
        assert ChordQuality.parse("dim") == ChordQuality.DIMINISHED
        assert ChordQuality.parse("m7b5") == ChordQuality.HALF_DIMINISHED_7
        assert ChordQuality.parse("dominant_7") == ChordQuality.DOMINANT_7
        assert ChordQuality.parse("major") == ChordQuality.MAJOR
        with pytest.raises(TheoryError):
            ChordQuality.parse("sus9")


class TestQualityDerivation:
    """Tests for deriving chord qualities from a scale."""

    def test_major(self) -> None:
        """I ii iii IV V vi vii°."""
        assert diatonic_qualities_for(Tonality.MAJOR) == [M, m, m, M, M, m, d]

    def test_natural_minor_is_rotated_major(self) -> None:
        """Natural minor reads the major list from the sixth degree."""
        rotated = diatonic_qualities_for(Tonality.NATURAL_MINOR)
        assert rotated == [m, d, M, m, m, M, M]
        derived = diatonic_chord_qualities(build_scale(0, Tonality.NATURAL_MINOR))
        assert rotated == derived

    def test_harmonic_minor(self) -> None:
        """i ii° III+ iv V VI vii°."""
        assert diatonic_qualities_for(Tonality.HARMONIC_MINOR) == [m, d, A, m, M, M, d]

    def test_melodic_minor(self) -> None:
        """i ii III+ IV V vi° vii°."""
        assert diatonic_qualities_for(Tonality.MELODIC_MINOR) == [m, m, A, M, M, d, d]

    def test_major_sevenths(self) -> None:
        """Imaj7 ii7 iii7 IVmaj7 V7 vi7 viiø7."""
        assert diatonic_qualities_for(Tonality.MAJOR, sevenths=True) == [
            ChordQuality.MAJOR_7,
            ChordQuality.MINOR_7,
            ChordQuality.MINOR_7,
            ChordQuality.MAJOR_7,
            ChordQuality.DOMINANT_7,
            ChordQuality.MINOR_7,
            ChordQuality.HALF_DIMINISHED_7,
        ]

    def test_harmonic_minor_sevenths(self) -> None:
        """Harmonic minor needs the extended seventh qualities."""
        assert diatonic_qualities_for(Tonality.HARMONIC_MINOR, sevenths=True) == [
            ChordQuality.MINOR_MAJOR_7,
            ChordQuality.HALF_DIMINISHED_7,
            ChordQuality.AUGMENTED_MAJOR_7,
            ChordQuality.MINOR_7,
            ChordQuality.DOMINANT_7,
            ChordQuality.MAJOR_7,
            ChordQuality.DIMINISHED_7,
        ]

    def test_independent_of_tonic(self) -> None:
        """Qualities depend only on the interval pattern."""
        for tonality in Tonality:
            expected = diatonic_qualities_for(tonality)
            for tonic in PitchClass:
                assert diatonic_chord_qualities(build_scale(tonic, tonality)) == expected

    def test_stack_wraps_degrees(self) -> None:
        """The chord on the seventh degree reaches into the next octave."""
        scale = build_scale(0, Tonality.MAJOR)
        assert quality_of_stack(scale, 6) == ChordQuality.DIMINISHED
        assert quality_of_stack(scale, 4, sevenths=True) == ChordQuality.DOMINANT_7

    def test_wrong_length_fails(self) -> None:
        """A scale must have seven notes."""
        with pytest.raises(TheoryError, match="7-note"):
            diatonic_chord_qualities([0, 2, 4])

    def test_unknown_signature_fails(self) -> None:
        """A non-diatonic scale fails loudly instead of guessing."""
        chromatic = [0, 1, 2, 3, 4, 5, 6]
        with pytest.raises(TheoryError, match="signature"):
            diatonic_chord_qualities(chromatic)


class TestRotate:
    """Tests for the rotate helper."""

    def test_rotate(self) -> None:
        """Rotation wraps in both directions."""
        assert rotate([0, 1, 2], 1) == [1, 2, 0]
        assert rotate([0, 1, 2], -1) == [2, 0, 1]
        assert rotate([0, 1, 2], 3) == [0, 1, 2]
        assert rotate([], 2) == []
