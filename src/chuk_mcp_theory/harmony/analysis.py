"""
Diatonic harmony of a key signature.

Chord tones are labelled from the key's own spelled scale, never
respelled independently, so a chord always agrees with the key it came
from (the raised seventh of A harmonic minor stays G♯ in every chord).
"""

from __future__ import annotations

from collections.abc import Sequence

from chuk_mcp_theory.constants import ErrorMessages
from chuk_mcp_theory.core.chord import build_chord, diatonic_qualities_for
from chuk_mcp_theory.core.scale import degree_name
from chuk_mcp_theory.errors import TheoryError
from chuk_mcp_theory.harmony.roman import RomanNumeral
from chuk_mcp_theory.models.harmony import DiatonicChord
from chuk_mcp_theory.models.key_signature import KeySignature
from chuk_mcp_theory.models.sequence import NoteSequence


def chord_labels(chord_notes: Sequence[int], key_signature: KeySignature) -> tuple[str, ...]:
    """
    Label chord tones with the key's spelling.

    Raises TheoryError if a tone is not in the key's scale.
    """
    labels = []
    for note in chord_notes:
        label = key_signature.label_for(note)
        if label is None:
            raise TheoryError(
                ErrorMessages.CHORD_TONE_OUTSIDE_KEY.format(note=int(note), key=key_signature.name)
            )
        labels.append(label)
    return tuple(labels)


def build_diatonic_chords(key_signature: KeySignature, sevenths: bool = False) -> list[NoteSequence]:
    """Spelled triads (or seventh chords) on each of the seven scale degrees."""
    qualities = diatonic_qualities_for(key_signature.tonality, sevenths)
    chords = []
    for root, quality in zip(key_signature.notes, qualities, strict=True):
        notes = build_chord(root, quality)
        chords.append(NoteSequence(notes=notes, labels=chord_labels(notes, key_signature)))
    return chords


def build_diatonic_triads(key_signature: KeySignature) -> list[NoteSequence]:
    """
    The seven diatonic triads of a key.

    In A harmonic minor the third triad is C E G♯ (the augmented III+).
    """
    return build_diatonic_chords(key_signature)


def build_diatonic_sevenths(key_signature: KeySignature) -> list[NoteSequence]:
    """The seven diatonic seventh chords of a key."""
    return build_diatonic_chords(key_signature, sevenths=True)


def diatonic_chords(key_signature: KeySignature, sevenths: bool = False) -> list[DiatonicChord]:
    """Full harmonization: numeral, quality, symbol and spelled tones per degree."""
    qualities = diatonic_qualities_for(key_signature.tonality, sevenths)
    chords = build_diatonic_chords(key_signature, sevenths)
    return [
        DiatonicChord(
            degree=index + 1,
            degree_name=degree_name(index),
            numeral=str(RomanNumeral(index + 1, quality)),
            quality=quality,
            symbol=f"{chord.labels[0]}{quality.symbol}",
            chord=chord,
        )
        for index, (quality, chord) in enumerate(zip(qualities, chords, strict=True))
    ]
