"""
Key-signature calculator.

Given a tonic and a tonality, decide how the key is written: whether it
uses sharps, flats or neither (or both, for the enharmonic keys at the
bottom of the circle of fifths), which accidentals appear in the
signature, and how every scale degree is spelled.
"""

from __future__ import annotations

import logging

from chuk_mcp_theory.constants import ErrorMessages
from chuk_mcp_theory.core.pitch import (
    CIRCLE_OF_FIFTHS,
    FLAT_ORDER,
    SHARP_ORDER,
    Interval,
    PitchClass,
    transpose,
)
from chuk_mcp_theory.core.scale import Tonality, build_scale
from chuk_mcp_theory.core.spelling import AccidentalType, spell_scale
from chuk_mcp_theory.errors import InternalConsistencyError
from chuk_mcp_theory.keys.cache import KeySignatureCache
from chuk_mcp_theory.models.key_signature import KeySignature
from chuk_mcp_theory.models.sequence import NoteSequence

logger = logging.getLogger(__name__)

# Circle-of-fifths positions written only with sharps / only with flats.
# Positions 5, 6 and 7 (B/C♭, F♯/G♭, C♯/D♭) can be written either way.
SHARP_KEY_RANGE = range(1, 5)
FLAT_KEY_RANGE = range(8, 12)

_cache = KeySignatureCache()


def relative_major(tonic: int, tonality: Tonality) -> PitchClass:
    """The major key sharing this key's signature (a minor third up for minors)."""
    if tonality is Tonality.MAJOR:
        return PitchClass(int(tonic) % 12)
    return transpose(tonic, Interval.m3)


def circle_of_fifths_index(note: int) -> int:
    """Steps clockwise from C on the circle of fifths (0-11)."""
    try:
        return CIRCLE_OF_FIFTHS.index(PitchClass(int(note) % 12))
    except ValueError:
        raise InternalConsistencyError(ErrorMessages.NOT_ON_CIRCLE.format(note=note)) from None


def accidental_types_for(index: int) -> list[AccidentalType]:
    """Spelling conventions available at a circle-of-fifths position, flat first."""
    if index == 0:
        return [AccidentalType.NATURAL]
    if index in SHARP_KEY_RANGE:
        return [AccidentalType.SHARP]
    if index in FLAT_KEY_RANGE:
        return [AccidentalType.FLAT]
    return [AccidentalType.FLAT, AccidentalType.SHARP]


def accidentals_for(accidental_type: AccidentalType, index: int) -> tuple[PitchClass, ...]:
    """
    The accidentals of the signature at a circle-of-fifths position.

    Sharps count clockwise from C, flats counter-clockwise: position 6
    is six sharps (F♯ major) or 12 - 6 = six flats (G♭ major).
    """
    if accidental_type is AccidentalType.NATURAL:
        return ()
    if accidental_type is AccidentalType.SHARP:
        return SHARP_ORDER[:index]
    return FLAT_ORDER[: len(CIRCLE_OF_FIFTHS) - index]


def _preference(key_signature: KeySignature) -> tuple[int, bool]:
    # Fewer accidentals first; flats win ties
    return (key_signature.accidental_count, key_signature.accidental_type is not AccidentalType.FLAT)


def compute_key_signatures(tonic: int, tonality: Tonality) -> tuple[KeySignature, ...]:
    """
    Compute every written form of a key, without caching.

    Args:
        tonic: Tonic pitch class (0-11)
        tonality: Scale type

    Returns:
        One KeySignature, or two for enharmonic keys, sorted by number of
        accidentals with flat spellings first on a tie.

    Example:
        [ks.name for ks in compute_key_signatures(6, Tonality.MAJOR)]
        == ['G♭ major', 'F♯ major']
    """
    tonic = PitchClass(int(tonic) % 12)
    tonality = Tonality(tonality)
    index = circle_of_fifths_index(relative_major(tonic, tonality))
    scale = build_scale(tonic, tonality)

    results = []
    for accidental_type in accidental_types_for(index):
        labels = spell_scale(scale, tonic, accidental_type, tonality)
        results.append(
            KeySignature(
                tonic=tonic,
                tonic_label=labels[0],
                tonality=tonality,
                accidentals=accidentals_for(accidental_type, index),
                accidental_type=accidental_type,
                scale_ascending=NoteSequence(notes=scale, labels=labels),
            )
        )

    results.sort(key=_preference)
    logger.debug(
        "Computed %s %s: %s", tonic.name, tonality.value, [ks.name for ks in results]
    )
    return tuple(results)


def get_key_signatures(tonic: int, tonality: Tonality) -> tuple[KeySignature, ...]:
    """Memoized compute_key_signatures. Returned models are frozen and shared."""
    return _cache.get_or_compute(tonic, tonality, compute_key_signatures)


def key_signature_cache() -> KeySignatureCache:
    """The process-wide cache used by get_key_signatures."""
    return _cache


def major_key_label(note: int) -> str:
    """Preferred written name of the major key on a pitch class (6 -> 'G♭')."""
    return get_key_signatures(note, Tonality.MAJOR)[0].tonic_label


def minor_key_label(note: int) -> str:
    """Preferred written name of the minor key on a pitch class (8 -> 'G♯')."""
    return get_key_signatures(note, Tonality.NATURAL_MINOR)[0].tonic_label
