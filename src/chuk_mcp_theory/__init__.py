"""
CHUK Music Theory - key signatures, spelled scales and diatonic harmony.

The engine is a set of pure functions:
- build_scale(tonic, tonality)
- get_key_signatures(tonic, tonality)
- build_chord(root, quality)
- build_diatonic_triads(key_signature)
- roman_numerals_for(tonality)
"""

from chuk_mcp_theory.core import ChordQuality, PitchClass, Tonality, build_chord, build_scale
from chuk_mcp_theory.errors import InternalConsistencyError, TheoryError
from chuk_mcp_theory.harmony import build_diatonic_triads, roman_numerals_for
from chuk_mcp_theory.keys import get_key_signatures
from chuk_mcp_theory.models import KeySignature, NoteSequence

__all__ = [
    "PitchClass",
    "Tonality",
    "ChordQuality",
    "KeySignature",
    "NoteSequence",
    "TheoryError",
    "InternalConsistencyError",
    "build_scale",
    "get_key_signatures",
    "build_chord",
    "build_diatonic_triads",
    "roman_numerals_for",
]
