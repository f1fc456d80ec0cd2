"""
Pydantic models for the values the engine returns.

- NoteSequence: parallel notes/labels (scales and chords)
- KeySignature: a fully spelled key
- DiatonicChord: one chord of a key's harmonization
"""

from chuk_mcp_theory.models.harmony import DiatonicChord
from chuk_mcp_theory.models.key_signature import KeySignature
from chuk_mcp_theory.models.sequence import NoteSequence

__all__ = [
    "NoteSequence",
    "KeySignature",
    "DiatonicChord",
]
