"""
DiatonicChord model - one chord of a key's harmonization.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from chuk_mcp_theory.core.chord import ChordQuality
from chuk_mcp_theory.models.sequence import NoteSequence


class DiatonicChord(BaseModel):
    """A chord built on one scale degree, spelled in the key."""

    degree: int = Field(..., ge=1, le=7, description="Scale degree of the root (1-7)")
    degree_name: str = Field(..., description="Tonic, Supertonic, ...")
    numeral: str = Field(..., description="Roman numeral with quality suffix")
    quality: ChordQuality = Field(..., description="Chord quality")
    symbol: str = Field(..., description="Chord symbol, e.g. 'F♯m' or 'Bdim'")
    chord: NoteSequence = Field(..., description="Spelled chord tones, root first")

    model_config = {"frozen": True}
