"""
Key signatures - accidentals and spelled scales for every key.
"""

from chuk_mcp_theory.keys.cache import KeySignatureCache
from chuk_mcp_theory.keys.calculator import (
    FLAT_KEY_RANGE,
    SHARP_KEY_RANGE,
    accidental_types_for,
    accidentals_for,
    circle_of_fifths_index,
    compute_key_signatures,
    get_key_signatures,
    key_signature_cache,
    major_key_label,
    minor_key_label,
    relative_major,
)

__all__ = [
    "KeySignatureCache",
    "SHARP_KEY_RANGE",
    "FLAT_KEY_RANGE",
    "relative_major",
    "circle_of_fifths_index",
    "accidental_types_for",
    "accidentals_for",
    "compute_key_signatures",
    "get_key_signatures",
    "key_signature_cache",
    "major_key_label",
    "minor_key_label",
]
