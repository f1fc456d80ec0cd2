"""
Export - rendering keys to files.
"""

from chuk_mcp_theory.export.midi import (
    TICKS_PER_BEAT,
    MidiEvent,
    beats_to_ticks,
    chords_to_events,
    events_to_midi,
    key_signature_to_midi,
    midi_key_name,
    scale_to_events,
)

__all__ = [
    "TICKS_PER_BEAT",
    "MidiEvent",
    "beats_to_ticks",
    "events_to_midi",
    "scale_to_events",
    "chords_to_events",
    "key_signature_to_midi",
    "midi_key_name",
]
