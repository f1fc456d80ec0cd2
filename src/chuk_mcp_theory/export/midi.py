"""
MIDI rendering of scales and diatonic progressions using mido.

Stands in for audio playback: a key's scale or chords become note events
on a single track, with the key signature written as a meta message.
All operations are deterministic: same input → same output.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from mido import Message, MetaMessage, MidiFile, MidiTrack

from chuk_mcp_theory.constants import (
    DEFAULT_OCTAVE,
    DEFAULT_TEMPO_BPM,
    DEFAULT_VELOCITY,
    MidiContent,
)
from chuk_mcp_theory.harmony.analysis import build_diatonic_chords
from chuk_mcp_theory.models.key_signature import KeySignature
from chuk_mcp_theory.models.sequence import NoteSequence

TICKS_PER_BEAT = 480

_ASCII_ACCIDENTALS = str.maketrans({"♯": "#", "♭": "b", "♮": ""})


@dataclass(frozen=True)
class MidiEvent:
    """
    A single MIDI note event.

    All times are in ticks (absolute from start of track).
    """

    pitch: int  # MIDI note number (0-127)
    start_ticks: int
    duration_ticks: int
    velocity: int  # 0-127
    channel: int = 0  # 0-15

    def __post_init__(self) -> None:
        if not 0 <= self.pitch <= 127:
            raise ValueError(f"Pitch must be 0-127, got {self.pitch}")
        if not 0 <= self.velocity <= 127:
            raise ValueError(f"Velocity must be 0-127, got {self.velocity}")
        if not 0 <= self.channel <= 15:
            raise ValueError(f"Channel must be 0-15, got {self.channel}")
        if self.start_ticks < 0:
            raise ValueError(f"Start ticks must be >= 0, got {self.start_ticks}")
        if self.duration_ticks < 0:
            raise ValueError(f"Duration ticks must be >= 0, got {self.duration_ticks}")


def beats_to_ticks(beats: float, ticks_per_beat: int = TICKS_PER_BEAT) -> int:
    """Convert a beat position to ticks."""
    return int(beats * ticks_per_beat)


def midi_key_name(key_signature: KeySignature) -> str:
    """
    Key name in the form mido's key_signature meta message expects.

    'F♯ major' -> 'F#', 'E♭ harmonic minor' -> 'Ebm'.
    """
    name = key_signature.tonic_label.translate(_ASCII_ACCIDENTALS)
    return f"{name}m" if key_signature.tonality.is_minor else name


def events_to_midi(
    events: Iterable[MidiEvent],
    tempo_bpm: int = DEFAULT_TEMPO_BPM,
    ticks_per_beat: int = TICKS_PER_BEAT,
    key: str | None = None,
    track_name: str | None = None,
) -> MidiFile:
    """
    Write note events to a single-track MidiFile.

    Args:
        events: MidiEvents in any order
        tempo_bpm: Tempo in beats per minute
        ticks_per_beat: Resolution
        key: Optional mido key name ('Gb', 'C#m') for a key_signature meta
        track_name: Optional track name meta

    Returns:
        A mido MidiFile ready to be saved
    """
    mid = MidiFile(ticks_per_beat=ticks_per_beat)
    track = MidiTrack()
    mid.tracks.append(track)

    if track_name:
        track.append(MetaMessage("track_name", name=track_name, time=0))
    track.append(MetaMessage("set_tempo", tempo=int(60_000_000 / tempo_bpm), time=0))
    if key:
        track.append(MetaMessage("key_signature", key=key, time=0))

    timed: list[tuple[int, Message]] = []
    for event in events:
        timed.append(
            (
                event.start_ticks,
                Message("note_on", channel=event.channel, note=event.pitch, velocity=event.velocity),
            )
        )
        timed.append(
            (
                event.start_ticks + event.duration_ticks,
                Message("note_off", channel=event.channel, note=event.pitch, velocity=0),
            )
        )

    # note_off before note_on at the same tick so repeated notes retrigger cleanly
    timed.sort(key=lambda item: (item[0], item[1].type != "note_off"))

    current = 0
    for absolute, message in timed:
        message.time = absolute - current
        track.append(message)
        current = absolute

    track.append(MetaMessage("end_of_track", time=0))
    return mid


def scale_to_events(
    scale: NoteSequence,
    octave: int = DEFAULT_OCTAVE,
    octaves: int = 1,
    beats_per_note: float = 1.0,
    velocity: int = DEFAULT_VELOCITY,
) -> list[MidiEvent]:
    """A scale played upward one note at a time, ending on the tonic."""
    base = (octave + 1) * 12
    step = beats_to_ticks(beats_per_note)
    return [
        MidiEvent(pitch=base + offset, start_ticks=i * step, duration_ticks=step, velocity=velocity)
        for i, offset in enumerate(scale.span(octaves))
    ]


def chords_to_events(
    chords: Sequence[NoteSequence],
    octave: int = DEFAULT_OCTAVE,
    beats_per_chord: float = 2.0,
    velocity: int = DEFAULT_VELOCITY,
) -> list[MidiEvent]:
    """Chords played as blocks, one after another, in close position above the root."""
    base = (octave + 1) * 12
    step = beats_to_ticks(beats_per_chord)
    events = []
    for i, chord in enumerate(chords):
        for offset in chord.ascending(include_octave=False):
            events.append(
                MidiEvent(
                    pitch=base + offset,
                    start_ticks=i * step,
                    duration_ticks=step,
                    velocity=velocity,
                )
            )
    return events


def key_signature_to_midi(
    key_signature: KeySignature,
    content: MidiContent = "scale",
    sevenths: bool = False,
    octave: int = DEFAULT_OCTAVE,
    octaves: int = 1,
    tempo_bpm: int = DEFAULT_TEMPO_BPM,
) -> MidiFile:
    """
    Render a key as MIDI: its ascending scale, or its diatonic chords
    followed by a return to the tonic chord.
    """
    if content == "scale":
        events = scale_to_events(key_signature.scale_ascending, octave=octave, octaves=octaves)
    elif content == "chords":
        chords = build_diatonic_chords(key_signature, sevenths)
        events = chords_to_events([*chords, chords[0]], octave=octave)
    else:
        raise ValueError(f"Unknown MIDI content: {content}")

    return events_to_midi(
        events,
        tempo_bpm=tempo_bpm,
        key=midi_key_name(key_signature),
        track_name=key_signature.name.translate(_ASCII_ACCIDENTALS),
    )
