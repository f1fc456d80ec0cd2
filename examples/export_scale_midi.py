#!/usr/bin/env python3
"""
Example: Render scales and diatonic progressions to MIDI.

Run this script to create playable MIDI files you can open in any DAW.

Usage:
    python examples/export_scale_midi.py
    # Creates: examples/output/*.mid
"""

from pathlib import Path

from chuk_mcp_theory.core import PitchClass, Tonality
from chuk_mcp_theory.export import key_signature_to_midi, midi_key_name
from chuk_mcp_theory.keys import get_key_signatures


def main() -> None:
    """Generate example MIDI files."""
    output_dir = Path(__file__).parent / "output"
    output_dir.mkdir(exist_ok=True)

    # Example 1: Two octaves of A harmonic minor
    key = get_key_signatures(PitchClass.A, Tonality.HARMONIC_MINOR)[0]
    path = output_dir / "a_harmonic_minor_scale.mid"
    key_signature_to_midi(key, content="scale", octaves=2).save(str(path))
    print(f"Created: {path}")

    # Example 2: Diatonic sevenths of E♭ major
    key = get_key_signatures(PitchClass.Ds, Tonality.MAJOR)[0]
    path = output_dir / "e_flat_major_sevenths.mid"
    key_signature_to_midi(key, content="chords", sevenths=True, tempo_bpm=80).save(str(path))
    print(f"Created: {path}")

    # Example 3: Both spellings of the F♯ / G♭ major triads
    for key in get_key_signatures(PitchClass.Fs, Tonality.MAJOR):
        path = output_dir / f"{midi_key_name(key)}_major_triads.mid"
        key_signature_to_midi(key, content="chords").save(str(path))
        print(f"Created: {path}")

    print("\nDone! Open the MIDI files in your DAW to hear them.")


if __name__ == "__main__":
    main()
