#!/usr/bin/env python3
"""
Example: Print every key signature with its spelled scale and harmony.

Usage:
    python examples/print_key_signatures.py
"""

from chuk_mcp_theory.core import PitchClass, Tonality
from chuk_mcp_theory.harmony import diatonic_chords, roman_numerals_for
from chuk_mcp_theory.keys import get_key_signatures


def main() -> None:
    """Walk all 12 tonics in each tonality."""
    for tonality in Tonality:
        print(tonality.display_name.title())
        print("=" * 40)
        print("  " + " ".join(roman_numerals_for(tonality)))
        for tonic in PitchClass:
            for key in get_key_signatures(tonic, tonality):
                accidentals = f"{key.accidental_count} {key.accidental_type.value}"
                print(f"  {key.name:<22} [{accidentals:<9}] {' '.join(key.labels)}")
        print()

    # Chords of one enharmonic pair
    for key in get_key_signatures(PitchClass.Fs, Tonality.MAJOR):
        print(key.name)
        for chord in diatonic_chords(key, sevenths=True):
            print(f"  {chord.numeral:<6} {chord.symbol:<8} {' '.join(chord.chord.labels)}")


if __name__ == "__main__":
    main()
