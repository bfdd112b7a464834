#!/usr/bin/env python3
"""
Example: Spell the diatonic chords of every mode.

Shows scale spelling, chord symbols, roman numerals and voicings for a
tonal center across the seven modes.

Usage:
    python examples/diatonic_chords.py
    python examples/diatonic_chords.py Eb
"""

import sys

from chuk_mcp_chords.constants import ScaleMode
from chuk_mcp_chords.core import Scale, get_diatonic_chords, voice_chord


def main() -> None:
    """Print the diatonic seventh chords of each mode."""
    center = sys.argv[1] if len(sys.argv) > 1 else "C"

    print(f"Diatonic seventh chords on {center}")
    print("=" * 40)

    for mode in ScaleMode:
        scale = Scale(center, mode)
        print()
        print(f"{scale.name_unicode()}: {' '.join(n.name() for n in scale.notes_of_scale())}")

        for numeral, chord in get_diatonic_chords(scale, ["7th"]):
            voicing = " ".join(voice_chord(chord))
            print(f"  {numeral:<5} {chord.name():<10} {voicing}")


if __name__ == "__main__":
    main()
