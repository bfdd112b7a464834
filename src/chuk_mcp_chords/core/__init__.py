"""
Core chord primitives.

These are the spelling rules everything else composes on:
- Note: A letter plus an alteration, with enharmonic respelling and intervals
- Scale: The seven spelled notes of a diatonic mode on a center
- Chord: A degree chord with shape, inversion and extensions, and its symbol
- voice_chord: Octave placement of a chord's tones for display
"""

from chuk_mcp_chords.core.chord import Chord, get_diatonic_chords, parse_extensions
from chuk_mcp_chords.core.errors import ChordsError, ChordStructureError, InvalidInputError
from chuk_mcp_chords.core.note import Note
from chuk_mcp_chords.core.scale import STEP_PATTERNS, Scale, build_scale_notes, parse_mode
from chuk_mcp_chords.core.voicing import OCTAVE_PLACEMENT, NamedNoteList, voice_chord

__all__ = [
    # Note
    "Note",
    # Scale
    "Scale",
    "STEP_PATTERNS",
    "build_scale_notes",
    "parse_mode",
    # Chord
    "Chord",
    "get_diatonic_chords",
    "parse_extensions",
    # Voicing
    "NamedNoteList",
    "OCTAVE_PLACEMENT",
    "voice_chord",
    # Errors
    "ChordsError",
    "ChordStructureError",
    "InvalidInputError",
]
