"""
Voicing - place an ordered tone list into octaves for display.

Anything that exposes an ordered note list can be voiced; Chord is the
usual caller.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from chuk_mcp_chords.constants import DEFAULT_BASE_OCTAVE, Letter
from chuk_mcp_chords.core.note import Note

# Order of letters within an octave (octaves start at C)
OCTAVE_PLACEMENT: dict[Letter, int] = {
    Letter.C: 0,
    Letter.D: 1,
    Letter.E: 2,
    Letter.F: 3,
    Letter.G: 4,
    Letter.A: 5,
    Letter.B: 6,
}


class NamedNoteList(Protocol):
    """A named, ordered list of notes, lowest first."""

    keep: bool

    def name(self) -> str: ...

    def name_unicode(self) -> str: ...

    def note_list(self) -> Sequence[Note]: ...

    def is_same(self, other) -> bool: ...


def voice_chord(notes: NamedNoteList, octave: int = DEFAULT_BASE_OCTAVE) -> list[str]:
    """
    Assign octaves to a note list so the voicing always climbs.

    The first note is the bass: it sits in the starting octave and the
    next note goes up an octave. After that the octave goes up whenever a
    note's letter is not above the previous note's letter.

    Args:
        notes: Anything with a note_list(), bass first
        octave: Octave of the bass note

    Returns:
        Tone strings like ["C3", "E4", "G4"], spelled with sharps
    """
    tones: list[str] = []
    last = -1
    is_bass = True

    for note in notes.note_list():
        simple = note.to_sharp()
        placement = OCTAVE_PLACEMENT[simple.letter]

        if not is_bass and placement <= last:
            octave += 1
        tones.append(f"{simple.name()}{octave}")

        if is_bass:
            octave += 1
            is_bass = False
        else:
            last = placement

    return tones
