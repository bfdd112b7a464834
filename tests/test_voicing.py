"""
Tests for chord voicing.

Tests cover:
- Octave placement of chords in root position and inversions
- The always-climbing rule for arbitrary note lists
"""

from dataclasses import dataclass, field

from chuk_mcp_chords.constants import Letter
from chuk_mcp_chords.core import OCTAVE_PLACEMENT, Chord, Note, Scale, voice_chord


@dataclass
class NoteRun:
    """Minimal named note list for voicing arbitrary tones."""

    notes: list[Note] = field(default_factory=list)
    keep: bool = False

    def name(self) -> str:
        return " ".join(n.name() for n in self.notes)

    def name_unicode(self) -> str:
        return " ".join(n.name_unicode() for n in self.notes)

    def note_list(self) -> list[Note]:
        return self.notes

    def is_same(self, other) -> bool:
        return self.notes == other.notes


class TestOctavePlacement:
    """Tests for the placement table."""

    def test_octaves_start_at_c(self) -> None:
        """C is lowest, B highest."""
        assert OCTAVE_PLACEMENT[Letter.C] == 0
        assert OCTAVE_PLACEMENT[Letter.B] == 6
        assert sorted(OCTAVE_PLACEMENT.values()) == list(range(7))


class TestVoiceChord:
    """Tests for voice_chord."""

    def test_root_position_triad(self, c_major: Scale) -> None:
        """The bass forces the next tone up an octave."""
        assert voice_chord(c_major.chord_for_degree(1)) == ["C3", "E4", "G4"]

    def test_first_inversion(self, c_major: Scale) -> None:
        """Inverted bass, remaining tones climb."""
        chord = c_major.chord_for_degree(1).set_inversion("first")
        assert voice_chord(chord) == ["E3", "C4", "G4"]

    def test_second_inversion(self, c_major: Scale) -> None:
        chord = c_major.chord_for_degree(1).set_inversion("second")
        assert voice_chord(chord) == ["G3", "C4", "E4"]

    def test_wraps_past_b(self, c_major: Scale) -> None:
        """A tone with a lower letter goes up an octave."""
        g7 = Chord(c_major, 5, extensions={"7th"})
        assert voice_chord(g7) == ["G3", "B4", "D5", "F5"]

    def test_start_octave(self, c_major: Scale) -> None:
        """The bass octave can be chosen."""
        assert voice_chord(c_major.chord_for_degree(1), octave=2) == ["C2", "E3", "G3"]

    def test_sharp_spelling(self) -> None:
        """Tones are shown in sharp form."""
        assert voice_chord(Scale("Bb").chord_for_degree(1)) == ["A#3", "D4", "F4"]

    def test_repeated_letter_climbs(self) -> None:
        """A tone on the same letter as the previous one goes up."""
        run = NoteRun([Note(Letter.C), Note(Letter.C), Note(Letter.C, 1)])
        assert voice_chord(run) == ["C3", "C4", "C#5"]

    def test_empty(self) -> None:
        """Nothing to voice."""
        assert voice_chord(NoteRun()) == []
