"""
Scale primitive - the seven spelled notes of a diatonic mode.

A scale is a root note plus a step pattern. Each degree takes the next
letter, so a scale never skips or repeats a letter; the accidental on each
degree is whatever keeps the step from the previous degree correct.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from chuk_mcp_chords.constants import ErrorMessages, ScaleMode
from chuk_mcp_chords.core.errors import InvalidInputError
from chuk_mcp_chords.core.note import Note, letter_after, step_to_next

if TYPE_CHECKING:
    from chuk_mcp_chords.core.chord import Chord

# Semitones from each degree to the next; the leading 0 is the root.
# "augmented" has no ScaleMode member and is only reachable through
# build_scale_notes().
STEP_PATTERNS: dict[str, tuple[int, ...]] = {
    "lydian": (0, 2, 2, 2, 1, 2, 2),
    "major": (0, 2, 2, 1, 2, 2, 2),
    "mixolydian": (0, 2, 2, 1, 2, 2, 1),
    "dorian": (0, 2, 1, 2, 2, 2, 1),
    "minor": (0, 2, 1, 2, 2, 1, 2),
    "phrygian": (0, 1, 2, 2, 2, 1, 2),
    "locrian": (0, 1, 2, 2, 1, 2, 2),
    "augmented": (0, 2, 2, 2, 2, 1, 2),
}

_MODE_ALIASES: dict[str, ScaleMode] = {
    "ionian": ScaleMode.MAJOR,
    "aeolian": ScaleMode.MINOR,
    "natural_minor": ScaleMode.MINOR,
    "natural minor": ScaleMode.MINOR,
}

_NUMERALS: dict[int, str] = {1: "I", 2: "II", 3: "III", 4: "IV", 5: "V", 6: "VI", 7: "VII"}

SCALE_LENGTH = 7


def build_scale_notes(root: Note, steps: Sequence[int]) -> tuple[Note, ...]:
    """
    Spell a scale from a root and a step pattern.

    Walks the letters one at a time. Each new note starts from the previous
    note's alteration and is nudged up or down by one when the natural step
    between the two letters is smaller or larger than the pattern needs.

    Args:
        root: First degree
        steps: Semitones from each degree to the next, first entry ignored

    Returns:
        One note per step, starting with the root

    Raises:
        InvalidInputError: If a degree would need more than a double accidental
    """
    notes = [root]
    letter = root.letter

    for needed in steps[1:]:
        natural = step_to_next(letter)
        letter = letter_after(letter)

        alter = notes[-1].alter
        if natural < needed:
            alter += 1
        elif natural > needed:
            alter -= 1

        notes.append(Note(letter, alter))

    return tuple(notes)


def parse_mode(mode: ScaleMode | str) -> ScaleMode:
    """Coerce a mode name ('major', 'Dorian', 'aeolian') to a ScaleMode."""
    if isinstance(mode, ScaleMode):
        return mode
    try:
        key = mode.strip().lower()
        if key in _MODE_ALIASES:
            return _MODE_ALIASES[key]
        return ScaleMode(key)
    except (AttributeError, ValueError):
        raise InvalidInputError(ErrorMessages.INVALID_MODE.format(mode=mode)) from None


@dataclass(frozen=True)
class Scale:
    """
    A diatonic scale: a spelled tonal center plus a mode.

    The seven notes are generated once at construction. Setters return a
    new Scale.

    Examples:
        Scale("C", "major") = C D E F G A B
        Scale("Eb", "dorian") = Eb F Gb Ab Bb C Db
    """

    center: str = "C"
    mode: ScaleMode = ScaleMode.MAJOR
    _root: Note = field(init=False, repr=False, compare=False)
    _notes: tuple[Note, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        root = Note.parse(str(self.center))
        mode = parse_mode(self.mode)

        object.__setattr__(self, "center", root.name())
        object.__setattr__(self, "mode", mode)
        object.__setattr__(self, "_root", root)
        object.__setattr__(self, "_notes", build_scale_notes(root, STEP_PATTERNS[mode.value]))

    @property
    def root(self) -> Note:
        """The tonal center as a Note."""
        return self._root

    def set_center(self, center: str) -> Scale:
        """Same mode on a different center."""
        return Scale(center, self.mode)

    def set_mode(self, mode: ScaleMode | str) -> Scale:
        """Same center in a different mode."""
        return Scale(self.center, mode)

    def root_name(self) -> str:
        return self._root.name()

    def root_name_unicode(self) -> str:
        return self._root.name_unicode()

    def name(self) -> str:
        """Display name, e.g. 'F# Minor'."""
        return f"{self.root_name()} {self.mode.value.capitalize()}"

    def name_unicode(self) -> str:
        return f"{self.root_name_unicode()} {self.mode.value.capitalize()}"

    def is_same(self, other: Scale | None) -> bool:
        """Same spelled center and same mode."""
        return other is not None and self._root == other._root and self.mode == other.mode

    def notes_of_scale(self) -> tuple[Note, ...]:
        """The seven notes, degree 1 first."""
        return self._notes

    def get_note(self, degree: int) -> Note:
        """
        Get the note for a scale degree.

        Degrees above 7 wrap (8 is the root again, 9 the second, ...) and
        keep the same spelling.

        Raises:
            InvalidInputError: If degree is 0 or negative
        """
        if degree <= 0:
            raise InvalidInputError(ErrorMessages.DEGREE_NOT_POSITIVE.format(degree=degree))
        return self._notes[(degree - 1) % SCALE_LENGTH]

    def chord_for_degree(self, degree: int) -> Chord:
        """Root-position triad built on a degree."""
        from chuk_mcp_chords.core.chord import Chord

        return Chord(self, degree)

    def roman_for_degree(self, degree: int) -> str:
        """
        Roman numeral for the triad on a degree.

        Minor triads are lower case, diminished triads lower case with a
        degree sign: C major gives I ii iii IV V vi vii°.
        """
        if degree not in _NUMERALS:
            raise InvalidInputError(ErrorMessages.DEGREE_OUT_OF_RANGE.format(degree=degree))

        numeral = _NUMERALS[degree]
        chord = self.chord_for_degree(degree)
        if chord.is_min():
            numeral = numeral.lower()
        elif chord.is_dim():
            numeral = numeral.lower() + "°"

        return numeral

    def __str__(self) -> str:
        return self.name()

    def __repr__(self) -> str:
        return f"Scale({self.center!r}, {self.mode.value!r})"
