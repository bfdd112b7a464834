"""
Note primitive - a spelled note (letter + alteration).

Unlike a pitch class, a Note keeps its spelling: C# and Db are different
Notes that happen to sound the same. Enharmonic questions go through the
sharp-normalized form (to_sharp), which is also the basis for intervals.
"""

from __future__ import annotations

from dataclasses import dataclass

from chuk_mcp_chords.constants import ErrorMessages, Letter
from chuk_mcp_chords.core.errors import InvalidInputError


@dataclass(frozen=True)
class _LetterNode:
    """Neighbours of a natural letter and the semitone distance to each."""

    next_letter: Letter
    prev_letter: Letter
    next_dist: int
    prev_dist: int  # Always negative


# B-C and E-F are half steps, everything else is a whole step
_LETTER_GRAPH: dict[Letter, _LetterNode] = {
    Letter.A: _LetterNode(Letter.B, Letter.G, 2, -2),
    Letter.B: _LetterNode(Letter.C, Letter.A, 1, -2),
    Letter.C: _LetterNode(Letter.D, Letter.B, 2, -1),
    Letter.D: _LetterNode(Letter.E, Letter.C, 2, -2),
    Letter.E: _LetterNode(Letter.F, Letter.D, 1, -2),
    Letter.F: _LetterNode(Letter.G, Letter.E, 2, -1),
    Letter.G: _LetterNode(Letter.A, Letter.F, 2, -2),
}

# Indexed by alter + 2
_ACCIDENTALS: tuple[str, ...] = ("bb", "b", "", "#", "x")
_ACCIDENTALS_UNICODE: tuple[str, ...] = ("\U0001d12b", "♭", "", "♯", "\U0001d12a")

_ACCIDENTAL_TO_ALTER: dict[str, int] = {
    "": 0,
    "b": -1,
    "#": 1,
    "x": 2,
    "bb": -2,
}

MIN_ALTER = -2
MAX_ALTER = 2


def letter_after(letter: Letter) -> Letter:
    """The next letter in the cycle A B C D E F G A..."""
    return _LETTER_GRAPH[letter].next_letter


def step_to_next(letter: Letter) -> int:
    """Semitones from a natural letter up to the next one (1 or 2)."""
    return _LETTER_GRAPH[letter].next_dist


@dataclass(frozen=True)
class Note:
    """
    A letter class plus an alteration in semitones (-2..2).

    Immutable and hashable. Equality is exact spelling; use is_same()
    for enharmonic equivalence.

    Examples:
        Note(Letter.C) = C
        Note(Letter.B, -1) = Bb
        Note.parse("F#") = F#
    """

    letter: Letter
    alter: int = 0

    def __post_init__(self) -> None:
        if not isinstance(self.letter, Letter):
            try:
                object.__setattr__(self, "letter", Letter(str(self.letter).upper()))
            except ValueError:
                raise InvalidInputError(
                    ErrorMessages.INVALID_LETTER.format(letter=self.letter)
                ) from None
        if self.alter not in range(MIN_ALTER, MAX_ALTER + 1):
            raise InvalidInputError(ErrorMessages.INVALID_ALTER.format(alter=self.alter))

    def accidental(self) -> str:
        """ASCII accidental: bb, b, '', #, x."""
        return _ACCIDENTALS[self.alter + 2]

    def accidental_unicode(self) -> str:
        """Accidental as a Unicode musical symbol."""
        return _ACCIDENTALS_UNICODE[self.alter + 2]

    def name(self) -> str:
        """Display name, e.g. 'Bb'."""
        return self.letter.value + self.accidental()

    def name_unicode(self) -> str:
        """Display name with Unicode accidentals."""
        return self.letter.value + self.accidental_unicode()

    def flatten(self, steps: int = 1) -> Note:
        """Lower by a number of semitones, keeping the letter."""
        if steps <= 0:
            raise InvalidInputError(
                ErrorMessages.INVALID_STEPS.format(action="flatten", steps=steps)
            )
        new_alter = self.alter - steps
        if new_alter < MIN_ALTER:
            raise InvalidInputError(
                ErrorMessages.TOO_MUCH_ALTERATION.format(
                    action="flattening", name=self.name(), steps=steps
                )
            )
        return Note(self.letter, new_alter)

    def sharpen(self, steps: int = 1) -> Note:
        """Raise by a number of semitones, keeping the letter."""
        if steps <= 0:
            raise InvalidInputError(
                ErrorMessages.INVALID_STEPS.format(action="sharpen", steps=steps)
            )
        new_alter = self.alter + steps
        if new_alter > MAX_ALTER:
            raise InvalidInputError(
                ErrorMessages.TOO_MUCH_ALTERATION.format(
                    action="sharpening", name=self.name(), steps=steps
                )
            )
        return Note(self.letter, new_alter)

    def simplify(self) -> Note:
        """
        Respell one step toward a simpler spelling.

        Moves to the neighbouring letter when the alteration covers the
        distance to it: Cb -> B, E# -> F, Dbb -> C, Fbb -> Eb, Ex -> F#.
        Otherwise the note comes back unchanged.
        """
        if self.alter == 0:
            return Note(self.letter, self.alter)

        node = _LETTER_GRAPH[self.letter]

        if self.alter < 0:
            if node.prev_dist >= self.alter:
                return Note(node.prev_letter, self.alter - node.prev_dist)
            return Note(self.letter, self.alter)

        if node.next_dist <= self.alter:
            return Note(node.next_letter, self.alter - node.next_dist)
        return Note(self.letter, self.alter)

    def to_sharp(self) -> Note:
        """
        Sharp-normalized spelling (alteration >= 0).

        This is the canonical form for pitch identity: Db -> C#, Gb -> F#,
        Fb -> E, Ebb -> D.
        """
        note = self.simplify()
        letter = note.letter
        alter = note.alter

        while alter < 0:
            node = _LETTER_GRAPH[letter]
            alter -= node.prev_dist
            letter = node.prev_letter

        return Note(letter, alter)

    def is_same(self, other: Note) -> bool:
        """True if both notes sound the same, regardless of spelling."""
        return self.to_sharp() == other.to_sharp()

    def interval(self, other: Note) -> int:
        """
        Ascending semitones from this note up to another (0-11).

        Direction matters: C.interval(E) == 4 but E.interval(C) == 8.
        """
        me = self.to_sharp()
        they = other.to_sharp()

        semitones = they.alter - me.alter
        letter = me.letter
        while letter != they.letter:
            node = _LETTER_GRAPH[letter]
            semitones += node.next_dist
            letter = node.next_letter

        if semitones < 0:
            semitones += 12
        return semitones

    def __str__(self) -> str:
        return self.name()

    def __repr__(self) -> str:
        if self.alter == 0:
            return f"Note({self.letter.value!r})"
        return f"Note({self.letter.value!r}, {self.alter})"

    @classmethod
    def parse(cls, text: str) -> Note:
        """
        Parse a note from a string like 'C', 'F#', 'Bb', 'Ebb', 'Gx'.

        The letter is case-insensitive; accidentals are b, bb, # and x.
        """
        text = text.strip()
        letter_text = text[:1].upper()

        try:
            letter = Letter(letter_text)
        except ValueError:
            raise InvalidInputError(
                ErrorMessages.INVALID_LETTER.format(letter=letter_text)
            ) from None

        accidental = text[1:]
        if accidental not in _ACCIDENTAL_TO_ALTER:
            raise InvalidInputError(ErrorMessages.INVALID_ACCIDENTAL.format(accidental=accidental))

        return cls(letter, _ACCIDENTAL_TO_ALTER[accidental])
