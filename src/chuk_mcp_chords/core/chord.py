"""
Chord primitive - a scale-degree chord with shape, inversion and extensions.

Chord tones are picked from the scale by degree arithmetic, so spelling
always follows the scale. The chord symbol is worked out afterwards from
the intervals between those tones.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from chuk_mcp_chords.constants import (
    EXTENSION_TONES,
    MIDDLE_TONES,
    ChordType,
    ErrorMessages,
    Extension,
    Inversion,
)
from chuk_mcp_chords.core.errors import ChordStructureError, InvalidInputError
from chuk_mcp_chords.core.note import Note
from chuk_mcp_chords.core.scale import Scale

logger = logging.getLogger(__name__)

_TONE_ROLES: dict[int, str] = {
    1: "root",
    2: "supertonic",
    3: "mediant",
    4: "subdominant",
    5: "dominant",
    7: "seventh",
    9: "ninth",
    11: "eleventh",
}

# Position in the sorted note list that moves to the bass
_INVERSION_OFFSETS: dict[Inversion, int] = {
    Inversion.ROOT: 0,
    Inversion.FIRST: 1,
    Inversion.SECOND: 2,
    Inversion.THIRD: 3,
}

_INVERSION_ABBREVS: dict[Inversion, str] = {
    Inversion.ROOT: "(R)",
    Inversion.FIRST: "(1)",
    Inversion.SECOND: "(2)",
    Inversion.THIRD: "(3)",
}

# (root->third, third->fifth) semitones
_TRIAD_QUALITIES: dict[tuple[int, int], str] = {
    (3, 3): "dim",
    (3, 4): "min",
    (4, 3): "maj",
    (4, 4): "aug",
}

# Longest glyphs first so "bb" is not read as two flats
_UNICODE_GLYPHS: tuple[tuple[str, str], ...] = (
    ("bb", "\U0001d12b"),
    ("#", "♯"),
    ("b", "♭"),
    ("x", "\U0001d12a"),
)


def _parse_enum(enum_cls, value, message: str, **fmt):
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(str(value).strip().lower())
    except ValueError:
        raise InvalidInputError(message.format(**fmt)) from None


def parse_extensions(extensions: Iterable[Extension | str]) -> frozenset[Extension]:
    """Coerce extension names ('7th', '9th', '11th') to a frozenset of Extension."""
    return frozenset(
        _parse_enum(Extension, ext, ErrorMessages.INVALID_EXTENSION, extension=ext)
        for ext in extensions
    )


def _check_degree(degree: int) -> None:
    if isinstance(degree, bool) or not isinstance(degree, int) or not 1 <= degree <= 7:
        raise InvalidInputError(ErrorMessages.DEGREE_OUT_OF_RANGE.format(degree=degree))


@dataclass(frozen=True)
class Chord:
    """
    A chord built on a degree of a scale.

    Immutable: every set_* method returns a new Chord. The tone map is
    worked out once at construction.

    Examples:
        Chord(Scale("C", "major"), 1) = C
        Chord(Scale("C", "major"), 5, extensions={"7th"}) = G7
        Chord(Scale("C", "major"), 2, inversion="first") = Dmin/F
    """

    scale: Scale = field(default_factory=Scale)
    degree: int = 1
    chord_type: ChordType = ChordType.TRIAD
    inversion: Inversion = Inversion.ROOT
    extensions: frozenset[Extension] = frozenset()
    # UI bookkeeping, not used by the chord itself
    keep: bool = field(default=False, compare=False)
    _tones: Mapping[int, Note] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        _check_degree(self.degree)

        chord_type = _parse_enum(
            ChordType, self.chord_type, ErrorMessages.INVALID_CHORD_TYPE, chord_type=self.chord_type
        )
        inversion = _parse_enum(
            Inversion, self.inversion, ErrorMessages.INVALID_INVERSION, inversion=self.inversion
        )
        extensions = parse_extensions(self.extensions)

        object.__setattr__(self, "chord_type", chord_type)
        object.__setattr__(self, "inversion", inversion)
        object.__setattr__(self, "extensions", extensions)
        object.__setattr__(self, "_tones", MappingProxyType(self._build_tones()))

    def _build_tones(self) -> dict[int, Note]:
        indexes = [1, 5, MIDDLE_TONES[self.chord_type]]
        indexes += [EXTENSION_TONES[ext] for ext in Extension if ext in self.extensions]
        return {t: self.scale.get_note(self.degree + t - 1) for t in indexes}

    # Persistent setters

    def set_scale(self, scale: Scale) -> Chord:
        return self._replace(scale=scale)

    def set_degree(self, degree: int) -> Chord:
        _check_degree(degree)
        return self._replace(degree=degree)

    def set_chord_type(self, chord_type: ChordType | str) -> Chord:
        return self._replace(chord_type=chord_type)

    def set_inversion(self, inversion: Inversion | str) -> Chord:
        return self._replace(inversion=inversion)

    def set_extension(self, extension: Extension | str, value: bool) -> Chord:
        """Turn a single extension on or off."""
        (ext,) = parse_extensions([extension])
        extensions = self.extensions | {ext} if value else self.extensions - {ext}
        return self._replace(extensions=extensions)

    def set_extensions(self, extensions: Iterable[Extension | str]) -> Chord:
        """Replace the whole extension set."""
        return self._replace(extensions=frozenset(extensions))

    def set_keep(self, keep: bool) -> Chord:
        return self._replace(keep=keep)

    def _replace(self, **changes) -> Chord:
        props = {
            "scale": self.scale,
            "degree": self.degree,
            "chord_type": self.chord_type,
            "inversion": self.inversion,
            "extensions": self.extensions,
            "keep": self.keep,
        }
        props.update(changes)
        return Chord(**props)

    # Tones

    @property
    def root(self) -> Note:
        """The note on the chord's degree."""
        return self.scale.get_note(self.degree)

    def root_name(self) -> str:
        return self.root.name()

    @property
    def chord_tones(self) -> Mapping[int, Note]:
        """Read-only map of chordal index (1, 3, 5, 7, ...) to note."""
        return self._tones

    def has_extension(self, extension: Extension | str) -> bool:
        (ext,) = parse_extensions([extension])
        return ext in self.extensions

    def _tone(self, index: int) -> Note:
        note = self._tones.get(index)
        if note is None:
            logger.warning("Trying to get tone %d from chord failed: %r", index, self)
            raise ChordStructureError(
                ErrorMessages.MISSING_TONE.format(role=_TONE_ROLES.get(index, "chordal"), index=index)
            )
        return note

    def note_list(self) -> list[Note]:
        """
        Chord tones from the bass up.

        Root position lists tones by chordal index. An inverted chord pulls
        the bass tone out and puts it first; the tones that were below it
        follow, then the rest: first inversion of C E G is E C G.
        """
        notes = [self._tones[t] for t in sorted(self._tones)]

        offset = _INVERSION_OFFSETS[self.inversion]
        if offset == 0:
            return notes

        return notes[offset : offset + 1] + notes[:offset] + notes[offset + 1 :]

    # Quality

    def is_dim(self) -> bool:
        """True if the fifth is diminished."""
        return self._tone(1).interval(self._tone(5)) == 6

    def is_min(self) -> bool:
        """True for a minor triad (minor third, perfect fifth)."""
        return (
            self.chord_type == ChordType.TRIAD
            and not self.is_dim()
            and self._tone(1).interval(self._tone(3)) == 3
        )

    def _check_structure(self) -> None:
        for index in (1, MIDDLE_TONES[self.chord_type], 5):
            if index not in self._tones:
                raise ChordStructureError(
                    ErrorMessages.MISSING_TONE.format(role=_TONE_ROLES[index], index=index)
                )

    def name(self) -> str:
        """
        Chord symbol, e.g. 'C', 'Dmin', 'G7', 'Bmin7b5', 'Fmaj7/A'.

        Built as root + quality + extension + sus + (add...) and, when
        inverted, '/' + bass note.

        Raises:
            ChordStructureError: If the tones fit no known quality or the
                bass tone for the inversion is missing
        """
        self._check_structure()

        root = self._tone(1)
        quality = ""
        sus = ""
        ext = ""
        add: list[str] = []

        if self.chord_type == ChordType.SUS2:
            sus = "sus2"
        elif self.chord_type == ChordType.SUS4:
            sus = "sus4"
        else:
            pair = (root.interval(self._tone(3)), self._tone(3).interval(self._tone(5)))
            if pair not in _TRIAD_QUALITIES:
                raise ChordStructureError(
                    f"Invalid lower chord structure: intervals {pair} match no triad quality"
                )
            quality = _TRIAD_QUALITIES[pair]

        if 7 in self._tones:
            int5to7 = self._tone(5).interval(self._tone(7))
            if int5to7 == 3:
                ext = "7"
                if quality == "maj":
                    quality = ""
            elif int5to7 == 4:
                ext = "7"
                if quality in ("min", ""):
                    ext = "maj7"
                elif quality == "dim":
                    quality = "min"
                    ext = "7b5"
            elif Extension.SEVENTH in self.extensions:
                raise ChordStructureError(f"Invalid interval to 7th: {int5to7} semitones above 5th")

        if Extension.NINTH in self.extensions:
            int1to9 = root.interval(self._tone(9))
            if int1to9 == 1:
                add.append("b9")
            elif int1to9 == 2:
                if ext == "7":
                    ext = "9"
                else:
                    add.append("9")
            elif int1to9 == 3:
                third = self._tones.get(3)
                # A ninth that sounds like the third is just the third restated
                if third is None or not self._tone(9).is_same(third):
                    add.append("#9")
            else:
                raise ChordStructureError(f"Invalid interval to 9th: {int1to9} semitones")

        if Extension.ELEVENTH in self.extensions:
            int1to11 = root.interval(self._tone(11))
            if int1to11 == 5:
                if ext == "9":
                    ext = "11"
                else:
                    add.append("11")
            elif int1to11 == 6:
                add.append("#11")
            else:
                raise ChordStructureError(f"Invalid interval to 11th: {int1to11} semitones")

        if quality == "maj" and ext == "":
            quality = ""

        add_text = f"(add{','.join(add)})" if add else ""
        name = root.name() + quality + ext + sus + add_text

        if self.inversion != Inversion.ROOT:
            name += "/" + self._tone(self._bass_index()).name()

        return name

    def _bass_index(self) -> int:
        if self.inversion == Inversion.FIRST:
            return MIDDLE_TONES[self.chord_type]
        if self.inversion == Inversion.SECOND:
            return 5
        if self.inversion == Inversion.THIRD:
            return 7
        return 1

    def name_unicode(self) -> str:
        """name() with Unicode accidentals."""
        name = self.name()
        for ascii_glyph, glyph in _UNICODE_GLYPHS:
            name = name.replace(ascii_glyph, glyph)
        return name

    def inversion_abbrev(self) -> str:
        """Short inversion marker: (R), (1), (2), (3)."""
        return _INVERSION_ABBREVS[self.inversion]

    def roman_symbol(self) -> str:
        """Roman numeral of this degree's triad in the scale."""
        return self.scale.roman_for_degree(self.degree)

    # Comparison

    def is_same(self, other: Chord) -> bool:
        """Same spelled root and same chord type."""
        return self.root == other.root and self.chord_type == other.chord_type

    def is_same_name(self, other: Chord) -> bool:
        return self.name() == other.name()

    def change_scale(self, scale: Scale) -> Chord:
        """
        Re-express this chord in another scale.

        Keeps the root pitch when the new scale contains it (by enharmonic
        identity) and moves the degree there; otherwise keeps the degree.
        """
        changed = self.set_scale(scale)
        for index, note in enumerate(scale.notes_of_scale()):
            if note.is_same(self.root):
                return changed.set_degree(index + 1)
        return changed

    def __str__(self) -> str:
        return self.name()


def get_diatonic_chords(
    scale: Scale,
    extensions: Iterable[Extension | str] = (),
) -> list[tuple[str, Chord]]:
    """
    Get the chord on every degree of a scale.

    Args:
        scale: The scale
        extensions: Extensions applied to every chord

    Returns:
        List of (roman numeral string, chord) tuples, degree 1 first
    """
    flags = parse_extensions(extensions)
    return [
        (scale.roman_for_degree(degree), Chord(scale, degree, extensions=flags))
        for degree in range(1, 8)
    ]
