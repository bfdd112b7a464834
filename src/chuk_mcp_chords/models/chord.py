"""
Chord models - requests and views exchanged with the tools.

Requests validate raw tool parameters and build core objects. Views are the
JSON-ready snapshots returned to the caller.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

from chuk_mcp_chords.constants import ChordType, Extension, Inversion, ScaleMode
from chuk_mcp_chords.core.chord import Chord, parse_extensions
from chuk_mcp_chords.core.note import Note
from chuk_mcp_chords.core.scale import Scale, parse_mode
from chuk_mcp_chords.core.voicing import voice_chord


class ScaleRequest(BaseModel):
    """A tonal center and mode as given by a caller."""

    center: str = Field(..., description="Tonal center spelling (e.g. 'C', 'F#', 'Bb')")
    mode: ScaleMode = Field(ScaleMode.MAJOR, description="Scale mode")

    model_config = {"frozen": True}

    @field_validator("center")
    @classmethod
    def validate_center(cls, v: str) -> str:
        """Normalize the center to its note spelling."""
        return Note.parse(v).name()

    @field_validator("mode", mode="before")
    @classmethod
    def validate_mode(cls, v: Any) -> ScaleMode:
        """Accept mode names and aliases like 'aeolian'."""
        return parse_mode(v)

    def to_scale(self) -> Scale:
        return Scale(self.center, self.mode)


class ChordRequest(ScaleRequest):
    """Everything needed to build a chord."""

    degree: int = Field(1, ge=1, le=7, description="Scale degree of the chord root")
    chord_type: ChordType = Field(ChordType.TRIAD, description="triad, sus2 or sus4")
    inversion: Inversion = Field(Inversion.ROOT, description="root, first, second or third")
    extensions: frozenset[Extension] = Field(
        default_factory=frozenset, description="Any of '7th', '9th', '11th'"
    )

    @field_validator("extensions", mode="before")
    @classmethod
    def validate_extensions(cls, v: Any) -> frozenset[Extension]:
        """Accept a list of extension names, or None for no extensions."""
        if v is None:
            return frozenset()
        if isinstance(v, str):
            v = [v]
        return parse_extensions(v)

    def to_chord(self) -> Chord:
        return Chord(
            self.to_scale(),
            self.degree,
            self.chord_type,
            self.inversion,
            self.extensions,
        )


class ScaleView(BaseModel):
    """Snapshot of a scale for display."""

    name: str
    name_unicode: str
    center: str
    mode: ScaleMode
    notes: list[str] = Field(default_factory=list, description="Degree 1 first")
    numerals: list[str] = Field(default_factory=list, description="Roman numeral per degree")

    model_config = {"frozen": True}

    @classmethod
    def from_scale(cls, scale: Scale) -> ScaleView:
        return cls(
            name=scale.name(),
            name_unicode=scale.name_unicode(),
            center=scale.center,
            mode=scale.mode,
            notes=[note.name() for note in scale.notes_of_scale()],
            numerals=[scale.roman_for_degree(degree) for degree in range(1, 8)],
        )


class ChordView(BaseModel):
    """Snapshot of a chord: symbol, analysis and voiced tones."""

    name: str
    name_unicode: str
    roman: str
    degree: int
    chord_type: ChordType
    inversion: Inversion
    inversion_abbrev: str
    extensions: list[Extension] = Field(default_factory=list)
    notes: list[str] = Field(default_factory=list, description="Bass first")
    voicing: list[str] = Field(default_factory=list, description="Octave-tagged tones")

    model_config = {"frozen": True}

    @classmethod
    def from_chord(cls, chord: Chord, base_octave: int = 3) -> ChordView:
        """
        Snapshot a chord.

        Args:
            chord: The chord
            base_octave: Octave of the bass note in the voicing

        Returns:
            ChordView
        """
        return cls(
            name=chord.name(),
            name_unicode=chord.name_unicode(),
            roman=chord.roman_symbol(),
            degree=chord.degree,
            chord_type=chord.chord_type,
            inversion=chord.inversion,
            inversion_abbrev=chord.inversion_abbrev(),
            extensions=[ext for ext in Extension if ext in chord.extensions],
            notes=[note.name() for note in chord.note_list()],
            voicing=voice_chord(chord, base_octave),
        )
