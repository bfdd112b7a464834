"""
Constants and enums for the chord system.

No magic strings - use enums for constrained values.
"""

from enum import Enum


class Letter(str, Enum):
    """The seven natural letter classes."""

    A = "A"
    B = "B"
    C = "C"
    D = "D"
    E = "E"
    F = "F"
    G = "G"


class ScaleMode(str, Enum):
    """
    The diatonic modes a scale can be built on.

    Ordered brightest to darkest.
    """

    LYDIAN = "lydian"
    MAJOR = "major"
    MIXOLYDIAN = "mixolydian"
    DORIAN = "dorian"
    MINOR = "minor"
    PHRYGIAN = "phrygian"
    LOCRIAN = "locrian"


class ChordType(str, Enum):
    """Chord shape - which tone sits between the root and the fifth."""

    TRIAD = "triad"  # 1 3 5
    SUS2 = "sus2"  # 1 2 5
    SUS4 = "sus4"  # 1 4 5


class Inversion(str, Enum):
    """Which chordal tone is placed in the bass."""

    ROOT = "root"
    FIRST = "first"
    SECOND = "second"
    THIRD = "third"  # Needs a 7th


class Extension(str, Enum):
    """Tones stacked above the base shape."""

    SEVENTH = "7th"
    NINTH = "9th"
    ELEVENTH = "11th"


# Chordal index carried by each extension
EXTENSION_TONES: dict[Extension, int] = {
    Extension.SEVENTH: 7,
    Extension.NINTH: 9,
    Extension.ELEVENTH: 11,
}

# Chordal index of the tone between root and fifth
MIDDLE_TONES: dict[ChordType, int] = {
    ChordType.TRIAD: 3,
    ChordType.SUS2: 2,
    ChordType.SUS4: 4,
}

# Default register for voicings
DEFAULT_BASE_OCTAVE = 3


class ErrorMessages:
    """Standardized error messages."""

    INVALID_ALTER = "Invalid alter amount: {alter}. Must be between -2 and 2."
    INVALID_LETTER = "Bad generic note: '{letter}'."
    INVALID_ACCIDENTAL = "Unknown accidental: '{accidental}'."
    INVALID_STEPS = "Steps to {action} must be >= 1, got {steps}."
    TOO_MUCH_ALTERATION = "Too much {action}: {name} by {steps} leaves the -2..2 range."
    DEGREE_OUT_OF_RANGE = "Degree is out of range (1-7): {degree}."
    DEGREE_NOT_POSITIVE = "Degree out of bound: {degree}."
    INVALID_MODE = "Unknown scale mode: '{mode}'."
    INVALID_CHORD_TYPE = "Unknown chord type: '{chord_type}'."
    INVALID_INVERSION = "Unknown inversion: '{inversion}'."
    INVALID_EXTENSION = "Unknown extension: '{extension}'."
    MISSING_TONE = "No {role} tone ({index}) in the chord tones."
