"""
Error types for the chord engine.

Bad input (degree, alteration, accidental text, unknown enum values) is an
InvalidInputError. A chord whose tones do not fit any known structure is a
ChordStructureError. Both are ValueErrors so callers can catch them together.
"""


class ChordsError(ValueError):
    """Base class for chord engine errors."""


class InvalidInputError(ChordsError):
    """Malformed input: out-of-range degree or alteration, unparseable text."""


class ChordStructureError(ChordsError):
    """Chord tones that do not match any known quality or extension spelling."""
