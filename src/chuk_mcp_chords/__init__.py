"""
chuk-mcp-chords - canonical spellings and names for scales and chords.

See chuk_mcp_chords.core for the Note, Scale and Chord primitives.
"""

__version__ = "0.1.0"
