"""
MCP tool implementations.

Tools are organized by domain:
- scales - Scale spelling and diatonic chord listings
- chords - Chord naming, voicing and re-keying
"""

from chuk_mcp_chords.tools.chords import register_chord_tools
from chuk_mcp_chords.tools.scales import register_scale_tools

__all__ = [
    "register_chord_tools",
    "register_scale_tools",
]
