"""
Pydantic models for the chord tools.

This module provides:
- ScaleRequest / ChordRequest: Validated tool parameters
- ScaleView / ChordView: JSON-ready snapshots of scales and chords
"""

from chuk_mcp_chords.models.chord import ChordRequest, ChordView, ScaleRequest, ScaleView

__all__ = [
    "ChordRequest",
    "ChordView",
    "ScaleRequest",
    "ScaleView",
]
