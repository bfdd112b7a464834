"""
Chord tools - MCP tools for naming, voicing and re-keying chords.

Every tool takes the same chord parameters: a scale (center + mode), a
degree, a chord type, an inversion and a list of extensions.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_chords.config import ChordSettings
from chuk_mcp_chords.core.voicing import voice_chord
from chuk_mcp_chords.models import ChordRequest, ChordView, ScaleRequest

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_chord_tools(mcp: ChukMCPServer, settings: ChordSettings) -> dict[str, Any]:
    """
    Register chord tools with the MCP server.

    Args:
        mcp: The MCP server instance
        settings: Defaults for omitted parameters

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    def chord_request(
        center: str | None,
        mode: str | None,
        degree: int,
        chord_type: str,
        inversion: str,
        extensions: list[str] | None,
    ) -> ChordRequest:
        return ChordRequest(
            center=center or settings.default_center,
            mode=mode or settings.default_mode,
            degree=degree,
            chord_type=chord_type,
            inversion=inversion,
            extensions=extensions,
        )

    @mcp.tool  # type: ignore[arg-type]
    async def chords_name_chord(
        degree: int = 1,
        center: str | None = None,
        mode: str | None = None,
        chord_type: str = "triad",
        inversion: str = "root",
        extensions: list[str] | None = None,
    ) -> str:
        """
        Name a scale-degree chord.

        Returns the chord symbol, its roman numeral, its tones bass first
        and a voicing.

        Args:
            degree: Scale degree of the chord root (1-7)
            center: Tonal center; defaults from settings
            mode: Scale mode; defaults from settings
            chord_type: triad, sus2 or sus4
            inversion: root, first, second or third
            extensions: Any of "7th", "9th", "11th"

        Returns:
            JSON string with chord details

        Example:
            chords_name_chord(degree=5, center="C", mode="major", extensions=["7th"])
        """
        try:
            chord = chord_request(center, mode, degree, chord_type, inversion, extensions).to_chord()
            view = ChordView.from_chord(chord, settings.base_octave)

            return json.dumps(
                {
                    "status": "success",
                    "display": view.name_unicode if settings.unicode_names else view.name,
                    "chord": view.model_dump(mode="json"),
                }
            )
        except Exception as e:
            logger.exception("Failed to name chord")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chords_name_chord"] = chords_name_chord

    @mcp.tool  # type: ignore[arg-type]
    async def chords_voice_chord(
        degree: int = 1,
        center: str | None = None,
        mode: str | None = None,
        chord_type: str = "triad",
        inversion: str = "root",
        extensions: list[str] | None = None,
        octave: int | None = None,
    ) -> str:
        """
        Place a chord's tones into octaves, bass first.

        Args:
            degree: Scale degree of the chord root (1-7)
            center: Tonal center; defaults from settings
            mode: Scale mode; defaults from settings
            chord_type: triad, sus2 or sus4
            inversion: root, first, second or third
            extensions: Any of "7th", "9th", "11th"
            octave: Octave of the bass note; defaults from settings

        Returns:
            JSON string with octave-tagged tones like ["C3", "E4", "G4"]

        Example:
            chords_voice_chord(degree=1, center="C", inversion="first")
        """
        try:
            chord = chord_request(center, mode, degree, chord_type, inversion, extensions).to_chord()
            base_octave = settings.base_octave if octave is None else octave

            return json.dumps(
                {
                    "status": "success",
                    "name": chord.name(),
                    "voicing": voice_chord(chord, base_octave),
                }
            )
        except Exception as e:
            logger.exception("Failed to voice chord")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chords_voice_chord"] = chords_voice_chord

    @mcp.tool  # type: ignore[arg-type]
    async def chords_change_scale(
        new_center: str,
        new_mode: str,
        degree: int = 1,
        center: str | None = None,
        mode: str | None = None,
        chord_type: str = "triad",
        inversion: str = "root",
        extensions: list[str] | None = None,
    ) -> str:
        """
        Re-express a chord in another scale.

        The chord root's pitch is kept when the new scale contains it;
        otherwise the chord keeps its degree and takes the new scale's
        spelling.

        Args:
            new_center: Tonal center of the target scale
            new_mode: Mode of the target scale
            degree: Scale degree of the chord root (1-7)
            center: Current tonal center; defaults from settings
            mode: Current mode; defaults from settings
            chord_type: triad, sus2 or sus4
            inversion: root, first, second or third
            extensions: Any of "7th", "9th", "11th"

        Returns:
            JSON string with the chord before and after

        Example:
            chords_change_scale(new_center="G", new_mode="major", degree=5, center="C")
        """
        try:
            chord = chord_request(center, mode, degree, chord_type, inversion, extensions).to_chord()
            new_scale = ScaleRequest(center=new_center, mode=new_mode).to_scale()
            changed = chord.change_scale(new_scale)

            return json.dumps(
                {
                    "status": "success",
                    "scale": new_scale.name(),
                    "pitch_kept": changed.root.is_same(chord.root),
                    "before": ChordView.from_chord(chord, settings.base_octave).model_dump(
                        mode="json"
                    ),
                    "after": ChordView.from_chord(changed, settings.base_octave).model_dump(
                        mode="json"
                    ),
                }
            )
        except Exception as e:
            logger.exception("Failed to change scale")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chords_change_scale"] = chords_change_scale

    return tools
