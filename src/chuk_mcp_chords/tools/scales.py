"""
Scale tools - MCP tools for scale spelling and diatonic harmony.

Tools for spelling a scale and listing the chord on each of its degrees.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_chords.config import ChordSettings
from chuk_mcp_chords.core.chord import get_diatonic_chords
from chuk_mcp_chords.models import ChordView, ScaleRequest, ScaleView

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_scale_tools(mcp: ChukMCPServer, settings: ChordSettings) -> dict[str, Any]:
    """
    Register scale tools with the MCP server.

    Args:
        mcp: The MCP server instance
        settings: Defaults for omitted parameters

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    def scale_request(center: str | None, mode: str | None) -> ScaleRequest:
        return ScaleRequest(
            center=center or settings.default_center,
            mode=mode or settings.default_mode,
        )

    @mcp.tool  # type: ignore[arg-type]
    async def chords_describe_scale(center: str | None = None, mode: str | None = None) -> str:
        """
        Spell a scale and give the roman numeral for each degree.

        Args:
            center: Tonal center (e.g. "C", "F#", "Bb"); defaults from settings
            mode: lydian, major, mixolydian, dorian, minor, phrygian or locrian

        Returns:
            JSON string with the scale's notes and numerals

        Example:
            chords_describe_scale(center="D", mode="dorian")
        """
        try:
            scale = scale_request(center, mode).to_scale()
            view = ScaleView.from_scale(scale)

            return json.dumps({"status": "success", "scale": view.model_dump(mode="json")})
        except Exception as e:
            logger.exception("Failed to describe scale")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chords_describe_scale"] = chords_describe_scale

    @mcp.tool  # type: ignore[arg-type]
    async def chords_list_diatonic(
        center: str | None = None,
        mode: str | None = None,
        extensions: list[str] | None = None,
    ) -> str:
        """
        List the chord built on every degree of a scale.

        Args:
            center: Tonal center; defaults from settings
            mode: Scale mode; defaults from settings
            extensions: Extensions applied to every chord ("7th", "9th", "11th")

        Returns:
            JSON string with one chord per degree

        Example:
            chords_list_diatonic(center="C", mode="major", extensions=["7th"])
        """
        try:
            scale = scale_request(center, mode).to_scale()
            chords = get_diatonic_chords(scale, extensions or ())

            return json.dumps(
                {
                    "status": "success",
                    "scale": scale.name(),
                    "chords": [
                        ChordView.from_chord(chord, settings.base_octave).model_dump(mode="json")
                        for _, chord in chords
                    ],
                    "count": len(chords),
                }
            )
        except Exception as e:
            logger.exception("Failed to list diatonic chords")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chords_list_diatonic"] = chords_list_diatonic

    return tools
