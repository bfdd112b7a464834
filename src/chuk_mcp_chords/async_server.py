#!/usr/bin/env python3
"""
Async Chords MCP Server using chuk-mcp-server

This server provides MCP tools for spelling scales and naming chords.
Chords are built on a scale degree, so every tone is spelled the way the
scale spells it.

The server provides tools for:
- Spelling a scale in any of the seven diatonic modes
- Listing the diatonic chords of a scale with roman numerals
- Naming a chord from its degree, shape, inversion and extensions
- Voicing a chord into octaves
- Re-expressing a chord in another scale
"""

import logging
from pathlib import Path
from typing import Any

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_chords.config import SETTINGS_FILENAME, ChordSettings, load_settings
from chuk_mcp_chords.tools import register_chord_tools, register_scale_tools

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Paths - settings live next to the user's project
BASE_PATH = Path.cwd()
SETTINGS_PATH = BASE_PATH / SETTINGS_FILENAME


def create_server(settings: ChordSettings) -> tuple[ChukMCPServer, dict[str, Any]]:
    """
    Create the MCP server and register every tool.

    Args:
        settings: Defaults for omitted tool parameters

    Returns:
        The server and a dictionary of registered tool functions
    """
    server = ChukMCPServer("chuk-mcp-chords")

    tools: dict[str, Any] = {}
    tools.update(register_scale_tools(server, settings))
    tools.update(register_chord_tools(server, settings))

    logger.info("CHUK Chords MCP Server initialized")
    logger.info(f"  Default scale: {settings.default_center} {settings.default_mode.value}")
    logger.info(f"  Voicing base octave: {settings.base_octave}")
    return server, tools


def create_default_server(settings_path: Path | None = None) -> ChukMCPServer:
    """Create the server from a settings file (chords.yaml in the working directory)."""
    path = settings_path or SETTINGS_PATH
    logger.info(f"  Settings file: {path}")
    server, _ = create_server(load_settings(path))
    return server
