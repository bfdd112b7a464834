"""
Settings - defaults for the chord tools.

Settings come from a YAML file (chords.yaml in the working directory for the
server). A missing file means built-in defaults (C major, bass in octave 3).

Example chords.yaml:

    default_center: "Eb"
    default_mode: dorian
    base_octave: 3
    unicode_names: false
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

from chuk_mcp_chords.constants import DEFAULT_BASE_OCTAVE, ScaleMode
from chuk_mcp_chords.core.note import Note
from chuk_mcp_chords.core.scale import parse_mode

logger = logging.getLogger(__name__)

SETTINGS_FILENAME = "chords.yaml"


class ChordSettings(BaseModel):
    """Defaults applied when a tool call leaves a parameter out."""

    default_center: str = Field("C", description="Tonal center spelling (e.g. 'C', 'F#', 'Bb')")
    default_mode: ScaleMode = Field(ScaleMode.MAJOR, description="Scale mode")
    base_octave: int = Field(
        DEFAULT_BASE_OCTAVE, ge=0, le=8, description="Octave of the bass note in voicings"
    )
    unicode_names: bool = Field(False, description="Report chord names with Unicode accidentals")

    model_config = {"frozen": True}

    @field_validator("default_center")
    @classmethod
    def validate_center(cls, v: str) -> str:
        """Normalize the center to its note spelling."""
        return Note.parse(v).name()

    @field_validator("default_mode", mode="before")
    @classmethod
    def validate_mode(cls, v: Any) -> ScaleMode:
        """Accept mode names and aliases like 'aeolian'."""
        return parse_mode(v)


def load_settings(path: Path | None = None) -> ChordSettings:
    """
    Load settings from a YAML file.

    Args:
        path: Settings file; None or a missing file gives defaults

    Returns:
        Parsed settings

    Raises:
        ValueError: If the file exists but holds invalid settings
    """
    if path is None or not path.exists():
        logger.debug(f"No settings file at {path}, using defaults")
        return ChordSettings()

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Settings file must contain a mapping: {path}")

    settings = ChordSettings(**data)
    logger.info(f"Loaded settings from {path}")
    return settings
