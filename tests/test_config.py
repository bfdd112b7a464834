"""
Tests for settings loading.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from chuk_mcp_chords.config import ChordSettings, load_settings
from chuk_mcp_chords.constants import ScaleMode


class TestChordSettings:
    """Tests for ChordSettings model."""

    def test_defaults(self):
        """Defaults are C major, bass in octave 3."""
        settings = ChordSettings()
        assert settings.default_center == "C"
        assert settings.default_mode == ScaleMode.MAJOR
        assert settings.base_octave == 3
        assert settings.unicode_names is False

    def test_center_normalized(self):
        """Center is stored as its note spelling."""
        assert ChordSettings(default_center="f#").default_center == "F#"

    def test_mode_alias(self):
        """Mode accepts aliases."""
        assert ChordSettings(default_mode="aeolian").default_mode == ScaleMode.MINOR

    def test_invalid_values(self):
        """Bad center, mode or octave is rejected."""
        with pytest.raises(ValidationError):
            ChordSettings(default_center="H")
        with pytest.raises(ValidationError):
            ChordSettings(default_mode="blues")
        with pytest.raises(ValidationError):
            ChordSettings(base_octave=12)

    def test_frozen(self):
        """Settings cannot be changed after loading."""
        settings = ChordSettings()
        with pytest.raises(ValidationError):
            settings.base_octave = 4


class TestLoadSettings:
    """Tests for load_settings."""

    def test_no_path(self):
        """No path gives defaults."""
        assert load_settings(None) == ChordSettings()

    def test_missing_file(self, temp_dir: Path):
        """A missing file gives defaults."""
        assert load_settings(temp_dir / "chords.yaml") == ChordSettings()

    def test_load_yaml(self, temp_dir: Path):
        """Values come from the YAML file."""
        path = temp_dir / "chords.yaml"
        path.write_text(
            "default_center: bb\n"
            "default_mode: dorian\n"
            "base_octave: 2\n"
            "unicode_names: true\n"
        )

        settings = load_settings(path)
        assert settings.default_center == "Bb"
        assert settings.default_mode == ScaleMode.DORIAN
        assert settings.base_octave == 2
        assert settings.unicode_names is True

    def test_empty_file(self, temp_dir: Path):
        """An empty file gives defaults."""
        path = temp_dir / "chords.yaml"
        path.write_text("")
        assert load_settings(path) == ChordSettings()

    def test_not_a_mapping(self, temp_dir: Path):
        """A list at the top level is rejected."""
        path = temp_dir / "chords.yaml"
        path.write_text("- C\n- major\n")
        with pytest.raises(ValueError):
            load_settings(path)
