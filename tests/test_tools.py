"""
Tests for MCP tools.

Tests the MCP tool implementations for scales and chords.
"""

import json

import pytest

from chuk_mcp_chords.config import ChordSettings
from chuk_mcp_chords.models import ChordRequest, ChordView, ScaleRequest, ScaleView
from chuk_mcp_chords.tools import register_chord_tools, register_scale_tools


# Mock MCP server for testing tools
class MockMCPServer:
    """Mock MCP server that just stores registered tools."""

    def __init__(self, name: str):
        self.name = name
        self.tools: dict = {}

    def tool(self, func):
        """Decorator to register a tool."""
        self.tools[func.__name__] = func
        return func


@pytest.fixture
def scale_tools():
    """Scale tools with default settings."""
    return register_scale_tools(MockMCPServer("test"), ChordSettings())


@pytest.fixture
def chord_tools():
    """Chord tools with default settings."""
    return register_chord_tools(MockMCPServer("test"), ChordSettings())


class TestModels:
    """Tests for request and view models."""

    def test_scale_request(self):
        """Scale request builds a scale."""
        scale = ScaleRequest(center="eb", mode="aeolian").to_scale()
        assert scale.name() == "Eb Minor"

    def test_chord_request_extensions(self):
        """Extensions accept a list, a single name or None."""
        assert ChordRequest(center="C", extensions=["7th"]).to_chord().name() == "Cmaj7"
        assert ChordRequest(center="C", extensions="9th").to_chord().name() == "C(add9)"
        assert ChordRequest(center="C", extensions=None).to_chord().name() == "C"

    def test_chord_request_degree_range(self):
        """Degree outside 1-7 is rejected."""
        with pytest.raises(ValueError):
            ChordRequest(center="C", degree=8)

    def test_scale_view(self):
        """Scale view snapshot."""
        view = ScaleView.from_scale(ScaleRequest(center="A", mode="minor").to_scale())
        assert view.notes == ["A", "B", "C", "D", "E", "F", "G"]
        assert view.numerals == ["i", "ii°", "III", "iv", "v", "VI", "VII"]

    def test_chord_view(self):
        """Chord view snapshot."""
        chord = ChordRequest(center="C", degree=5, inversion="first", extensions=["7th"]).to_chord()
        view = ChordView.from_chord(chord)
        assert view.name == "G7/B"
        assert view.roman == "V"
        assert view.inversion_abbrev == "(1)"
        assert view.notes == ["B", "G", "D", "F"]
        assert view.voicing == ["B3", "G4", "D5", "F5"]


class TestScaleTools:
    """Tests for scale tools."""

    @pytest.mark.asyncio
    async def test_describe_scale(self, scale_tools):
        """Describe a scale."""
        result = await scale_tools["chords_describe_scale"](center="D", mode="dorian")
        data = json.loads(result)
        assert data["status"] == "success"
        assert data["scale"]["name"] == "D Dorian"
        assert data["scale"]["notes"] == ["D", "E", "F", "G", "A", "B", "C"]
        assert data["scale"]["numerals"] == ["i", "ii", "III", "IV", "v", "vi°", "VII"]

    @pytest.mark.asyncio
    async def test_describe_scale_defaults(self, scale_tools):
        """Omitted parameters come from settings."""
        data = json.loads(await scale_tools["chords_describe_scale"]())
        assert data["scale"]["name"] == "C Major"

    @pytest.mark.asyncio
    async def test_describe_scale_invalid(self, scale_tools):
        """Bad center returns an error."""
        data = json.loads(await scale_tools["chords_describe_scale"](center="H"))
        assert data["status"] == "error"

    @pytest.mark.asyncio
    async def test_list_diatonic(self, scale_tools):
        """List the seventh chords of C major."""
        result = await scale_tools["chords_list_diatonic"](
            center="C", mode="major", extensions=["7th"]
        )
        data = json.loads(result)
        assert data["status"] == "success"
        assert data["count"] == 7
        assert [c["name"] for c in data["chords"]] == [
            "Cmaj7", "Dmin7", "Emin7", "Fmaj7", "G7", "Amin7", "Bmin7b5",
        ]
        assert data["chords"][6]["roman"] == "vii°"

    @pytest.mark.asyncio
    async def test_list_diatonic_bad_extension(self, scale_tools):
        """Unknown extension returns an error."""
        data = json.loads(await scale_tools["chords_list_diatonic"](extensions=["13th"]))
        assert data["status"] == "error"


class TestChordTools:
    """Tests for chord tools."""

    @pytest.mark.asyncio
    async def test_name_chord(self, chord_tools):
        """Name V7 in C major."""
        result = await chord_tools["chords_name_chord"](
            degree=5, center="C", mode="major", extensions=["7th"]
        )
        data = json.loads(result)
        assert data["status"] == "success"
        assert data["display"] == "G7"
        assert data["chord"]["name"] == "G7"
        assert data["chord"]["notes"] == ["G", "B", "D", "F"]
        assert data["chord"]["extensions"] == ["7th"]

    @pytest.mark.asyncio
    async def test_name_chord_unicode_display(self):
        """Unicode display follows settings."""
        tools = register_chord_tools(MockMCPServer("test"), ChordSettings(unicode_names=True))
        data = json.loads(await tools["chords_name_chord"](degree=1, center="Bb"))
        assert data["display"] == "B♭"
        assert data["chord"]["name"] == "Bb"

    @pytest.mark.asyncio
    async def test_name_chord_invalid_degree(self, chord_tools):
        """Degree outside 1-7 returns an error."""
        data = json.loads(await chord_tools["chords_name_chord"](degree=9))
        assert data["status"] == "error"

    @pytest.mark.asyncio
    async def test_name_chord_structure_error(self, chord_tools):
        """Third inversion without a 7th returns an error."""
        data = json.loads(await chord_tools["chords_name_chord"](degree=1, inversion="third"))
        assert data["status"] == "error"

    @pytest.mark.asyncio
    async def test_voice_chord(self, chord_tools):
        """Voice a triad from the default octave."""
        data = json.loads(await chord_tools["chords_voice_chord"](degree=1, center="C"))
        assert data["status"] == "success"
        assert data["name"] == "C"
        assert data["voicing"] == ["C3", "E4", "G4"]

    @pytest.mark.asyncio
    async def test_voice_chord_octave(self, chord_tools):
        """Explicit bass octave."""
        data = json.loads(
            await chord_tools["chords_voice_chord"](degree=1, center="C", inversion="first", octave=2)
        )
        assert data["voicing"] == ["E2", "C3", "G3"]

    @pytest.mark.asyncio
    async def test_voice_chord_settings_octave(self):
        """Bass octave defaults from settings."""
        tools = register_chord_tools(MockMCPServer("test"), ChordSettings(base_octave=4))
        data = json.loads(await tools["chords_voice_chord"](degree=1, center="C"))
        assert data["voicing"] == ["C4", "E5", "G5"]

    @pytest.mark.asyncio
    async def test_change_scale(self, chord_tools):
        """G in C major becomes I in G major."""
        result = await chord_tools["chords_change_scale"](
            new_center="G", new_mode="major", degree=5, center="C"
        )
        data = json.loads(result)
        assert data["status"] == "success"
        assert data["pitch_kept"] is True
        assert data["before"]["roman"] == "V"
        assert data["after"]["degree"] == 1
        assert data["after"]["roman"] == "I"

    @pytest.mark.asyncio
    async def test_change_scale_keeps_degree(self, chord_tools):
        """Without the root pitch the degree stays."""
        result = await chord_tools["chords_change_scale"](
            new_center="G", new_mode="major", degree=4, center="C"
        )
        data = json.loads(result)
        assert data["pitch_kept"] is False
        assert data["after"]["name"] == "C"
        assert data["after"]["degree"] == 4
