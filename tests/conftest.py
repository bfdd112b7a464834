"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest

from chuk_mcp_chords.core import Scale


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def c_major() -> Scale:
    """C major scale."""
    return Scale("C", "major")


@pytest.fixture
def c_minor() -> Scale:
    """C natural minor scale."""
    return Scale("C", "minor")
