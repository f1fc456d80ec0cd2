"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest

from chuk_mcp_theory.core import PitchClass, Tonality
from chuk_mcp_theory.keys import get_key_signatures


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def temp_midi_path(temp_dir: Path) -> Path:
    """Path for a temporary MIDI file."""
    return temp_dir / "test.mid"


@pytest.fixture
def all_key_signatures():
    """Every written form of every key (12 tonics x 4 tonalities)."""
    return [
        key_signature
        for tonality in Tonality
        for tonic in PitchClass
        for key_signature in get_key_signatures(tonic, tonality)
    ]
