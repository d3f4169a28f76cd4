"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest

from chuk_mcp_keymap.models import HarmonicKeymap

C_MAJOR_YAML = """
type: harmonic
id: c-major
name: C major
scalePitches: [0, 2, 4, 5, 7, 9, 11]
"""


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def c_major() -> HarmonicKeymap:
    """C major in 12 EDO."""
    return HarmonicKeymap(id="c-major", name="C major", scale_pitches={0, 2, 4, 5, 7, 9, 11})


@pytest.fixture
def c_major_yaml() -> str:
    """C major as a YAML definition."""
    return C_MAJOR_YAML
