"""Shared test fixtures."""

import subprocess
from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_timings_path() -> Path:
    return FIXTURES_DIR / "sample_timings.txt"


@pytest.fixture
def tone_wav(tmp_path: Path) -> Path:
    """A 10-second 440 Hz tone, generated with ffmpeg."""
    output = tmp_path / "tone.wav"
    cmd = [
        "ffmpeg", "-y", "-nostdin",
        "-v", "error",
        "-f", "lavfi",
        "-i", "sine=f=440:d=10",
        "-c:a", "pcm_s16le",
        str(output),
    ]
    subprocess.run(cmd, check=True)
    return output
