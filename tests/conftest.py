"""Shared test fixtures."""

from __future__ import annotations

import os
import tempfile

import pytest
from mutagen.id3 import ID3

# A run of silent MPEG-1 Layer III frame bytes; enough for ID3 to load and save
FAKE_AUDIO = (b"\xff\xfb\x90\x64" + b"\x00" * 413) * 4


@pytest.fixture
def tmp_dir():
    """Create a temporary directory that's cleaned up after the test."""
    with tempfile.TemporaryDirectory() as d:
        yield d


@pytest.fixture
def make_mp3(tmp_dir):
    """Factory fixture that creates small MP3 files, optionally pre-tagged."""

    def _make(filename: str, frames: list | None = None) -> str:
        path = os.path.join(tmp_dir, filename)
        with open(path, "wb") as f:
            f.write(FAKE_AUDIO)
        if frames is not None:
            tags = ID3()
            for frame in frames:
                tags.add(frame)
            tags.save(path)
        return path

    return _make
