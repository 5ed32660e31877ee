"""Shared pytest fixtures for mkvtool tests."""

import logging

import pytest
import structlog

from mkvtool.config import Config, SelectionConfig
from mkvtool.models.track import Track


@pytest.fixture
def default_config():
    """Create a configuration with a default language policy."""
    return Config(
        selection=SelectionConfig(language_priority=["eng", "default"], ignore=["forced"]),
    )


@pytest.fixture
def sample_tracks():
    """Create the tracks of a typical release with several subtitles."""
    return [
        Track(index=0, type="video", codec="AVC/H.264/MPEG-4p10", is_default=True, uid=1001),
        Track(index=1, type="audio", language="jpn", name="Japanese", codec="AAC", is_default=True),
        Track(index=2, type="audio", language="eng", name="English", codec="AC-3"),
        Track(index=3, type="subtitles", language="eng", name="English (Forced)", codec="SubRip/SRT"),
        Track(index=4, type="subtitles", language="eng", name="English", codec="SubRip/SRT"),
        Track(index=5, type="subtitles", language="fre", name="Français", codec="SubRip/SRT", is_default=True),
        Track(index=6, type="subtitles", language="", name="Signs", codec="SubStationAlpha"),
    ]


@pytest.fixture
def mkv_file(tmp_path):
    """Create an empty file standing in for a Matroska file."""
    path = tmp_path / "Series.Title.S01E02.720p.HDTV.x264-GROUP.mkv"
    path.write_bytes(b"")
    return path


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop logging handlers installed by CLI invocations."""
    yield
    structlog.reset_defaults()
    logging.getLogger().handlers.clear()
