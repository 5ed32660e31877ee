"""Matroska track data models."""

from dataclasses import dataclass
from typing import Optional

# Track types as reported by mkvmerge --identify.
VIDEO = "video"
AUDIO = "audio"
SUBTITLES = "subtitles"

TRACK_TYPE_ALIASES = {
    "a": AUDIO,
    "aud": AUDIO,
    "audio": AUDIO,
    "v": VIDEO,
    "vid": VIDEO,
    "video": VIDEO,
    "s": SUBTITLES,
    "sub": SUBTITLES,
    "subtitles": SUBTITLES,
}


@dataclass(frozen=True)
class Track:
    """Represents a single track in a Matroska file."""

    index: int  # Track id as reported by mkvmerge (0-based)
    type: str  # "video", "audio", "subtitles" or any other mkvmerge type
    language: str = ""  # Empty when the track carries no language tag
    name: str = ""  # Track name
    codec: str = ""  # Codec name (e.g., "SubRip/SRT", "AVC/H.264/MPEG-4p10")
    is_default: bool = False  # Whether the "default" flag is set
    uid: Optional[int] = None  # Matroska track UID

    def __str__(self) -> str:
        """Human-readable representation."""
        default_marker = " [DEFAULT]" if self.is_default else ""
        name_part = f" ({self.name})" if self.name else ""
        language = self.language or "-"
        return f"Track {self.index}: {self.type} {language} {self.codec}{name_part}{default_marker}"


def parse_track_type(value: str) -> str:
    """Resolve a track type or one of its short aliases to the full name.

    Args:
        value: Track type as typed by the user (e.g., "s", "aud", "video")

    Returns:
        Full track type name (audio, video or subtitles)

    Raises:
        ValueError: If the track type is not recognized
    """
    try:
        return TRACK_TYPE_ALIASES[value.lower()]
    except KeyError:
        raise ValueError(f"invalid track type (use a, v, or s): {value}") from None
