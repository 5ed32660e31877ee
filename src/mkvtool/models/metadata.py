"""Release name metadata models."""

from dataclasses import asdict, dataclass
from typing import Union

FieldValue = Union[str, int]


@dataclass
class ReleaseInfo:
    """Scene information extracted from a release filename.

    Missing string fields are empty and missing numeric fields are zero.
    Marker fields (extended, hardcoded, proper, repack, widescreen) hold the
    marker text found in the name.
    """

    title: str = ""
    year: int = 0
    season: int = 0
    episode: int = 0
    episodename: str = ""
    resolution: str = ""
    quality: str = ""
    codec: str = ""
    audio: str = ""
    group: str = ""
    region: str = ""
    extended: str = ""
    hardcoded: str = ""
    proper: str = ""
    repack: str = ""
    widescreen: str = ""
    language: str = ""
    website: str = ""
    container: str = ""

    def as_fields(self) -> dict[str, FieldValue]:
        """Return the metadata as a field name to value mapping."""
        return asdict(self)

    def __str__(self) -> str:
        """Human-readable representation."""
        if self.season > 0 and self.episode > 0:
            return f"{self.title} S{self.season:02d}E{self.episode:02d}"
        if self.year > 0:
            return f"{self.title} ({self.year})"
        return self.title or "Unknown release"
