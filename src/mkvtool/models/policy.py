"""Track selection policies."""

from dataclasses import dataclass
from typing import Union

from mkvtool.models.track import SUBTITLES


@dataclass(frozen=True)
class ExplicitIndex:
    """Select the track with exactly this index."""

    index: int


@dataclass(frozen=True)
class LanguagePolicy:
    """Select the first track matching an ordered list of languages.

    Tracks whose name contains any of the ``ignore`` strings
    (case-insensitive) are never selected.
    """

    languages: tuple[str, ...]
    track_type: str = SUBTITLES
    ignore: tuple[str, ...] = ()


SelectionPolicy = Union[ExplicitIndex, LanguagePolicy]
