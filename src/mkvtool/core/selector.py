"""Track selection by explicit index or language priority."""

from typing import Iterable, Optional, Sequence

from mkvtool.models.policy import ExplicitIndex, LanguagePolicy, SelectionPolicy
from mkvtool.models.track import Track
from mkvtool.utils.logger import get_logger

logger = get_logger(__name__)

# Matroska has the concept of a "default language" (usually English). Tracks
# in that language carry no language code, and users select them with this
# reserved token.
DEFAULT_LANGUAGE_TOKEN = "default"
NO_LANGUAGE = ""


class SelectionError(Exception):
    """Base class for track selection failures."""


class TrackNotFoundError(SelectionError):
    """The requested track index does not exist in the file."""

    def __init__(self, index: int, file_name: Optional[str] = None):
        self.index = index
        self.file_name = file_name
        where = f" in file {file_name}" if file_name else ""
        super().__init__(f"track #{index} not found{where}")


class NoMatchingTrackError(SelectionError):
    """No track matched any of the requested languages."""

    def __init__(self, languages: Sequence[str]):
        self.languages = list(languages)
        super().__init__(f"no track with language(s): {','.join(self.languages)}")


def name_matches_any(name: str, substrings: Iterable[str]) -> bool:
    """Return True if any of the substrings occurs in name (case-insensitive)."""
    name_lower = name.lower()
    return any(substr.lower() in name_lower for substr in substrings)


def select_by_index(
    tracks: Sequence[Track], index: int, file_name: Optional[str] = None
) -> Track:
    """Return the track with the given index.

    Args:
        tracks: Tracks in the file
        index: Track index (0-based, as reported by mkvmerge)
        file_name: File name, used in the error message only

    Returns:
        The matching Track

    Raises:
        TrackNotFoundError: If no track has that index
    """
    for track in tracks:
        if track.index == index:
            return track
    raise TrackNotFoundError(index, file_name)


def select_by_language_priority(
    tracks: Sequence[Track],
    languages: Sequence[str],
    track_type: str,
    ignore: Iterable[str] = (),
) -> Track:
    """Return the first track of a type matching the language priority.

    The list of languages works as a priority: ["eng", "fra"] first attempts
    to find an English track and, failing that, a French one. The special
    language "default" selects tracks with no language code.

    Tracks whose name contains one of the ignore strings (case-insensitive)
    are skipped. This is useful to select tracks by language while ignoring
    "Forced" tracks.

    Args:
        tracks: Tracks in the file, in file order
        languages: Language codes in priority order
        track_type: Only tracks of this type are considered
        ignore: Substrings excluding a track by name

    Returns:
        The selected Track

    Raises:
        NoMatchingTrackError: If no track matches any language
    """
    ignore = list(ignore)

    for lang in languages:
        wanted = NO_LANGUAGE if lang == DEFAULT_LANGUAGE_TOKEN else lang
        for track in tracks:
            if track.type != track_type or track.language != wanted:
                continue
            if name_matches_any(track.name, ignore):
                logger.debug(
                    "Ignoring track by name",
                    track_index=track.index,
                    name=track.name,
                    ignore=ignore,
                )
                continue
            logger.info(
                "Selected track from priority list",
                language=lang,
                track_index=track.index,
                priority=list(languages),
            )
            return track

    logger.debug(
        "No matching track found",
        available_languages=[t.language for t in tracks if t.type == track_type],
        priority=list(languages),
    )
    raise NoMatchingTrackError(languages)


def select_track(
    tracks: Sequence[Track], policy: SelectionPolicy, file_name: Optional[str] = None
) -> Track:
    """Select a track according to a selection policy.

    Args:
        tracks: Tracks in the file
        policy: Either an ExplicitIndex or a LanguagePolicy
        file_name: File name, used in error messages

    Returns:
        The selected Track

    Raises:
        SelectionError: If no track satisfies the policy
    """
    if isinstance(policy, ExplicitIndex):
        return select_by_index(tracks, policy.index, file_name)
    if isinstance(policy, LanguagePolicy):
        return select_by_language_priority(
            tracks, policy.languages, policy.track_type, policy.ignore
        )
    raise TypeError(f"Unsupported selection policy: {policy!r}")
