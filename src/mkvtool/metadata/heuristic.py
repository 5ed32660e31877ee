"""Release name heuristics for extracting scene information.

Release names look like "Show.Name.S01E02.Episode.Name.720p.HDTV.x264-GROUP.mkv"
or "Movie Name (2022) [1080p] BluRay.mkv". Each known element is matched
independently; the title is whatever precedes the first element found.
"""

import re
from pathlib import PurePath
from typing import Optional

import structlog

from mkvtool.models.metadata import ReleaseInfo

logger = structlog.get_logger(__name__)

CONTAINERS = {"mkv", "avi", "mp4", "m4v", "webm", "ts", "wmv", "mov"}

# Simple elements: (field, pattern). Group 1 holds the value.
STRING_PATTERNS = [
    ("resolution", re.compile(r"\b(\d{3,4}[pi]|4k)\b", re.IGNORECASE)),
    (
        "quality",
        re.compile(
            # Short words like "Web" or "Cam" also appear in titles; only
            # their uppercase spelling counts.
            r"\b((?i:(?:PPV\.)?[HP]DTV|HDCAM|B[DR]Rip|(?:PPV )?WEB-?DL(?: DVDRip)?|HDRip"
            r"|DVDRip|CamRip|WEBRip|BluRay|DvDScr|Telesync)|CAM|TS|WEB)\b"
        ),
    ),
    ("codec", re.compile(r"\b(xvid|[hx]\.?26[45]|hevc|avc)\b", re.IGNORECASE)),
    (
        "audio",
        re.compile(
            r"\b(MP3|DDP?\.?5\.1|Dual[- ]Audio|DTS(?:-HD(?:\.MA)?)?|AAC(?:\.?2\.0)?"
            r"|E?AC3(?:\.5\.1)?|FLAC|TrueHD|Atmos)\b",
            re.IGNORECASE,
        ),
    ),
    ("region", re.compile(r"\b(R\d)\b")),
    ("extended", re.compile(r"\b(EXTENDED(?:[. ]CUT)?|Extended(?:[. ]Cut)?)\b")),
    ("hardcoded", re.compile(r"\b(HC)\b")),
    ("proper", re.compile(r"\b(PROPER)\b")),
    ("repack", re.compile(r"\b(REPACK|RERIP)\b")),
    ("widescreen", re.compile(r"\b(WS)\b")),
    (
        "language",
        re.compile(r"\b(rus\.eng|ita\.eng|MULTi|MULTI|FRENCH|GERMAN|ITALIAN|SPANISH|VOSTFR)\b"),
    ),
]

EPISODE_PATTERNS = [
    re.compile(r"\bS(\d{1,2})[ ._-]?E(\d{1,3})\b", re.IGNORECASE),
    re.compile(r"\b(\d{1,2})x(\d{2,3})\b"),
]

YEAR_PATTERN = re.compile(r"[\[(]?\b((?:19|20)\d{2})\b[\])]?")
GROUP_PATTERN = re.compile(r"-\s?((?=[A-Za-z0-9]*[A-Za-z])[A-Za-z0-9]+)$")
WEBSITE_PATTERN = re.compile(r"^\[\s?([^\]]+?)\s?\]\s*")


def parse_release_name(filename: str) -> ReleaseInfo:
    """Parse a release filename into scene information.

    Args:
        filename: File name (any leading directories are ignored)

    Returns:
        ReleaseInfo with every field that could be extracted
    """
    name = PurePath(filename).name
    info = ReleaseInfo()

    stem, dot, ext = name.rpartition(".")
    if dot and ext.lower() in CONTAINERS:
        info.container = ext.lower()
        name = stem

    if match := WEBSITE_PATTERN.match(name):
        info.website = match.group(1)
        name = name[match.end() :]

    # Start offsets of every element found; the title ends at the first one.
    starts = []
    episode_end: Optional[int] = None

    for pattern in EPISODE_PATTERNS:
        if match := pattern.search(name):
            info.season = int(match.group(1))
            info.episode = int(match.group(2))
            starts.append(match.start())
            episode_end = match.end()
            break

    # The last year wins, so "Blade Runner 2049 (2017)" keeps 2049 in the title.
    years = [m for m in YEAR_PATTERN.finditer(name) if m.start(1) > 0]
    if years:
        info.year = int(years[-1].group(1))
        starts.append(years[-1].start())

    for field, pattern in STRING_PATTERNS:
        if match := pattern.search(name):
            setattr(info, field, match.group(1))
            starts.append(match.start())

    # A trailing "-GROUP" only counts after some other element, so that a
    # hyphenated title such as "Spider-Man" is left alone.
    if starts and (match := GROUP_PATTERN.search(name)) and match.start() > min(starts):
        info.group = match.group(1)
        starts.append(match.start())

    title_end = min(starts) if starts else len(name)
    info.title = _clean_title(name[:title_end])

    if episode_end is not None:
        following = [s for s in starts if s >= episode_end]
        end = min(following) if following else len(name)
        info.episodename = _clean_title(name[episode_end:end])

    logger.debug("Parsed release name", filename=filename, release=str(info))
    return info


def _clean_title(title: str) -> str:
    """Clean up an extracted title.

    - Replace dots and underscores with spaces
    - Remove extra whitespace
    - Strip separators and brackets left at either end

    Args:
        title: Raw extracted title

    Returns:
        Cleaned title
    """
    cleaned = title.replace(".", " ").replace("_", " ")
    cleaned = re.sub(r"\s+", " ", cleaned)
    return cleaned.strip(" -[(")
