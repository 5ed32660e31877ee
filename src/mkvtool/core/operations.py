"""Track operations on Matroska files, executed through a command runner."""

import os
import tempfile
from pathlib import Path
from typing import Optional, Sequence

from mkvtool.core import commands
from mkvtool.core.commands import ExtractedTrack
from mkvtool.core.executor import CommandRunner
from mkvtool.core.selector import select_by_index
from mkvtool.models.track import Track
from mkvtool.utils.logger import get_logger

logger = get_logger(__name__)


def is_only_default(track: Track, tracks: Sequence[Track]) -> bool:
    """Return True if track is the only default track of its type."""
    defaults = [t for t in tracks if t.type == track.type and t.is_default]
    return defaults == [track]


def set_default(
    file_path: Path,
    tracks: Sequence[Track],
    index: int,
    runner: CommandRunner,
    skip_if_correct: bool = False,
) -> bool:
    """Make a track the only default track of its type.

    The default flag is first reset on every track of the same type, then set
    on the chosen track.

    Args:
        file_path: Matroska file to edit in place
        tracks: Tracks in the file
        index: Track to set as default (0-based)
        runner: Command runner
        skip_if_correct: Do nothing if the track already is the only default

    Returns:
        True if successful, False otherwise

    Raises:
        TrackNotFoundError: If the file has no such track
    """
    track = select_by_index(tracks, index, str(file_path))

    if skip_if_correct and is_only_default(track, tracks):
        logger.info("Track already correct", file=str(file_path), track_index=index)
        return True

    logger.info(
        "Setting default track",
        file=str(file_path),
        track_index=index,
        track_type=track.type,
        language=track.language,
    )

    if not runner.run("mkvpropedit", commands.clear_default_args(file_path, tracks, track.type)):
        return False
    return runner.run("mkvpropedit", commands.add_default_args(file_path, index))


def extract_track(
    file_path: Path,
    tracks: Sequence[Track],
    index: int,
    runner: CommandRunner,
    dest: Path,
) -> Optional[ExtractedTrack]:
    """Extract a track into its own file.

    Returns:
        The extracted track, or None if mkvextract failed

    Raises:
        TrackNotFoundError: If the file has no such track
    """
    track = select_by_index(tracks, index, str(file_path))

    logger.info("Extracting track", file=str(file_path), track_index=index, dest=str(dest))
    if not runner.run("mkvextract", commands.extract_args(file_path, index, dest)):
        return None
    return ExtractedTrack(language=track.language, path=dest)


def keep_only(
    infile: Path,
    outfile: Path,
    tracks: Sequence[Track],
    index: int,
    runner: CommandRunner,
) -> bool:
    """Remux infile into outfile keeping only one track of the chosen type.

    The chosen track is extracted to a temporary file, then merged back into
    a copy of infile stripped of every track of that type.

    Returns:
        True if successful, False otherwise

    Raises:
        TrackNotFoundError: If the file has no such track
        ValueError: If mkvmerge cannot drop tracks of the chosen track's type
    """
    track = select_by_index(tracks, index, str(infile))
    if track.type not in commands.NO_TRACKS_OPTIONS:
        raise ValueError(f"cannot drop tracks of type {track.type!r}")

    fd, temp_name = tempfile.mkstemp(prefix="mkvtool")
    os.close(fd)
    temp = Path(temp_name)

    try:
        extracted = extract_track(infile, tracks, index, runner, temp)
        if extracted is None:
            return False
        return runner.run(
            "mkvmerge", commands.submux_args(infile, outfile, track.type, [extracted])
        )
    finally:
        temp.unlink(missing_ok=True)


def remux(
    infiles: Sequence[Path], outfile: Path, runner: CommandRunner, subs: bool = True
) -> bool:
    """Remux the input file(s) into the output file.

    Setting subs to False causes subtitles not to be copied.
    """
    logger.info(
        "Remuxing", inputs=[str(f) for f in infiles], output=str(outfile), subs=subs
    )
    return runner.run("mkvmerge", commands.remux_args(infiles, outfile, subs))
