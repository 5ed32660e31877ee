"""Argument builders for the mkvtoolnix programs.

A friendly chat about Matroska track numbers: tracks are stored in the file
starting at one, but mkvmerge --identify reports them starting at zero.
mkvmerge and mkvextract expect the zero-based numbers, while mkvpropedit
expects one-based numbers. Tracks are always handled and displayed starting
at zero here; only the mkvpropedit builders add the offset.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

from mkvtool.models.track import AUDIO, SUBTITLES, VIDEO, Track

MKVPROPEDIT_TRACK_OFFSET = 1

# mkvmerge options that drop every track of a type from an input file.
NO_TRACKS_OPTIONS = {
    VIDEO: "--no-video",
    AUDIO: "--no-audio",
    SUBTITLES: "--no-subtitles",
}


@dataclass(frozen=True)
class ExtractedTrack:
    """A track exported to its own file."""

    language: str
    path: Path


def _propedit_selector(index: int) -> str:
    return f"track:{index + MKVPROPEDIT_TRACK_OFFSET}"


def clear_default_args(
    file_path: Path, tracks: Sequence[Track], track_type: str
) -> list[str]:
    """Build mkvpropedit arguments resetting the default flag on a track type."""
    args = [str(file_path)]
    for track in tracks:
        if track.type == track_type:
            args.extend(["--edit", _propedit_selector(track.index), "--set", "flag-default=0"])
    return args


def add_default_args(file_path: Path, index: int) -> list[str]:
    """Build mkvpropedit arguments setting the default flag on one track."""
    return [str(file_path), "--edit", _propedit_selector(index), "--set", "flag-default=1"]


def extract_args(file_path: Path, index: int, dest: Path) -> list[str]:
    """Build mkvextract arguments exporting a single track to dest."""
    return [str(file_path), "tracks", f"{index}:{dest}"]


def submux_args(
    infile: Path,
    outfile: Path,
    drop_type: Optional[str] = None,
    extracted: Sequence[ExtractedTrack] = (),
) -> list[str]:
    """Build mkvmerge arguments merging extracted tracks into a file.

    Args:
        infile: Source Matroska file
        outfile: Destination file
        drop_type: Optionally remove every track of this type from infile
        extracted: Track files to append, each tagged with its language

    Returns:
        mkvmerge arguments
    """
    args = ["-o", str(outfile)]
    if drop_type is not None:
        args.append(NO_TRACKS_OPTIONS[drop_type])
    args.append(str(infile))

    for track in extracted:
        # Tracks without a language keep the container's default language.
        if track.language:
            args.extend(["--language", f"0:{track.language}"])
        args.append(str(track.path))
    return args


def remux_args(infiles: Sequence[Path], outfile: Path, subs: bool = True) -> list[str]:
    """Build mkvmerge arguments remuxing input files into outfile."""
    args = []
    if not subs:
        args.append("-S")
    args.extend(str(f) for f in infiles)
    args.extend(["-o", str(outfile)])
    return args
