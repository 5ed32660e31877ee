"""Terminal rendering of track listings."""

from typing import Optional, Sequence

from rich.console import Console
from rich.table import Table
from rich.text import Text

from mkvtool.models.track import Track

DEFAULT_MARKER = "<====="


def track_table(tracks: Sequence[Track], show_uid: bool = False, title: Optional[str] = None) -> Table:
    """Build a table listing tracks, numbered as mkvmerge does (from zero)."""
    table = Table(title=Text(title) if title else None, title_justify="left")
    table.add_column("Number", justify="right")
    if show_uid:
        table.add_column("UID", justify="right")
    for header in ("Type", "Name", "Language", "Codec", "Default"):
        table.add_column(header)

    for track in tracks:
        row = [str(track.index)]
        if show_uid:
            row.append("" if track.uid is None else str(track.uid))
        # Make default flag easier to see.
        row.extend(
            [
                track.type,
                track.name,
                track.language,
                track.codec,
                DEFAULT_MARKER if track.is_default else "",
            ]
        )
        # Names often contain brackets, which rich would read as markup.
        table.add_row(*(Text(cell) for cell in row))
    return table


def show_tracks(
    tracks: Sequence[Track],
    show_uid: bool = False,
    title: Optional[str] = None,
    console: Optional[Console] = None,
) -> None:
    """Print the track table for a file."""
    console = console or Console()
    console.print(track_table(tracks, show_uid=show_uid, title=title))
