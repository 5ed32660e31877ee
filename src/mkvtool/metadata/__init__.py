"""Release name metadata extraction for mkvtool.

This package turns scene release filenames into the field mapping used by
format masks.
"""

from mkvtool.metadata.heuristic import parse_release_name

__all__ = ["parse_release_name"]
