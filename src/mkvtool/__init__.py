"""mkvtool - easy operations on Matroska containers."""

__version__ = "0.4.0"
