"""Rename files from the scene information in their names."""

from pathlib import Path, PurePath
from typing import Union

import click

from mkvtool.core.mask import RenderError, render_mask
from mkvtool.metadata.heuristic import parse_release_name
from mkvtool.utils.logger import get_logger

logger = get_logger(__name__)


def format_name(mask: str, file_name: Union[str, PurePath]) -> str:
    """Format the scene information in a file name using a mask.

    Only the last path component is parsed.

    Raises:
        RenderError: If the mask cannot be rendered
    """
    info = parse_release_name(PurePath(file_name).name)
    return render_mask(info.as_fields(), mask)


def rename_file(mask: str, path: Path, dry_run: bool = False) -> Path:
    """Rename a file according to the scene information in its name.

    The new name is relative to the file's directory, so a mask such as
    "%{year}/%{title}.%{container}" moves the file into an existing
    subdirectory.

    Args:
        mask: Format mask for the new name
        path: File to rename
        dry_run: Only print the new name

    Returns:
        The new path

    Raises:
        RenderError: If the mask cannot be rendered, or renders no file name
        FileExistsError: If another file already has the new name
        OSError: If the file cannot be moved (e.g. missing subdirectory)
    """
    new_name = format_name(mask, path)
    if new_name.strip() in ("", ".", ".."):
        raise RenderError(f"mask {mask!r} does not produce a file name")
    new_path = path.parent / new_name

    click.echo(f"{path} => {new_path}")
    if dry_run or new_path == path:
        return new_path

    if new_path.exists() and not new_path.samefile(path):
        raise FileExistsError(f"destination already exists: {new_path}")

    path.rename(new_path)
    logger.info("File renamed", file=str(path), new_name=str(new_path))
    return new_path
