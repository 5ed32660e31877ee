"""Command-line interface for mkvtool."""

import os
import subprocess
import sys
from pathlib import Path

import click
import yaml

from mkvtool import __version__
from mkvtool.config import load_config
from mkvtool.core.analyzer import MatroskaAnalyzer
from mkvtool.core.executor import get_runner, missing_tools
from mkvtool.core.mask import RenderError
from mkvtool.core.operations import keep_only, remux as remux_files, set_default
from mkvtool.core.renamer import format_name, rename_file
from mkvtool.core.selector import SelectionError, select_track
from mkvtool.models.policy import ExplicitIndex, LanguagePolicy
from mkvtool.models.track import parse_track_type
from mkvtool.utils.display import show_tracks
from mkvtool.utils.language import normalize_languages
from mkvtool.utils.logger import setup_logging

# Commands that run the mkvtoolnix programs.
TOOL_COMMANDS = {"merge", "only", "remux", "setdefault", "setdefaultbylang", "show"}

# Failures reading a file's tracks.
ANALYZE_ERRORS = (OSError, subprocess.SubprocessError, ValueError)

files_argument = click.argument(
    "files", nargs=-1, required=True, type=click.Path(dir_okay=False, path_type=Path)
)


def _track_type(ctx, param, value):
    try:
        return parse_track_type(value)
    except ValueError as e:
        raise click.BadParameter(str(e)) from None


def readable(files) -> list[Path]:
    """Return the readable files, noting the ones skipped."""
    ret = []
    for path in files:
        if path.is_file() and os.access(path, os.R_OK):
            ret.append(path)
        else:
            click.echo(f"Note: File {str(path)!r} is not readable. Skipping.", err=True)
    return ret


def finish(errors: list[str]) -> None:
    """Report collected per-file errors and exit with an error if any."""
    if not errors:
        return
    for message in errors:
        click.secho(message, fg="red", err=True)
    sys.exit(1)


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to configuration file (defaults to built-in defaults)",
)
@click.option("--dry-run", "-n", is_flag=True, default=False, help="Dry-run mode (only show commands)")
@click.pass_context
def cli(ctx, config, dry_run):
    """mkvtool - Easy operations on Matroska containers."""
    try:
        cfg = load_config(config)
        ctx.ensure_object(dict)
        ctx.obj["config"] = cfg

        setup_logging(cfg.logging)

    except (OSError, ValueError, yaml.YAMLError) as e:
        click.echo(f"Error loading configuration: {e}", err=True)
        sys.exit(1)

    dry_run = dry_run or cfg.execution.dry_run
    ctx.obj["dry_run"] = dry_run
    # The runner only prints commands when dry-run is chosen.
    ctx.obj["runner"] = get_runner(dry_run)
    if dry_run:
        click.echo("Dry-run mode: Will not modify any files.")

    if ctx.invoked_subcommand in TOOL_COMMANDS:
        missing = missing_tools()
        if missing:
            click.secho(
                f"Requirements check: required 3rd party tool(s) missing: {','.join(missing)}",
                fg="red",
                err=True,
            )
            sys.exit(1)


@cli.command()
@files_argument
@click.option("--uid", "-u", is_flag=True, default=False, help="Include track UIDs in the output")
def show(files, uid):
    """Show information about files."""
    analyzer = MatroskaAnalyzer()
    errors = []

    for path in readable(files):
        try:
            tracks = analyzer.analyze(path)
        except ANALYZE_ERRORS as e:
            errors.append(f"{path}: {e}")
            continue
        show_tracks(tracks, show_uid=uid, title=str(path))

    finish(errors)


@cli.command()
@files_argument
@click.option("--track", "-t", type=int, required=True, help="Track number (as shown by 'show')")
@click.pass_context
def setdefault(ctx, files, track):
    """Set the default flag on a track, clearing it on the other tracks of its type."""
    config = ctx.obj["config"]
    runner = ctx.obj["runner"]
    analyzer = MatroskaAnalyzer()
    errors = []

    for path in readable(files):
        try:
            tracks = analyzer.analyze(path)
            ok = set_default(
                path, tracks, track, runner, skip_if_correct=config.execution.skip_if_correct
            )
        except (SelectionError, *ANALYZE_ERRORS) as e:
            errors.append(f"{path}: {e}")
            continue
        if not ok:
            errors.append(f"{path}: mkvpropedit failed")

    finish(errors)


@cli.command()
@files_argument
@click.option(
    "--lang",
    "-l",
    multiple=True,
    help="Preferred languages (Use multiple times. Use 'default' for tracks with no language set.)",
)
@click.option(
    "--ignore",
    "-i",
    multiple=True,
    help="Ignore tracks with this string in the name (can be used multiple times.)",
)
@click.option(
    "--type", "track_type", default="s", callback=_track_type, help="Track type (a, v, or s)"
)
@click.pass_context
def setdefaultbylang(ctx, files, lang, ignore, track_type):
    """Set the default track by language."""
    config = ctx.obj["config"]
    runner = ctx.obj["runner"]

    languages = normalize_languages(lang or config.selection.language_priority)
    if not languages:
        raise click.UsageError("must specify at least one language (--lang)")
    policy = LanguagePolicy(
        languages=tuple(languages),
        track_type=track_type,
        ignore=tuple(ignore or config.selection.ignore),
    )

    analyzer = MatroskaAnalyzer()
    errors = []

    for path in readable(files):
        try:
            tracks = analyzer.analyze(path)
            selected = select_track(tracks, policy, str(path))
            ok = set_default(
                path,
                tracks,
                selected.index,
                runner,
                skip_if_correct=config.execution.skip_if_correct,
            )
        except (SelectionError, *ANALYZE_ERRORS) as e:
            errors.append(f"{path}: {e}")
            continue
        if not ok:
            errors.append(f"{path}: mkvpropedit failed")

    finish(errors)


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("output_file", type=click.Path(dir_okay=False, path_type=Path))
@click.option("--track", "-t", type=int, default=None, help="Track number to keep")
@click.option(
    "--lang",
    "-l",
    multiple=True,
    help="Preferred languages (Use multiple times. Use 'default' for tracks with no language set.)",
)
@click.option(
    "--ignore",
    "-i",
    multiple=True,
    help="Ignore tracks with this string in the name (can be used multiple times.)",
)
@click.option(
    "--type", "track_type", default="s", callback=_track_type, help="Track type (a, v, or s)"
)
@click.pass_context
def only(ctx, input_file, output_file, track, lang, ignore, track_type):
    """Remove all tracks of a type, except one."""
    # Must have track OR lang set. Not neither, not both.
    if (track is None) == (not lang):
        raise click.UsageError("must specify track (--track) OR language (--lang)")

    if track is not None:
        policy = ExplicitIndex(track)
    else:
        policy = LanguagePolicy(
            languages=tuple(normalize_languages(lang)),
            track_type=track_type,
            ignore=tuple(ignore),
        )

    try:
        tracks = MatroskaAnalyzer().analyze(input_file)
        selected = select_track(tracks, policy, str(input_file))
        ok = keep_only(input_file, output_file, tracks, selected.index, ctx.obj["runner"])
    except (SelectionError, *ANALYZE_ERRORS) as e:
        finish([f"{input_file}: {e}"])
        return

    if not ok:
        finish([f"{input_file}: unable to remux into {output_file}"])


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("output_file", type=click.Path(dir_okay=False, path_type=Path))
@click.pass_context
def remux(ctx, input_file, output_file):
    """Remux input file into an output file."""
    if not remux_files([input_file], output_file, ctx.obj["runner"], subs=True):
        finish([f"{input_file}: mkvmerge failed"])


@cli.command()
@files_argument
@click.option(
    "--output", "-o", required=True, type=click.Path(dir_okay=False, path_type=Path), help="Output file"
)
@click.option(
    "--subs/--no-subs", default=True, help="Copy subtitles from the input files (default: True)"
)
@click.pass_context
def merge(ctx, files, output, subs):
    """Merge input tracks and files (A/V/S) into an output file."""
    if not remux_files(list(files), output, ctx.obj["runner"], subs=subs):
        finish([f"{output}: mkvmerge failed"])


@cli.command(name="print")
@files_argument
@click.option("--format", "-f", "mask", default=None, help="Formatting mask")
@click.pass_context
def print_(ctx, files, mask):
    """Parse file names and print scene information using a printf style mask."""
    mask = mask or ctx.obj["config"].format.print_mask
    errors = []

    for path in files:
        try:
            click.echo(format_name(mask, path))
        except RenderError as e:
            errors.append(f"{path}: {e}")

    finish(errors)


@cli.command()
@files_argument
@click.option("--format", "-f", "mask", default=None, help="Formatting mask")
@click.pass_context
def rename(ctx, files, mask):
    """Rename files based on the scene information in their names."""
    mask = mask or ctx.obj["config"].format.rename_mask
    errors = []

    for path in readable(files):
        try:
            rename_file(mask, path, dry_run=ctx.obj["dry_run"])
        except (RenderError, OSError) as e:
            errors.append(f"{path}: {e}")

    finish(errors)


@cli.command()
def version():
    """Show version information."""
    click.echo(f"mkvtool v{__version__}")


def main():
    """Entry point for the CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
