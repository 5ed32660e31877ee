"""Structured logging for mkvtool.

Log records always go to stderr: stdout carries command output (track
tables, formatted names, dry-run commands) and must stay parseable.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click
import structlog

from mkvtool.config import LoggingConfig

SHARED_PROCESSORS = [
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.format_exc_info,
]


def _renderer(log_format: str):
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def _handlers(output: Optional[str]) -> list[logging.Handler]:
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if not output:
        return handlers

    log_path = Path(output)
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))
    except OSError as e:
        click.echo(f"Warning: not logging to {log_path}: {e}", err=True)
    return handlers


def setup_logging(config: LoggingConfig) -> None:
    """Route structlog through the standard library to stderr and the optional log file."""
    structlog.configure(
        processors=[*SHARED_PROCESSORS, _renderer(config.format)],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        level=config.level.upper(),
        handlers=_handlers(config.output),
        force=True,
    )


def get_logger(name: Optional[str] = None) -> structlog.stdlib.BoundLogger:
    """Get a logger for a module."""
    return structlog.get_logger(name)
