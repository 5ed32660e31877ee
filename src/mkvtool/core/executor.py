"""Command runners for the mkvtoolnix programs."""

import shlex
import shutil
import subprocess
from abc import ABC, abstractmethod
from typing import Sequence

import click

from mkvtool.utils.logger import get_logger

logger = get_logger(__name__)

REQUIRED_TOOLS = ("mkvextract", "mkvmerge", "mkvpropedit")


class CommandRunner(ABC):
    """Abstract base class for command runners."""

    @abstractmethod
    def run(self, program: str, args: Sequence[str]) -> bool:
        """Run a program with arguments.

        Args:
            program: Program name (looked up in PATH)
            args: Program arguments

        Returns:
            True if successful, False otherwise
        """
        pass


class SubprocessRunner(CommandRunner):
    """Run commands, passing their output through to the terminal."""

    def run(self, program: str, args: Sequence[str]) -> bool:
        cmd = [program, *args]
        logger.debug("Executing command", command=cmd)

        try:
            subprocess.run(cmd, check=True)

        except subprocess.CalledProcessError as e:
            logger.error(f"{program} failed", returncode=e.returncode, command=cmd)
            return False

        except OSError as e:
            logger.error(f"Unable to execute {program}", error=str(e), command=cmd)
            return False

        logger.info("Command succeeded", program=program)
        return True


class DryRunRunner(CommandRunner):
    """Only print the commands (dry-run)."""

    def run(self, program: str, args: Sequence[str]) -> bool:
        click.echo(shlex.join([program, *args]))
        return True


def get_runner(dry_run: bool = False) -> CommandRunner:
    """Get the runner for the current mode."""
    if dry_run:
        return DryRunRunner()
    return SubprocessRunner()


def missing_tools(tools: Sequence[str] = REQUIRED_TOOLS) -> list[str]:
    """Return the required tools that are not installed."""
    return [tool for tool in tools if shutil.which(tool) is None]
