"""
External source formatting for written artifacts.

Formatting is decoration: `run_formatter` swallows `FormatterError` after
logging it, leaving the file exactly as the writer produced it. The formatter
process is waited on without a timeout, so a hung tool blocks the caller.
"""

from __future__ import annotations

import logging
import os
import subprocess
from pathlib import Path
from typing import Iterable, Protocol, Tuple, Union

from artifact import FormatterError

logger = logging.getLogger(__name__)

DEFAULT_FORMATTER_COMMAND: Tuple[str, ...] = ("black", "--quiet")


class Formatter(Protocol):
    def format_file(self, path: Path) -> None:
        """Format `path` in place, raising `FormatterError` on failure."""


class CommandFormatter:
    """Run an external formatter with the artifact path as its last argument."""

    def __init__(self, command: Iterable[str] = DEFAULT_FORMATTER_COMMAND):
        self.command: Tuple[str, ...] = tuple(command)
        if not self.command:
            raise ValueError("Formatter command must not be empty")

    def argv(self, path: Union[str, os.PathLike]) -> list:
        return [*self.command, os.fspath(path)]

    def format_file(self, path: Path) -> None:
        argv = self.argv(path)
        try:
            result = subprocess.run(argv, check=False, capture_output=True, text=True)
        except OSError as exc:
            raise FormatterError(self.command, f"could not start formatter ({exc})") from exc
        if result.returncode != 0:
            raise FormatterError(
                self.command,
                "formatter reported failure",
                returncode=result.returncode,
                stderr=result.stderr,
            )
        logger.debug("%s exited with status %s", argv[0], result.returncode)


def run_formatter(formatter: Formatter, path: Path) -> bool:
    """Format `path`, returning False instead of raising when formatting fails."""
    try:
        formatter.format_file(path)
    except FormatterError as exc:
        logger.warning("Could not format %s: %s", path, exc)
        return False
    return True


__all__ = ["DEFAULT_FORMATTER_COMMAND", "CommandFormatter", "Formatter", "run_formatter"]
