"""
Exception hierarchy for the dump pipeline.

Only `PathError` and `WriteError` escape `emit`; formatter and notifier
failures are caught and logged by the pipeline stages that raise them.
"""

from __future__ import annotations

import os
from typing import Optional, Sequence, Union


class EmitError(RuntimeError):
    """Base class for every failure raised while dumping an artifact."""


class PathError(EmitError):
    """Raised when the output directory is unusable or cannot be created."""

    def __init__(self, message: str, path: Optional[Union[str, os.PathLike]] = None):
        suffix = f": {path}" if path is not None else ""
        super().__init__(f"{message}{suffix}")
        self.path = path


class WriteError(EmitError):
    """Raised when the artifact file cannot be written."""

    def __init__(self, path: Union[str, os.PathLike], reason: str):
        super().__init__(f"Failed to write {path}: {reason}")
        self.path = path
        self.reason = reason


class FormatterError(EmitError):
    """Raised when the external formatter cannot run or reports failure."""

    def __init__(
        self,
        command: Sequence[str],
        message: str,
        *,
        returncode: Optional[int] = None,
        stderr: str = "",
    ):
        status = f" (exit {returncode})" if returncode is not None else ""
        detail = f"\n{stderr.strip()}" if stderr and stderr.strip() else ""
        super().__init__(f"{' '.join(command)}: {message}{status}{detail}")
        self.command = tuple(command)
        self.returncode = returncode
        self.stderr = stderr


class NotifyError(EmitError):
    """Raised when the status line cannot be written."""
