"""Success notification after an artifact is written."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional, Protocol, TextIO

from artifact import NotifyError

logger = logging.getLogger(__name__)


class Notifier(Protocol):
    def notify(self, path: Path) -> None:
        """Report that `path` was written, raising `NotifyError` on failure."""


def format_notification(path: Path) -> str:
    return f"Wrote generated code to `{path}`"


class StreamNotifier:
    """Write a single status line to a text stream (stdout unless given)."""

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        # sys.stdout is resolved per call, not at construction.
        return self._stream if self._stream is not None else sys.stdout

    def notify(self, path: Path) -> None:
        stream = self.stream
        try:
            stream.write(format_notification(path) + "\n")
            stream.flush()
        except (OSError, ValueError) as exc:
            raise NotifyError(f"Could not write notification: {exc}") from exc


def run_notifier(notifier: Notifier, path: Path) -> bool:
    try:
        notifier.notify(path)
    except NotifyError as exc:
        logger.debug("Notification for %s dropped: %s", path, exc)
        return False
    return True


__all__ = ["Notifier", "StreamNotifier", "format_notification", "run_notifier"]
