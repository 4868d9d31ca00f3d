"""Best-effort steps that run after an artifact has been written."""

from .formatter import DEFAULT_FORMATTER_COMMAND, CommandFormatter, Formatter, run_formatter
from .notifier import Notifier, StreamNotifier, format_notification, run_notifier

__all__ = [
    "DEFAULT_FORMATTER_COMMAND",
    "CommandFormatter",
    "Formatter",
    "Notifier",
    "StreamNotifier",
    "format_notification",
    "run_formatter",
    "run_notifier",
]
