"""
Artifact naming.

A caller-supplied identifier is used untouched. Without one, a name is built
from the current UTC time at one-second resolution, so two unnamed dumps made
within the same second resolve to the same file and the later one wins.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable, Optional

DEFAULT_PREFIX = "out"
TIMESTAMP_FORMAT = f"{DEFAULT_PREFIX}_%Y_%m%d_%H%M%S"

Clock = Callable[[], datetime]


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def default_identifier(moment: datetime) -> str:
    return moment.strftime(TIMESTAMP_FORMAT)


def resolve_identifier(identifier: Optional[str], *, clock: Optional[Clock] = None) -> str:
    """
    Return the identifier to dump under.

    Args:
        identifier: Name supplied by the caller, passed through unchanged.
        clock: Zero-argument callable returning the current time; defaults to
            UTC wall-clock time.
    """
    if identifier is not None:
        return identifier
    clock = clock or _utc_now
    return default_identifier(clock())


__all__ = ["DEFAULT_PREFIX", "TIMESTAMP_FORMAT", "default_identifier", "resolve_identifier"]
