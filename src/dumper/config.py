"""
Feature toggles for the dump pipeline.

`enabled` is the master switch and is off by default, so instrumentation
calls can stay in generator code permanently. The environment is the usual
way to flip it on:

    CODEDUMP=1              enable, with formatting and notification
    CODEDUMP=messy          enable, skip the formatter
    CODEDUMP_FORMATTED=0    override the formatter toggle
    CODEDUMP_NOTIFICATION=0 override the notification toggle
    CODEDUMP_FORMATTER="ruff format"
"""

from __future__ import annotations

import logging
import os
import shlex
from dataclasses import dataclass, replace
from typing import Mapping, Optional, Tuple

from postprocess import DEFAULT_FORMATTER_COMMAND

logger = logging.getLogger(__name__)

ENV_ENABLED = "CODEDUMP"
ENV_FORMATTED = "CODEDUMP_FORMATTED"
ENV_NOTIFICATION = "CODEDUMP_NOTIFICATION"
ENV_FORMATTER = "CODEDUMP_FORMATTER"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}
MESSY = "messy"


def _parse_flag(name: str, value: str, default: bool) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    logger.warning("Ignoring %s=%r: not a boolean flag; using %s", name, value, default)
    return default


def _parse_command(name: str, value: str) -> Tuple[str, ...]:
    try:
        command = tuple(shlex.split(value))
    except ValueError as exc:
        logger.warning("Ignoring %s=%r: %s", name, value, exc)
        return DEFAULT_FORMATTER_COMMAND
    return command or DEFAULT_FORMATTER_COMMAND


@dataclass(frozen=True)
class DumpConfig:
    enabled: bool = False
    formatted: bool = True
    notification: bool = True
    formatter_command: Tuple[str, ...] = DEFAULT_FORMATTER_COMMAND

    def enable(self) -> "DumpConfig":
        return replace(self, enabled=True)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "DumpConfig":
        """
        Build a configuration from `CODEDUMP*` environment variables.

        Unrecognised values for the master switch leave dumping disabled and
        the other variables unread. Malformed overrides are logged and the
        default is kept.
        """
        env = os.environ if environ is None else environ

        switch = env.get(ENV_ENABLED, "").strip().lower()
        if switch not in _TRUE and switch != MESSY:
            return cls()
        formatted = switch != MESSY

        if ENV_FORMATTED in env:
            formatted = _parse_flag(ENV_FORMATTED, env[ENV_FORMATTED], formatted)
        notification = True
        if ENV_NOTIFICATION in env:
            notification = _parse_flag(ENV_NOTIFICATION, env[ENV_NOTIFICATION], notification)

        formatter_command = DEFAULT_FORMATTER_COMMAND
        raw_command = env.get(ENV_FORMATTER, "").strip()
        if raw_command:
            formatter_command = _parse_command(ENV_FORMATTER, raw_command)

        return cls(
            enabled=True,
            formatted=formatted,
            notification=notification,
            formatter_command=formatter_command,
        )


__all__ = [
    "ENV_ENABLED",
    "ENV_FORMATTED",
    "ENV_FORMATTER",
    "ENV_NOTIFICATION",
    "DumpConfig",
]
