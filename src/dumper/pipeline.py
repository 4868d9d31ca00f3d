"""
Dump generated code to a file that pytest can run on its own.

Typical use inside a code generator::

    from dumper import emit

    module = build_module_ast()
    emit(module, "generated_models")   # no-op unless CODEDUMP=1
    return module

With dumping enabled this writes `./tests/generated_models.py`, formats it and
prints its location; `pytest tests/generated_models.py` then compiles the
generated code with real line numbers in every traceback.

Pipeline order is fixed: resolve name and directory, compose, write, format,
notify. Only path and write failures propagate; the formatter and notifier are
best-effort. Nothing is cached between calls and the same resolved path is
always overwritten.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from artifact import ArtifactTarget
from composer import ComposedArtifact, compose_artifact
from composer.harness import GeneratedSource
from emitter import write_artifact
from postprocess import CommandFormatter, Formatter, Notifier, StreamNotifier, run_formatter, run_notifier
from resolver import ensure_directory, resolve_target
from resolver.naming import Clock
from resolver.paths import PathLike

from .config import DumpConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EmitOutcome:
    """What a successful, enabled dump produced."""

    target: ArtifactTarget
    artifact: ComposedArtifact
    formatted: bool
    notified: bool

    @property
    def path(self) -> Path:
        return self.target.path


class ArtifactDumper:
    """Dump pipeline bound to a configuration and its collaborators."""

    def __init__(
        self,
        config: Optional[DumpConfig] = None,
        *,
        formatter: Optional[Formatter] = None,
        notifier: Optional[Notifier] = None,
        clock: Optional[Clock] = None,
        cwd: Optional[PathLike] = None,
    ):
        self.config = config or DumpConfig()
        self.formatter = formatter or CommandFormatter(self.config.formatter_command)
        self.notifier = notifier or StreamNotifier()
        self.clock = clock
        self.cwd = cwd

    def emit(
        self,
        source: GeneratedSource,
        identifier: Optional[str] = None,
        location: Optional[PathLike] = None,
    ) -> Optional[EmitOutcome]:
        """
        Write `source` plus its test harness to `<location>/<identifier>.py`.

        Args:
            source: Generated Python source text, or an AST to unparse.
            identifier: Artifact name; a UTC timestamp name when omitted.
            location: Output directory; `<cwd>/tests` when omitted.

        Returns:
            The outcome of the dump, or None when dumping is disabled.

        Raises:
            PathError: The output directory is invalid or cannot be created.
            WriteError: The artifact file could not be written.
        """
        if not self.config.enabled:
            return None

        target = resolve_target(identifier, location, clock=self.clock, cwd=self.cwd)
        artifact = compose_artifact(source, target.identifier)

        ensure_directory(target.directory)
        write_artifact(target.path, artifact.text)
        logger.debug("Wrote %d characters to %s", len(artifact.text), target.path)

        formatted = False
        if self.config.formatted:
            formatted = run_formatter(self.formatter, target.path)

        notified = False
        if self.config.notification:
            notified = run_notifier(self.notifier, target.path)

        return EmitOutcome(target=target, artifact=artifact, formatted=formatted, notified=notified)


def emit(
    source: GeneratedSource,
    identifier: Optional[str] = None,
    location: Optional[PathLike] = None,
    *,
    config: Optional[DumpConfig] = None,
) -> Optional[EmitOutcome]:
    """Dump with `config`, or with the `CODEDUMP*` environment when omitted."""
    dumper = ArtifactDumper(config if config is not None else DumpConfig.from_env())
    return dumper.emit(source, identifier, location)


__all__ = ["ArtifactDumper", "EmitOutcome", "emit"]
