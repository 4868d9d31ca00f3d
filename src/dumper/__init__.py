"""Public entry point: dump generated code to a runnable artifact file."""

from .config import DumpConfig
from .pipeline import ArtifactDumper, EmitOutcome, emit

__all__ = ["ArtifactDumper", "DumpConfig", "EmitOutcome", "emit"]
