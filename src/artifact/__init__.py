"""Shared data model and error taxonomy for dumped artifacts."""

from .errors import EmitError, FormatterError, NotifyError, PathError, WriteError
from .model import SOURCE_SUFFIX, ArtifactTarget

__all__ = [
    "SOURCE_SUFFIX",
    "ArtifactTarget",
    "EmitError",
    "FormatterError",
    "NotifyError",
    "PathError",
    "WriteError",
]
