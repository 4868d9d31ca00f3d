"""Identifier and output-path resolution for dumped artifacts."""

from .naming import DEFAULT_PREFIX, TIMESTAMP_FORMAT, default_identifier, resolve_identifier
from .paths import (
    DEFAULT_SUBDIRECTORY,
    artifact_path,
    ensure_directory,
    resolve_directory,
    resolve_target,
)

__all__ = [
    "DEFAULT_PREFIX",
    "DEFAULT_SUBDIRECTORY",
    "TIMESTAMP_FORMAT",
    "artifact_path",
    "default_identifier",
    "ensure_directory",
    "resolve_directory",
    "resolve_identifier",
    "resolve_target",
]
