"""
Output location handling.

`resolve_directory` only decides *where* the artifact goes; nothing touches the
filesystem until `ensure_directory` runs right before the write.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Union

from artifact import SOURCE_SUFFIX, ArtifactTarget, PathError

from .naming import Clock, resolve_identifier

DEFAULT_SUBDIRECTORY = "tests"

PathLike = Union[str, os.PathLike]


def resolve_directory(
    location: Optional[PathLike],
    *,
    cwd: Optional[PathLike] = None,
) -> Path:
    """
    Resolve the directory the artifact is written into.

    Args:
        location: Caller-supplied directory. `None` selects `<cwd>/tests`.
        cwd: Base directory for the default; defaults to the process cwd.

    Raises:
        PathError: If `location` is empty or contains a NUL byte, or the
            default is needed and the process cwd no longer exists.
    """
    if location is None:
        if cwd is not None:
            return Path(cwd) / DEFAULT_SUBDIRECTORY
        try:
            base = Path.cwd()
        except OSError as exc:
            raise PathError(f"Cannot determine current working directory ({exc.strerror or exc})") from exc
        return base / DEFAULT_SUBDIRECTORY

    try:
        raw = os.fspath(location)
    except TypeError as exc:
        raise PathError(f"Output location must be a path, not {type(location).__name__}") from exc
    if isinstance(raw, bytes):
        raw = os.fsdecode(raw)
    if not raw:
        raise PathError("Output location is empty")
    if "\x00" in raw:
        raise PathError("Output location contains a NUL byte", raw.replace("\x00", "\\x00"))
    return Path(raw)


def artifact_path(directory: Path, identifier: str) -> Path:
    return directory / f"{identifier}{SOURCE_SUFFIX}"


def resolve_target(
    identifier: Optional[str],
    location: Optional[PathLike],
    *,
    clock: Optional[Clock] = None,
    cwd: Optional[PathLike] = None,
) -> ArtifactTarget:
    """Combine name and directory resolution into a single target."""
    name = resolve_identifier(identifier, clock=clock)
    directory = resolve_directory(location, cwd=cwd)
    return ArtifactTarget(identifier=name, directory=directory, path=artifact_path(directory, name))


def ensure_directory(directory: Path) -> None:
    """Create `directory` and any missing parents, tolerating existing ones."""
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise PathError(f"Cannot create output directory ({exc.strerror or exc})", directory) from exc


__all__ = [
    "DEFAULT_SUBDIRECTORY",
    "artifact_path",
    "ensure_directory",
    "resolve_directory",
    "resolve_target",
]
