"""
Value objects describing where a dumped artifact lives on disk.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

SOURCE_SUFFIX = ".py"


@dataclass(frozen=True)
class ArtifactTarget:
    """Resolved identifier and location for a single dump."""

    identifier: str
    directory: Path
    path: Path

    @property
    def file_name(self) -> str:
        return self.path.name
