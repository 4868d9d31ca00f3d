"""Utilities for writing composed artifacts to disk."""

from .writer import write_artifact

__all__ = ["write_artifact"]
