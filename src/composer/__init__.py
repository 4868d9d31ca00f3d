"""Compose dumped source text plus the pytest harness that exercises it."""

from .harness import HARNESS_TEST_NAME, ComposedArtifact, build_harness, compose_artifact, render_source

__all__ = [
    "HARNESS_TEST_NAME",
    "ComposedArtifact",
    "build_harness",
    "compose_artifact",
    "render_source",
]
