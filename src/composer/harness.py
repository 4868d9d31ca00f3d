"""
Build the text written for a dumped artifact.

Generated source is emitted verbatim (or via `ast.unparse` when handed a
Python AST) and followed by a single no-op pytest test whose only statement is
a reference to the artifact's identifier. Running `pytest path/to/file.py`
therefore proves that the file compiles on its own and that the identifier
resolves inside it, while tracebacks point at stable line numbers.
"""

from __future__ import annotations

import ast
import io
from dataclasses import dataclass
from typing import Union

HARNESS_TEST_NAME = "test_generated_code"

GeneratedSource = Union[str, ast.AST]


@dataclass(frozen=True)
class ComposedArtifact:
    identifier: str
    source: str
    harness: str
    text: str


def render_source(source: GeneratedSource) -> str:
    """
    Turn generated source into text without altering it.

    Raises:
        TypeError: If `source` is neither text nor a Python AST node.
    """
    if isinstance(source, str):
        return source
    if isinstance(source, ast.AST):
        return ast.unparse(source)
    raise TypeError(f"Expected str or ast.AST source, got {type(source).__name__}")


def build_harness(identifier: str) -> str:
    return (
        f"def {HARNESS_TEST_NAME}():\n"
        f"    {identifier}  # noqa: B018\n"
    )


def compose_artifact(
    source: GeneratedSource,
    identifier: str,
    *,
    wrap: bool = True,
) -> ComposedArtifact:
    """
    Assemble the final file contents.

    The rendered source is kept byte-for-byte; a newline is only added when it
    does not already end with one, followed by two blank lines before the
    harness.
    """
    rendered = render_source(source)
    if not wrap:
        return ComposedArtifact(identifier=identifier, source=rendered, harness="", text=rendered)

    harness = build_harness(identifier)
    buffer = io.StringIO()
    buffer.write(rendered)
    if rendered and not rendered.endswith("\n"):
        buffer.write("\n")
    if rendered:
        buffer.write("\n\n")
    buffer.write(harness)
    return ComposedArtifact(
        identifier=identifier,
        source=rendered,
        harness=harness,
        text=buffer.getvalue(),
    )


__all__ = [
    "HARNESS_TEST_NAME",
    "ComposedArtifact",
    "GeneratedSource",
    "build_harness",
    "compose_artifact",
    "render_source",
]
