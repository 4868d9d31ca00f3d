"""
Command-line interface for dumping generated Python source to a runnable file.
"""

from __future__ import annotations

import argparse
import shlex
import sys
from pathlib import Path
from typing import List

from artifact import EmitError
from dumper import ArtifactDumper, DumpConfig
from postprocess import DEFAULT_FORMATTER_COMMAND


def _read_source(source_arg: str) -> str:
    if source_arg == "-":
        return sys.stdin.read()
    return Path(source_arg).read_text(encoding="utf-8")


def dump_command(args: argparse.Namespace) -> int:
    try:
        source = _read_source(args.source)
    except (OSError, UnicodeDecodeError) as exc:
        sys.stderr.write(f"ERROR: Failed to read {args.source}: {exc}\n")
        return 1

    formatter_command = tuple(shlex.split(args.formatter)) if args.formatter else DEFAULT_FORMATTER_COMMAND
    if not formatter_command:
        sys.stderr.write("ERROR: --formatter must name a command\n")
        return 1

    config = DumpConfig(
        enabled=True,
        formatted=not args.no_format,
        notification=not args.quiet,
        formatter_command=formatter_command,
    )

    try:
        ArtifactDumper(config).emit(source, args.name, args.out)
    except EmitError as exc:
        sys.stderr.write(f"ERROR: {exc}\n")
        return 1
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="codedump", description="Dump generated Python source to a runnable test file"
    )
    subparsers = parser.add_subparsers(dest="command")

    dump_parser = subparsers.add_parser("dump", help="Write generated source plus a pytest harness")
    dump_parser.add_argument("source", help="Path to the generated source, or '-' to read stdin")
    dump_parser.add_argument(
        "--name",
        help="Artifact identifier and file stem (defaults to a UTC timestamp name)",
    )
    dump_parser.add_argument(
        "--out",
        help="Output directory (defaults to ./tests)",
    )
    dump_parser.add_argument(
        "--no-format",
        action="store_true",
        help="Skip running the external formatter on the written file.",
    )
    dump_parser.add_argument(
        "--formatter",
        help=f"Formatter command; the file path is appended (default: {' '.join(DEFAULT_FORMATTER_COMMAND)})",
    )
    dump_parser.add_argument(
        "--quiet",
        action="store_true",
        help="Do not print the location of the written file.",
    )
    dump_parser.set_defaults(func=dump_command)

    return parser


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not hasattr(args, "func"):
        parser.print_help()
        return 1
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
