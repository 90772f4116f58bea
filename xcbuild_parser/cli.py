#!/usr/bin/env python3
"""
xcbuild-parser - structured JSON summary of xcodebuild output.

Usage:
    xcodebuild test -scheme MyApp 2>&1 | xcbuild-parser
    xcodebuild test -scheme MyApp 2>&1 | xcbuild-parser --print-warnings
    xcbuild-parser build.log

The report goes to stdout; logs and errors go to stderr. The exit code is 0
whenever a report was written, even if the build itself failed.
"""

import argparse
import io
import logging
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from xcbuild_parser.config import settings
from xcbuild_parser.exceptions import InputReadError, XcodeBuildParserError
from xcbuild_parser.services import XcodeBuildParser, serialize_report

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False):
    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.LOG_LEVEL.upper(),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="xcbuild-parser",
        description="Convert xcodebuild output into a JSON build and test report.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        help="Captured xcodebuild log (reads stdin if omitted)",
    )
    parser.add_argument(
        "--print-warnings",
        action="store_true",
        default=settings.PRINT_WARNINGS,
        help="Include the detailed warnings list in the report",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging to stderr")
    return parser


def open_stdin() -> TextIO:
    """Standard input decoded as UTF-8, with undecodable bytes replaced."""
    buffer = getattr(sys.stdin, "buffer", None)
    if buffer is None:
        return sys.stdin
    return io.TextIOWrapper(buffer, encoding="utf-8", errors="replace")


def run(args: argparse.Namespace) -> int:
    parser = XcodeBuildParser(print_warnings=args.print_warnings)

    if args.input:
        path = Path(args.input)
        try:
            with path.open("r", encoding="utf-8", errors="replace") as f:
                report = parser.parse_stream(f)
        except OSError as e:
            raise InputReadError(f"Cannot read {path}: {e}") from e
    else:
        report = parser.parse_stream(open_stdin())

    print(serialize_report(report))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    setup_logging(args.verbose)

    try:
        return run(args)
    except XcodeBuildParserError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
