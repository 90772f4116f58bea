"""
Compiler and tool diagnostic matcher.

Recognizes:
- ``/path/to/File.swift:15:5: error: cannot find 'x' in scope``
- ``/path/to/File.swift:10:9: warning: variable 'y' was never used``
- the ``** BUILD FAILED **`` banner
- location-less tool errors (clang, ld, swiftc, xcodebuild, fatal error, ...)
"""

from __future__ import annotations

import re
from typing import Optional

from xcbuild_parser.entities import Diagnostic, DiagnosticKind

from .base import to_int

LOCATED_PATTERN = re.compile(
    r"^(?P<file>.+?):(?P<line>\d+):(?P<column>\d+):\s+(?P<kind>error|warning):\s+(?P<message>.+)$"
)

BUILD_FAILED_BANNER = "** BUILD FAILED **"

# Real build errors that are reported without a file:line:column prefix
TOOL_ERROR_PATTERNS = [
    re.compile(pattern, re.IGNORECASE)
    for pattern in (
        r"^clang: error:",
        r"^ld: error:",
        r"^swiftc: error:",
        r"^error: linker command failed",
        r"^error: fatalError",
        r"^fatal error:",
        r"^xcodebuild: error:",
        r"^error: unable to",
        r"^error: cannot",
    )
]


def parse_diagnostic(line: str) -> Optional[Diagnostic]:
    match = LOCATED_PATTERN.search(line)
    if match:
        return Diagnostic(
            file=match.group("file"),
            line=to_int(match.group("line")),
            column=to_int(match.group("column")),
            message=match.group("message"),
            kind=DiagnosticKind(match.group("kind")),
        )

    trimmed = line.strip()

    if BUILD_FAILED_BANNER in line:
        return Diagnostic(message=trimmed, kind=DiagnosticKind.ERROR)

    for pattern in TOOL_ERROR_PATTERNS:
        if pattern.search(trimmed):
            return Diagnostic(message=trimmed, kind=DiagnosticKind.ERROR)

    return None
