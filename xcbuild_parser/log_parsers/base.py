"""
Shared types and helpers for the line matchers.

Every matcher is a pure function over a single line of xcodebuild output.
Test-result matchers share one calling convention so the registry can try
them in priority order:

- ``None``  -> the line is not this matcher's format, try the next one
- ``[]``    -> the line is this matcher's format but deliberately yields
              nothing (e.g. a parameterized failure rollup); stop here
- ``[...]`` -> one or more outcomes; stop here
"""

from __future__ import annotations

from typing import Callable, List, Optional

from xcbuild_parser.config import settings
from xcbuild_parser.entities import TestOutcome

TestResultMatcher = Callable[[str, Optional[str]], Optional[List[TestOutcome]]]


def to_int(value: Optional[str]) -> Optional[int]:
    """Convert a numeric capture, returning None when it is missing or malformed."""
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None


def to_float(value: Optional[str]) -> Optional[float]:
    """Convert a decimal capture such as ``0.123``; malformed values become None."""
    if value is None:
        return None
    try:
        return float(value)
    except ValueError:
        return None


def resolve_suite(suite: Optional[str]) -> str:
    """Suite name for lines that do not carry their own."""
    return suite if suite is not None else settings.SWIFT_TESTING_SUITE
