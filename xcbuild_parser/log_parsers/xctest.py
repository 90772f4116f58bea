"""
XCTest result matcher.

    Test Case '-[MyAppTests testExample]' passed (0.001 seconds).
    Test Case '-[MyAppTests testFailure]' failed (0.002 seconds).

The suite name always comes from the line itself; the failure location is
reported on separate diagnostic lines and is not attached here.
"""

from __future__ import annotations

import re
from typing import List, Optional

from xcbuild_parser.entities import TestOutcome, TestStatus

from .base import to_float

PASSED_PATTERN = re.compile(
    r"Test Case '-\[(?P<suite>.+?)\s+(?P<test>.+?)\]' passed \((?P<duration>\d+\.\d+) seconds\)\."
)
FAILED_PATTERN = re.compile(
    r"Test Case '-\[(?P<suite>.+?)\s+(?P<test>.+?)\]' failed \((?P<duration>\d+\.\d+) seconds\)\."
)

# A passed result anywhere on the line takes precedence
PATTERNS = (
    (PASSED_PATTERN, TestStatus.PASSED),
    (FAILED_PATTERN, TestStatus.FAILED),
)


def parse_xctest_result(line: str, suite: Optional[str] = None) -> Optional[List[TestOutcome]]:
    for pattern, status in PATTERNS:
        match = pattern.search(line)
        if match:
            return [
                TestOutcome(
                    suite=match.group("suite"),
                    test_case=match.group("test"),
                    status=status,
                    duration=to_float(match.group("duration")),
                )
            ]

    return None
