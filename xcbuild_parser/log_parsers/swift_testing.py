"""
Swift Testing result matchers.

Supports:
- individual issues:   ✘ Test "name" recorded an issue ... at File.swift:41:9: message
- passes:              ✔ Test "name" passed after 0.123 seconds.
                       ✔ Test name() passed after 0.123 seconds.
                       ✔ Test "name" with 19 test cases passed after 0.123 seconds.
- failures:            ✘ Test "name" failed after 0.123 seconds with 1 issue.
                       ✗ Test name() failed after 0.123 seconds.

Parameterized runs are expanded into one outcome per case. A parameterized
failure rollup ("with N test cases failed after ... with M issues") yields
nothing: each failing case is already reported by its own issue line.
"""

from __future__ import annotations

import re
from typing import List, Optional

from xcbuild_parser.entities import TestOutcome, TestStatus

from .base import resolve_suite, to_float, to_int

ISSUE_PATTERN = re.compile(
    r'✘ Test "(?P<test>[^"]+)" recorded an issue.*at (?P<file>[^:]+):(?P<line>\d+):\d+: (?P<message>.+)$'
)
PASSED_PATTERN = re.compile(
    r'✔ Test (?:"(?P<quoted>[^"]+)"|(?P<bare>\w+\(\))) (?:with (?P<count>\d+) test cases )?'
    r"passed after (?P<duration>[\d.]+) seconds\."
)
FAILED_PATTERN = re.compile(
    r'[✗✘] Test (?:"(?P<quoted>[^"]+)"|(?P<bare>\w+\(\))) (?:with (?P<count>\d+) test cases )?'
    r"failed after (?P<duration>[\d.]+) seconds"
)


def parse_swift_testing_issue(line: str, suite: Optional[str] = None) -> Optional[List[TestOutcome]]:
    """One failed outcome per recorded issue, parameterized or not."""
    if "✘ Test" not in line or "recorded an issue" not in line:
        return None

    match = ISSUE_PATTERN.search(line)
    if not match:
        return None

    return [
        TestOutcome(
            suite=resolve_suite(suite),
            test_case=match.group("test"),
            status=TestStatus.FAILED,
            failure_message=match.group("message"),
            file=match.group("file"),
            line=to_int(match.group("line")),
        )
    ]


def parse_swift_testing_success(line: str, suite: Optional[str] = None) -> Optional[List[TestOutcome]]:
    if "✔ Test" not in line or "passed after" not in line:
        return None

    match = PASSED_PATTERN.search(line)
    if not match:
        return None

    return _expand_cases(match, suite, TestStatus.PASSED)


def parse_swift_testing_failure(line: str, suite: Optional[str] = None) -> Optional[List[TestOutcome]]:
    if ("✗ Test" not in line and "✘ Test" not in line) or "failed after" not in line:
        return None

    # Parameterized rollup: the individual issue lines carry the failures
    if "with" in line and "test cases" in line and "issues" in line:
        return []

    match = FAILED_PATTERN.search(line)
    if not match:
        return None

    return _expand_cases(match, suite, TestStatus.FAILED)


def _expand_cases(match: re.Match, suite: Optional[str], status: TestStatus) -> List[TestOutcome]:
    name = match.group("quoted") or match.group("bare") or ""
    count = to_int(match.group("count"))
    if count is None:
        count = 1
    duration = to_float(match.group("duration"))
    suite_name = resolve_suite(suite)

    return [
        TestOutcome(
            suite=suite_name,
            test_case=f"{name} [case {index}]" if count > 1 else name,
            status=status,
            duration=duration,
        )
        for index in range(1, count + 1)
    ]
