"""
Line Classifier - runs every matcher family over one line of output.

Diagnostics, suite banners, test results, result bundle paths and completion
markers are checked independently, so one line may feed several of them.
Test-result matchers are the exception: they are tried in a fixed priority
order and the first one that recognizes the line wins.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from xcbuild_parser.entities import Diagnostic, TestOutcome

from .base import TestResultMatcher
from .diagnostics import parse_diagnostic
from .suite import is_completion_marker, parse_suite_started
from .swift_testing import (
    parse_swift_testing_failure,
    parse_swift_testing_issue,
    parse_swift_testing_success,
)
from .xcresult import parse_xcresult_path
from .xctest import parse_xctest_result

# Issue lines must win over the failure matcher, which in turn must see
# parameterized rollups before XCTest gets a chance.
TEST_RESULT_MATCHERS: List[TestResultMatcher] = [
    parse_swift_testing_issue,
    parse_swift_testing_success,
    parse_swift_testing_failure,
    parse_xctest_result,
]


@dataclass
class LineClassification:
    """Everything extracted from a single line."""

    diagnostic: Optional[Diagnostic] = None
    suite: Optional[str] = None  # suite announced on this line, if any
    test_results: List[TestOutcome] = field(default_factory=list)
    xcresult_path: Optional[str] = None
    completed: bool = False


def parse_test_result(
    line: str,
    suite: Optional[str],
    matchers: Sequence[TestResultMatcher] = TEST_RESULT_MATCHERS,
) -> List[TestOutcome]:
    """First matcher to return a list (even an empty one) decides the line."""
    for matcher in matchers:
        results = matcher(line, suite)
        if results is not None:
            return results
    return []


class LineClassifier:
    """
    Classifies xcodebuild output lines.

    The classifier itself is stateless; the caller passes in the current
    suite context and applies the returned LineClassification.
    """

    def __init__(self, matchers: Optional[Sequence[TestResultMatcher]] = None):
        self._matchers: List[TestResultMatcher] = list(matchers or TEST_RESULT_MATCHERS)

    def classify(self, line: str, current_suite: Optional[str] = None) -> LineClassification:
        result = LineClassification()

        result.diagnostic = parse_diagnostic(line)

        # A suite banner applies to results on the same line as well
        result.suite = parse_suite_started(line)
        suite = result.suite if result.suite is not None else current_suite

        result.test_results = parse_test_result(line, suite, self._matchers)
        result.xcresult_path = parse_xcresult_path(line)
        result.completed = is_completion_marker(line)

        return result
