"""
Log Parsers - line matchers for xcodebuild output.

Structure:
- base.py: matcher calling convention and capture helpers
- diagnostics.py: compiler/tool errors and warnings
- suite.py: "Test Suite '...' started at" banners and completion markers
- xctest.py: XCTest "Test Case '-[Suite test]' passed/failed" lines
- swift_testing.py: Swift Testing issue, pass and failure lines
- xcresult.py: result bundle path announcements
- registry.py: LineClassifier and the test-result priority order

Usage:
    from xcbuild_parser.log_parsers import LineClassifier

    classifier = LineClassifier()
    result = classifier.classify(line, current_suite="MyAppTests")
"""

from .diagnostics import parse_diagnostic
from .registry import (
    TEST_RESULT_MATCHERS,
    LineClassification,
    LineClassifier,
    parse_test_result,
)
from .suite import is_completion_marker, parse_suite_started
from .swift_testing import (
    parse_swift_testing_failure,
    parse_swift_testing_issue,
    parse_swift_testing_success,
)
from .xcresult import parse_xcresult_path
from .xctest import parse_xctest_result

__all__ = [
    "LineClassification",
    "LineClassifier",
    "TEST_RESULT_MATCHERS",
    "is_completion_marker",
    "parse_diagnostic",
    "parse_suite_started",
    "parse_swift_testing_failure",
    "parse_swift_testing_issue",
    "parse_swift_testing_success",
    "parse_test_result",
    "parse_xcresult_path",
    "parse_xctest_result",
]
