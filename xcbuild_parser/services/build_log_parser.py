"""
Build log parser service - turns xcodebuild output into a Report.

Usage:
    xcodebuild test -scheme MyApp 2>&1 | xcbuild-parser
    xcodebuild test -scheme MyApp 2>&1 | xcbuild-parser --print-warnings

Each call to parse()/parse_stream() works on its own RunState, so a parser
instance can be reused without carrying lists or timestamps between runs.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable, Iterable, List, Optional, TextIO

from pydantic import ValidationError

from xcbuild_parser.config import settings
from xcbuild_parser.dtos import Report, ReportSummary
from xcbuild_parser.entities import BuildStatus, Diagnostic, TestOutcome, TestStatus
from xcbuild_parser.exceptions import ReportSerializationError
from xcbuild_parser.log_parsers import LineClassification, LineClassifier

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class RunState:
    """Running totals for a single parse pass."""

    errors: List[Diagnostic] = field(default_factory=list)
    warnings: List[Diagnostic] = field(default_factory=list)
    test_results: List[TestOutcome] = field(default_factory=list)
    current_suite: Optional[str] = None
    xcresult_path: Optional[str] = None
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None

    def apply(self, classification: LineClassification, now: Clock) -> None:
        diagnostic = classification.diagnostic
        if diagnostic is not None:
            if diagnostic.is_error:
                self.errors.append(diagnostic)
            else:
                self.warnings.append(diagnostic)
            logger.debug(f"{diagnostic.kind.value}: {diagnostic.message}")

        if classification.suite is not None:
            self.current_suite = classification.suite

        if classification.test_results:
            self.test_results.extend(classification.test_results)
            logger.debug(
                f"{len(classification.test_results)} test result(s) for "
                f"{classification.test_results[0].test_case}"
            )

        if classification.xcresult_path is not None:
            self.xcresult_path = classification.xcresult_path

        # Last completion marker wins
        if classification.completed:
            self.end_time = now()


def format_build_time(start: Optional[datetime], end: Optional[datetime]) -> str:
    if start is None or end is None:
        return "0.000"
    return f"{(end - start).total_seconds():.3f}"


class XcodeBuildParser:
    """Aggregates classified xcodebuild lines into a Report."""

    def __init__(
        self,
        print_warnings: bool = False,
        clock: Optional[Clock] = None,
        classifier: Optional[LineClassifier] = None,
    ):
        self.print_warnings = print_warnings
        self._clock = clock or utc_now
        self._classifier = classifier or LineClassifier()

    def parse(self, lines: Iterable[str]) -> Report:
        """Parse every line and build the report once the input is exhausted."""
        state = RunState()

        for line in lines:
            if state.start_time is None:
                state.start_time = self._clock()
            classification = self._classifier.classify(line, state.current_suite)
            state.apply(classification, self._clock)

        if state.end_time is None:
            state.end_time = self._clock()

        return self.build_report(state)

    def parse_stream(self, stream: TextIO) -> Report:
        """Parse a text stream such as sys.stdin, one line at a time."""
        return self.parse(line.rstrip("\r\n") for line in stream)

    def build_report(self, state: RunState) -> Report:
        passed_tests = sum(1 for result in state.test_results if result.status == TestStatus.PASSED)
        failed_results = [result for result in state.test_results if result.failed]

        status = (
            BuildStatus.SUCCESS
            if not state.errors and not failed_results
            else BuildStatus.FAILURE
        )

        summary = ReportSummary(
            errors=len(state.errors),
            warnings=len(state.warnings),
            passed_tests=passed_tests,
            failed_tests=len(failed_results),
            build_time=format_build_time(state.start_time, state.end_time),
        )

        logger.info(
            f"Parsed build: status={status.value} errors={summary.errors} "
            f"warnings={summary.warnings} passed={summary.passed_tests} "
            f"failed={summary.failed_tests} time={summary.build_time}s"
        )

        return Report(
            status=status,
            summary=summary,
            errors=list(state.errors),
            warnings=list(state.warnings) if self.print_warnings else None,
            test_results=failed_results,
            xcresult_path=state.xcresult_path,
        )


def serialize_report(report: Report, indent: Optional[int] = None) -> str:
    """
    Encode the report as JSON using the camelCase wire names.

    Absent optional fields (including `warnings` when not requested) are
    omitted rather than written as null.

    Raises:
        ReportSerializationError: If the report cannot be encoded
    """
    if indent is None:
        indent = settings.JSON_INDENT
    try:
        return report.model_dump_json(by_alias=True, exclude_none=True, indent=indent)
    except (ValidationError, ValueError, TypeError) as e:
        logger.error(f"Failed to encode build summary: {e}")
        raise ReportSerializationError(f"Failed to encode build summary - {e}", cause=e) from e
