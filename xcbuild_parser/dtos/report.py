"""DTOs for the JSON build report written to stdout."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from xcbuild_parser.entities import BuildStatus, Diagnostic, TestOutcome


class ReportSummary(BaseModel):
    """Aggregate counts and timing for one xcodebuild invocation."""

    errors: int = 0
    warnings: int = 0
    passed_tests: int = 0
    failed_tests: int = 0
    build_time: str = "0.000"  # seconds, three decimals

    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel, frozen=True)


class Report(BaseModel):
    """
    Final build and test report.

    `warnings` is None unless warning output was requested, and
    `test_results` only ever holds failed outcomes.
    """

    status: BuildStatus
    summary: ReportSummary
    errors: List[Diagnostic] = []
    warnings: Optional[List[Diagnostic]] = None
    test_results: List[TestOutcome] = []
    xcresult_path: Optional[str] = None

    model_config = ConfigDict(
        populate_by_name=True,
        alias_generator=to_camel,
        frozen=True,
    )
