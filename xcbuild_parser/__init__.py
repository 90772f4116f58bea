"""Parse xcodebuild output into a structured build and test report."""

from .dtos import Report, ReportSummary
from .entities import BuildStatus, Diagnostic, DiagnosticKind, TestOutcome, TestStatus
from .services import XcodeBuildParser, serialize_report

__version__ = "1.0.0"

__all__ = [
    "BuildStatus",
    "Diagnostic",
    "DiagnosticKind",
    "Report",
    "ReportSummary",
    "TestOutcome",
    "TestStatus",
    "XcodeBuildParser",
    "serialize_report",
]
