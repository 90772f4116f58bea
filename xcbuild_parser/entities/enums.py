"""
Shared enums for entities.

Values are the literal strings written to the JSON report.
"""

from enum import Enum


class DiagnosticKind(str, Enum):
    """Severity of a compiler or tool diagnostic."""

    ERROR = "error"
    WARNING = "warning"


class TestStatus(str, Enum):
    """Outcome of a single test invocation."""

    __test__ = False

    PASSED = "passed"
    FAILED = "failed"


class BuildStatus(str, Enum):
    """Overall status of the build/test run."""

    SUCCESS = "success"
    FAILURE = "failure"
