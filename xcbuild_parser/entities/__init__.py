from .diagnostic import Diagnostic
from .enums import BuildStatus, DiagnosticKind, TestStatus
from .test_outcome import TestOutcome

__all__ = [
    "BuildStatus",
    "Diagnostic",
    "DiagnosticKind",
    "TestOutcome",
    "TestStatus",
]
