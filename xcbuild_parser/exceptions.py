"""Custom exceptions for the xcodebuild log parser."""

from __future__ import annotations


class XcodeBuildParserError(Exception):
    """Base exception for parser failures."""


class InputReadError(XcodeBuildParserError):
    """Raised when a named input log cannot be opened or read."""


class ReportSerializationError(XcodeBuildParserError):
    """Raised when the final report cannot be encoded."""

    def __init__(self, message: str, cause: Exception | None = None):
        super().__init__(message)
        self.cause = cause
