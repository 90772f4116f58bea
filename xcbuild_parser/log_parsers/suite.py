"""
Suite context and completion markers.

    Test Suite 'MyAppTests' started at 2024-01-15 10:30:00.000.
"""

from __future__ import annotations

from typing import Optional

SUITE_STARTED_OPEN = "Test Suite '"
SUITE_STARTED_CLOSE = "' started at"

COMPLETION_MARKERS = (
    "Test session results",
    "BUILD SUCCEEDED",
    "BUILD FAILED",
)


def parse_suite_started(line: str) -> Optional[str]:
    """Return the suite name announced by a ``Test Suite '...' started at`` line."""
    if SUITE_STARTED_OPEN not in line or SUITE_STARTED_CLOSE not in line:
        return None
    parts = line.split("'")
    if len(parts) < 2:
        return None
    return parts[1]


def is_completion_marker(line: str) -> bool:
    return any(marker in line for marker in COMPLETION_MARKERS)
