"""Result bundle path matcher (``/.../Run-MyAppTests-....xcresult``)."""

from __future__ import annotations

from typing import Optional

XCRESULT_SUFFIX = ".xcresult"
ROOT_PREFIX = "/"


def parse_xcresult_path(line: str) -> Optional[str]:
    """Return the trimmed line if it is an absolute path to an .xcresult bundle."""
    trimmed = line.strip()
    if not trimmed.endswith(XCRESULT_SUFFIX):
        return None
    if not trimmed.startswith(ROOT_PREFIX):
        return None
    return trimmed
