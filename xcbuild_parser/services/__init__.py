from .build_log_parser import (
    RunState,
    XcodeBuildParser,
    format_build_time,
    serialize_report,
)

__all__ = [
    "RunState",
    "XcodeBuildParser",
    "format_build_time",
    "serialize_report",
]
