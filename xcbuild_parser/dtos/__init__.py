from .report import Report, ReportSummary

__all__ = ["Report", "ReportSummary"]
