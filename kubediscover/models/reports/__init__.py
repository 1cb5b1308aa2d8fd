"""Report models."""

from kubediscover.models.reports.report_data import (
    ConfigWarning,
    ReportData,
    ReportSummary,
)

__all__ = ["ConfigWarning", "ReportData", "ReportSummary"]
