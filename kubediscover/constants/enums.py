"""All enum definitions for kubediscover.

This module consolidates all enumerations used throughout the application.
"""

from enum import Enum

# =============================================================================
# Report Enums
# =============================================================================


class ReportFormat(Enum):
    """Output formats a report can be rendered to."""

    HTML = "html"
    JSON = "json"
    MARKDOWN = "markdown"

    @property
    def extension(self) -> str:
        """File extension used for reports of this format."""
        return _REPORT_EXTENSIONS[self]


_REPORT_EXTENSIONS = {
    ReportFormat.HTML: "html",
    ReportFormat.JSON: "json",
    ReportFormat.MARKDOWN: "md",
}


class RowStatus(Enum):
    """Colour classes applied to report rows and cards."""

    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"
    INFO = "info"


# =============================================================================
# Kubernetes Enums
# =============================================================================


class PodPhase(Enum):
    """Pod phase values from Kubernetes API."""

    PENDING = "Pending"
    RUNNING = "Running"
    SUCCEEDED = "Succeeded"
    FAILED = "Failed"
    UNKNOWN = "Unknown"


HEALTHY_POD_PHASES = frozenset({PodPhase.RUNNING.value, PodPhase.SUCCEEDED.value})


__all__ = [
    "HEALTHY_POD_PHASES",
    "PodPhase",
    "ReportFormat",
    "RowStatus",
]
