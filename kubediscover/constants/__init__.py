"""Constants module for kubediscover.

Centralized constants organized by domain:
- enums.py: All Enum class definitions
- labels.py: Kubernetes label and annotation keys
- timeouts.py: Timeout values
- defaults.py: Default values for settings and sentinels
"""

from kubediscover.constants.defaults import (
    REPORTS_DIR_DEFAULT,
    UNKNOWN,
    VERSION_UNAVAILABLE,
)
from kubediscover.constants.enums import (
    HEALTHY_POD_PHASES,
    PodPhase,
    ReportFormat,
    RowStatus,
)
from kubediscover.constants.timeouts import (
    CLUSTER_REQUEST_TIMEOUT,
    KUBECTL_COMMAND_TIMEOUT,
)

__all__ = [
    # Timeouts
    "CLUSTER_REQUEST_TIMEOUT",
    # Enums
    "HEALTHY_POD_PHASES",
    "KUBECTL_COMMAND_TIMEOUT",
    "REPORTS_DIR_DEFAULT",
    "UNKNOWN",
    "VERSION_UNAVAILABLE",
    "PodPhase",
    "ReportFormat",
    "RowStatus",
]
