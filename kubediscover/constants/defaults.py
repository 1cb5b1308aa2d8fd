"""Default values for settings.

All default values used in the ReportSettings model.
"""

from typing import Final

# ============================================================================
# Output defaults
# ============================================================================

REPORTS_DIR_DEFAULT: Final = "./cluster-reports"
REPORT_FORMAT_DEFAULT: Final = "json"
TIMESTAMP_FORMAT: Final = "%Y%m%d_%H%M%S"
WORKSPACE_PREFIX: Final = "kubediscover-"

# ============================================================================
# Collector defaults
# ============================================================================

KUBECTL_BINARY_DEFAULT: Final = "kubectl"
MESH_NAMESPACE_TOKEN_DEFAULT: Final = "istio"
MESH_CONTROL_PLANE_DEPLOYMENT_DEFAULT: Final = "istiod"
MESH_PROXY_CONTAINER_DEFAULT: Final = "istio-proxy"
SUSPICIOUS_NODE_SELECTORS_DEFAULT: Final = ("mode=system",)

# ============================================================================
# Sentinels
# ============================================================================

VERSION_UNAVAILABLE: Final = "N/A"
UNKNOWN: Final = "unknown"

__all__ = [
    "KUBECTL_BINARY_DEFAULT",
    "MESH_CONTROL_PLANE_DEPLOYMENT_DEFAULT",
    "MESH_NAMESPACE_TOKEN_DEFAULT",
    "MESH_PROXY_CONTAINER_DEFAULT",
    "REPORTS_DIR_DEFAULT",
    "REPORT_FORMAT_DEFAULT",
    "SUSPICIOUS_NODE_SELECTORS_DEFAULT",
    "TIMESTAMP_FORMAT",
    "UNKNOWN",
    "VERSION_UNAVAILABLE",
    "WORKSPACE_PREFIX",
]
