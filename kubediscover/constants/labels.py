"""Kubernetes label and annotation keys read by the parsers."""

from typing import Final

# ============================================================================
# Node labels (AKS)
# ============================================================================

NODE_POOL_LABELS: Final = (
    "agentpool",
    "kubernetes.azure.com/agentpool",
)
NODE_MODE_LABEL: Final = "kubernetes.azure.com/mode"
NODE_PRIORITY_LABEL: Final = "kubernetes.azure.com/scalesetpriority"
NODE_PRIORITY_SPOT: Final = "Spot"

# ============================================================================
# Namespace labels and annotations
# ============================================================================

ISTIO_INJECTION_LABEL: Final = "istio-injection"
ISTIO_INJECTION_ENABLED: Final = "enabled"
ISTIO_REVISION_LABEL: Final = "istio.io/rev"
NODE_SELECTOR_ANNOTATION: Final = "scheduler.alpha.kubernetes.io/node-selector"
DEFAULT_TOLERATIONS_ANNOTATION: Final = "scheduler.alpha.kubernetes.io/defaultTolerations"

# ============================================================================
# Pod annotations
# ============================================================================

SIDECAR_STATUS_ANNOTATION: Final = "sidecar.istio.io/status"

__all__ = [
    "DEFAULT_TOLERATIONS_ANNOTATION",
    "ISTIO_INJECTION_ENABLED",
    "ISTIO_INJECTION_LABEL",
    "ISTIO_REVISION_LABEL",
    "NODE_MODE_LABEL",
    "NODE_POOL_LABELS",
    "NODE_PRIORITY_LABEL",
    "NODE_PRIORITY_SPOT",
    "NODE_SELECTOR_ANNOTATION",
    "SIDECAR_STATUS_ANNOTATION",
]
