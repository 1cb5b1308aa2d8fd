"""Controllers module for kubediscover.

This module provides the controllers that collect Kubernetes cluster data
for reports.
"""

from __future__ import annotations

# Base classes
from kubediscover.controllers.base import BaseController, ProgressCallback

# Cluster domain
from kubediscover.controllers.cluster import (
    ClusterController,
    KubectlError,
    NamespaceNotFoundError,
)

__all__ = [
    # Base
    "BaseController",
    # Domain Controllers
    "ClusterController",
    "KubectlError",
    "NamespaceNotFoundError",
    "ProgressCallback",
]
