"""Init file for cluster module."""

from kubediscover.controllers.cluster.controller import ClusterController
from kubediscover.controllers.cluster.errors import KubectlError, NamespaceNotFoundError

__all__ = ["ClusterController", "KubectlError", "NamespaceNotFoundError"]
