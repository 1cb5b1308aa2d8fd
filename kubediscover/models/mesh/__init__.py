"""Service mesh models."""

from kubediscover.models.mesh.mesh_info import (
    IstioDestinationRule,
    IstioGateway,
    IstioVirtualService,
    MeshInfo,
    MeshStats,
)

__all__ = [
    "IstioDestinationRule",
    "IstioGateway",
    "IstioVirtualService",
    "MeshInfo",
    "MeshStats",
]
