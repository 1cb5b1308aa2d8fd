"""Parsers turning raw kubectl JSON into kubediscover models."""

from kubediscover.controllers.cluster.parsers.mesh_parser import MeshParser
from kubediscover.controllers.cluster.parsers.namespace_parser import NamespaceParser
from kubediscover.controllers.cluster.parsers.node_parser import NodeParser
from kubediscover.controllers.cluster.parsers.pod_parser import PodParser
from kubediscover.controllers.cluster.parsers.scaling_parser import ScalingParser
from kubediscover.controllers.cluster.parsers.workload_parser import WorkloadParser

__all__ = [
    "MeshParser",
    "NamespaceParser",
    "NodeParser",
    "PodParser",
    "ScalingParser",
    "WorkloadParser",
]
