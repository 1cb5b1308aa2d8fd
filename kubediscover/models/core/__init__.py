"""Core Kubernetes resource models."""

from kubediscover.models.core.namespace_info import NamespaceInfo
from kubediscover.models.core.node_pool_info import NodeInfo, NodePoolInfo, Taint
from kubediscover.models.core.pod_info import PodHealthGroup, PodInfo, PodProblemInfo
from kubediscover.models.core.workload_info import (
    CronJobInfo,
    DaemonSetInfo,
    DeploymentInfo,
    StatefulSetInfo,
    Toleration,
    VolumeClaimTemplateInfo,
    WorkloadSet,
)

__all__ = [
    "CronJobInfo",
    "DaemonSetInfo",
    "DeploymentInfo",
    "NamespaceInfo",
    "NodeInfo",
    "NodePoolInfo",
    "PodHealthGroup",
    "PodInfo",
    "PodProblemInfo",
    "StatefulSetInfo",
    "Taint",
    "Toleration",
    "VolumeClaimTemplateInfo",
    "WorkloadSet",
]
