"""Data models for kubediscover."""

from kubediscover.models.core import (
    CronJobInfo,
    DaemonSetInfo,
    DeploymentInfo,
    NamespaceInfo,
    NodeInfo,
    NodePoolInfo,
    PodHealthGroup,
    PodInfo,
    PodProblemInfo,
    StatefulSetInfo,
    Taint,
    Toleration,
    VolumeClaimTemplateInfo,
    WorkloadSet,
)
from kubediscover.models.mesh import (
    IstioDestinationRule,
    IstioGateway,
    IstioVirtualService,
    MeshInfo,
    MeshStats,
)
from kubediscover.models.reports import ConfigWarning, ReportData, ReportSummary
from kubediscover.models.scaling import HPAInfo, PDBInfo, PVCInfo
from kubediscover.models.state import ReportSettings

__all__ = [
    "ConfigWarning",
    "CronJobInfo",
    "DaemonSetInfo",
    "DeploymentInfo",
    "HPAInfo",
    "IstioDestinationRule",
    "IstioGateway",
    "IstioVirtualService",
    "MeshInfo",
    "MeshStats",
    "NamespaceInfo",
    "NodeInfo",
    "NodePoolInfo",
    "PDBInfo",
    "PVCInfo",
    "PodHealthGroup",
    "PodInfo",
    "PodProblemInfo",
    "ReportData",
    "ReportSettings",
    "ReportSummary",
    "StatefulSetInfo",
    "Taint",
    "Toleration",
    "VolumeClaimTemplateInfo",
    "WorkloadSet",
]
