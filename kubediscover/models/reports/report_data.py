"""Report data container and derived summary values."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from kubediscover.constants.defaults import (
    SUSPICIOUS_NODE_SELECTORS_DEFAULT,
    VERSION_UNAVAILABLE,
)
from kubediscover.models.core import (
    CronJobInfo,
    DaemonSetInfo,
    DeploymentInfo,
    NamespaceInfo,
    NodePoolInfo,
    PodHealthGroup,
    StatefulSetInfo,
)
from kubediscover.models.mesh import MeshInfo
from kubediscover.models.scaling import HPAInfo, PDBInfo, PVCInfo


class ReportData(BaseModel):
    """Everything collected from the cluster for one report run."""

    model_config = ConfigDict(frozen=True)

    cluster: str
    target_namespace: str | None = None
    version: str = VERSION_UNAVAILABLE
    generated_at: datetime
    node_pools: list[NodePoolInfo] = Field(default_factory=list)
    namespaces: list[NamespaceInfo] = Field(default_factory=list)
    istio: MeshInfo = Field(default_factory=MeshInfo.not_installed)
    deployments: list[DeploymentInfo] = Field(default_factory=list)
    statefulsets: list[StatefulSetInfo] = Field(default_factory=list)
    cronjobs: list[CronJobInfo] = Field(default_factory=list)
    daemonsets: list[DaemonSetInfo] = Field(default_factory=list)
    pod_health: list[PodHealthGroup] = Field(default_factory=list)
    hpas: list[HPAInfo] = Field(default_factory=list)
    pdbs: list[PDBInfo] = Field(default_factory=list)
    pvcs: list[PVCInfo] = Field(default_factory=list)

    @property
    def is_namespace_scoped(self) -> bool:
        return bool(self.target_namespace)


class ConfigWarning(BaseModel):
    """A namespace whose node-selector annotation matches a suspicious pattern."""

    model_config = ConfigDict(frozen=True)

    namespace: str
    node_selector: str
    pattern: str

    @property
    def message(self) -> str:
        return (
            f"Namespace {self.namespace} has node selector annotation set to "
            f"{self.node_selector}. This schedules pods on system node pools, "
            "which is unusual for user applications."
        )


class ReportSummary(BaseModel):
    """Counters shared by every report format.

    Always built from a ``ReportData`` via :meth:`from_data` so that the
    numbers in every format come from the same records.
    """

    model_config = ConfigDict(frozen=True)

    node_count: int = 0
    ready_nodes: int = 0
    namespace_count: int = 0
    istio_injected_namespaces: int = 0
    total_pods: int = 0
    problem_pods: int = 0
    sidecar_pods: int = 0
    sidecar_coverage: int = 0
    total_deployments: int = 0
    healthy_deployments: int = 0
    total_statefulsets: int = 0
    total_cronjobs: int = 0
    total_daemonsets: int = 0
    total_workloads: int = 0
    hpa_count: int = 0
    pdb_count: int = 0
    pvc_count: int = 0
    config_warnings: list[ConfigWarning] = Field(default_factory=list)

    @property
    def has_warnings(self) -> bool:
        return bool(self.config_warnings)

    @property
    def all_deployments_healthy(self) -> bool:
        return self.healthy_deployments == self.total_deployments

    @staticmethod
    def coverage_percent(part: int, total: int) -> int:
        """Integer percentage rounded down, 0 when there is nothing to cover."""
        if total <= 0:
            return 0
        return (100 * part) // total

    @staticmethod
    def find_config_warnings(
        namespaces: Iterable[NamespaceInfo],
        patterns: Iterable[str] = SUSPICIOUS_NODE_SELECTORS_DEFAULT,
    ) -> list[ConfigWarning]:
        patterns = tuple(patterns)
        warnings: list[ConfigWarning] = []
        for namespace in namespaces:
            if not namespace.node_selector:
                continue
            for pattern in patterns:
                if pattern in namespace.node_selector:
                    warnings.append(
                        ConfigWarning(
                            namespace=namespace.name,
                            node_selector=namespace.node_selector,
                            pattern=pattern,
                        )
                    )
                    break
        return warnings

    @classmethod
    def from_data(
        cls,
        data: ReportData,
        suspicious_node_selectors: Iterable[str] = SUSPICIOUS_NODE_SELECTORS_DEFAULT,
    ) -> ReportSummary:
        total_pods = sum(group.total for group in data.pod_health)
        sidecar_pods = sum(group.with_sidecar for group in data.pod_health)
        problem_pods = sum(len(group.problems) for group in data.pod_health)
        total_deployments = len(data.deployments)
        return cls(
            node_count=sum(pool.count for pool in data.node_pools),
            ready_nodes=sum(pool.ready for pool in data.node_pools),
            namespace_count=len(data.namespaces),
            istio_injected_namespaces=sum(1 for ns in data.namespaces if ns.istio_injection),
            total_pods=total_pods,
            problem_pods=problem_pods,
            sidecar_pods=sidecar_pods,
            sidecar_coverage=cls.coverage_percent(sidecar_pods, total_pods),
            total_deployments=total_deployments,
            healthy_deployments=sum(1 for d in data.deployments if d.healthy),
            total_statefulsets=len(data.statefulsets),
            total_cronjobs=len(data.cronjobs),
            total_daemonsets=len(data.daemonsets),
            total_workloads=(
                total_deployments
                + len(data.statefulsets)
                + len(data.cronjobs)
                + len(data.daemonsets)
            ),
            hpa_count=len(data.hpas),
            pdb_count=len(data.pdbs),
            pvc_count=len(data.pvcs),
            config_warnings=cls.find_config_warnings(
                data.namespaces, suspicious_node_selectors
            ),
        )
