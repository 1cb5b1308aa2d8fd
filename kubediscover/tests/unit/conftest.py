"""Shared fixtures for unit tests."""

from __future__ import annotations

from datetime import datetime

import pytest

from kubediscover.models.core import (
    CronJobInfo,
    DaemonSetInfo,
    DeploymentInfo,
    NamespaceInfo,
    NodePoolInfo,
    PodHealthGroup,
    PodInfo,
    PodProblemInfo,
    StatefulSetInfo,
    Taint,
    Toleration,
    VolumeClaimTemplateInfo,
)
from kubediscover.models.mesh import IstioGateway, IstioVirtualService, MeshInfo
from kubediscover.models.reports import ReportData
from kubediscover.models.scaling import HPAInfo, PDBInfo, PVCInfo

GENERATED_AT = datetime(2024, 5, 1, 12, 30, 45)


@pytest.fixture
def generated_at() -> datetime:
    return GENERATED_AT


@pytest.fixture
def sample_report_data() -> ReportData:
    """A cluster-wide data set covering every entity group."""
    api_pod = PodInfo(
        namespace="payments",
        name="api-7d9f",
        phase="Running",
        ready=True,
        containers=["api", "istio-proxy"],
        container_count=2,
        ready_containers=2,
        has_sidecar=True,
        sidecar_version="1.20.1",
        problem=False,
        reason="Running",
        node_name="aks-user-0",
    )
    broken_pod = PodInfo(
        namespace="payments",
        name="worker-5c2a",
        phase="Pending",
        containers=["worker"],
        container_count=1,
        problem=True,
        reason="ImagePullBackOff",
        restart_count=4,
    )
    system_pod = PodInfo(
        namespace="kube-system",
        name="coredns-1",
        phase="Running",
        ready=True,
        containers=["coredns"],
        container_count=1,
        ready_containers=1,
        reason="Running",
        node_name="aks-system-0",
    )
    return ReportData(
        cluster="prod-aks",
        version="v1.29.2",
        generated_at=GENERATED_AT,
        node_pools=[
            NodePoolInfo(
                pool="system",
                mode="System",
                count=2,
                ready=2,
                taints=[Taint(key="CriticalAddonsOnly", value="true", effect="NoSchedule")],
            ),
            NodePoolInfo(pool="user", mode="User", count=3, ready=2, spot=True),
        ],
        namespaces=[
            NamespaceInfo(name="kube-system"),
            NamespaceInfo(
                name="payments",
                labels={"istio-injection": "enabled", "team": "billing"},
                istio_injection=True,
                istio_rev="1-20",
                node_selector="kubernetes.azure.com/mode=system",
            ),
            NamespaceInfo(name="istio-system"),
        ],
        istio=MeshInfo.build(
            version="1.20.1",
            namespace="istio-system",
            gateways=[IstioGateway(name="public", namespace="payments")],
            virtual_services=[
                IstioVirtualService(name="api", namespace="payments", hosts=["api.example.com"])
            ],
            destination_rules=[],
        ),
        deployments=[
            DeploymentInfo(
                name="api",
                namespace="payments",
                replicas=3,
                ready_replicas=3,
                available_replicas=3,
                tolerations=[Toleration(key="dedicated", operator="Equal", effect="NoSchedule")],
                node_selector={"agentpool": "user"},
                healthy=True,
            ),
            DeploymentInfo(
                name="worker",
                namespace="payments",
                replicas=2,
                ready_replicas=1,
                available_replicas=1,
                healthy=False,
            ),
        ],
        statefulsets=[
            StatefulSetInfo(
                name="db",
                namespace="payments",
                replicas=1,
                ready_replicas=1,
                update_strategy="RollingUpdate",
                volume_claim_templates=[
                    VolumeClaimTemplateInfo(name="data", storage_class="managed-csi", size="10Gi")
                ],
                healthy=True,
            )
        ],
        cronjobs=[
            CronJobInfo(
                name="nightly",
                namespace="payments",
                schedule="0 2 * * *",
                suspend=True,
                healthy=False,
            )
        ],
        daemonsets=[
            DaemonSetInfo(name="node-exporter", namespace="kube-system", desired=5, ready=5, healthy=True)
        ],
        pod_health=[
            PodHealthGroup(
                namespace="kube-system",
                total=1,
                running=1,
                with_sidecar=0,
                pods=[system_pod],
            ),
            PodHealthGroup(
                namespace="payments",
                total=2,
                running=1,
                with_sidecar=1,
                pods=[api_pod, broken_pod],
                problems=[
                    PodProblemInfo(name="worker-5c2a", reason="ImagePullBackOff", restart_count=4)
                ],
            ),
        ],
        hpas=[HPAInfo(namespace="payments", name="api", min_replicas=2, max_replicas=10)],
        pdbs=[PDBInfo(namespace="payments", name="api", min_available="50%", disruptions_allowed=1)],
        pvcs=[
            PVCInfo(
                namespace="payments",
                name="data-db-0",
                status="Bound",
                size="10Gi",
                storage_class="managed-csi",
            )
        ],
    )
