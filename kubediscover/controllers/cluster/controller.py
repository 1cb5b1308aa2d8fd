"""Cluster controller for report data collection.

This module serves as the main orchestrator for cluster data operations,
delegating kubectl listings to fetchers and object mapping to parsers. All
queries run one after another; a failed listing degrades to an empty
collection while a missing scope namespace aborts the run.
"""

from __future__ import annotations

import asyncio
import logging
import subprocess
from datetime import datetime

from kubediscover.controllers.base import BaseController, ProgressCallback
from kubediscover.controllers.cluster.errors import KubectlError, NamespaceNotFoundError
from kubediscover.controllers.cluster.fetchers import (
    FETCH_ERRORS,
    MeshFetcher,
    ResourceFetcher,
    VersionFetcher,
)
from kubediscover.controllers.cluster.parsers import (
    MeshParser,
    NamespaceParser,
    NodeParser,
    PodParser,
    ScalingParser,
    WorkloadParser,
)
from kubediscover.models.core import (
    NamespaceInfo,
    NodePoolInfo,
    PodHealthGroup,
    PodInfo,
    WorkloadSet,
)
from kubediscover.models.mesh import MeshInfo
from kubediscover.models.reports import ReportData
from kubediscover.models.scaling import HPAInfo, PDBInfo, PVCInfo
from kubediscover.models.state import ReportSettings

logger = logging.getLogger(__name__)


class ClusterController(BaseController):
    """Collects every resource group needed for a cluster report."""

    def __init__(
        self,
        context: str | None = None,
        settings: ReportSettings | None = None,
        progress_callback: ProgressCallback | None = None,
    ):
        """Initialize the cluster controller.

        Args:
            context: Optional Kubernetes context name; the current context when None.
            settings: Report settings (kubectl binary, timeouts, mesh names).
            progress_callback: Receives one line per collection step.
        """
        super().__init__(progress_callback)
        self.context = context
        self.settings = settings or ReportSettings()

        # Initialize fetchers
        self._resource_fetcher = ResourceFetcher(
            self._run_kubectl, request_timeout=self.settings.request_timeout
        )
        self._version_fetcher = VersionFetcher(self._run_kubectl)
        self._mesh_fetcher = MeshFetcher(
            self._resource_fetcher,
            MeshParser(),
            namespace_token=self.settings.mesh_namespace_token,
            control_plane_deployment=self.settings.mesh_control_plane_deployment,
        )

        # Initialize parsers
        self._node_parser = NodeParser()
        self._namespace_parser = NamespaceParser()
        self._workload_parser = WorkloadParser()
        self._pod_parser = PodParser(proxy_container=self.settings.mesh_proxy_container)
        self._scaling_parser = ScalingParser()

    # ------------------------------------------------------------------
    # kubectl
    # ------------------------------------------------------------------

    def _run_kubectl_sync(
        self,
        args: tuple[str, ...],
        timeout: int | None = None,
    ) -> str:
        """Run a kubectl command synchronously (thread-safe wrapper target)."""
        cmd = [self.settings.kubectl_binary]
        if self.context:
            cmd.extend(["--context", self.context])
        cmd.extend(args)
        effective_timeout = timeout if timeout is not None else self.settings.command_timeout
        result = subprocess.run(
            cmd, capture_output=True, text=True, timeout=effective_timeout
        )
        if result.returncode != 0:
            stderr = (result.stderr or "").strip()
            raise KubectlError(args, stderr, result.returncode)
        return result.stdout

    async def _run_kubectl(self, args: tuple[str, ...]) -> str:
        return await asyncio.to_thread(self._run_kubectl_sync, args)

    # ------------------------------------------------------------------
    # Collection steps
    # ------------------------------------------------------------------

    async def fetch_cluster_version(self) -> str:
        return await self._version_fetcher.fetch_version()

    async def ensure_namespace_exists(self, namespace: str) -> None:
        """Fail fast when the requested scope namespace is missing.

        Raises:
            NamespaceNotFoundError: kubectl could not get the namespace.
        """
        try:
            await self._run_kubectl(("get", "namespace", namespace, "-o", "name"))
        except FETCH_ERRORS as exc:
            detail = exc.stderr if isinstance(exc, KubectlError) else str(exc)
            raise NamespaceNotFoundError(namespace, detail) from exc

    async def fetch_node_pools(self) -> list[NodePoolInfo]:
        """Fetch nodes cluster-wide and aggregate them per pool."""
        items = await self._resource_fetcher.list_items("nodes", cluster_scoped=True)
        nodes = self._node_parser.parse_nodes(items)
        return self._node_parser.group_node_pools(nodes)

    async def fetch_namespaces(self, namespace: str | None = None) -> list[NamespaceInfo]:
        """Fetch the scope namespace, or every namespace for a cluster run."""
        if namespace:
            item = await self._resource_fetcher.get_object("namespace", namespace)
            return [self._namespace_parser.parse_namespace(item)] if item else []
        items = await self._resource_fetcher.list_items("namespaces", cluster_scoped=True)
        return self._namespace_parser.parse_namespaces(items)

    async def detect_mesh(self, namespace: str | None = None) -> MeshInfo:
        return await self._mesh_fetcher.detect(namespace)

    async def fetch_workloads(self, namespace: str | None = None) -> WorkloadSet:
        """Fetch deployments, statefulsets, cronjobs and daemonsets."""
        fetch = self._resource_fetcher.list_items
        parser = self._workload_parser
        statefulsets = [parser.parse_statefulset(i) for i in await fetch("statefulsets", namespace)]
        cronjobs = [parser.parse_cronjob(i) for i in await fetch("cronjobs", namespace)]
        daemonsets = [parser.parse_daemonset(i) for i in await fetch("daemonsets", namespace)]
        deployments = [parser.parse_deployment(i) for i in await fetch("deployments", namespace)]
        return WorkloadSet(
            deployments=deployments,
            statefulsets=statefulsets,
            cronjobs=cronjobs,
            daemonsets=daemonsets,
        )

    async def fetch_pods(self, namespace: str | None = None) -> list[PodInfo]:
        items = await self._resource_fetcher.list_items("pods", namespace)
        return self._pod_parser.parse_pods(items)

    @staticmethod
    def group_pods_by_namespace(pods: list[PodInfo]) -> list[PodHealthGroup]:
        return PodParser.group_pods_by_namespace(pods)

    async def fetch_autoscaling(
        self, namespace: str | None = None
    ) -> tuple[list[HPAInfo], list[PDBInfo]]:
        hpa_items = await self._resource_fetcher.list_items("hpa", namespace)
        pdb_items = await self._resource_fetcher.list_items("pdb", namespace)
        return (
            [self._scaling_parser.parse_hpa(item) for item in hpa_items],
            [self._scaling_parser.parse_pdb(item) for item in pdb_items],
        )

    async def fetch_storage(self, namespace: str | None = None) -> list[PVCInfo]:
        items = await self._resource_fetcher.list_items("pvc", namespace)
        return [self._scaling_parser.parse_pvc(item) for item in items]

    # ------------------------------------------------------------------
    # Orchestration
    # ------------------------------------------------------------------

    async def collect(
        self,
        cluster: str,
        namespace: str | None = None,
        generated_at: datetime | None = None,
    ) -> ReportData:
        """Run every collection step for one report.

        Args:
            cluster: Cluster identifier used to label the report.
            namespace: Optional scope; every namespaced query is restricted to it.
            generated_at: Collection time; now when None.

        Raises:
            NamespaceNotFoundError: ``namespace`` does not exist on the cluster.
        """
        generated_at = generated_at or datetime.now().replace(microsecond=0)

        self._notify_progress("Collecting cluster information...")
        version = await self.fetch_cluster_version()
        self._notify_progress(f"  Version: {version}")

        if namespace:
            await self.ensure_namespace_exists(namespace)
            self._notify_progress(f"  Namespace '{namespace}' found")

        self._notify_progress("Collecting node information...")
        node_pools = await self.fetch_node_pools()
        ready = sum(pool.ready for pool in node_pools)
        total = sum(pool.count for pool in node_pools)
        self._notify_progress(f"  Nodes: {ready}/{total} ready")

        self._notify_progress("Collecting namespace information...")
        namespaces = await self.fetch_namespaces(namespace)
        if namespace:
            injection = namespaces[0].istio_injection if namespaces else False
            self._notify_progress(
                f"  Namespace: {namespace} (Istio injection: {str(injection).lower()})"
            )
        else:
            injected = sum(1 for ns in namespaces if ns.istio_injection)
            self._notify_progress(
                f"  Namespaces: {len(namespaces)} ({injected} with Istio injection)"
            )

        self._notify_progress("Checking Istio...")
        mesh = await self.detect_mesh(namespace)
        if mesh.installed:
            self._notify_progress(
                f"  Istio: {mesh.version} (Gateways: {mesh.stats.gateway_count}, "
                f"VS: {mesh.stats.virtual_service_count})"
            )
        else:
            self._notify_progress("  Istio not installed")

        self._notify_progress("Collecting workloads...")
        workloads = await self.fetch_workloads(namespace)
        self._notify_progress(
            f"  Deployments: {len(workloads.deployments)} | "
            f"StatefulSets: {len(workloads.statefulsets)} | "
            f"CronJobs: {len(workloads.cronjobs)} | "
            f"DaemonSets: {len(workloads.daemonsets)}"
        )

        self._notify_progress("Analyzing all pods...")
        pods = await self.fetch_pods(namespace)
        pod_health = self.group_pods_by_namespace(pods)
        sidecars = sum(group.with_sidecar for group in pod_health)
        problems = sum(len(group.problems) for group in pod_health)
        self._notify_progress(
            f"  Pods: {len(pods)} total ({sidecars} with sidecars, {problems} with issues)"
        )

        self._notify_progress("Collecting HPAs & PDBs...")
        hpas, pdbs = await self.fetch_autoscaling(namespace)
        self._notify_progress(f"  HPAs: {len(hpas)} | PDBs: {len(pdbs)}")

        self._notify_progress("Collecting storage...")
        pvcs = await self.fetch_storage(namespace)
        self._notify_progress(f"  PVCs: {len(pvcs)}")

        return ReportData(
            cluster=cluster,
            target_namespace=namespace or None,
            version=version,
            generated_at=generated_at,
            node_pools=node_pools,
            namespaces=namespaces,
            istio=mesh,
            deployments=workloads.deployments,
            statefulsets=workloads.statefulsets,
            cronjobs=workloads.cronjobs,
            daemonsets=workloads.daemonsets,
            pod_health=pod_health,
            hpas=hpas,
            pdbs=pdbs,
            pvcs=pvcs,
        )
