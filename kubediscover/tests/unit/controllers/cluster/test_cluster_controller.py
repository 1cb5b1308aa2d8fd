"""Tests for cluster controller."""

from __future__ import annotations

import json
import subprocess
from datetime import datetime
from typing import Any
from unittest.mock import MagicMock, patch

import pytest

from kubediscover.constants.enums import ReportFormat
from kubediscover.controllers.cluster.controller import ClusterController
from kubediscover.controllers.cluster.errors import KubectlError, NamespaceNotFoundError
from kubediscover.models.state import ReportSettings
from kubediscover.utils.report_generator import ReportGenerator


def _items(*items: dict[str, Any]) -> str:
    return json.dumps({"items": list(items)})


class FakeKubectl:
    """Answers kubectl invocations from canned listings and records them."""

    def __init__(self, listings: dict[str, str] | None = None, missing_namespaces: tuple[str, ...] = ()):
        self.listings = listings or {}
        self.missing_namespaces = missing_namespaces
        self.calls: list[tuple[str, ...]] = []

    def __call__(self, args: tuple[str, ...], timeout: int | None = None) -> str:
        self.calls.append(args)
        if args[:3] == ("version", "-o", "json"):
            return json.dumps({"serverVersion": {"gitVersion": "v1.29.2"}})
        if args[:2] == ("get", "namespace"):
            name = args[2]
            if name in self.missing_namespaces:
                raise KubectlError(args, f'namespaces "{name}" not found', 1)
            if "-o" in args and args[args.index("-o") + 1] == "name":
                return f"namespace/{name}"
            return json.dumps({"metadata": {"name": name}})
        return self.listings.get(args[1], _items())


@pytest.fixture
def three_namespace_cluster() -> FakeKubectl:
    """Three namespaces, one healthy deployment, no mesh."""
    return FakeKubectl(
        {
            "nodes": _items(
                {
                    "metadata": {"name": "aks-system-0", "labels": {"agentpool": "system"}},
                    "status": {"conditions": [{"type": "Ready", "status": "True"}]},
                }
            ),
            "namespaces": _items(
                {"metadata": {"name": "default"}},
                {"metadata": {"name": "kube-system"}},
                {"metadata": {"name": "app", "labels": {"istio-injection": "enabled"}}},
            ),
            "deployments": _items(
                {
                    "metadata": {"name": "web", "namespace": "app"},
                    "spec": {"replicas": 3},
                    "status": {"readyReplicas": 3, "availableReplicas": 3},
                }
            ),
            "pods": _items(
                {
                    "metadata": {"name": "web-1", "namespace": "app"},
                    "spec": {"containers": [{"name": "web"}]},
                    "status": {"phase": "Running"},
                },
                {
                    "metadata": {"name": "web-2", "namespace": "app"},
                    "spec": {"containers": [{"name": "web"}]},
                    "status": {
                        "phase": "Pending",
                        "containerStatuses": [
                            {"state": {"waiting": {"reason": "ImagePullBackOff"}}}
                        ],
                    },
                },
                {
                    "metadata": {"name": "coredns", "namespace": "kube-system"},
                    "spec": {"containers": [{"name": "coredns"}]},
                    "status": {"phase": "Running"},
                },
            ),
        }
    )


class TestClusterController:
    """Tests for ClusterController class."""

    @pytest.fixture
    def controller(self) -> ClusterController:
        """Create ClusterController instance."""
        return ClusterController(context="my-cluster")

    def test_controller_init(self, controller: ClusterController) -> None:
        assert controller.context == "my-cluster"
        assert controller.settings == ReportSettings()

    def test_run_kubectl_sync_builds_command(self, controller: ClusterController) -> None:
        completed = MagicMock(returncode=0, stdout="ok", stderr="")
        with patch(
            "kubediscover.controllers.cluster.controller.subprocess.run", return_value=completed
        ) as run:
            assert controller._run_kubectl_sync(("get", "pods")) == "ok"

        cmd = run.call_args.args[0]
        assert cmd == ["kubectl", "--context", "my-cluster", "get", "pods"]
        assert run.call_args.kwargs["timeout"] == 45

    def test_run_kubectl_sync_without_context(self) -> None:
        controller = ClusterController(settings=ReportSettings(kubectl_binary="/usr/bin/kubectl"))
        completed = MagicMock(returncode=0, stdout="", stderr="")
        with patch(
            "kubediscover.controllers.cluster.controller.subprocess.run", return_value=completed
        ) as run:
            controller._run_kubectl_sync(("version",))

        assert run.call_args.args[0] == ["/usr/bin/kubectl", "version"]

    def test_run_kubectl_sync_raises_on_failure(self, controller: ClusterController) -> None:
        completed = MagicMock(returncode=1, stdout="", stderr="  forbidden \n")
        with patch(
            "kubediscover.controllers.cluster.controller.subprocess.run", return_value=completed
        ), pytest.raises(KubectlError) as exc_info:
            controller._run_kubectl_sync(("get", "pods"))

        assert exc_info.value.stderr == "forbidden"
        assert exc_info.value.returncode == 1

    @pytest.mark.asyncio
    async def test_ensure_namespace_exists_missing(self, controller: ClusterController) -> None:
        controller._run_kubectl_sync = FakeKubectl(missing_namespaces=("ghost",))  # type: ignore[method-assign]

        with pytest.raises(NamespaceNotFoundError, match="ghost"):
            await controller.ensure_namespace_exists("ghost")

    @pytest.mark.asyncio
    async def test_ensure_namespace_exists_timeout(self, controller: ClusterController) -> None:
        def timeout(args: tuple[str, ...], timeout: int | None = None) -> str:
            raise subprocess.TimeoutExpired(cmd="kubectl", timeout=45)

        controller._run_kubectl_sync = timeout  # type: ignore[method-assign]

        with pytest.raises(NamespaceNotFoundError):
            await controller.ensure_namespace_exists("app")

    @pytest.mark.asyncio
    async def test_fetch_workloads_query_order(self, controller: ClusterController) -> None:
        fake = FakeKubectl()
        controller._run_kubectl_sync = fake  # type: ignore[method-assign]

        workloads = await controller.fetch_workloads("app")

        assert workloads.total == 0
        assert [call[1] for call in fake.calls] == [
            "statefulsets",
            "cronjobs",
            "daemonsets",
            "deployments",
        ]


class TestCollect:
    """End-to-end collection against a fake kubectl."""

    @pytest.mark.asyncio
    async def test_collect_cluster_without_mesh(
        self, three_namespace_cluster: FakeKubectl, generated_at: datetime
    ) -> None:
        progress: list[str] = []
        controller = ClusterController(progress_callback=progress.append)
        controller._run_kubectl_sync = three_namespace_cluster  # type: ignore[method-assign]

        data = await controller.collect("demo", generated_at=generated_at)

        assert data.cluster == "demo"
        assert data.version == "v1.29.2"
        assert data.target_namespace is None
        assert len(data.namespaces) == 3
        assert data.istio.installed is False
        assert len(data.deployments) == 1
        assert data.deployments[0].healthy is True
        assert [group.namespace for group in data.pod_health] == ["app", "kube-system"]
        assert sum(group.total for group in data.pod_health) == 3
        assert data.pod_health[0].problems[0].reason == "ImagePullBackOff"
        assert "  Nodes: 1/1 ready" in progress
        assert "  Pods: 3 total (0 with sidecars, 1 with issues)" in progress

        report = json.loads(ReportGenerator(data).generate_json_report())
        assert report["istio"] == {"installed": False}
        assert len(report["workloads"]["deployments"]) == 1
        assert report["workloads"]["deployments"][0]["healthy"] is True
        assert report["summary"]["total_pods"] == 3

    @pytest.mark.asyncio
    async def test_collect_namespace_scope(
        self, three_namespace_cluster: FakeKubectl, generated_at: datetime
    ) -> None:
        controller = ClusterController()
        controller._run_kubectl_sync = three_namespace_cluster  # type: ignore[method-assign]

        data = await controller.collect("demo", "app", generated_at=generated_at)

        assert data.target_namespace == "app"
        assert [ns.name for ns in data.namespaces] == ["app"]
        scoped = [
            call for call in three_namespace_cluster.calls
            if call[0] == "get" and call[1] in ("pods", "deployments", "hpa", "pdb", "pvc")
        ]
        assert scoped
        assert all(call[call.index("-n") + 1] == "app" for call in scoped)

    @pytest.mark.asyncio
    async def test_collect_missing_namespace_stops_before_listings(
        self, generated_at: datetime
    ) -> None:
        fake = FakeKubectl(missing_namespaces=("ghost",))
        controller = ClusterController()
        controller._run_kubectl_sync = fake  # type: ignore[method-assign]

        with pytest.raises(NamespaceNotFoundError):
            await controller.collect("demo", "ghost", generated_at=generated_at)

        assert not any(call[:2] == ("get", "nodes") for call in fake.calls)

    @pytest.mark.asyncio
    async def test_failed_listing_degrades(self, generated_at: datetime) -> None:
        fake = FakeKubectl({"pods": "Unable to connect to the server"})
        controller = ClusterController()
        controller._run_kubectl_sync = fake  # type: ignore[method-assign]

        data = await controller.collect("demo", generated_at=generated_at)

        assert data.pod_health == []
        assert data.version == "v1.29.2"

    @pytest.mark.asyncio
    async def test_wrong_typed_fields_do_not_abort_collection(self, generated_at: datetime) -> None:
        fake = FakeKubectl(
            {
                "namespaces": _items({"metadata": {"name": 42}}),
                "nodes": _items(
                    {
                        "metadata": {"name": "aks-user-0"},
                        "spec": {"taints": [{"key": 1, "effect": "NoSchedule"}]},
                    }
                ),
                "pods": _items(
                    {"metadata": {"name": "odd", "namespace": "app"}, "status": {"phase": 5}}
                ),
                "cronjobs": _items(
                    {"metadata": {"name": "nightly", "namespace": "app"}, "spec": {"schedule": ["0 2 * * *"]}}
                ),
            }
        )
        controller = ClusterController()
        controller._run_kubectl_sync = fake  # type: ignore[method-assign]

        data = await controller.collect("demo", generated_at=generated_at)

        assert [ns.name for ns in data.namespaces] == ["42"]
        assert data.node_pools[0].taints[0].key == "1"
        assert data.pod_health[0].problems[0].reason == "5"
        assert data.cronjobs[0].schedule is None

        generator = ReportGenerator(data)
        for fmt in ReportFormat:
            assert generator.generate(fmt)
