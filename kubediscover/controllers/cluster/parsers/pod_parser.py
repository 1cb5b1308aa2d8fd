"""Pod parser for cluster controller - parses pod health and sidecar state."""

from __future__ import annotations

from collections import defaultdict
from typing import Any

from kubediscover.constants.defaults import MESH_PROXY_CONTAINER_DEFAULT
from kubediscover.constants.enums import HEALTHY_POD_PHASES, PodPhase
from kubediscover.constants.labels import SIDECAR_STATUS_ANNOTATION
from kubediscover.controllers.cluster.parsers.workload_parser import WorkloadParser
from kubediscover.models.core import PodHealthGroup, PodInfo, PodProblemInfo
from kubediscover.utils.resource_parser import (
    as_dict,
    as_list,
    coerce_int,
    condition_is_true,
    dig,
    image_tag,
    optional_str,
)


class PodParser:
    """Parses pods into PodInfo and groups them per namespace."""

    def __init__(self, proxy_container: str = MESH_PROXY_CONTAINER_DEFAULT) -> None:
        self._proxy_container = proxy_container

    @staticmethod
    def _container_statuses(status: dict[str, Any]) -> list[dict[str, Any]]:
        return [
            item for item in as_list(status.get("containerStatuses")) if isinstance(item, dict)
        ]

    @staticmethod
    def _waiting_reason(statuses: list[dict[str, Any]]) -> str | None:
        """Return the first non-null waiting reason across container statuses."""
        for container_status in statuses:
            reason = dig(container_status, "state", "waiting", "reason")
            if reason is not None:
                return str(reason)
        return None

    def parse_pod(self, pod: dict[str, Any]) -> PodInfo:
        """Parse a single pod.

        A pod counts as having a sidecar when either the injection status
        annotation is present or a proxy container is declared in the spec.
        """
        metadata = as_dict(pod.get("metadata"))
        spec = as_dict(pod.get("spec"))
        status = as_dict(pod.get("status"))
        annotations = as_dict(metadata.get("annotations"))

        containers = [c for c in as_list(spec.get("containers")) if isinstance(c, dict)]
        container_names = [str(c.get("name")) for c in containers]
        proxies = [c for c in containers if c.get("name") == self._proxy_container]
        statuses = self._container_statuses(status)

        phase = optional_str(status.get("phase"))
        waiting_reason = self._waiting_reason(statuses)

        return PodInfo(
            namespace=str(metadata.get("namespace") or ""),
            name=str(metadata.get("name") or ""),
            phase=phase,
            ready=condition_is_true(status.get("conditions"), "Ready"),
            containers=container_names,
            container_count=len(containers),
            ready_containers=sum(1 for s in statuses if s.get("ready") is True),
            has_sidecar=annotations.get(SIDECAR_STATUS_ANNOTATION) is not None or bool(proxies),
            sidecar_version=image_tag(proxies[0].get("image")) if proxies else None,
            problem=phase not in HEALTHY_POD_PHASES,
            reason=waiting_reason if waiting_reason is not None else phase,
            restart_count=sum(coerce_int(s.get("restartCount")) for s in statuses),
            node_name=optional_str(spec.get("nodeName")),
            tolerations=WorkloadParser.parse_tolerations(spec),
        )

    def parse_pods(self, items: list[Any]) -> list[PodInfo]:
        return [self.parse_pod(item) for item in items if isinstance(item, dict)]

    @staticmethod
    def group_pods_by_namespace(pods: list[PodInfo]) -> list[PodHealthGroup]:
        """Group pods per namespace, sorted by namespace name.

        Every pod lands in exactly one group, so group totals add up to
        ``len(pods)``.
        """
        grouped: dict[str, list[PodInfo]] = defaultdict(list)
        for pod in pods:
            grouped[pod.namespace].append(pod)

        return [
            PodHealthGroup(
                namespace=namespace,
                total=len(members),
                running=sum(1 for pod in members if pod.phase == PodPhase.RUNNING.value),
                with_sidecar=sum(1 for pod in members if pod.has_sidecar),
                pods=members,
                problems=[
                    PodProblemInfo(
                        name=pod.name,
                        reason=pod.reason,
                        restart_count=pod.restart_count,
                    )
                    for pod in members
                    if pod.problem
                ],
            )
            for namespace, members in sorted(grouped.items())
        ]
