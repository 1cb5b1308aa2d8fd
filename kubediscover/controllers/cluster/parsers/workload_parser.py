"""Workload parser for deployments, statefulsets, cronjobs and daemonsets.

Every ``parse_*`` method decides the ``healthy`` flag exactly once:

- Deployment / StatefulSet: ready replicas equal desired replicas
- DaemonSet: ready pods equal desired scheduled pods
- CronJob: the schedule is not suspended
"""

from __future__ import annotations

from typing import Any

from kubediscover.models.core import (
    CronJobInfo,
    DaemonSetInfo,
    DeploymentInfo,
    StatefulSetInfo,
    Toleration,
    VolumeClaimTemplateInfo,
)
from kubediscover.utils.resource_parser import (
    as_dict,
    as_list,
    coerce_int,
    dig,
    optional_int,
    optional_str,
    string_map,
)


class WorkloadParser:
    """Parses workload objects into workload models."""

    @staticmethod
    def parse_tolerations(pod_spec: Any) -> list[Toleration]:
        return [
            Toleration(
                key=optional_str(item.get("key")),
                operator=optional_str(item.get("operator")),
                value=optional_str(item.get("value")),
                effect=optional_str(item.get("effect")),
            )
            for item in as_list(as_dict(pod_spec).get("tolerations"))
            if isinstance(item, dict)
        ]

    @staticmethod
    def _node_selector(pod_spec: Any) -> dict[str, str] | None:
        selector = as_dict(pod_spec).get("nodeSelector")
        if not isinstance(selector, dict):
            return None
        return string_map(selector)

    @staticmethod
    def _identity(item: dict[str, Any]) -> tuple[str, str, dict[str, str]]:
        metadata = as_dict(item.get("metadata"))
        return (
            str(metadata.get("name") or ""),
            str(metadata.get("namespace") or ""),
            string_map(metadata.get("labels")),
        )

    def parse_deployment(self, item: dict[str, Any]) -> DeploymentInfo:
        name, namespace, labels = self._identity(item)
        spec = as_dict(item.get("spec"))
        status = as_dict(item.get("status"))
        pod_spec = dig(spec, "template", "spec")
        replicas = optional_int(spec.get("replicas"))
        ready_replicas = coerce_int(status.get("readyReplicas"))
        return DeploymentInfo(
            name=name,
            namespace=namespace,
            replicas=replicas,
            ready_replicas=ready_replicas,
            available_replicas=coerce_int(status.get("availableReplicas")),
            labels=labels,
            tolerations=self.parse_tolerations(pod_spec),
            node_selector=self._node_selector(pod_spec),
            healthy=ready_replicas == replicas,
        )

    def parse_statefulset(self, item: dict[str, Any]) -> StatefulSetInfo:
        name, namespace, labels = self._identity(item)
        spec = as_dict(item.get("spec"))
        status = as_dict(item.get("status"))
        pod_spec = dig(spec, "template", "spec")
        replicas = optional_int(spec.get("replicas"))
        ready_replicas = coerce_int(status.get("readyReplicas"))
        templates = [
            VolumeClaimTemplateInfo(
                name=optional_str(dig(template, "metadata", "name")),
                storage_class=optional_str(dig(template, "spec", "storageClassName")),
                size=optional_str(dig(template, "spec", "resources", "requests", "storage")),
            )
            for template in as_list(spec.get("volumeClaimTemplates"))
            if isinstance(template, dict)
        ]
        return StatefulSetInfo(
            name=name,
            namespace=namespace,
            replicas=replicas,
            ready_replicas=ready_replicas,
            labels=labels,
            update_strategy=optional_str(dig(spec, "updateStrategy", "type")),
            volume_claim_templates=templates,
            tolerations=self.parse_tolerations(pod_spec),
            node_selector=self._node_selector(pod_spec),
            healthy=ready_replicas == replicas,
        )

    def parse_cronjob(self, item: dict[str, Any]) -> CronJobInfo:
        name, namespace, labels = self._identity(item)
        spec = as_dict(item.get("spec"))
        status = as_dict(item.get("status"))
        pod_spec = dig(spec, "jobTemplate", "spec", "template", "spec")
        suspend = spec.get("suspend") is True
        return CronJobInfo(
            name=name,
            namespace=namespace,
            schedule=optional_str(spec.get("schedule")),
            suspend=suspend,
            active=len(as_list(status.get("active"))),
            last_schedule=optional_str(status.get("lastScheduleTime")),
            last_successful=optional_str(status.get("lastSuccessfulTime")),
            labels=labels,
            tolerations=self.parse_tolerations(pod_spec),
            node_selector=self._node_selector(pod_spec),
            healthy=not suspend,
        )

    def parse_daemonset(self, item: dict[str, Any]) -> DaemonSetInfo:
        name, namespace, labels = self._identity(item)
        spec = as_dict(item.get("spec"))
        status = as_dict(item.get("status"))
        pod_spec = dig(spec, "template", "spec")
        desired = coerce_int(status.get("desiredNumberScheduled"))
        ready = coerce_int(status.get("numberReady"))
        return DaemonSetInfo(
            name=name,
            namespace=namespace,
            desired=desired,
            ready=ready,
            available=coerce_int(status.get("numberAvailable")),
            unavailable=coerce_int(status.get("numberUnavailable")),
            labels=labels,
            tolerations=self.parse_tolerations(pod_spec),
            node_selector=self._node_selector(pod_spec),
            healthy=ready == desired,
        )
