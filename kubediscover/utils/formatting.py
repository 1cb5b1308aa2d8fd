"""Presentation helpers shared by the Markdown and HTML renderers."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime

from kubediscover.constants.enums import RowStatus
from kubediscover.models.core import (
    CronJobInfo,
    DaemonSetInfo,
    DeploymentInfo,
    PodInfo,
    StatefulSetInfo,
    Taint,
    Toleration,
    VolumeClaimTemplateInfo,
)

GENERATED_FORMAT = "%Y-%m-%d %H:%M:%S"

StatusRecord = DeploymentInfo | StatefulSetInfo | CronJobInfo | DaemonSetInfo | PodInfo


def row_status(record: StatusRecord) -> RowStatus:
    """Colour class for a record, read from its precomputed flags.

    Suspended cronjobs are amber; pods follow their ``problem`` flag;
    everything else follows ``healthy``.
    """
    if isinstance(record, PodInfo):
        return RowStatus.ERROR if record.problem else RowStatus.SUCCESS
    if isinstance(record, CronJobInfo) and record.suspend:
        return RowStatus.WARNING
    return RowStatus.SUCCESS if record.healthy else RowStatus.ERROR


def format_generated(value: datetime) -> str:
    return value.strftime(GENERATED_FORMAT)


def format_taints(taints: Iterable[Taint]) -> list[str]:
    return [f"{taint.key}:{taint.effect}" for taint in taints]


def format_tolerations(tolerations: Iterable[Toleration]) -> list[str]:
    return [f"{toleration.key or '*'}:{toleration.effect}" for toleration in tolerations]


def format_node_selector(selector: dict[str, str] | None) -> str | None:
    if not selector:
        return None
    return ", ".join(f"{key}={value}" for key, value in selector.items())


def format_volume_templates(templates: Iterable[VolumeClaimTemplateInfo]) -> str:
    return ", ".join(f"{template.name} ({template.size})" for template in templates)


def format_replicas(ready: int, desired: int | None) -> str:
    return f"{ready}/{desired if desired is not None else 'N/A'}"
