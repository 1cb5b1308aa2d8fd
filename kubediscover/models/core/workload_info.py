"""Workload models for deployments, statefulsets, cronjobs and daemonsets.

The ``healthy`` flag on each model is decided by the parser at collection
time. Renderers read it as-is.
"""

from pydantic import BaseModel, ConfigDict, Field


class Toleration(BaseModel):
    """Projection of a pod-spec toleration."""

    model_config = ConfigDict(frozen=True)

    key: str | None = None
    operator: str | None = None
    value: str | None = None
    effect: str | None = None


class DeploymentInfo(BaseModel):
    """Deployment row."""

    model_config = ConfigDict(frozen=True)

    name: str
    namespace: str
    replicas: int | None = None
    ready_replicas: int = 0
    available_replicas: int = 0
    labels: dict[str, str] = Field(default_factory=dict)
    tolerations: list[Toleration] = Field(default_factory=list)
    node_selector: dict[str, str] | None = None
    healthy: bool = False


class VolumeClaimTemplateInfo(BaseModel):
    """Volume claim template declared by a statefulset."""

    model_config = ConfigDict(frozen=True)

    name: str | None = None
    storage_class: str | None = None
    size: str | None = None


class StatefulSetInfo(BaseModel):
    """StatefulSet row."""

    model_config = ConfigDict(frozen=True)

    name: str
    namespace: str
    replicas: int | None = None
    ready_replicas: int = 0
    labels: dict[str, str] = Field(default_factory=dict)
    update_strategy: str | None = None
    volume_claim_templates: list[VolumeClaimTemplateInfo] = Field(default_factory=list)
    tolerations: list[Toleration] = Field(default_factory=list)
    node_selector: dict[str, str] | None = None
    healthy: bool = False


class CronJobInfo(BaseModel):
    """CronJob row. Healthy means the schedule is not suspended."""

    model_config = ConfigDict(frozen=True)

    name: str
    namespace: str
    schedule: str | None = None
    suspend: bool = False
    active: int = 0
    last_schedule: str | None = None
    last_successful: str | None = None
    labels: dict[str, str] = Field(default_factory=dict)
    tolerations: list[Toleration] = Field(default_factory=list)
    node_selector: dict[str, str] | None = None
    healthy: bool = True


class DaemonSetInfo(BaseModel):
    """DaemonSet row."""

    model_config = ConfigDict(frozen=True)

    name: str
    namespace: str
    desired: int = 0
    ready: int = 0
    available: int = 0
    unavailable: int = 0
    labels: dict[str, str] = Field(default_factory=dict)
    tolerations: list[Toleration] = Field(default_factory=list)
    node_selector: dict[str, str] | None = None
    healthy: bool = False


class WorkloadSet(BaseModel):
    """The four workload listings collected for one run."""

    model_config = ConfigDict(frozen=True)

    deployments: list[DeploymentInfo] = Field(default_factory=list)
    statefulsets: list[StatefulSetInfo] = Field(default_factory=list)
    cronjobs: list[CronJobInfo] = Field(default_factory=list)
    daemonsets: list[DaemonSetInfo] = Field(default_factory=list)

    @property
    def total(self) -> int:
        return (
            len(self.deployments)
            + len(self.statefulsets)
            + len(self.cronjobs)
            + len(self.daemonsets)
        )
