"""Pod health models."""

from pydantic import BaseModel, ConfigDict, Field

from kubediscover.models.core.workload_info import Toleration


class PodInfo(BaseModel):
    """Single pod snapshot with sidecar and problem diagnostics."""

    model_config = ConfigDict(frozen=True)

    namespace: str = Field(serialization_alias="ns")
    name: str
    phase: str | None = None
    ready: bool = False
    containers: list[str] = Field(default_factory=list)
    container_count: int = 0
    ready_containers: int = 0
    has_sidecar: bool = False
    sidecar_version: str | None = None
    problem: bool = False
    reason: str | None = None
    restart_count: int = 0
    node_name: str | None = None
    tolerations: list[Toleration] = Field(default_factory=list)


class PodProblemInfo(BaseModel):
    """Short problem entry listed under a namespace group."""

    model_config = ConfigDict(frozen=True)

    name: str
    reason: str | None = None
    restart_count: int = 0


class PodHealthGroup(BaseModel):
    """Pods of one namespace with running, sidecar and problem tallies."""

    model_config = ConfigDict(frozen=True)

    namespace: str
    total: int = 0
    running: int = 0
    with_sidecar: int = 0
    pods: list[PodInfo] = Field(default_factory=list)
    problems: list[PodProblemInfo] = Field(default_factory=list)
