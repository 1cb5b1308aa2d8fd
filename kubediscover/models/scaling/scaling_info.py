"""Autoscaling, disruption budget and storage models."""

from pydantic import BaseModel, ConfigDict, Field


class HPAInfo(BaseModel):
    """HorizontalPodAutoscaler bounds."""

    model_config = ConfigDict(frozen=True)

    namespace: str = Field(serialization_alias="ns")
    name: str
    min_replicas: int | None = Field(default=None, serialization_alias="min")
    max_replicas: int | None = Field(default=None, serialization_alias="max")


class PDBInfo(BaseModel):
    """PodDisruptionBudget row. ``min_available`` may be a count or a percentage."""

    model_config = ConfigDict(frozen=True)

    namespace: str = Field(serialization_alias="ns")
    name: str
    min_available: int | str | None = Field(default=None, serialization_alias="min")
    disruptions_allowed: int = Field(default=0, serialization_alias="disruptions")


class PVCInfo(BaseModel):
    """PersistentVolumeClaim row."""

    model_config = ConfigDict(frozen=True)

    namespace: str = Field(serialization_alias="ns")
    name: str
    status: str | None = None
    size: str | None = None
    storage_class: str | None = None
