"""Namespace models."""

from pydantic import BaseModel, ConfigDict, Field


class NamespaceInfo(BaseModel):
    """Namespace configuration relevant to scheduling and mesh injection."""

    model_config = ConfigDict(frozen=True)

    name: str = "unknown"
    labels: dict[str, str] = Field(default_factory=dict)
    annotations: dict[str, str] = Field(default_factory=dict)
    istio_injection: bool = False
    istio_rev: str | None = None
    node_selector: str | None = None
    default_tolerations: str | None = None
