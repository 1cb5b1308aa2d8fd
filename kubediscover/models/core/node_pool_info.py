"""Node pool models."""

from pydantic import BaseModel, ConfigDict, Field


class Taint(BaseModel):
    """Projection of a node taint."""

    model_config = ConfigDict(frozen=True)

    key: str | None = None
    value: str | None = None
    effect: str | None = None


class NodeInfo(BaseModel):
    """Normalized shape of a single node before pool grouping."""

    model_config = ConfigDict(frozen=True)

    name: str = "unknown"
    pool: str = "unknown"
    mode: str = "unknown"
    ready: bool = False
    spot: bool = False
    taints: list[Taint] = Field(default_factory=list)
    labels: dict[str, str] = Field(default_factory=dict)


class NodePoolInfo(BaseModel):
    """Aggregated node pool row, grouped by pool label."""

    model_config = ConfigDict(frozen=True)

    pool: str = "unknown"
    mode: str = "unknown"
    count: int = 0
    ready: int = 0
    spot: bool = False
    taints: list[Taint] = Field(default_factory=list)
    common_labels: dict[str, str] = Field(default_factory=dict)
