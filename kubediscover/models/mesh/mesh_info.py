"""Istio service mesh models."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class IstioGateway(BaseModel):
    """Istio Gateway resource."""

    model_config = ConfigDict(frozen=True)

    name: str
    namespace: str | None = None
    servers: list[dict[str, Any]] | None = None


class IstioVirtualService(BaseModel):
    """Istio VirtualService resource."""

    model_config = ConfigDict(frozen=True)

    name: str
    namespace: str | None = None
    hosts: list[str] = Field(default_factory=list)
    gateways: list[str] | None = None


class IstioDestinationRule(BaseModel):
    """Istio DestinationRule resource."""

    model_config = ConfigDict(frozen=True)

    name: str
    namespace: str | None = None
    host: str | None = None


class MeshStats(BaseModel):
    model_config = ConfigDict(frozen=True)

    gateway_count: int = 0
    virtual_service_count: int = 0
    destination_rule_count: int = 0


class MeshInfo(BaseModel):
    """Service mesh state. ``installed=False`` carries no version or resources."""

    model_config = ConfigDict(frozen=True)

    installed: bool = False
    version: str | None = None
    namespace: str | None = None
    gateways: list[IstioGateway] = Field(default_factory=list)
    virtual_services: list[IstioVirtualService] = Field(default_factory=list)
    destination_rules: list[IstioDestinationRule] = Field(default_factory=list)
    stats: MeshStats = Field(default_factory=MeshStats)

    @classmethod
    def not_installed(cls) -> "MeshInfo":
        return cls(installed=False)

    @classmethod
    def build(
        cls,
        *,
        version: str,
        namespace: str,
        gateways: list[IstioGateway],
        virtual_services: list[IstioVirtualService],
        destination_rules: list[IstioDestinationRule],
    ) -> "MeshInfo":
        """Create an installed mesh state with stats derived from the lists."""
        return cls(
            installed=True,
            version=version,
            namespace=namespace,
            gateways=gateways,
            virtual_services=virtual_services,
            destination_rules=destination_rules,
            stats=MeshStats(
                gateway_count=len(gateways),
                virtual_service_count=len(virtual_services),
                destination_rule_count=len(destination_rules),
            ),
        )
