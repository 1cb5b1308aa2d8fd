"""Istio resource parser."""

from __future__ import annotations

from typing import Any

from kubediscover.models.mesh import (
    IstioDestinationRule,
    IstioGateway,
    IstioVirtualService,
)
from kubediscover.utils.resource_parser import as_dict, as_list, dig, image_tag, optional_str


class MeshParser:
    """Parses Istio custom resources and control-plane details."""

    @staticmethod
    def find_control_plane_namespace(namespace_items: list[Any], token: str) -> str | None:
        """Return the first namespace whose name contains ``token``."""
        for item in namespace_items:
            name = dig(item, "metadata", "name")
            if isinstance(name, str) and token in name:
                return name
        return None

    @staticmethod
    def control_plane_version(deployment: dict[str, Any]) -> str:
        """Return the image tag of the control-plane deployment's first container."""
        containers = as_list(dig(deployment, "spec", "template", "spec", "containers"))
        if not containers:
            return "unknown"
        return image_tag(as_dict(containers[0]).get("image"))

    def parse_gateway(self, item: dict[str, Any]) -> IstioGateway:
        servers = dig(item, "spec", "servers")
        return IstioGateway(
            name=str(dig(item, "metadata", "name") or ""),
            namespace=optional_str(dig(item, "metadata", "namespace")),
            servers=[as_dict(s) for s in servers] if isinstance(servers, list) else None,
        )

    def parse_virtual_service(self, item: dict[str, Any]) -> IstioVirtualService:
        gateways = dig(item, "spec", "gateways")
        return IstioVirtualService(
            name=str(dig(item, "metadata", "name") or ""),
            namespace=optional_str(dig(item, "metadata", "namespace")),
            hosts=[str(host) for host in as_list(dig(item, "spec", "hosts"))],
            gateways=[str(g) for g in gateways] if isinstance(gateways, list) else None,
        )

    def parse_destination_rule(self, item: dict[str, Any]) -> IstioDestinationRule:
        return IstioDestinationRule(
            name=str(dig(item, "metadata", "name") or ""),
            namespace=optional_str(dig(item, "metadata", "namespace")),
            host=optional_str(dig(item, "spec", "host")),
        )
