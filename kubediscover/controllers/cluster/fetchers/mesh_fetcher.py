"""Istio detection and resource fetching."""

from __future__ import annotations

import logging

from kubediscover.constants.defaults import (
    MESH_CONTROL_PLANE_DEPLOYMENT_DEFAULT,
    MESH_NAMESPACE_TOKEN_DEFAULT,
    UNKNOWN,
)
from kubediscover.controllers.cluster.fetchers.resource_fetcher import ResourceFetcher
from kubediscover.controllers.cluster.parsers.mesh_parser import MeshParser
from kubediscover.models.mesh import MeshInfo

logger = logging.getLogger(__name__)


class MeshFetcher:
    """Detects the mesh control plane and lists its traffic resources."""

    def __init__(
        self,
        resource_fetcher: ResourceFetcher,
        parser: MeshParser | None = None,
        namespace_token: str = MESH_NAMESPACE_TOKEN_DEFAULT,
        control_plane_deployment: str = MESH_CONTROL_PLANE_DEPLOYMENT_DEFAULT,
    ) -> None:
        self._resources = resource_fetcher
        self._parser = parser or MeshParser()
        self._namespace_token = namespace_token
        self._control_plane_deployment = control_plane_deployment

    async def find_control_plane_namespace(self) -> str | None:
        namespace_items = await self._resources.list_items("namespaces", cluster_scoped=True)
        return self._parser.find_control_plane_namespace(
            namespace_items, self._namespace_token
        )

    async def fetch_control_plane_version(self, control_plane_namespace: str) -> str:
        deployment = await self._resources.get_object(
            "deployment", self._control_plane_deployment, namespace=control_plane_namespace
        )
        if deployment is None:
            return UNKNOWN
        return self._parser.control_plane_version(deployment)

    async def detect(self, namespace: str | None = None) -> MeshInfo:
        """Detect the mesh and list its resources within ``namespace`` scope.

        When no control-plane namespace exists no further query is issued.
        """
        control_plane = await self.find_control_plane_namespace()
        if not control_plane:
            logger.info("No namespace matching %r; mesh not installed", self._namespace_token)
            return MeshInfo.not_installed()

        version = await self.fetch_control_plane_version(control_plane)
        gateways = await self._resources.list_items("gateway", namespace)
        virtual_services = await self._resources.list_items("virtualservice", namespace)
        destination_rules = await self._resources.list_items("destinationrule", namespace)

        return MeshInfo.build(
            version=version,
            namespace=control_plane,
            gateways=[self._parser.parse_gateway(item) for item in gateways],
            virtual_services=[
                self._parser.parse_virtual_service(item) for item in virtual_services
            ],
            destination_rules=[
                self._parser.parse_destination_rule(item) for item in destination_rules
            ],
        )
