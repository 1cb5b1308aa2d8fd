"""Fetchers issuing kubectl queries for the cluster controller."""

from kubediscover.controllers.cluster.fetchers.mesh_fetcher import MeshFetcher
from kubediscover.controllers.cluster.fetchers.resource_fetcher import (
    FETCH_ERRORS,
    ResourceFetcher,
    RunKubectl,
)
from kubediscover.controllers.cluster.fetchers.version_fetcher import (
    DEFAULT_VERSION_STRATEGIES,
    VersionFetcher,
    legacy_short_version,
    structured_version,
)

__all__ = [
    "DEFAULT_VERSION_STRATEGIES",
    "FETCH_ERRORS",
    "MeshFetcher",
    "ResourceFetcher",
    "RunKubectl",
    "VersionFetcher",
    "legacy_short_version",
    "structured_version",
]
