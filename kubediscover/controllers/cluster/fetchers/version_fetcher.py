"""Cluster version detection.

The server version is looked up through an ordered list of strategies. Each
strategy returns the version string or None for "no match"; the first match
wins and the ``N/A`` sentinel is used only when every strategy misses.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Awaitable, Callable, Sequence

from kubediscover.constants.defaults import VERSION_UNAVAILABLE
from kubediscover.controllers.cluster.fetchers.resource_fetcher import (
    FETCH_ERRORS,
    RunKubectl,
)
from kubediscover.utils.resource_parser import dig

logger = logging.getLogger(__name__)

VersionStrategy = Callable[[RunKubectl], Awaitable[str | None]]


async def structured_version(run_kubectl: RunKubectl) -> str | None:
    """``kubectl version -o json`` -> ``serverVersion.gitVersion``."""
    output = await run_kubectl(("version", "-o", "json"))
    try:
        data = json.loads(output)
    except json.JSONDecodeError:
        return None
    version = dig(data, "serverVersion", "gitVersion")
    if isinstance(version, str) and version and version != "null":
        return version
    return None


async def legacy_short_version(run_kubectl: RunKubectl) -> str | None:
    """``kubectl version --short`` -> third field of the ``Server`` line."""
    output = await run_kubectl(("version", "--short"))
    for line in output.splitlines():
        if "Server" not in line:
            continue
        fields = line.split()
        if len(fields) >= 3:
            return fields[2]
    return None


DEFAULT_VERSION_STRATEGIES: tuple[VersionStrategy, ...] = (
    structured_version,
    legacy_short_version,
)


class VersionFetcher:
    """Resolves the cluster server version."""

    def __init__(
        self,
        run_kubectl_func: RunKubectl,
        strategies: Sequence[VersionStrategy] = DEFAULT_VERSION_STRATEGIES,
    ) -> None:
        self._run_kubectl = run_kubectl_func
        self._strategies = tuple(strategies)

    async def fetch_version(self) -> str:
        for strategy in self._strategies:
            try:
                version = await strategy(self._run_kubectl)
            except FETCH_ERRORS as exc:
                logger.debug("Version strategy %s failed: %s", strategy.__name__, exc)
                continue
            if version:
                return version
        logger.warning("Could not determine cluster version")
        return VERSION_UNAVAILABLE
