"""Generic resource fetcher - lists Kubernetes objects through kubectl."""

from __future__ import annotations

import json
import logging
import subprocess
from collections.abc import Awaitable, Callable
from typing import Any

from kubediscover.constants.timeouts import CLUSTER_REQUEST_TIMEOUT
from kubediscover.controllers.cluster.errors import KubectlError
from kubediscover.utils.resource_parser import as_list

logger = logging.getLogger(__name__)

RunKubectl = Callable[[tuple[str, ...]], Awaitable[str]]

# Failures that degrade a listing to an empty result instead of aborting the run.
FETCH_ERRORS = (KubectlError, subprocess.TimeoutExpired, OSError)


class ResourceFetcher:
    """Lists resources for the whole cluster or a single namespace.

    Every listing failure (kubectl error, timeout, unparsable output) is
    logged and returned as an empty list.
    """

    def __init__(
        self,
        run_kubectl_func: RunKubectl,
        request_timeout: str = CLUSTER_REQUEST_TIMEOUT,
    ) -> None:
        """Initialize with kubectl runner function.

        Args:
            run_kubectl_func: Async function to run kubectl commands
            request_timeout: Value passed to ``--request-timeout``
        """
        self._run_kubectl = run_kubectl_func
        self._request_timeout = request_timeout

    @staticmethod
    def scope_args(namespace: str | None) -> tuple[str, ...]:
        """Build the namespace selection arguments for a listing."""
        if namespace:
            return ("-n", namespace)
        return ("--all-namespaces",)

    def _build_get_args(self, *parts: str) -> tuple[str, ...]:
        return (
            "get",
            *parts,
            "-o",
            "json",
            f"--request-timeout={self._request_timeout}",
        )

    async def get_json(self, *parts: str) -> dict[str, Any] | None:
        """Run ``kubectl get <parts> -o json`` and decode the result.

        Returns:
            Decoded object, or None when the command fails or output is not a JSON object.
        """
        args = self._build_get_args(*parts)
        try:
            output = await self._run_kubectl(args)
        except FETCH_ERRORS as exc:
            logger.warning("kubectl %s failed: %s", " ".join(parts), exc)
            return None

        if not output:
            return None
        try:
            data = json.loads(output)
        except json.JSONDecodeError:
            logger.warning("kubectl %s returned malformed JSON", " ".join(parts))
            return None
        if not isinstance(data, dict):
            logger.warning("kubectl %s returned unexpected payload", " ".join(parts))
            return None
        return data

    async def list_items(
        self,
        resource: str,
        namespace: str | None = None,
        *,
        cluster_scoped: bool = False,
    ) -> list[dict[str, Any]]:
        """List ``resource`` objects.

        Args:
            resource: kubectl resource name (``pods``, ``deployments``...)
            namespace: Restrict to one namespace; all namespaces when None
            cluster_scoped: The resource has no namespace (nodes, namespaces)
        """
        parts: tuple[str, ...] = (resource,)
        if not cluster_scoped:
            parts = (*parts, *self.scope_args(namespace))

        data = await self.get_json(*parts)
        if data is None:
            return []
        items = [item for item in as_list(data.get("items")) if isinstance(item, dict)]
        logger.debug("Fetched %d %s", len(items), resource)
        return items

    async def get_object(
        self,
        resource: str,
        name: str,
        namespace: str | None = None,
    ) -> dict[str, Any] | None:
        """Fetch a single named object, None when missing or on failure."""
        parts: tuple[str, ...] = (resource, name)
        if namespace:
            parts = (*parts, "-n", namespace)
        return await self.get_json(*parts)
