"""Namespace parser for cluster controller."""

from __future__ import annotations

from typing import Any

from kubediscover.constants.defaults import UNKNOWN
from kubediscover.constants.labels import (
    DEFAULT_TOLERATIONS_ANNOTATION,
    ISTIO_INJECTION_ENABLED,
    ISTIO_INJECTION_LABEL,
    ISTIO_REVISION_LABEL,
    NODE_SELECTOR_ANNOTATION,
)
from kubediscover.models.core import NamespaceInfo
from kubediscover.utils.resource_parser import as_dict, optional_str, string_map


class NamespaceParser:
    """Parses namespace objects into NamespaceInfo."""

    def parse_namespace(self, namespace: dict[str, Any]) -> NamespaceInfo:
        metadata = as_dict(namespace.get("metadata"))
        labels = string_map(metadata.get("labels"))
        annotations = string_map(metadata.get("annotations"))
        return NamespaceInfo(
            name=optional_str(metadata.get("name")) or UNKNOWN,
            labels=labels,
            annotations=annotations,
            istio_injection=labels.get(ISTIO_INJECTION_LABEL, "disabled") == ISTIO_INJECTION_ENABLED,
            istio_rev=labels.get(ISTIO_REVISION_LABEL),
            node_selector=annotations.get(NODE_SELECTOR_ANNOTATION),
            default_tolerations=annotations.get(DEFAULT_TOLERATIONS_ANNOTATION),
        )

    def parse_namespaces(self, items: list[Any]) -> list[NamespaceInfo]:
        return [self.parse_namespace(item) for item in items if isinstance(item, dict)]
