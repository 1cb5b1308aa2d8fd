"""Node parser for cluster controller - parses node data into pool summaries."""

from __future__ import annotations

from collections import defaultdict
from typing import Any

from kubediscover.constants.defaults import UNKNOWN
from kubediscover.constants.labels import (
    NODE_MODE_LABEL,
    NODE_POOL_LABELS,
    NODE_PRIORITY_LABEL,
    NODE_PRIORITY_SPOT,
)
from kubediscover.models.core import NodeInfo, NodePoolInfo, Taint
from kubediscover.utils.resource_parser import (
    as_dict,
    as_list,
    condition_is_true,
    optional_str,
    string_map,
)


class NodeParser:
    """Parses node data into structured formats."""

    def __init__(self) -> None:
        """Initialize node parser."""
        pass

    def _get_label_value(
        self, labels: dict[str, str], label_tuples: tuple[str, ...], default: str = UNKNOWN
    ) -> str:
        """Extract label value from labels dict using ordered label tuples."""
        for label in label_tuples:
            value = labels.get(label)
            if value:
                return value
        return default

    @staticmethod
    def _parse_taints(spec: dict[str, Any]) -> list[Taint]:
        return [
            Taint(
                key=optional_str(taint.get("key")),
                value=optional_str(taint.get("value")),
                effect=optional_str(taint.get("effect")),
            )
            for taint in as_list(spec.get("taints"))
            if isinstance(taint, dict)
        ]

    def parse_node(self, node: dict[str, Any]) -> NodeInfo:
        """Parse a single raw node into NodeInfo.

        Args:
            node: Raw node dictionary from API

        Returns:
            NodeInfo object.
        """
        metadata = as_dict(node.get("metadata"))
        status = as_dict(node.get("status"))
        spec = as_dict(node.get("spec"))
        labels = string_map(metadata.get("labels"))

        return NodeInfo(
            name=optional_str(metadata.get("name")) or UNKNOWN,
            pool=self._get_label_value(labels, NODE_POOL_LABELS),
            mode=labels.get(NODE_MODE_LABEL) or UNKNOWN,
            ready=condition_is_true(status.get("conditions"), "Ready"),
            spot=labels.get(NODE_PRIORITY_LABEL, "regular") == NODE_PRIORITY_SPOT,
            taints=self._parse_taints(spec),
            labels=labels,
        )

    def parse_nodes(self, items: list[Any]) -> list[NodeInfo]:
        """Parse node list items, skipping entries without metadata."""
        return [
            self.parse_node(item)
            for item in items
            if isinstance(item, dict) and "metadata" in item
        ]

    @staticmethod
    def group_node_pools(nodes: list[NodeInfo]) -> list[NodePoolInfo]:
        """Group nodes by pool, sorted by pool name.

        The first node seen in a pool provides mode, spot flag and labels.
        Taints are the de-duplicated union across the pool.
        """
        pools: dict[str, list[NodeInfo]] = defaultdict(list)
        for node in nodes:
            pools[node.pool].append(node)

        summaries: list[NodePoolInfo] = []
        for pool_name in sorted(pools):
            members = pools[pool_name]
            first = members[0]
            taints: list[Taint] = []
            for node in members:
                for taint in node.taints:
                    if taint not in taints:
                        taints.append(taint)
            summaries.append(
                NodePoolInfo(
                    pool=pool_name,
                    mode=first.mode,
                    count=len(members),
                    ready=sum(1 for node in members if node.ready),
                    spot=first.spot,
                    taints=sorted(
                        taints,
                        key=lambda t: (t.key or "", t.value or "", t.effect or ""),
                    ),
                    common_labels=first.labels,
                )
            )
        return summaries
