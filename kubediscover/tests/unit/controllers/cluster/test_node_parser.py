"""Tests for node parser."""

from __future__ import annotations

from typing import Any

import pytest

from kubediscover.controllers.cluster.parsers.node_parser import NodeParser
from kubediscover.models.core import Taint


def make_node(
    name: str,
    pool: str | None = "user",
    *,
    ready: bool = True,
    mode: str = "User",
    spot: bool = False,
    taints: list[dict[str, Any]] | None = None,
    pool_label: str = "agentpool",
) -> dict[str, Any]:
    labels = {"kubernetes.azure.com/mode": mode}
    if pool is not None:
        labels[pool_label] = pool
    if spot:
        labels["kubernetes.azure.com/scalesetpriority"] = "Spot"
    return {
        "metadata": {"name": name, "labels": labels},
        "spec": {"taints": taints or []},
        "status": {"conditions": [{"type": "Ready", "status": "True" if ready else "False"}]},
    }


class TestNodeParser:
    """Tests for NodeParser class."""

    @pytest.fixture
    def parser(self) -> NodeParser:
        """Create NodeParser instance."""
        return NodeParser()

    def test_parse_node_basic(self, parser: NodeParser) -> None:
        """Test parsing a ready node."""
        node = parser.parse_node(make_node("aks-user-0", ready=True))

        assert node.name == "aks-user-0"
        assert node.pool == "user"
        assert node.mode == "User"
        assert node.ready is True
        assert node.spot is False

    def test_parse_node_pool_label_fallback(self, parser: NodeParser) -> None:
        """The managed pool label is used when the short label is absent."""
        node = parser.parse_node(
            make_node("n1", "gpu", pool_label="kubernetes.azure.com/agentpool")
        )
        assert node.pool == "gpu"

    def test_parse_node_without_pool_label(self, parser: NodeParser) -> None:
        node = parser.parse_node(make_node("n1", pool=None))
        assert node.pool == "unknown"

    def test_parse_node_spot_and_taints(self, parser: NodeParser) -> None:
        node = parser.parse_node(
            make_node(
                "n1",
                spot=True,
                taints=[{"key": "kubernetes.azure.com/scalesetpriority", "value": "spot", "effect": "NoSchedule"}],
            )
        )
        assert node.spot is True
        assert node.taints == [
            Taint(key="kubernetes.azure.com/scalesetpriority", value="spot", effect="NoSchedule")
        ]

    def test_parse_node_wrong_typed_fields(self, parser: NodeParser) -> None:
        raw = make_node("n1", taints=[{"key": 1, "value": {"v": "x"}, "effect": "NoSchedule"}])
        raw["metadata"]["name"] = 42
        node = parser.parse_node(raw)
        assert node.name == "42"
        assert node.taints == [Taint(key="1", value=None, effect="NoSchedule")]

    def test_parse_nodes_skips_entries_without_metadata(self, parser: NodeParser) -> None:
        nodes = parser.parse_nodes([make_node("n1"), {"spec": {}}, "garbage"])
        assert [node.name for node in nodes] == ["n1"]

    def test_group_node_pools(self, parser: NodeParser) -> None:
        """Nodes are grouped by pool with ready counts and sorted pool names."""
        nodes = parser.parse_nodes(
            [
                make_node("user-0", "user", ready=True),
                make_node("user-1", "user", ready=False),
                make_node("sys-0", "system", mode="System"),
            ]
        )

        pools = parser.group_node_pools(nodes)

        assert [pool.pool for pool in pools] == ["system", "user"]
        user = pools[1]
        assert user.count == 2
        assert user.ready == 1
        assert user.mode == "User"
        assert sum(pool.count for pool in pools) == len(nodes)

    def test_group_node_pools_unique_taints(self, parser: NodeParser) -> None:
        """Taints shared by several nodes appear once per pool."""
        taint = {"key": "dedicated", "value": "gpu", "effect": "NoSchedule"}
        nodes = parser.parse_nodes(
            [
                make_node("gpu-0", "gpu", taints=[taint]),
                make_node("gpu-1", "gpu", taints=[taint, {"key": "a", "effect": "NoExecute"}]),
            ]
        )

        pool = parser.group_node_pools(nodes)[0]

        assert len(pool.taints) == 2
        assert [t.key for t in pool.taints] == ["a", "dedicated"]

    def test_group_node_pools_first_node_is_representative(self, parser: NodeParser) -> None:
        nodes = parser.parse_nodes(
            [
                make_node("n0", "mixed", mode="User", spot=True),
                make_node("n1", "mixed", mode="System", spot=False),
            ]
        )

        pool = parser.group_node_pools(nodes)[0]

        assert pool.mode == "User"
        assert pool.spot is True

    def test_group_node_pools_empty(self, parser: NodeParser) -> None:
        assert parser.group_node_pools([]) == []
