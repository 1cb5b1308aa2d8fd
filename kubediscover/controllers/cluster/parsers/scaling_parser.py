"""Parser for HPAs, PDBs and PVCs."""

from __future__ import annotations

from typing import Any

from kubediscover.models.scaling import HPAInfo, PDBInfo, PVCInfo
from kubediscover.utils.resource_parser import coerce_int, dig, optional_int, optional_str


class ScalingParser:
    """Thin projections of autoscaling, disruption budget and storage objects."""

    @staticmethod
    def _ns_and_name(item: dict[str, Any]) -> tuple[str, str]:
        return (
            str(dig(item, "metadata", "namespace") or ""),
            str(dig(item, "metadata", "name") or ""),
        )

    def parse_hpa(self, item: dict[str, Any]) -> HPAInfo:
        namespace, name = self._ns_and_name(item)
        return HPAInfo(
            namespace=namespace,
            name=name,
            min_replicas=optional_int(dig(item, "spec", "minReplicas")),
            max_replicas=optional_int(dig(item, "spec", "maxReplicas")),
        )

    def parse_pdb(self, item: dict[str, Any]) -> PDBInfo:
        namespace, name = self._ns_and_name(item)
        min_available = dig(item, "spec", "minAvailable")
        if not isinstance(min_available, (int, str)) or isinstance(min_available, bool):
            min_available = None
        return PDBInfo(
            namespace=namespace,
            name=name,
            min_available=min_available,
            disruptions_allowed=coerce_int(dig(item, "status", "disruptionsAllowed")),
        )

    def parse_pvc(self, item: dict[str, Any]) -> PVCInfo:
        namespace, name = self._ns_and_name(item)
        return PVCInfo(
            namespace=namespace,
            name=name,
            status=optional_str(dig(item, "status", "phase")),
            size=optional_str(dig(item, "spec", "resources", "requests", "storage")),
            storage_class=optional_str(dig(item, "spec", "storageClassName")),
        )
