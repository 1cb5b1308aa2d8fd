"""Autoscaling and storage models."""

from kubediscover.models.scaling.scaling_info import HPAInfo, PDBInfo, PVCInfo

__all__ = ["HPAInfo", "PDBInfo", "PVCInfo"]
