"""Report settings model and loader.

Settings are resolved in three layers, later layers winning:

1. model defaults
2. an optional YAML file
3. ``KUBEDISCOVER_*`` environment variables
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from kubediscover.constants.defaults import (
    KUBECTL_BINARY_DEFAULT,
    MESH_CONTROL_PLANE_DEPLOYMENT_DEFAULT,
    MESH_NAMESPACE_TOKEN_DEFAULT,
    MESH_PROXY_CONTAINER_DEFAULT,
    REPORTS_DIR_DEFAULT,
    SUSPICIOUS_NODE_SELECTORS_DEFAULT,
)
from kubediscover.constants.timeouts import (
    CLUSTER_REQUEST_TIMEOUT,
    KUBECTL_COMMAND_TIMEOUT,
)

logger = logging.getLogger(__name__)

ENV_PREFIX = "KUBEDISCOVER_"


class ReportSettings(BaseModel):
    """Report settings model with validation."""

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="forbid")

    # Output
    reports_dir: str = REPORTS_DIR_DEFAULT

    # kubectl
    kubectl_binary: str = KUBECTL_BINARY_DEFAULT
    request_timeout: str = CLUSTER_REQUEST_TIMEOUT
    command_timeout: int = KUBECTL_COMMAND_TIMEOUT  # seconds

    # Service mesh detection
    mesh_namespace_token: str = MESH_NAMESPACE_TOKEN_DEFAULT
    mesh_control_plane_deployment: str = MESH_CONTROL_PLANE_DEPLOYMENT_DEFAULT
    mesh_proxy_container: str = MESH_PROXY_CONTAINER_DEFAULT

    # Namespace node-selector values that trigger a configuration warning
    suspicious_node_selectors: tuple[str, ...] = Field(
        default=SUSPICIOUS_NODE_SELECTORS_DEFAULT
    )

    @field_validator("command_timeout")
    @classmethod
    def _positive_timeout(cls, value: int) -> int:
        if value < 1:
            raise ValueError("command_timeout must be at least 1 second")
        return value

    @field_validator("suspicious_node_selectors", mode="before")
    @classmethod
    def _split_selectors(cls, value: Any) -> Any:
        if isinstance(value, str):
            return tuple(part.strip() for part in value.split(",") if part.strip())
        return value

    @property
    def reports_path(self) -> Path:
        return Path(self.reports_dir)


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when settings fail to load."""


def _read_config_file(path: Path) -> dict[str, Any]:
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigLoadError(f"Cannot read config file {path}: {exc}") from exc

    try:
        loaded = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise ConfigLoadError(f"Invalid YAML in config file {path}: {exc}") from exc

    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise ConfigLoadError(f"Config file {path} must contain a mapping")
    return loaded


def _env_overrides(environ: Mapping[str, str]) -> dict[str, str]:
    overrides: dict[str, str] = {}
    for field_name in ReportSettings.model_fields:
        env_name = f"{ENV_PREFIX}{field_name.upper()}"
        if env_name in environ:
            overrides[field_name] = environ[env_name]
    return overrides


def load_settings(
    config_path: str | Path | None = None,
    environ: Mapping[str, str] | None = None,
    **overrides: Any,
) -> ReportSettings:
    """Build settings from file, environment and explicit overrides.

    Args:
        config_path: Optional YAML file with settings keys.
        environ: Environment mapping; defaults to ``os.environ``.
        **overrides: Highest-priority values; ``None`` values are ignored.

    Raises:
        ConfigLoadError: When the file is unreadable or values fail validation.
    """
    values: dict[str, Any] = {}
    if config_path is not None:
        values.update(_read_config_file(Path(config_path)))
        logger.debug("Loaded settings file %s", config_path)
    values.update(_env_overrides(os.environ if environ is None else environ))
    values.update({key: value for key, value in overrides.items() if value is not None})

    try:
        return ReportSettings(**values)
    except ValidationError as exc:
        raise ConfigLoadError(f"Invalid settings: {exc}") from exc
