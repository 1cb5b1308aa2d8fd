"""Settings models."""

from kubediscover.models.state.report_settings import (
    ConfigError,
    ConfigLoadError,
    ReportSettings,
    load_settings,
)

__all__ = ["ConfigError", "ConfigLoadError", "ReportSettings", "load_settings"]
