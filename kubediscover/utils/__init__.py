"""Utility modules for kubediscover."""

from kubediscover.utils.report_generator import ReportGenerator
from kubediscover.utils.report_writer import ReportWriter, resolve_format

__all__ = ["ReportGenerator", "ReportWriter", "resolve_format"]
