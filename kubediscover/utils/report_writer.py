"""Persist rendered reports under the reports directory."""

from __future__ import annotations

import logging
import shutil
import tempfile
from pathlib import Path

from kubediscover.constants.defaults import (
    REPORT_FORMAT_DEFAULT,
    TIMESTAMP_FORMAT,
    WORKSPACE_PREFIX,
)
from kubediscover.constants.enums import ReportFormat
from kubediscover.models.reports import ReportData, ReportSummary
from kubediscover.models.state import ReportSettings
from kubediscover.utils.report_generator import ReportGenerator

logger = logging.getLogger(__name__)


def resolve_format(value: str | None) -> ReportFormat:
    """Map a CLI format argument to a ``ReportFormat``.

    Unknown values fall back to JSON with a warning so that a typo still
    yields a report.
    """
    if value is None:
        return ReportFormat(REPORT_FORMAT_DEFAULT)
    try:
        return ReportFormat(value.strip().lower())
    except ValueError:
        logger.warning(
            "Unknown report format %r, falling back to %s", value, REPORT_FORMAT_DEFAULT
        )
        return ReportFormat(REPORT_FORMAT_DEFAULT)


class ReportWriter:
    """Render a report and move it into the reports directory.

    The document is first written inside a temporary workspace; the
    workspace is removed when the context manager exits, on success,
    error or interrupt alike.
    """

    def __init__(self, settings: ReportSettings | None = None):
        self.settings = settings or ReportSettings()

    @property
    def reports_dir(self) -> Path:
        return self.settings.reports_path

    @staticmethod
    def build_filename(data: ReportData, report_format: ReportFormat) -> str:
        """``<cluster>[_<namespace>]_<YYYYmmdd_HHMMSS>.<ext>``"""
        parts = [data.cluster]
        if data.target_namespace:
            parts.append(data.target_namespace)
        parts.append(data.generated_at.strftime(TIMESTAMP_FORMAT))
        return f"{'_'.join(parts)}.{report_format.extension}"

    def render(
        self,
        data: ReportData,
        report_format: ReportFormat,
        summary: ReportSummary | None = None,
    ) -> str:
        summary = summary or ReportSummary.from_data(
            data, self.settings.suspicious_node_selectors
        )
        return ReportGenerator(data, summary).generate(report_format)

    def write(
        self,
        data: ReportData,
        report_format: ReportFormat,
        summary: ReportSummary | None = None,
    ) -> Path:
        """Render ``data`` and return the path of the saved report."""
        filename = self.build_filename(data, report_format)
        target = self.reports_dir / filename

        with tempfile.TemporaryDirectory(prefix=WORKSPACE_PREFIX) as tmp_dir:
            staged = Path(tmp_dir) / filename
            staged.write_text(self.render(data, report_format, summary), encoding="utf-8")
            logger.debug("Rendered %s report into %s", report_format.value, staged)

            self.reports_dir.mkdir(parents=True, exist_ok=True)
            shutil.move(str(staged), target)

        logger.info("Report saved to %s", target)
        return target
