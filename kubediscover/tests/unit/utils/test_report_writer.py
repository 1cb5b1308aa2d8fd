"""Tests for report writer."""

from __future__ import annotations

import json
import logging
import tempfile
from datetime import datetime
from pathlib import Path

import pytest

from kubediscover.constants.enums import ReportFormat
from kubediscover.models.reports import ReportData
from kubediscover.models.state import ReportSettings
from kubediscover.utils.report_writer import ReportWriter, resolve_format


class TestResolveFormat:
    """Tests for resolve_format."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (None, ReportFormat.JSON),
            ("html", ReportFormat.HTML),
            ("JSON", ReportFormat.JSON),
            ("markdown", ReportFormat.MARKDOWN),
        ],
    )
    def test_known_values(self, value: str | None, expected: ReportFormat) -> None:
        assert resolve_format(value) is expected

    def test_unknown_value_falls_back_with_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="kubediscover.utils.report_writer"):
            assert resolve_format("pdf") is ReportFormat.JSON

        assert "'pdf'" in caplog.text


class TestReportWriter:
    """Tests for ReportWriter class."""

    @pytest.fixture
    def writer(self, tmp_path: Path) -> ReportWriter:
        return ReportWriter(ReportSettings(reports_dir=str(tmp_path / "reports")))

    def test_build_filename_cluster(self, sample_report_data: ReportData) -> None:
        assert (
            ReportWriter.build_filename(sample_report_data, ReportFormat.JSON)
            == "prod-aks_20240501_123045.json"
        )

    def test_build_filename_namespace(self, sample_report_data: ReportData) -> None:
        data = sample_report_data.model_copy(update={"target_namespace": "payments"})
        assert (
            ReportWriter.build_filename(data, ReportFormat.MARKDOWN)
            == "prod-aks_payments_20240501_123045.md"
        )

    def test_write_creates_directory_and_file(
        self, writer: ReportWriter, sample_report_data: ReportData
    ) -> None:
        path = writer.write(sample_report_data, ReportFormat.HTML)

        assert path == writer.reports_dir / "prod-aks_20240501_123045.html"
        assert path.read_text(encoding="utf-8").startswith("<!DOCTYPE html>")

    def test_workspace_is_removed(
        self,
        writer: ReportWriter,
        sample_report_data: ReportData,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        scratch = tmp_path / "scratch"
        scratch.mkdir()
        monkeypatch.setattr(tempfile, "tempdir", str(scratch))

        writer.write(sample_report_data, ReportFormat.JSON)

        assert list(scratch.iterdir()) == []

    def test_workspace_is_removed_on_failure(
        self,
        writer: ReportWriter,
        sample_report_data: ReportData,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        scratch = tmp_path / "scratch"
        scratch.mkdir()
        monkeypatch.setattr(tempfile, "tempdir", str(scratch))

        def explode(*args: object) -> None:
            raise KeyboardInterrupt

        monkeypatch.setattr("kubediscover.utils.report_writer.shutil.move", explode)

        with pytest.raises(KeyboardInterrupt):
            writer.write(sample_report_data, ReportFormat.JSON)

        assert list(scratch.iterdir()) == []
        assert list(writer.reports_dir.iterdir()) == []

    def test_two_runs_differ_only_in_timestamp(
        self, writer: ReportWriter, sample_report_data: ReportData
    ) -> None:
        later = sample_report_data.model_copy(update={"generated_at": datetime(2024, 5, 2, 8, 0, 0)})

        first = writer.write(sample_report_data, ReportFormat.JSON)
        second = writer.write(later, ReportFormat.JSON)

        assert first != second
        first_report = json.loads(first.read_text(encoding="utf-8"))
        second_report = json.loads(second.read_text(encoding="utf-8"))
        assert first_report.pop("generated") != second_report.pop("generated")
        assert first_report == second_report

    def test_summary_uses_configured_patterns(
        self, tmp_path: Path, sample_report_data: ReportData
    ) -> None:
        writer = ReportWriter(
            ReportSettings(reports_dir=str(tmp_path), suspicious_node_selectors=("pool=infra",))
        )

        report = json.loads(writer.render(sample_report_data, ReportFormat.JSON))

        assert report["summary"]["config_warnings"] == []
