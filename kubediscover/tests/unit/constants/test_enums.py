"""Tests for enum definitions."""

from __future__ import annotations

from kubediscover.constants.enums import HEALTHY_POD_PHASES, PodPhase, ReportFormat


class TestReportFormat:
    """Tests for ReportFormat enum."""

    def test_values(self) -> None:
        assert [fmt.value for fmt in ReportFormat] == ["html", "json", "markdown"]

    def test_extensions(self) -> None:
        assert ReportFormat.HTML.extension == "html"
        assert ReportFormat.JSON.extension == "json"
        assert ReportFormat.MARKDOWN.extension == "md"


class TestPodPhase:
    """Tests for pod phase constants."""

    def test_healthy_phases(self) -> None:
        assert HEALTHY_POD_PHASES == {"Running", "Succeeded"}
        assert PodPhase.PENDING.value not in HEALTHY_POD_PHASES
