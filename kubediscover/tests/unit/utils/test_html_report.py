"""Tests for the HTML layout."""

from __future__ import annotations

import pytest

from kubediscover.models.core import DeploymentInfo
from kubediscover.models.reports import ReportData, ReportSummary
from kubediscover.utils.html_report import HTMLReportBuilder, esc


def build(data: ReportData) -> str:
    return HTMLReportBuilder(data, ReportSummary.from_data(data)).build()


class TestHTMLReportBuilder:
    """Tests for HTMLReportBuilder class."""

    @pytest.fixture
    def page(self, sample_report_data: ReportData) -> str:
        return build(sample_report_data)

    def test_skeleton(self, page: str) -> None:
        assert page.startswith("<!DOCTYPE html>")
        assert page.rstrip().endswith("</html>")
        assert "<style>" in page
        assert "function toggleSection(id)" in page
        assert "window.print()" in page

    def test_summary_cards(self, page: str) -> None:
        assert page.count('<div class="summary-card ') == 4
        assert '<div class="value">33%</div>' in page
        assert '<div class="value">1/2</div>' in page
        assert "D:2 S:1 C:1 DS:1" in page

    def test_warning_alert(self, page: str) -> None:
        assert "<strong>Configuration Warning:</strong> Namespace payments" in page

    def test_no_warning_alert_without_matches(self, sample_report_data: ReportData) -> None:
        summary = ReportSummary.from_data(sample_report_data, suspicious_node_selectors=())
        page = HTMLReportBuilder(sample_report_data, summary).build()
        assert "Configuration Warning" not in page

    def test_collapsible_sections(self, page: str) -> None:
        for section_id in ("node-pools", "namespaces", "istio", "workloads", "pods", "autoscaling"):
            assert f'<div class="section" id="{section_id}">' in page
            assert f"toggleSection('{section_id}')" in page

    def test_row_colours_follow_flags(self, page: str) -> None:
        assert page.count('<tr class="row-error">') == 2  # worker deployment, pending pod
        assert page.count('<tr class="row-warning">') == 2  # user pool not fully ready, suspended cronjob
        assert '<span class="badge warning">Yes</span>' in page
        assert '<span class="badge error">Unhealthy</span>' in page
        assert '<span class="badge success">Healthy</span>' in page

    def test_pod_table_shows_readiness(self, page: str) -> None:
        assert "<th>Ready</th><th>Containers</th>" in page.replace("\n", "")
        assert (
            '<td><code>api-7d9f</code></td><td><span class="badge success">Running</span></td>'
            '<td><span class="badge success">Yes</span></td><td>2/2</td>'
        ) in page
        assert (
            '<td><code>worker-5c2a</code></td><td><span class="badge error">Pending</span></td>'
            '<td><span class="badge error">No</span></td><td>0/1</td>'
        ) in page

    def test_namespace_scope_omits_node_pools(self, sample_report_data: ReportData) -> None:
        page = build(sample_report_data.model_copy(update={"target_namespace": "payments"}))
        assert 'id="node-pools"' not in page
        assert "Namespace <strong>payments</strong>" in page

    def test_dynamic_text_is_escaped(self, sample_report_data: ReportData) -> None:
        hostile = DeploymentInfo(
            name="<script>alert('x')</script>",
            namespace="a&b",
            replicas=1,
            ready_replicas=1,
            healthy=True,
        )
        data = sample_report_data.model_copy(
            update={"cluster": '"quoted"<b>', "deployments": [hostile]}
        )

        page = build(data)

        assert "<script>alert" not in page
        assert "&lt;script&gt;alert(&#x27;x&#x27;)&lt;/script&gt;" in page
        assert "a&amp;b" in page
        assert "&quot;quoted&quot;&lt;b&gt;" in page


class TestEsc:
    """Tests for esc helper."""

    def test_none_is_empty(self) -> None:
        assert esc(None) == ""

    def test_numbers(self) -> None:
        assert esc(3) == "3"
