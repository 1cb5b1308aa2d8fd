"""Report generator - renders collected cluster data as Markdown, JSON or HTML."""

from __future__ import annotations

import json
import logging
from typing import Any

import yaml

from kubediscover.constants.enums import ReportFormat, RowStatus
from kubediscover.models.core import PodHealthGroup
from kubediscover.models.reports import ReportData, ReportSummary
from kubediscover.utils.formatting import (
    format_generated,
    format_node_selector,
    format_replicas,
    format_taints,
    format_tolerations,
    format_volume_templates,
    row_status,
)
from kubediscover.utils.html_report import HTMLReportBuilder

logger = logging.getLogger(__name__)

REPORT_TITLE = "Kubernetes Cluster Report"


class ReportGenerator:
    """Generate cluster reports from one collected data set.

    All formats read the same ``ReportData`` and ``ReportSummary``; the
    format only changes the layout.
    """

    # Constants for formatting
    TABLE_HEADER_METRIC_VALUE = (
        "| Metric | Value |",
        "| --- | --- |",
    )
    TABLE_HEADER_PODS = (
        "| Pod Name | Status | Ready | Containers | Sidecar | Restarts | Node |",
        "|----------|--------|-------|------------|---------|----------|------|",
    )

    def __init__(self, data: ReportData, summary: ReportSummary | None = None):
        self.data = data
        self.summary = summary or ReportSummary.from_data(data)
        self.lines: list[str] = []

    def generate(self, report_format: ReportFormat) -> str:
        """Render the report in ``report_format``."""
        logger.debug("Rendering %s report for %s", report_format.value, self.data.cluster)
        if report_format is ReportFormat.MARKDOWN:
            return self.generate_markdown_report()
        if report_format is ReportFormat.HTML:
            return self.generate_html_report()
        return self.generate_json_report()

    # ------------------------------------------------------------------
    # JSON
    # ------------------------------------------------------------------

    @staticmethod
    def _dump(items: list[Any]) -> list[dict[str, Any]]:
        return [item.model_dump(mode="json", by_alias=True) for item in items]

    def _get_summary_dict(self) -> dict[str, Any]:
        summary = self.summary.model_dump(mode="json", exclude={"config_warnings"})
        summary["config_warnings"] = [
            {**warning.model_dump(mode="json"), "message": warning.message}
            for warning in self.summary.config_warnings
        ]
        return summary

    def generate_json_report(self) -> str:
        """Generate a JSON report nesting every collected group."""
        data = self.data
        report_data: dict[str, Any] = {
            "cluster": data.cluster,
            "target_namespace": data.target_namespace or "",
            "version": data.version,
            "generated": data.generated_at.isoformat(),
            "summary": self._get_summary_dict(),
            "node_pools": self._dump(data.node_pools),
            "namespaces": self._dump(data.namespaces),
            "istio": self._get_istio_dict(),
            "workloads": {
                "deployments": self._dump(data.deployments),
                "statefulsets": self._dump(data.statefulsets),
                "cronjobs": self._dump(data.cronjobs),
                "daemonsets": self._dump(data.daemonsets),
            },
            "pod_health": self._dump(data.pod_health),
            "autoscaling": {
                "hpa": self._dump(data.hpas),
                "pdb": self._dump(data.pdbs),
            },
            "storage": {
                "pvcs": self._dump(data.pvcs),
            },
        }
        return json.dumps(report_data, indent=2)

    def _get_istio_dict(self) -> dict[str, Any]:
        if not self.data.istio.installed:
            return {"installed": False}
        return self.data.istio.model_dump(mode="json")

    # ------------------------------------------------------------------
    # HTML
    # ------------------------------------------------------------------

    def generate_html_report(self) -> str:
        return HTMLReportBuilder(self.data, self.summary).build()

    # ------------------------------------------------------------------
    # Markdown
    # ------------------------------------------------------------------

    def generate_markdown_report(self) -> str:
        """Generate a Markdown report."""
        self.lines = []

        self._add_header()
        self._add_summary()
        if not self.data.is_namespace_scoped:
            self._add_node_pools()
        self._add_namespaces()
        if self.data.istio.installed:
            self._add_istio()
        self._add_workloads()
        self._add_pods()
        self._add_autoscaling_and_storage()

        return "\n".join(self.lines) + "\n"

    def _add(self, line: str = "") -> None:
        """Add a line to the report."""
        self.lines.append(line)

    def _add_lines(self, *lines: str) -> None:
        """Add multiple lines to the report."""
        self.lines.extend(lines)

    @staticmethod
    def _status_marker(status: RowStatus) -> str:
        """Return an ASCII status marker for a row status."""
        return {
            RowStatus.SUCCESS: "[OK]",
            RowStatus.WARNING: "[WARN]",
        }.get(status, "[ERR]")

    @staticmethod
    def _bool_marker(value: bool) -> str:
        """Return an ASCII marker for a boolean value."""
        return "[OK]" if value else "[ERR]"

    @staticmethod
    def _code_list(values: list[str]) -> str:
        return ", ".join(f"`{value}`" for value in values)

    def _add_header(self) -> None:
        """Add report header."""
        self._add(f"# {REPORT_TITLE}: {self.data.cluster}")
        if self.data.target_namespace:
            self._add(f"## Namespace: {self.data.target_namespace}")
        self._add_lines(
            "",
            f"**Generated:** {format_generated(self.data.generated_at)}  ",
            f"**Kubernetes Version:** {self.data.version}",
            "",
        )

    def _add_summary(self) -> None:
        summary = self.summary
        self._add_lines(
            "---",
            "",
            "## Summary",
            "",
            *self.TABLE_HEADER_METRIC_VALUE,
            f"| Total Pods | {summary.total_pods} |",
            f"| Problem Pods | {self._bool_marker(not summary.problem_pods)} {summary.problem_pods} |",
            f"| Istio Sidecars | {summary.sidecar_pods} ({summary.sidecar_coverage}% coverage) |",
            f"| Deployments | {summary.healthy_deployments}/{summary.total_deployments} healthy |",
            f"| Workloads | {summary.total_workloads} "
            f"(D:{summary.total_deployments} S:{summary.total_statefulsets} "
            f"C:{summary.total_cronjobs} DS:{summary.total_daemonsets}) |",
            "",
        )
        if not summary.has_warnings:
            return
        for warning in summary.config_warnings:
            self._add(f"> **[WARN] Configuration Warning:** {warning.message}")
            self._add()

    def _add_node_pools(self) -> None:
        self._add_lines("---", "", "## Node Pools Summary", "")
        if not self.data.node_pools:
            self._add_lines("*No node data available*", "")
            return
        for pool in self.data.node_pools:
            self._add(f"### {pool.pool} ({pool.mode} mode)")
            self._add(f"- **Count:** {pool.count} nodes | **Ready:** {pool.ready}/{pool.count}")
            if pool.spot:
                self._add("- **Type:** Spot Instances")
            if pool.taints:
                self._add(f"- **Taints:** {self._code_list(format_taints(pool.taints))}")
            self._add()

    def _add_namespaces(self) -> None:
        self._add_lines("---", "", "## Namespace Configuration", "")
        for namespace in self.data.namespaces:
            injection = "Enabled" if namespace.istio_injection else "[ERR] Disabled"
            if namespace.istio_rev is not None:
                injection += f" (revision: `{namespace.istio_rev}`)"
            labels_yaml = (
                yaml.safe_dump(namespace.labels, default_flow_style=False, sort_keys=True).rstrip()
                if namespace.labels
                else ""
            )
            self._add_lines(
                f"### {namespace.name}",
                "",
                f"**Istio Injection:** {injection}",
                "",
                "**Labels:**",
                "```yaml",
                labels_yaml,
                "```",
                "",
            )
            if namespace.node_selector is not None:
                self._add_lines(
                    f"[WARN] **Node Selector Annotation:** `{namespace.node_selector}`", ""
                )
            if namespace.default_tolerations is not None:
                self._add_lines(
                    "**Default Tolerations:** ",
                    "```json",
                    namespace.default_tolerations,
                    "```",
                    "",
                )

    def _add_istio(self) -> None:
        mesh = self.data.istio
        self._add_lines(
            "---",
            "",
            "## Istio Service Mesh",
            "",
            f"**Version:** {mesh.version} | **Control Plane Namespace:** {mesh.namespace}",
            "",
            f"### Gateways ({mesh.stats.gateway_count})",
            "",
        )
        if mesh.gateways:
            for gateway in mesh.gateways:
                self._add(f"- **{gateway.namespace}/{gateway.name}**")
        else:
            self._add("*No gateways configured in this namespace*")

        self._add_lines("", f"### VirtualServices ({mesh.stats.virtual_service_count})", "")
        if mesh.virtual_services:
            for service in mesh.virtual_services:
                self._add(f"- **{service.namespace}/{service.name}**: {', '.join(service.hosts)}")
        else:
            self._add("*No virtual services configured in this namespace*")

        self._add_lines("", f"### DestinationRules ({mesh.stats.destination_rule_count})", "")
        if mesh.destination_rules:
            for rule in mesh.destination_rules:
                self._add(f"- **{rule.namespace}/{rule.name}**: {rule.host or 'N/A'}")
        else:
            self._add("*No destination rules configured in this namespace*")
        self._add()

    def _add_tolerations_line(self, tolerations: list[Any]) -> None:
        if tolerations:
            self._add(f"- **Tolerations:** {self._code_list(format_tolerations(tolerations))}")

    def _add_workloads(self) -> None:
        data = self.data
        self._add_lines("---", "", "## Workloads", "", f"### Deployments ({len(data.deployments)})", "")
        if not data.deployments:
            self._add("*No deployments*")
        for deployment in data.deployments:
            self._add_lines(
                f"#### {deployment.namespace}/{deployment.name}",
                f"- **Replicas:** {format_replicas(deployment.ready_replicas, deployment.replicas)} ready"
                f" | **Available:** {deployment.available_replicas}"
                f" | **Status:** {self._status_marker(row_status(deployment))}",
            )
            self._add_tolerations_line(deployment.tolerations)
            selector = format_node_selector(deployment.node_selector)
            if selector:
                self._add(f"- **Node Selector:** `{selector}`")
            self._add()

        self._add_lines("", f"### StatefulSets ({len(data.statefulsets)})", "")
        if not data.statefulsets:
            self._add("*No StatefulSets*")
        for statefulset in data.statefulsets:
            self._add_lines(
                f"#### {statefulset.namespace}/{statefulset.name}",
                f"- **Replicas:** {format_replicas(statefulset.ready_replicas, statefulset.replicas)}"
                f" | **Strategy:** {statefulset.update_strategy}"
                f" | **Status:** {self._status_marker(row_status(statefulset))}",
                f"- **Volumes:** {format_volume_templates(statefulset.volume_claim_templates)}",
            )
            self._add_tolerations_line(statefulset.tolerations)
            self._add()

        self._add_lines("", f"### CronJobs ({len(data.cronjobs)})", "")
        if not data.cronjobs:
            self._add("*No CronJobs*")
        for cronjob in data.cronjobs:
            self._add_lines(
                f"#### {cronjob.namespace}/{cronjob.name}",
                f"- **Schedule:** `{cronjob.schedule}`"
                f" | **Suspended:** {'Yes' if cronjob.suspend else 'No'}"
                f" | **Active:** {cronjob.active}"
                f" | **Status:** {self._status_marker(row_status(cronjob))}",
                f"- **Last Run:** {cronjob.last_schedule or 'Never'}",
            )
            self._add_tolerations_line(cronjob.tolerations)
            self._add()

        self._add_lines("", f"### DaemonSets ({len(data.daemonsets)})", "")
        if not data.daemonsets:
            self._add("*No DaemonSets*")
        for daemonset in data.daemonsets:
            self._add_lines(
                f"#### {daemonset.namespace}/{daemonset.name}",
                f"- **Ready:** {daemonset.ready}/{daemonset.desired}"
                f" | **Status:** {self._status_marker(row_status(daemonset))}",
            )
            if daemonset.unavailable > 0:
                self._add(f"- [WARN] **Unavailable:** {daemonset.unavailable}")
            self._add_tolerations_line(daemonset.tolerations)
            self._add()

    def _add_pod_group(self, group: PodHealthGroup) -> None:
        self._add_lines(
            f"### {group.namespace}",
            "",
            f"**Summary:** {group.total} pods | {group.running} running"
            f" | {group.with_sidecar} with Istio sidecar",
            "",
            "#### Pod List",
            "",
            *self.TABLE_HEADER_PODS,
        )
        for pod in group.pods:
            self._add(
                f"| `{pod.name}` | {pod.phase} | {self._bool_marker(pod.ready)}"
                f" | {pod.ready_containers}/{pod.container_count}"
                f" | {self._bool_marker(pod.has_sidecar)} | {pod.restart_count}"
                f" | {pod.node_name or 'N/A'} |"
            )
        self._add()
        if group.problems:
            self._add_lines("#### [WARN] Problem Pods", "")
            for problem in group.problems:
                self._add(
                    f"- [ERR] **{problem.name}**: {problem.reason}"
                    f" (restarts: {problem.restart_count})"
                )
            self._add()

    def _add_pods(self) -> None:
        self._add_lines("---", "", f"## All Pods ({self.summary.total_pods})", "")
        if not self.data.pod_health:
            self._add_lines("*No pods*", "")
        for group in self.data.pod_health:
            self._add_pod_group(group)

    def _add_autoscaling_and_storage(self) -> None:
        data = self.data
        summary = self.summary
        self._add_lines(
            "---",
            "",
            "## Autoscaling & Storage",
            "",
            f"**HPAs:** {summary.hpa_count} | **PDBs:** {summary.pdb_count} | **PVCs:** {summary.pvc_count}",
            "",
        )
        if data.hpas:
            self._add("### HPAs")
            for hpa in data.hpas:
                self._add(f"- **{hpa.namespace}/{hpa.name}**: min={hpa.min_replicas}, max={hpa.max_replicas}")
            self._add()

        if data.pdbs:
            self._add("### PDBs")
            for pdb in data.pdbs:
                minimum = pdb.min_available if pdb.min_available is not None else "N/A"
                self._add(
                    f"- **{pdb.namespace}/{pdb.name}**: min={minimum}, disruptions={pdb.disruptions_allowed}"
                )
            self._add()

        if data.pvcs:
            self._add("### PVCs")
            by_namespace: dict[str, list[Any]] = {}
            for pvc in sorted(data.pvcs, key=lambda p: p.namespace):
                by_namespace.setdefault(pvc.namespace, []).append(pvc)
            for namespace, pvcs in by_namespace.items():
                self._add(f"#### {namespace}")
                for pvc in pvcs:
                    self._add(f"- **{pvc.name}**: {pvc.size} ({pvc.storage_class}) - {pvc.status}")
                self._add()
