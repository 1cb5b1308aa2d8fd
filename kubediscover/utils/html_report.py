"""HTML layout for cluster reports.

The page is a fixed skeleton: embedded stylesheet, four summary cards, an
optional configuration warning, then one collapsible section per entity
group. Every value taken from the cluster passes through ``html.escape``.
"""

from __future__ import annotations

import html
import json
from typing import Any

from kubediscover.constants.enums import RowStatus
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

PAGE_STYLE = """
* { margin: 0; padding: 0; box-sizing: border-box; }
body {
  font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;
  background: #f5f7fa; color: #2c3e50; line-height: 1.6; padding: 20px;
}
.container {
  max-width: 1400px; margin: 0 auto; background: white;
  border-radius: 12px; box-shadow: 0 2px 20px rgba(0,0,0,0.08); overflow: hidden;
}
header {
  background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
  color: white; padding: 40px;
}
header h1 { font-size: 2.2em; margin-bottom: 10px; }
header .meta { opacity: 0.9; font-size: 0.95em; }
.content { padding: 40px; }
.summary-grid {
  display: grid; grid-template-columns: repeat(auto-fit, minmax(220px, 1fr));
  gap: 20px; margin-bottom: 40px;
}
.summary-card {
  background: #f8f9fb; border-radius: 10px; padding: 24px;
  border-left: 4px solid #667eea;
}
.summary-card.success { border-left-color: #10b981; }
.summary-card.warning { border-left-color: #f59e0b; }
.summary-card.error { border-left-color: #ef4444; }
.summary-card .label {
  font-size: 0.85em; color: #6b7280; text-transform: uppercase; letter-spacing: 0.5px;
}
.summary-card .value { font-size: 2em; font-weight: 700; margin: 8px 0 4px; }
.summary-card .detail { font-size: 0.85em; color: #6b7280; }
.alert {
  padding: 16px 20px; border-radius: 8px; margin-bottom: 24px;
  background: #fef3c7; border-left: 4px solid #f59e0b; color: #92400e;
}
.section { margin-bottom: 32px; border: 1px solid #e5e7eb; border-radius: 10px; }
.section-header {
  padding: 18px 24px; background: #f9fafb; cursor: pointer;
  display: flex; justify-content: space-between; align-items: center;
}
.section-header h2 { font-size: 1.3em; }
.section-content { padding: 24px; }
.section.collapsed .section-content { display: none; }
.section.collapsed .toggle { transform: rotate(-90deg); }
h3 { margin: 20px 0 12px; font-size: 1.1em; color: #374151; }
table { width: 100%; border-collapse: collapse; margin: 12px 0; font-size: 0.92em; }
th {
  background: #f3f4f6; text-align: left; padding: 10px 12px;
  font-weight: 600; color: #374151;
}
td { padding: 10px 12px; border-top: 1px solid #e5e7eb; vertical-align: top; }
tr.row-error td { background: #fef2f2; }
tr.row-warning td { background: #fffbeb; }
.badge {
  display: inline-block; padding: 2px 10px; border-radius: 12px;
  font-size: 0.8em; font-weight: 600;
}
.badge.success { background: #d1fae5; color: #065f46; }
.badge.warning { background: #fef3c7; color: #92400e; }
.badge.error { background: #fee2e2; color: #991b1b; }
.badge.info { background: #e0e7ff; color: #3730a3; }
.status-dot {
  display: inline-block; width: 10px; height: 10px; border-radius: 50%; margin-right: 6px;
}
.status-dot.success { background: #10b981; }
.status-dot.warning { background: #f59e0b; }
.status-dot.error { background: #ef4444; }
code {
  background: #f3f4f6; padding: 2px 6px; border-radius: 4px;
  font-family: 'SF Mono', Monaco, monospace; font-size: 0.88em;
}
pre {
  background: #1f2937; color: #e5e7eb; padding: 14px; border-radius: 6px;
  overflow-x: auto; font-size: 0.85em;
}
.empty { color: #9ca3af; font-style: italic; }
footer {
  padding: 24px 40px; background: #f9fafb; color: #6b7280;
  font-size: 0.85em; text-align: center;
}
footer a { color: #667eea; }
@media print {
  body { background: white; padding: 0; }
  .section.collapsed .section-content { display: block; }
}
"""

PAGE_SCRIPT = """
function toggleSection(id) {
  document.getElementById(id).classList.toggle('collapsed');
}
"""


def esc(value: Any) -> str:
    """Escape any value for HTML text or attribute content."""
    if value is None:
        return ""
    return html.escape(str(value), quote=True)


class HTMLReportBuilder:
    """Build the HTML page for one report."""

    def __init__(self, data: ReportData, summary: ReportSummary):
        self.data = data
        self.summary = summary
        self.lines: list[str] = []

    def build(self) -> str:
        self.lines = []
        self._add_head()
        self._add_summary_cards()
        self._add_warnings()
        if not self.data.is_namespace_scoped:
            self._add_node_pools()
        self._add_namespaces()
        if self.data.istio.installed:
            self._add_istio()
        self._add_workloads()
        self._add_pods()
        self._add_autoscaling_and_storage()
        self._add_footer()
        return "\n".join(self.lines) + "\n"

    def _add(self, *lines: str) -> None:
        self.lines.extend(lines)

    # ------------------------------------------------------------------
    # Building blocks
    # ------------------------------------------------------------------

    @staticmethod
    def _badge(text: Any, status: RowStatus) -> str:
        return f'<span class="badge {status.value}">{esc(text)}</span>'

    @staticmethod
    def _dot(status: RowStatus) -> str:
        return f'<span class="status-dot {status.value}"></span>'

    @staticmethod
    def _codes(values: list[str]) -> str:
        return " ".join(f"<code>{esc(value)}</code>" for value in values)

    @staticmethod
    def _row_class(status: RowStatus) -> str:
        if status in (RowStatus.ERROR, RowStatus.WARNING):
            return f' class="row-{status.value}"'
        return ""

    def _empty(self, message: str) -> None:
        self._add(f'<p class="empty">{esc(message)}</p>')

    def _open_section(self, section_id: str, title: str) -> None:
        self._add(
            f'<div class="section" id="{esc(section_id)}">',
            f'<div class="section-header" onclick="toggleSection(\'{esc(section_id)}\')">',
            f"<h2>{esc(title)}</h2>",
            '<span class="toggle">&#9660;</span>',
            "</div>",
            '<div class="section-content">',
        )

    def _close_section(self) -> None:
        self._add("</div>", "</div>")

    def _table(self, headers: list[str], rows: list[tuple[RowStatus | None, list[str]]]) -> None:
        """Render a table; cells are already escaped HTML fragments."""
        self._add("<table>", "<thead><tr>")
        self._add(*(f"<th>{esc(header)}</th>" for header in headers))
        self._add("</tr></thead>", "<tbody>")
        for status, cells in rows:
            row_class = self._row_class(status) if status is not None else ""
            self._add(f"<tr{row_class}>" + "".join(f"<td>{cell}</td>" for cell in cells) + "</tr>")
        self._add("</tbody>", "</table>")

    # ------------------------------------------------------------------
    # Sections
    # ------------------------------------------------------------------

    def _add_head(self) -> None:
        data = self.data
        title = f"Cluster Report: {data.cluster}"
        meta = [f"Kubernetes {esc(data.version)}", f"Generated {esc(format_generated(data.generated_at))}"]
        if data.target_namespace:
            meta.insert(0, f"Namespace <strong>{esc(data.target_namespace)}</strong>")
        self._add(
            "<!DOCTYPE html>",
            '<html lang="en">',
            "<head>",
            '<meta charset="UTF-8">',
            '<meta name="viewport" content="width=device-width, initial-scale=1.0">',
            f"<title>{esc(title)}</title>",
            f"<style>{PAGE_STYLE}</style>",
            "</head>",
            "<body>",
            '<div class="container">',
            "<header>",
            f"<h1>{esc(title)}</h1>",
            f'<div class="meta">{" | ".join(meta)}</div>',
            "</header>",
            '<div class="content">',
        )

    def _card(self, label: str, value: str, detail: str, status: RowStatus) -> None:
        self._add(
            f'<div class="summary-card {status.value}">',
            f'<div class="label">{esc(label)}</div>',
            f'<div class="value">{esc(value)}</div>',
            f'<div class="detail">{esc(detail)}</div>',
            "</div>",
        )

    def _add_summary_cards(self) -> None:
        summary = self.summary
        self._add('<div class="summary-grid">')
        self._card(
            "Total Pods",
            str(summary.total_pods),
            f"{summary.problem_pods} with issues",
            RowStatus.ERROR if summary.problem_pods else RowStatus.SUCCESS,
        )
        self._card(
            "Deployments",
            f"{summary.healthy_deployments}/{summary.total_deployments}",
            "healthy",
            RowStatus.SUCCESS if summary.all_deployments_healthy else RowStatus.WARNING,
        )
        self._card(
            "Istio Sidecars",
            f"{summary.sidecar_coverage}%",
            f"{summary.sidecar_pods} of {summary.total_pods} pods",
            RowStatus.INFO,
        )
        self._card(
            "Workloads",
            str(summary.total_workloads),
            f"D:{summary.total_deployments} S:{summary.total_statefulsets} "
            f"C:{summary.total_cronjobs} DS:{summary.total_daemonsets}",
            RowStatus.INFO,
        )
        self._add("</div>")

    def _add_warnings(self) -> None:
        if not self.summary.has_warnings:
            return
        for warning in self.summary.config_warnings:
            self._add(
                '<div class="alert">',
                f"<strong>Configuration Warning:</strong> {esc(warning.message)}",
                "</div>",
            )

    def _add_node_pools(self) -> None:
        self._open_section("node-pools", f"Node Pools ({len(self.data.node_pools)})")
        if not self.data.node_pools:
            self._empty("No node data available")
        else:
            rows = []
            for pool in self.data.node_pools:
                status = RowStatus.SUCCESS if pool.ready == pool.count else RowStatus.WARNING
                rows.append(
                    (
                        status,
                        [
                            f"<strong>{esc(pool.pool)}</strong>",
                            self._badge(pool.mode, RowStatus.INFO),
                            esc(pool.count),
                            f"{self._dot(status)}{esc(pool.ready)}/{esc(pool.count)}",
                            self._badge("Spot", RowStatus.WARNING) if pool.spot else "Regular",
                            self._codes(format_taints(pool.taints)) or "None",
                        ],
                    )
                )
            self._table(["Pool", "Mode", "Nodes", "Ready", "Type", "Taints"], rows)
        self._close_section()

    def _add_namespaces(self) -> None:
        self._open_section("namespaces", f"Namespace Configuration ({len(self.data.namespaces)})")
        if not self.data.namespaces:
            self._empty("No namespace data available")
        for namespace in self.data.namespaces:
            injection = (
                self._badge("Enabled", RowStatus.SUCCESS)
                if namespace.istio_injection
                else self._badge("Disabled", RowStatus.ERROR)
            )
            if namespace.istio_rev is not None:
                injection += f" revision <code>{esc(namespace.istio_rev)}</code>"
            self._add(f"<h3>{esc(namespace.name)}</h3>", f"<p>Istio injection: {injection}</p>")
            if namespace.labels:
                self._add(f"<pre>{esc(json.dumps(namespace.labels, indent=2, sort_keys=True))}</pre>")
            if namespace.node_selector is not None:
                self._add(
                    f"<p>{self._badge('Node Selector', RowStatus.WARNING)} "
                    f"<code>{esc(namespace.node_selector)}</code></p>"
                )
            if namespace.default_tolerations is not None:
                self._add(
                    "<p>Default tolerations:</p>",
                    f"<pre>{esc(namespace.default_tolerations)}</pre>",
                )
        self._close_section()

    def _add_istio(self) -> None:
        mesh = self.data.istio
        self._open_section("istio", "Istio Service Mesh")
        self._add(
            f"<p>Version <code>{esc(mesh.version)}</code> in namespace "
            f"<code>{esc(mesh.namespace)}</code></p>",
            f"<h3>Gateways ({mesh.stats.gateway_count})</h3>",
        )
        if mesh.gateways:
            self._table(
                ["Namespace", "Name"],
                [(None, [esc(g.namespace), esc(g.name)]) for g in mesh.gateways],
            )
        else:
            self._empty("No gateways configured")
        self._add(f"<h3>VirtualServices ({mesh.stats.virtual_service_count})</h3>")
        if mesh.virtual_services:
            self._table(
                ["Namespace", "Name", "Hosts", "Gateways"],
                [
                    (
                        None,
                        [
                            esc(vs.namespace),
                            esc(vs.name),
                            self._codes(vs.hosts),
                            esc(", ".join(vs.gateways or [])),
                        ],
                    )
                    for vs in mesh.virtual_services
                ],
            )
        else:
            self._empty("No virtual services configured")
        self._add(f"<h3>DestinationRules ({mesh.stats.destination_rule_count})</h3>")
        if mesh.destination_rules:
            self._table(
                ["Namespace", "Name", "Host"],
                [(None, [esc(dr.namespace), esc(dr.name), esc(dr.host)]) for dr in mesh.destination_rules],
            )
        else:
            self._empty("No destination rules configured")
        self._close_section()

    def _add_workloads(self) -> None:
        data = self.data
        self._open_section("workloads", f"Workloads ({self.summary.total_workloads})")

        self._add(f"<h3>Deployments ({len(data.deployments)})</h3>")
        if data.deployments:
            rows = []
            for deployment in data.deployments:
                status = row_status(deployment)
                rows.append(
                    (
                        status,
                        [
                            esc(deployment.namespace),
                            f"{self._dot(status)}<strong>{esc(deployment.name)}</strong>",
                            esc(format_replicas(deployment.ready_replicas, deployment.replicas)),
                            esc(deployment.available_replicas),
                            self._codes(format_tolerations(deployment.tolerations)),
                            esc(format_node_selector(deployment.node_selector)),
                            self._badge("Healthy" if deployment.healthy else "Unhealthy", status),
                        ],
                    )
                )
            self._table(
                ["Namespace", "Name", "Ready", "Available", "Tolerations", "Node Selector", "Status"],
                rows,
            )
        else:
            self._empty("No deployments")

        self._add(f"<h3>StatefulSets ({len(data.statefulsets)})</h3>")
        if data.statefulsets:
            rows = []
            for statefulset in data.statefulsets:
                status = row_status(statefulset)
                rows.append(
                    (
                        status,
                        [
                            esc(statefulset.namespace),
                            f"{self._dot(status)}<strong>{esc(statefulset.name)}</strong>",
                            esc(format_replicas(statefulset.ready_replicas, statefulset.replicas)),
                            esc(statefulset.update_strategy),
                            esc(format_volume_templates(statefulset.volume_claim_templates)),
                            self._badge("Healthy" if statefulset.healthy else "Unhealthy", status),
                        ],
                    )
                )
            self._table(["Namespace", "Name", "Ready", "Strategy", "Volumes", "Status"], rows)
        else:
            self._empty("No StatefulSets")

        self._add(f"<h3>CronJobs ({len(data.cronjobs)})</h3>")
        if data.cronjobs:
            rows = []
            for cronjob in data.cronjobs:
                status = row_status(cronjob)
                rows.append(
                    (
                        status,
                        [
                            esc(cronjob.namespace),
                            f"{self._dot(status)}<strong>{esc(cronjob.name)}</strong>",
                            f"<code>{esc(cronjob.schedule)}</code>",
                            self._badge("Yes" if cronjob.suspend else "No", status),
                            esc(cronjob.active),
                            esc(cronjob.last_schedule or "Never"),
                        ],
                    )
                )
            self._table(["Namespace", "Name", "Schedule", "Suspended", "Active", "Last Run"], rows)
        else:
            self._empty("No CronJobs")

        self._add(f"<h3>DaemonSets ({len(data.daemonsets)})</h3>")
        if data.daemonsets:
            rows = []
            for daemonset in data.daemonsets:
                status = row_status(daemonset)
                rows.append(
                    (
                        status,
                        [
                            esc(daemonset.namespace),
                            f"{self._dot(status)}<strong>{esc(daemonset.name)}</strong>",
                            f"{esc(daemonset.ready)}/{esc(daemonset.desired)}",
                            esc(daemonset.unavailable),
                            self._badge("Healthy" if daemonset.healthy else "Unhealthy", status),
                        ],
                    )
                )
            self._table(["Namespace", "Name", "Ready", "Unavailable", "Status"], rows)
        else:
            self._empty("No DaemonSets")

        self._close_section()

    def _add_pod_group(self, group: PodHealthGroup) -> None:
        self._add(
            f"<h3>{esc(group.namespace)}</h3>",
            f"<p>{group.total} pods | {group.running} running | "
            f"{group.with_sidecar} with Istio sidecar</p>",
        )
        rows = []
        for pod in group.pods:
            status = row_status(pod)
            sidecar = (
                self._badge(pod.sidecar_version or "yes", RowStatus.SUCCESS)
                if pod.has_sidecar
                else self._badge("no", RowStatus.INFO)
            )
            rows.append(
                (
                    status,
                    [
                        f"<code>{esc(pod.name)}</code>",
                        self._badge(pod.phase or "Unknown", status),
                        self._badge(
                            "Yes" if pod.ready else "No",
                            RowStatus.SUCCESS if pod.ready else RowStatus.ERROR,
                        ),
                        f"{esc(pod.ready_containers)}/{esc(pod.container_count)}",
                        sidecar,
                        esc(pod.restart_count),
                        esc(pod.node_name or "N/A"),
                    ],
                )
            )
        self._table(
            ["Pod", "Status", "Ready", "Containers", "Sidecar", "Restarts", "Node"], rows
        )
        if group.problems:
            self._add('<div class="alert">', "<strong>Problem pods:</strong>", "<ul>")
            for problem in group.problems:
                self._add(
                    f"<li><code>{esc(problem.name)}</code>: {esc(problem.reason)} "
                    f"(restarts: {esc(problem.restart_count)})</li>"
                )
            self._add("</ul>", "</div>")

    def _add_pods(self) -> None:
        self._open_section("pods", f"All Pods ({self.summary.total_pods})")
        if not self.data.pod_health:
            self._empty("No pods")
        for group in self.data.pod_health:
            self._add_pod_group(group)
        self._close_section()

    def _add_autoscaling_and_storage(self) -> None:
        data = self.data
        summary = self.summary
        self._open_section("autoscaling", "Autoscaling & Storage")
        self._add(
            f"<p>HPAs: <strong>{summary.hpa_count}</strong> | "
            f"PDBs: <strong>{summary.pdb_count}</strong> | "
            f"PVCs: <strong>{summary.pvc_count}</strong></p>"
        )
        if data.hpas:
            self._add("<h3>HorizontalPodAutoscalers</h3>")
            self._table(
                ["Namespace", "Name", "Min", "Max"],
                [
                    (None, [esc(hpa.namespace), esc(hpa.name), esc(hpa.min_replicas), esc(hpa.max_replicas)])
                    for hpa in data.hpas
                ],
            )
        if data.pdbs:
            self._add("<h3>PodDisruptionBudgets</h3>")
            rows = []
            for pdb in data.pdbs:
                status = RowStatus.SUCCESS if pdb.disruptions_allowed > 0 else RowStatus.WARNING
                rows.append(
                    (
                        None,
                        [
                            esc(pdb.namespace),
                            esc(pdb.name),
                            esc(pdb.min_available if pdb.min_available is not None else "N/A"),
                            self._badge(pdb.disruptions_allowed, status),
                        ],
                    )
                )
            self._table(["Namespace", "Name", "Min Available", "Disruptions Allowed"], rows)
        if data.pvcs:
            self._add("<h3>PersistentVolumeClaims</h3>")
            rows = []
            for pvc in sorted(data.pvcs, key=lambda p: p.namespace):
                status = RowStatus.SUCCESS if pvc.status == "Bound" else RowStatus.WARNING
                rows.append(
                    (
                        None,
                        [
                            esc(pvc.namespace),
                            esc(pvc.name),
                            self._badge(pvc.status or "Unknown", status),
                            esc(pvc.size),
                            esc(pvc.storage_class),
                        ],
                    )
                )
            self._table(["Namespace", "Name", "Status", "Size", "Storage Class"], rows)
        self._close_section()

    def _add_footer(self) -> None:
        self._add(
            "</div>",
            "<footer>",
            f"Generated by kubediscover on {esc(format_generated(self.data.generated_at))} | "
            '<a href="#" onclick="window.print(); return false;">Print report</a>',
            "</footer>",
            "</div>",
            f"<script>{PAGE_SCRIPT}</script>",
            "</body>",
            "</html>",
        )
