"""Command-line entry point for kubediscover.

Usage:
    kubediscover <cluster> [html|json|markdown] [namespace] [options]

Progress goes to stderr; the path of the written report is the only thing
printed on stdout.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from collections.abc import Sequence

from rich.console import Console
from rich.logging import RichHandler

from kubediscover import __version__
from kubediscover.constants.enums import ReportFormat
from kubediscover.controllers import ClusterController, NamespaceNotFoundError
from kubediscover.models.reports import ReportSummary
from kubediscover.models.state import ConfigLoadError, load_settings
from kubediscover.utils.report_writer import ReportWriter, resolve_format

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130


def build_parser() -> argparse.ArgumentParser:
    formats = "|".join(fmt.value for fmt in ReportFormat)
    parser = argparse.ArgumentParser(
        prog="kubediscover",
        description="Discover a Kubernetes cluster and write an HTML, JSON or Markdown report.",
        epilog=(
            "Examples:\n"
            "  kubediscover prod-aks\n"
            "  kubediscover prod-aks html\n"
            "  kubediscover prod-aks markdown payments\n"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("cluster", help="Cluster name used to label the report")
    parser.add_argument(
        "format",
        nargs="?",
        default=None,
        help=f"Report format ({formats}); unknown values fall back to json",
    )
    parser.add_argument(
        "namespace",
        nargs="?",
        default=None,
        help="Restrict every query to this namespace",
    )
    parser.add_argument(
        "--context",
        default=None,
        help="kubectl context to query (default: current context)",
    )
    parser.add_argument(
        "--output-dir",
        default=None,
        help="Directory for report files (default: ./cluster-reports)",
    )
    parser.add_argument("--config", default=None, help="YAML settings file")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def configure_logging(verbose: bool, console: Console) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=verbose, rich_tracebacks=True)],
        force=True,
    )


async def run(args: argparse.Namespace, console: Console) -> int:
    """Collect, render and save one report. Returns the process exit code."""
    settings = load_settings(args.config, reports_dir=args.output_dir)
    report_format = resolve_format(args.format)

    scope = f"namespace {args.namespace}" if args.namespace else "entire cluster"
    console.print(f"[bold]Cluster discovery:[/bold] {args.cluster} ({scope})")

    controller = ClusterController(
        context=args.context,
        settings=settings,
        progress_callback=lambda message: console.print(message, markup=False, highlight=False),
    )
    data = await controller.collect(args.cluster, args.namespace)

    console.print(f"Generating {report_format.value} report...")
    summary = ReportSummary.from_data(data, settings.suspicious_node_selectors)
    path = ReportWriter(settings).write(data, report_format, summary)
    console.print(f"[green]Report saved:[/green] {path}")
    print(path)
    return EXIT_OK


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    console = Console(stderr=True)
    configure_logging(args.verbose, console)

    try:
        return asyncio.run(run(args, console))
    except NamespaceNotFoundError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        return EXIT_FAILURE
    except ConfigLoadError as exc:
        console.print(f"[red]Configuration error:[/red] {exc}")
        return EXIT_FAILURE
    except OSError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        return EXIT_FAILURE
    except KeyboardInterrupt:
        console.print("[yellow]Interrupted[/yellow]")
        return EXIT_INTERRUPTED


if __name__ == "__main__":
    sys.exit(main())
