"""
Terminal report for analysis results.

Renders the performance tier, per-metric status, a type breakdown and the
resource table with rich.
"""

from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .engine.models import (
    MetricThreshold,
    PerformanceLevel,
    PerformanceMetrics,
    PerformanceThresholds,
    display_bucket,
)
from .utils.formatting import format_bytes, format_duration, summarize_by_type, truncate_name
from .utils.log import console as default_console


# Style and progress percentage per tier
LEVEL_STYLES = {
    PerformanceLevel.EXCELLENT: ("bold green", 100),
    PerformanceLevel.GOOD: ("bold blue", 75),
    PerformanceLevel.NEEDS_IMPROVEMENT: ("bold yellow", 50),
    PerformanceLevel.POOR: ("bold red", 25),
    PerformanceLevel.UNKNOWN: ("dim", 0),
}

TYPE_STYLES = {
    "document": "blue",
    "script": "dark_orange",
    "stylesheet": "magenta",
    "image": "green",
    "json": "cyan",
    "xml": "bright_magenta",
    "text": "bright_blue",
    "xhr": "cyan",
    "font": "yellow",
    "data": "white",
    "default": "white",
}

# Resources slower than this are highlighted
SLOW_RESOURCE_MS = 1000


def metric_status(value: float, threshold: MetricThreshold) -> str:
    """Describe one metric against its threshold pair."""
    if value <= threshold.good:
        return "Excellent"
    if value <= threshold.poor:
        return "Good"
    return "Needs Improvement"


def _progress_bar(percent: int, width: int = 20) -> str:
    filled = round(width * percent / 100)
    return "█" * filled + "░" * (width - filled)


def render_report(
    metrics: PerformanceMetrics,
    level: PerformanceLevel,
    thresholds: PerformanceThresholds,
    console: Optional[Console] = None
) -> None:
    """
    Print a full analysis report.

    Args:
        metrics: Analysis result
        level: Tier computed for the result
        thresholds: Threshold table used for per-metric status
        console: Console to print to (defaults to the shared console)
    """
    console = console or default_console
    style, percent = LEVEL_STYLES[level]

    summary = Table.grid(padding=(0, 2))
    summary.add_column(style="bold")
    summary.add_column()
    summary.add_column(style="dim")
    summary.add_row(
        "Load Time", format_duration(metrics.load_time),
        metric_status(metrics.load_time, thresholds.load_time)
    )
    summary.add_row(
        "Total Size", format_bytes(metrics.page_size * 1024),
        metric_status(metrics.page_size, thresholds.page_size)
    )
    summary.add_row(
        "Requests", str(metrics.request_count),
        metric_status(metrics.request_count, thresholds.request_count)
    )

    header = f"[{style}]{_progress_bar(percent)}  {level.label}[/{style}]"
    console.print(Panel(summary, title="Performance Score", subtitle=header))

    if metrics.simulated:
        console.print(
            "[bold yellow]The page could not be retrieved; figures below are "
            "simulated estimates, not measurements.[/bold yellow]"
        )

    console.print(_breakdown_table(metrics))
    console.print(_resource_table(metrics))


def _breakdown_table(metrics: PerformanceMetrics) -> Table:
    table = Table(title="Resource Distribution")
    table.add_column("Type")
    table.add_column("Items", justify="right")
    table.add_column("Size", justify="right")

    for entry in summarize_by_type(metrics.resources):
        bucket = display_bucket(entry["type"])
        table.add_row(
            f"[{TYPE_STYLES[bucket]}]{entry['type'].capitalize()}[/]",
            str(entry["count"]),
            format_bytes(entry["size"]),
        )
    return table


def _resource_table(metrics: PerformanceMetrics) -> Table:
    table = Table(title="Resource Details")
    table.add_column("Resource", overflow="fold")
    table.add_column("Type")
    table.add_column("Size", justify="right")
    table.add_column("Load Time", justify="right")

    for resource in metrics.resources:
        bucket = display_bucket(resource.type)
        duration_style = "red" if resource.duration > SLOW_RESOURCE_MS else "green"
        table.add_row(
            truncate_name(resource.name),
            f"[{TYPE_STYLES[bucket]}]{resource.type.upper()}[/]",
            format_bytes(resource.size),
            f"[{duration_style}]{format_duration(resource.duration)}[/]",
        )
    return table


def render_endpoints(endpoints, console: Optional[Console] = None) -> None:
    """Print the sample endpoint catalog."""
    console = console or default_console
    table = Table(title="Sample API Endpoints")
    table.add_column("ID", style="bold")
    table.add_column("Name")
    table.add_column("Category")
    table.add_column("URL", overflow="fold")

    for endpoint in endpoints:
        table.add_row(endpoint.id, endpoint.name, endpoint.category, endpoint.url)
    console.print(table)
