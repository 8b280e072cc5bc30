from collections.abc import Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from profile_css.models import BuildReport, ValidationIssue

_MARKERS = {
    "error": "[red]❌[/red]",
    "warning": "[yellow]⚠️[/yellow]",
}


def render_issues(console: Console, issues: Sequence[ValidationIssue]) -> None:
    if not issues:
        console.print("[green]✓ All validation checks passed[/green]")
        return
    console.print("\n[bold]=== Validation Issues ===[/bold]")
    for issue in issues:
        console.print(f"{_MARKERS[issue.severity.value]} {escape(issue.message)}", soft_wrap=True)


def render_report(console: Console, report: BuildReport) -> None:
    table = Table(title="Build Report", show_header=False)
    table.add_column("metric")
    table.add_column("value", justify="right")
    table.add_row("Source files", str(report.source_count))
    table.add_row("Characters before minification", str(report.original_size_chars))
    table.add_row("Characters after minification", str(report.final_size_chars))
    table.add_row("Compression", f"{report.compression_ratio_percent:.2f}%")
    console.print(table)

    if report.size_ceiling_exceeded:
        console.print(
            f"[yellow]⚠️  Warning: Output size ({report.final_size_chars} chars) "
            f"exceeds {report.max_output_size} chars[/yellow]",
            soft_wrap=True,
        )

    render_issues(console, report.issues)
    console.print(f"\nOutput written to: {escape(str(report.output_path))}", soft_wrap=True)
