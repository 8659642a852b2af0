"""
Rich terminal display utilities for CLI.

Provides formatted output using the Rich library for:
- Syntax-highlighted JSON
- Validation errors
- Suite result tables
- Success/failure indicators
"""

import json
from typing import Any, List, Optional

from rich.console import Console
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.syntax import Syntax
from rich.table import Table
from rich.text import Text

from toolprobe.suite.runner import SuiteReport

console = Console()


def print_header(title: str) -> None:
    """Print a formatted header."""
    console.print()
    console.print(f"[bold cyan]{title}[/bold cyan]")
    console.print("=" * len(title))
    console.print()


def print_success(message: str) -> None:
    """Print a success message with checkmark."""
    console.print(f"[green]✓[/green] {message}")


def print_error(message: str) -> None:
    """Print an error message with X mark."""
    console.print(f"[red]✗[/red] {message}")


def print_warning(message: str) -> None:
    console.print(f"[yellow]⚠[/yellow] {message}")


def print_info(message: str) -> None:
    console.print(f"[blue]ℹ[/blue] {message}")


def print_json(data: Any, title: Optional[str] = None) -> None:
    """
    Print JSON data with syntax highlighting.

    Args:
        data: JSON-serializable data or JSON string
        title: Optional title for the panel
    """
    if isinstance(data, str):
        json_str = data
    else:
        json_str = json.dumps(data, indent=2)

    syntax = Syntax(json_str, "json", theme="monokai", line_numbers=False)

    if title:
        console.print(Panel(syntax, title=f"[bold]{title}[/bold]", border_style="cyan"))
    else:
        console.print(syntax)


def print_validation_errors(errors: List[str]) -> None:
    """
    Print validation errors in a formatted list.

    Args:
        errors: List of validation error messages
    """
    if not errors:
        return

    console.print()
    console.print("[bold red]Validation Errors:[/bold red]")
    for error in errors:
        # errors can contain user text with square brackets
        console.print(Text.assemble(("  • ", "red"), error))
    console.print()


def print_suite_results(report: SuiteReport, show_errors: bool = True) -> None:
    """
    Print per-case suite results and a summary table.

    Args:
        report: Suite run report
        show_errors: Whether to list failure reasons under the table
    """
    table = Table(title=f"Suite: {report.suite_name}", show_header=True, header_style="bold cyan")
    table.add_column("#", style="dim", width=4)
    table.add_column("Test Case", style="cyan", width=30)
    table.add_column("Tool", style="white", width=24)
    table.add_column("Result", justify="center", width=8)
    table.add_column("Errors", justify="right", width=8)

    for i, case in enumerate(report.cases, 1):
        result_icon = Text("✓", style="green") if case.passed else Text("✗", style="red")
        table.add_row(str(i), case.case_id, case.tool_name, result_icon, str(len(case.result.errors)))

    console.print()
    console.print(table)

    if show_errors:
        for case in report.failures():
            console.print(f"\n[bold red]{case.case_id}[/bold red] [dim]({case.tool_name})[/dim]")
            for error in case.result.errors:
                console.print(Text.assemble(("  • ", "red"), error))

    summary_table = Table(title="Summary", show_header=True, header_style="bold green")
    summary_table.add_column("Metric", style="cyan", width=25)
    summary_table.add_column("Value", style="white", width=25)
    summary_table.add_row("Pass Rate", f"{report.pass_rate:.1f}% ({report.passed}/{report.total})")
    summary_table.add_row("Failed", str(report.failed))

    console.print()
    console.print(summary_table)
    console.print()


def create_progress_spinner() -> Progress:
    """
    Create a progress spinner for long-running operations.

    Returns:
        Progress context manager
    """
    return Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console
    )


def print_separator() -> None:
    """Print a visual separator line."""
    console.print("[dim]" + "─" * 70 + "[/dim]")
