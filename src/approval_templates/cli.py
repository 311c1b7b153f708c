"""
Approval Templates CLI

Usage:
    approval-templates resolve GLPP INDIVIDUAL_PROSPECT
    approval-templates list
    approval-templates report --baseline tests/snapshots/combination_report.txt
"""
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from .config import get_config
from .errors import ResolutionError
from .logging_setup import configure_logging
from .registry import get_template_registry
from .report import compare_with_baseline, render_combination_report
from .resolver import resolve_template

app = typer.Typer(
    name="approval-templates",
    help="Resolve approval document templates",
    add_completion=False
)

console = Console()
err_console = Console(stderr=True)


@app.callback()
def main():
    configure_logging(get_config().log)


@app.command("resolve")
def resolve(
    document_type: str = typer.Argument(..., help="Document category token, e.g. GLPP"),
    record_type: str = typer.Argument(..., help="Record category token, e.g. INDIVIDUAL_PROSPECT"),
):
    """Print the template for a document type and record type."""
    try:
        descriptor = resolve_template(document_type, record_type)
    except ResolutionError as e:
        err_console.print(f"[red]✗ {e.message}[/red]")
        raise typer.Exit(1)

    typer.echo(f"{descriptor.template_id}\t{descriptor.template_file}")


@app.command("list")
def list_templates():
    """Show the template registry."""
    table = Table(title="Template registry")
    table.add_column("Document")
    table.add_column("Record")
    table.add_column("Template ID", style="cyan")
    table.add_column("Template file")

    for entry in get_template_registry():
        table.add_row(
            entry.document_category.value,
            entry.record_category.value,
            entry.template_id,
            entry.template_file,
        )
    console.print(table)


@app.command("report")
def report(
    baseline: Optional[Path] = typer.Option(
        None,
        "--baseline", "-b",
        help="Committed report to compare against"
    ),
    write: bool = typer.Option(
        False,
        "--write",
        help="Overwrite the baseline with the current report"
    ),
):
    """
    Print the resolution outcome of every document/record combination.

    With --baseline, exit with status 1 when the report differs from the
    committed file.
    """
    if write and baseline is None:
        raise typer.BadParameter("--write requires --baseline", param_hint="--write")

    if baseline is None:
        typer.echo(render_combination_report(), nl=False)
        return

    if write:
        baseline.parent.mkdir(parents=True, exist_ok=True)
        baseline.write_text(render_combination_report(), encoding="utf-8")
        err_console.print(f"[green]✓[/green] Baseline written: {baseline}")
        return

    if not baseline.exists():
        err_console.print(f"[red]✗ Baseline not found: {baseline}[/red]")
        raise typer.Exit(1)

    diff = compare_with_baseline(baseline)
    if diff:
        typer.echo("".join(diff), nl=False)
        err_console.print("[red]✗ Combination report differs from baseline[/red]")
        raise typer.Exit(1)

    err_console.print("[green]✓[/green] Combination report matches baseline")


if __name__ == "__main__":
    app()
