"""Rich output formatting helpers for the repodeps CLI.

Install plans are rendered as a numbered table in install order. Warnings
and notes from resolution go to stderr so that ``--json`` output on stdout
stays machine-readable.
"""

from __future__ import annotations

import json
from typing import Any

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from repodeps.core.archive import resolve_archive_url
from repodeps.core.dependency import InstallPlan
from repodeps.core.diagnostics import RecordingDiagnostics

console = Console()
err_console = Console(stderr=True)


def plan_to_dict(plan: InstallPlan) -> dict[str, Any]:
    """Convert an install plan to a JSON-serializable dictionary.

    Archive URLs are resolved against each package's source; unresolvable
    ones are reported as ``null`` and their warnings added to the plan's.
    """
    url_diagnostics = RecordingDiagnostics()
    packages = [
        {
            "id": pkg.path,
            "version": str(pkg.version),
            "display_name": pkg.label,
            "archive_url": resolve_archive_url(pkg, url_diagnostics),
        }
        for pkg in plan.packages
    ]
    return {
        "success": plan.success,
        "packages": packages,
        "warnings": plan.warnings + url_diagnostics.warnings,
        "notes": plan.notes,
    }


def print_diagnostics(warnings: list[str], notes: list[str]) -> None:
    """Print resolution warnings and notes to stderr."""
    for text in warnings:
        err_console.print(f"[yellow]warning:[/yellow] {escape(text)}")
    for text in notes:
        err_console.print(f"[dim]note: {escape(text)}[/dim]")


def print_install_plan(plan: InstallPlan) -> None:
    """Print the outcome of planning an installation.

    Args:
        plan: The plan returned by ``DependencyPlanner.plan``.
    """
    data = plan_to_dict(plan)
    print_diagnostics(data["warnings"], data["notes"])

    if not plan.success:
        console.print(
            Panel("[bold red]Resolution failed[/bold red]", title="Install Plan")
        )
        return

    if not plan.packages:
        console.print("[dim]Nothing to install.[/dim]")
        return

    table = Table(title="Install Plan", show_header=True, header_style="bold")
    table.add_column("#", justify="right")
    table.add_column("Package", style="bold")
    table.add_column("Version")
    table.add_column("Name", style="dim")
    table.add_column("Archive")
    for index, entry in enumerate(data["packages"], start=1):
        table.add_row(
            str(index),
            escape(entry["id"]),
            entry["version"],
            escape(entry["display_name"]),
            escape(entry["archive_url"] or "-"),
        )
    console.print(table)
    console.print(f"[bold]{len(plan.packages)}[/bold] package(s) to install")


def print_cycles(cycles: list[list[str]]) -> None:
    """Print dependency cycles, one per line, as ``a -> b -> a``."""
    if not cycles:
        console.print("[green]No dependency cycles found.[/green]")
        return
    console.print(f"[yellow]{len(cycles)} dependency cycle(s):[/yellow]")
    for cycle in cycles:
        console.print("  " + escape(" -> ".join(cycle)))


def print_json(data: Any) -> None:
    """Print data as indented JSON to stdout, without Rich highlighting."""
    click.echo(json.dumps(data, indent=2, default=str))
