# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: MIT-0

"""
Display Module

Rich UI components for reporting edge function cleanup results.
"""

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .models import CleanupResult

console = Console()


def create_summary_table(result: CleanupResult) -> Table:
    """
    Create cleanup summary table

    Args:
        result: Result of a cleanup run

    Returns:
        Rich Table object
    """
    summary_table = Table(show_header=False, box=None, padding=(0, 2))
    summary_table.add_column("Metric", style="cyan bold")
    summary_table.add_column("Value", justify="right")

    summary_table.add_row("Edge Functions", str(result.edge_function_count))
    summary_table.add_row("Attached Functions", str(result.attached_function_count))
    summary_table.add_row("Unattached Functions", str(result.orphan_count))
    summary_table.add_row(
        "Stacks Deleted", str(result.deleted_stack_count), style="green"
    )
    summary_table.add_row("Skipped", str(len(result.warnings)), style="yellow")

    return summary_table


def show_cleanup_summary(result: CleanupResult):
    """
    Show summary after a cleanup run

    Args:
        result: Result of a cleanup run
    """
    console.print()
    console.rule("[bold green]Edge Function Cleanup Complete", style="green")
    console.print()

    console.print(
        Panel(create_summary_table(result), title="Summary", border_style="green")
    )
    console.print()

    if result.deleted_stacks:
        console.print("[bold]Stack deletions requested:[/bold]")
        for stack_name in result.deleted_stacks:
            console.print(f"  • {stack_name}", style="green")
        console.print(
            "[dim]Stack teardown continues in CloudFormation after this command exits.[/dim]"
        )
        console.print()

    if result.warnings:
        console.print("[bold yellow]Skipped Functions:[/bold yellow]")
        for warning in result.warnings:
            console.print(f"  • {warning}", style="yellow")
        console.print()
