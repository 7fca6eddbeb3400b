"""
pulsegate CLI - Command Line Interface

Main entry point for the `pulsegate` command.
"""

from datetime import datetime
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from pulsegate.__version__ import __version__
from pulsegate.core.exceptions import ScheduleError
from pulsegate.scheduler import ALIASES, Schedule, format_duration
from pulsegate.scheduler.clock import SystemClock
from pulsegate.scheduler.fields import to_utc

app = typer.Typer(
    name="pulsegate",
    help="Check cron-style schedules the way pulse gates evaluate them",
    add_completion=False,
)

console = Console()


@app.command()
def version():
    """Show pulsegate version."""
    console.print(f"[bold green]pulsegate[/bold green] version [cyan]{__version__}[/cyan]")


@app.command()
def aliases():
    """
    List predefined schedule aliases.
    
    Example:
        pulsegate aliases
    """
    table = Table(title="Schedule Aliases")
    table.add_column("Alias", style="cyan")
    table.add_column("Expression", style="green")
    
    for alias, expression in ALIASES.items():
        table.add_row(alias, expression)
    
    console.print(table)


@app.command()
def check(
    expression: str = typer.Argument(..., help="Schedule, e.g. '*/5 * * * *' or '@daily'"),
    at: Optional[datetime] = typer.Option(
        None, "--at", help="Instant to check in UTC (YYYY-MM-DDTHH:MM:SS); defaults to now"
    ),
):
    """
    Check whether a schedule lets a pulse through at a given instant.
    
    Exits with 0 when it matches, 1 when it does not, 2 when the
    expression is invalid.
    
    Example:
        pulsegate check "0 9 * * *" --at 2024-03-15T09:00:00
    """
    try:
        schedule = Schedule(expression)
    except ScheduleError as e:
        console.print(f"[red]✗ {escape(e.message)}[/red]")
        raise typer.Exit(2)
    
    instant = to_utc(at) if at is not None else SystemClock().now()
    
    table = Table(title=f"{schedule.expression}  @ {instant.isoformat()}")
    table.add_column("Field", style="cyan")
    table.add_column("Spec", style="white")
    table.add_column("Value", justify="right")
    table.add_column("Match")
    table.add_column("Distance", justify="right", style="yellow")
    
    for gate in schedule.gates:
        passed = gate.matches(instant)
        table.add_row(
            gate.field.value,
            str(gate.expression),
            str(gate.value(instant)),
            "[green]yes[/green]" if passed else "[red]no[/red]",
            format_duration(gate.distance(instant)),
        )
    
    console.print(table)
    
    if schedule.matches(instant):
        console.print("[bold green]✓ Pulse passes[/bold green]")
        return
    
    lag = schedule.estimated_lag(instant)
    console.print(
        f"[bold yellow]Not the right moment[/bold yellow], "
        f"see you again in [cyan]{format_duration(lag)}[/cyan] ({lag} ms)"
    )
    raise typer.Exit(1)


if __name__ == "__main__":
    app()
