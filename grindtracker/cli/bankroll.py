"""Bankroll and setup commands for Grind Tracker CLI.

Handles the initial bankroll, configuration setup and the
venue/year filter choices.
"""

from typing import Optional

import click
from rich.panel import Panel

from grindtracker.cli.common import console, format_money, get_currency, get_db_path, get_ledger
from grindtracker.models import MONTHS, VENUES


@click.command()
@click.option("--force", is_flag=True, default=False, help="Overwrite an existing config file.")
def init(force: bool) -> None:
    """Create the configuration file with default settings."""
    from grindtracker.config import config_path, write_default_config

    path = config_path()
    if path.exists() and not force:
        console.print(f"[yellow]Config already exists at {path}[/yellow] (use --force to overwrite)")
        return

    written = write_default_config(path)
    console.print(Panel(
        f"[green]Configuration created.[/green]\n\n"
        f"Edit [cyan]{written}[/cyan] to change the buy-in ceiling,\n"
        f"currency symbol or database location.",
        title="[bold]Grind Tracker[/bold]",
        border_style="green",
    ))


@click.command()
@click.argument("amount", type=float, required=False)
@click.pass_context
def bankroll(ctx: click.Context, amount: Optional[float]) -> None:
    """Show or set the initial bankroll.

    \b
    Examples:
      grind bankroll         # Show the initial bankroll
      grind bankroll 250     # Set it to 250
    """
    ledger = get_ledger(ctx)
    currency = get_currency(ctx)

    if amount is None:
        console.print(f"Initial bankroll: [bold]{format_money(ledger.initial_bankroll, currency)}[/bold]")
        console.print(f"[dim]Database: {get_db_path(ctx)}[/dim]")
        return

    ledger.set_initial_bankroll(amount)
    console.print(f"[green]✓ Initial bankroll set to {format_money(ledger.initial_bankroll, currency)}[/green]")


@click.command()
def venues() -> None:
    """List the venues tournaments can be recorded at."""
    for venue in VENUES:
        console.print(venue)


@click.command()
@click.pass_context
def years(ctx: click.Context) -> None:
    """List the years and months available as filters."""
    ledger = get_ledger(ctx)
    found = ledger.available_years()

    if not found:
        console.print("[dim]No tournaments recorded yet[/dim]")
        return

    console.print(f"Years:  {', '.join(found)}")
    console.print(f"Months: {', '.join(MONTHS)}")
