"""Tournament commands for Grind Tracker CLI.

Handles recording, editing, deleting and listing tournaments.
"""

from datetime import date, datetime
from typing import Optional

import click
from pydantic import ValidationError as InputError
from rich.markup import escape
from rich.table import Table

from grindtracker.cli.common import (
    colored_money,
    console,
    fail,
    filter_options,
    format_money,
    get_currency,
    get_ledger,
)
from grindtracker.errors import NotFoundError, ValidationError
from grindtracker.models import DEFAULT_VENUE, VENUES, FilterCriteria, TournamentInput

DATE_TYPE = click.DateTime(formats=["%Y-%m-%d"])


def _as_date(value: Optional[datetime]) -> Optional[date]:
    return value.date() if value is not None else None


def _ceiling_message(ctx: click.Context, error: ValidationError) -> str:
    ledger = get_ledger(ctx)
    ceiling = format_money(ledger.buy_in_ceiling, get_currency(ctx))
    return f"[red]Buy-in cannot be more than {ceiling}[/red] ({error.reason})"


@click.command()
@click.option("--date", "played_on", type=DATE_TYPE, default=None, help="Tournament date (YYYY-MM-DD). Defaults to today.")
@click.option("--name", required=True, help="Tournament name.")
@click.option(
    "--venue",
    type=click.Choice(VENUES, case_sensitive=False),
    default=DEFAULT_VENUE,
    show_default=True,
    help="Poker room the tournament was played at.",
)
@click.option("--buy-in", "buy_in", type=click.FloatRange(min=0), required=True, help="Buy-in amount.")
@click.option("--prize", type=click.FloatRange(min=0), default=0.0, help="Prize won (0 if no payout).")
@click.pass_context
def add(
    ctx: click.Context,
    played_on: Optional[datetime],
    name: str,
    venue: str,
    buy_in: float,
    prize: float,
) -> None:
    """Record a tournament result.

    \b
    Examples:
      grind add --name "Bounty Builder" --venue PokerStars --buy-in 5.50
      grind add --date 2024-05-12 --name "Daily Big" --venue GGPoker --buy-in 10 --prize 37.20
    """
    ledger = get_ledger(ctx)
    currency = get_currency(ctx)

    try:
        candidate = TournamentInput(
            date=_as_date(played_on) or date.today(),
            name=name,
            venue=venue,
            buy_in=buy_in,
            prize=prize,
        )
        entry = ledger.add(candidate)
    except ValidationError as e:
        fail(_ceiling_message(ctx, e), title="Rejected")
    except InputError as e:
        fail(f"[red]Invalid tournament:[/red]\n\n{escape(str(e))}")

    console.print(
        f"[green]✓ Added tournament {entry.id}[/green] "
        f"{escape(entry.name)} @ {entry.venue}, profit {colored_money(entry.profit, currency)}"
    )


@click.command()
@click.argument("entry_id", type=int)
@click.option("--date", "played_on", type=DATE_TYPE, default=None, help="New date (YYYY-MM-DD).")
@click.option("--name", default=None, help="New name.")
@click.option("--venue", type=click.Choice(VENUES, case_sensitive=False), default=None, help="New venue.")
@click.option("--buy-in", "buy_in", type=click.FloatRange(min=0), default=None, help="New buy-in.")
@click.option("--prize", type=click.FloatRange(min=0), default=None, help="New prize.")
@click.pass_context
def edit(
    ctx: click.Context,
    entry_id: int,
    played_on: Optional[datetime],
    name: Optional[str],
    venue: Optional[str],
    buy_in: Optional[float],
    prize: Optional[float],
) -> None:
    """Edit a recorded tournament.

    ENTRY_ID is the id shown by 'grind list'. Options that are not given
    keep their current value.

    \b
    Examples:
      grind edit 1715500000000 --prize 25
      grind edit 1715500000000 --venue CoinPoker --buy-in 2.20
    """
    ledger = get_ledger(ctx)
    currency = get_currency(ctx)

    try:
        current = ledger.get(entry_id)
        changes = {
            "date": _as_date(played_on),
            "name": name,
            "venue": venue,
            "buy_in": buy_in,
            "prize": prize,
        }
        values = current.model_dump(include={"date", "name", "venue", "buy_in", "prize"})
        values.update({key: value for key, value in changes.items() if value is not None})
        entry = ledger.update(entry_id, TournamentInput(**values))
    except NotFoundError as e:
        fail(f"[red]{e}[/red]")
    except ValidationError as e:
        fail(_ceiling_message(ctx, e), title="Rejected")
    except InputError as e:
        fail(f"[red]Invalid tournament:[/red]\n\n{escape(str(e))}")

    console.print(
        f"[green]✓ Updated tournament {entry.id}[/green] "
        f"{escape(entry.name)} @ {entry.venue}, profit {colored_money(entry.profit, currency)}"
    )


@click.command()
@click.argument("entry_id", type=int)
@click.option("--yes", "-y", is_flag=True, default=False, help="Skip the confirmation prompt.")
@click.pass_context
def delete(ctx: click.Context, entry_id: int, yes: bool) -> None:
    """Delete a recorded tournament.

    \b
    Examples:
      grind delete 1715500000000
      grind delete 1715500000000 --yes
    """
    ledger = get_ledger(ctx)

    try:
        entry = ledger.get(entry_id)
    except NotFoundError as e:
        fail(f"[red]{e}[/red]")

    if not yes and not click.confirm(
        f"Are you sure you want to delete '{entry.name}' ({entry.date.isoformat()})?",
        default=False,
    ):
        console.print("[yellow]Delete cancelled[/yellow]")
        return

    ledger.remove(entry_id)
    console.print(f"[green]✓ Deleted tournament {entry_id}[/green]")


def render_entries_table(entries: list, currency: str, title: str) -> Table:
    """Build the tournaments table."""
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("ID", style="dim", no_wrap=True)
    table.add_column("Date", style="bold", no_wrap=True)
    table.add_column("Name")
    table.add_column("Venue")
    table.add_column("Buy-in", justify="right")
    table.add_column("Prize", justify="right")
    table.add_column("Profit", justify="right")

    for entry in entries:
        table.add_row(
            str(entry.id),
            entry.date.isoformat(),
            escape(entry.name),
            entry.venue,
            format_money(entry.buy_in, currency),
            format_money(entry.prize, currency),
            colored_money(entry.profit, currency),
        )
    return table


@click.command("list")
@filter_options
@click.pass_context
def list_tournaments(ctx: click.Context, criteria: FilterCriteria) -> None:
    """List recorded tournaments, newest first.

    \b
    Examples:
      grind list
      grind list --year 2024 --month 05
      grind list --venue GGPoker
    """
    ledger = get_ledger(ctx)
    entries = ledger.filter(criteria)

    if not entries:
        console.print(f"[dim]No tournaments found for {criteria.describe()}[/dim]")
        return

    console.print(render_entries_table(entries, get_currency(ctx), f"Tournaments: {criteria.describe()}"))
    console.print(f"\n[dim]Total: {len(entries)} tournaments[/dim]")
