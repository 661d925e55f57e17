"""Shared helpers for Grind Tracker CLI commands."""

import functools
import sqlite3
from pathlib import Path
from typing import Optional

import click
from pydantic import ValidationError as InputError
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from grindtracker.models import VENUES, FilterCriteria

console = Console()


def error_panel(message: str, title: str = "Error") -> None:
    """Print an error panel."""
    console.print(Panel(
        message,
        title=f"[bold red]{title}[/bold red]",
        border_style="red",
    ))


def fail(message: str, title: str = "Error") -> None:
    """Print an error panel and exit with status 1."""
    error_panel(message, title)
    raise SystemExit(1)


def get_config(ctx: click.Context) -> dict:
    """Configuration loaded by the root command."""
    from grindtracker.config import load_config

    obj = ctx.ensure_object(dict)
    if "config" not in obj:
        obj["config"] = load_config()
    return obj["config"]


def get_db_path(ctx: click.Context) -> Path:
    from grindtracker.config import resolve_db_path

    obj = ctx.ensure_object(dict)
    if obj.get("db_path"):
        return Path(obj["db_path"])
    return resolve_db_path(get_config(ctx))


def get_ledger(ctx: click.Context):
    """Load the ledger from the configured store."""
    from grindtracker.db import SQLiteStore
    from grindtracker.ledger import TournamentLedger

    obj = ctx.ensure_object(dict)
    if "ledger" not in obj:
        config = get_config(ctx)
        ceiling = float(config.get("ledger", {}).get("buy_in_ceiling", 10.0))
        db_path = get_db_path(ctx)
        try:
            store = SQLiteStore(db_path)
        except (sqlite3.Error, OSError) as e:
            error_panel(
                f"Could not open {escape(str(db_path))}: {escape(str(e))}\n"
                "Continuing with an empty ledger; changes will not be saved.",
                title="Warning",
            )
            obj["ledger"] = TournamentLedger(buy_in_ceiling=ceiling)
        else:
            obj["ledger"] = TournamentLedger.load(store, buy_in_ceiling=ceiling)
    return obj["ledger"]


def get_currency(ctx: click.Context) -> str:
    return str(get_config(ctx).get("ledger", {}).get("currency", "$"))


def format_money(amount: float, currency: str = "$") -> str:
    """Format an amount with the currency symbol after any sign."""
    sign = "-" if amount < 0 else ""
    return f"{sign}{currency}{abs(amount):.2f}"


def colored_money(amount: float, currency: str = "$") -> str:
    """Money string marked up green when non-negative, red otherwise."""
    color = "green" if amount >= 0 else "red"
    return f"[{color}]{format_money(amount, currency)}[/{color}]"


def filter_options(func):
    """Add --month/--year/--venue options and pass a ``criteria`` argument."""

    @click.option("--month", default=None, help="Calendar month to include (01-12).")
    @click.option("--year", default=None, help="Four-digit year to include.")
    @click.option(
        "--venue",
        type=click.Choice(VENUES, case_sensitive=False),
        default=None,
        help="Only tournaments played at this venue.",
    )
    @functools.wraps(func)
    def wrapper(*args, month: Optional[str], year: Optional[str], venue: Optional[str], **kwargs):
        try:
            criteria = FilterCriteria(month=month, year=year, venue=venue)
        except InputError as e:
            raise click.BadParameter(e.errors()[0]["msg"], param_hint="'--month'")
        return func(*args, criteria=criteria, **kwargs)

    return wrapper
