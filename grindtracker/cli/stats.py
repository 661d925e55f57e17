"""Statistics commands for Grind Tracker CLI.

Handles the bankroll summary and the cumulative profit chart.
"""

from pathlib import Path
from typing import Optional

import click
from rich.panel import Panel
from rich.table import Table

from grindtracker.cli.common import (
    colored_money,
    console,
    filter_options,
    format_money,
    get_currency,
    get_ledger,
)
from grindtracker.models import FilterCriteria


@click.command()
@filter_options
@click.pass_context
def stats(ctx: click.Context, criteria: FilterCriteria) -> None:
    """Show invested, won, profit, ROI and bankroll.

    The current bankroll is the initial bankroll plus the profit of the
    tournaments matching the filters.

    \b
    Examples:
      grind stats
      grind stats --year 2024 --month 05 --venue GGPoker
    """
    ledger = get_ledger(ctx)
    currency = get_currency(ctx)
    summary = ledger.summary(criteria)
    figures = summary.stats

    roi_color = "green" if figures.roi >= 0 else "red"
    console.print(Panel(
        f"Tournaments:      {figures.count}\n"
        f"Invested:         {format_money(figures.invested, currency)}\n"
        f"Won:              {format_money(figures.won, currency)}\n"
        f"Profit:           {colored_money(figures.profit, currency)}\n"
        f"ROI:              [{roi_color}]{figures.roi_text}%[/{roi_color}]\n\n"
        f"Initial bankroll: {format_money(summary.initial_bankroll, currency)}\n"
        f"Current bankroll: {colored_money(summary.current_bankroll, currency)}",
        title=f"[bold]Stats: {criteria.describe()}[/bold]",
        border_style="cyan",
    ))


@click.command()
@filter_options
@click.option(
    "--html", "html_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Also write an interactive plotly chart to this HTML file.",
)
@click.pass_context
def chart(ctx: click.Context, criteria: FilterCriteria, html_path: Optional[str]) -> None:
    """Show cumulative profit over time.

    \b
    Examples:
      grind chart
      grind chart --year 2024 --html profit.html
    """
    from grindtracker.charts import bar

    ledger = get_ledger(ctx)
    currency = get_currency(ctx)
    series = ledger.cumulative_series(criteria)

    if not series:
        console.print(f"[dim]No tournaments found for {criteria.describe()}[/dim]")
        return

    scale = max(abs(point.cumulative_profit) for point in series)
    table = Table(
        title=f"Cumulative Profit: {criteria.describe()}",
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("Date", style="bold", no_wrap=True)
    table.add_column("Profit", justify="right", no_wrap=True)
    table.add_column("")

    for point in series:
        table.add_row(
            point.date.isoformat(),
            colored_money(point.cumulative_profit, currency),
            bar(point.cumulative_profit, scale),
        )
    console.print(table)

    if html_path:
        from grindtracker.charts import profit_figure

        figure = profit_figure(series, currency, title=f"Cumulative Profit: {criteria.describe()}")
        target = Path(html_path)
        target.parent.mkdir(parents=True, exist_ok=True)
        figure.write_html(str(target))
        console.print(f"[green]✓ Chart written to {target}[/green]")
