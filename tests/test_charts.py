"""Tests for chart rendering."""

from datetime import date

from grindtracker.charts import bar, profit_figure
from grindtracker.models import SeriesPoint


def test_profit_figure_traces_series():
    series = [
        SeriesPoint(date=date(2024, 1, 1), cumulative_profit=-2.0),
        SeriesPoint(date=date(2024, 2, 1), cumulative_profit=1.0),
    ]
    figure = profit_figure(series, "$")

    trace = figure.data[0]
    assert list(trace.x) == ["2024-01-01", "2024-02-01"]
    assert list(trace.y) == [-2.0, 1.0]
    assert figure.layout.title.text == "Cumulative Profit"


def test_bar_scales_and_colors():
    assert bar(10.0, 10.0, width=10) == "[green]" + "█" * 10 + "[/green]"
    assert bar(-5.0, 10.0, width=10) == "[red]" + "█" * 5 + "[/red]"
    assert bar(0.0, 10.0) == "[green][/green]"
    assert bar(1.0, 0.0) == ""
