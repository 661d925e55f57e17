"""Cumulative profit chart rendering."""

from typing import Sequence

import plotly.graph_objects as go

from grindtracker.models import SeriesPoint

LINE_COLOR = "rgb(37, 99, 235)"
FILL_COLOR = "rgba(37, 99, 235, 0.5)"


def profit_figure(series: Sequence[SeriesPoint], currency: str = "$", title: str = "") -> go.Figure:
    """Line chart of cumulative profit by date."""
    figure = go.Figure()
    figure.add_trace(
        go.Scatter(
            x=[point.date.isoformat() for point in series],
            y=[point.cumulative_profit for point in series],
            mode="lines+markers",
            name=f"Cumulative profit ({currency})",
            line=dict(color=LINE_COLOR, shape="spline", smoothing=0.2),
            marker=dict(color=FILL_COLOR),
        )
    )
    figure.update_layout(
        template="plotly_dark",
        margin=dict(l=30, r=30, t=50, b=30),
        height=520,
        title=title or "Cumulative Profit",
        xaxis_title="Date",
        yaxis_title=f"Profit ({currency})",
    )
    return figure


def bar(value: float, scale: float, width: int = 30) -> str:
    """Text bar for ``value`` relative to the largest magnitude ``scale``."""
    if scale <= 0:
        return ""
    length = max(1, round(abs(value) / scale * width)) if value else 0
    color = "green" if value >= 0 else "red"
    return f"[{color}]{'█' * length}[/{color}]"
