"""Interactive Plotly charts for the SepsisWatch dashboard."""

from typing import Sequence

import pandas as pd
import plotly.graph_objects as go

from models.qsofa.risk_tiers import RiskTier
from sepsiswatch.data.records import HR_HISTORY_LABELS

from .theme import COLORS, get_plotly_template

# Suggested y-range for adult heart rate (bpm); plotly expands it if needed
HR_SUGGESTED_RANGE = (50, 140)


def _trend_labels(n_samples: int, labels: Sequence[str]) -> list:
    if n_samples <= len(labels):
        return list(labels)
    # More samples than labels: one label per hour back from "Now"
    return [f"-{hours}h" for hours in range(n_samples - 1, 0, -1)] + ["Now"]


def create_hr_trend_chart(
    hr_history: Sequence[float],
    labels: Sequence[str] = HR_HISTORY_LABELS,
) -> go.Figure:
    """
    Create the heart-rate trend line chart for the active patient.

    Args:
        hr_history: Heart-rate samples, oldest first.
        labels: X-axis labels, one per time point.

    Returns:
        go.Figure: Plotly line chart. An empty history yields a chart with
        the labelled axis and no points.
    """
    template = get_plotly_template()
    values = list(hr_history)
    x_labels = _trend_labels(len(values), labels)

    fig = go.Figure()
    fig.add_trace(
        go.Scatter(
            x=x_labels[-len(values):] if values else [],
            y=values,
            mode="lines+markers",
            name="Heart Rate Trend (bpm)",
            line=dict(color=COLORS["primary"], width=2, shape="spline", smoothing=0.1),
            marker=dict(size=6),
            hovertemplate="%{x}: %{y:.0f} bpm<extra></extra>",
        )
    )

    low, high = HR_SUGGESTED_RANGE
    if values:
        low = min(low, min(values) - 5)
        high = max(high, max(values) + 5)

    layout = dict(template["layout"])
    layout.update(
        title=dict(layout["title"], text="Heart Rate Trend (bpm)"),
        xaxis=dict(layout["xaxis"], categoryorder="array", categoryarray=x_labels),
        yaxis=dict(layout["yaxis"], range=[low, high]),
        showlegend=False,
        height=300,
    )
    fig.update_layout(**layout)

    return fig


def create_tier_distribution_chart(overview: pd.DataFrame) -> go.Figure:
    """
    Create a bar chart of how many loaded patients fall in each risk tier.

    Args:
        overview: DataFrame from ``ward_overview`` with a ``risk_tier``
            column of tier labels.

    Returns:
        go.Figure: Plotly bar chart with one bar per tier (zero bars kept).
    """
    template = get_plotly_template()

    tiers = [RiskTier.NORMAL, RiskTier.WATCH, RiskTier.ALERT]
    counts = overview["risk_tier"].value_counts() if len(overview) else pd.Series(dtype=int)
    labels = [tier.label for tier in tiers]
    values = [int(counts.get(label, 0)) for label in labels]
    colors = [COLORS[tier.severity] for tier in tiers]

    fig = go.Figure()
    fig.add_trace(
        go.Bar(
            x=labels,
            y=values,
            marker=dict(color=colors),
            text=values,
            textposition="outside",
            hovertemplate="<b>%{x}</b><br>Patients: %{y}<extra></extra>",
        )
    )

    layout = dict(template["layout"])
    layout.update(
        title=dict(layout["title"], text="Patients by Risk Tier"),
        yaxis=dict(layout["yaxis"], rangemode="tozero", dtick=1),
        showlegend=False,
        height=280,
    )
    fig.update_layout(**layout)

    return fig
