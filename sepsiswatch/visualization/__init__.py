"""Visualization components for the SepsisWatch dashboard."""

from .theme import COLORS, get_plotly_template, apply_theme
from .charts import create_hr_trend_chart, create_tier_distribution_chart
from .components import (
    UNKNOWN,
    format_value,
    metric_card,
    status_banner,
    criteria_indicator,
)

__all__ = [
    "COLORS",
    "get_plotly_template",
    "apply_theme",
    "create_hr_trend_chart",
    "create_tier_distribution_chart",
    "UNKNOWN",
    "format_value",
    "metric_card",
    "status_banner",
    "criteria_indicator",
]
