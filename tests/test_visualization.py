"""
Unit tests for dashboard charts and HTML components.
"""

import pandas as pd
import plotly.graph_objects as go
import pytest

from models.qsofa.risk_tiers import RiskTier
from sepsiswatch.data.records import HR_HISTORY_LABELS
from sepsiswatch.data.samples import get_sample_patients
from sepsiswatch.services.assessment_service import ward_overview
from sepsiswatch.visualization.charts import (
    create_hr_trend_chart,
    create_tier_distribution_chart,
)
from sepsiswatch.visualization.components import (
    UNKNOWN,
    criteria_indicator,
    format_value,
    metric_card,
    status_banner,
)
from sepsiswatch.visualization.theme import COLORS


class TestHeartRateTrendChart:
    """Tests for create_hr_trend_chart."""

    def test_five_point_trend(self):
        history = (78, 76, 75, 77, 75)

        fig = create_hr_trend_chart(history)

        assert isinstance(fig, go.Figure)
        trace = fig.data[0]
        assert list(trace.x) == list(HR_HISTORY_LABELS)
        assert list(trace.y) == list(history)

    def test_order_preserved(self):
        fig = create_hr_trend_chart([100, 105, 108, 112, 110])

        assert list(fig.data[0].y) == [100, 105, 108, 112, 110]
        assert fig.data[0].x[-1] == "Now"

    def test_short_trend_aligns_to_now(self):
        fig = create_hr_trend_chart([90, 95])

        assert list(fig.data[0].x) == ["-1h", "Now"]

    def test_long_trend_gets_hour_labels(self):
        fig = create_hr_trend_chart([80, 81, 82, 83, 84, 85, 86])

        assert list(fig.data[0].x) == ["-6h", "-5h", "-4h", "-3h", "-2h", "-1h", "Now"]

    def test_empty_trend(self):
        fig = create_hr_trend_chart([])

        assert len(fig.data[0].y) == 0

    def test_y_range_covers_values(self):
        fig = create_hr_trend_chart([150, 160, 170, 165, 168])

        low, high = fig.layout.yaxis.range
        assert low <= 50
        assert high >= 170


class TestTierDistributionChart:
    """Tests for create_tier_distribution_chart."""

    def test_counts_per_tier(self):
        fig = create_tier_distribution_chart(ward_overview(get_sample_patients()))

        bar = fig.data[0]
        assert list(bar.x) == ["Normal", "At-Risk / Watch", "Sepsis Alert!"]
        assert list(bar.y) == [2, 0, 1]

    def test_empty_overview(self):
        fig = create_tier_distribution_chart(pd.DataFrame({"risk_tier": []}))

        assert list(fig.data[0].y) == [0, 0, 0]


class TestComponents:
    """Tests for HTML components and value formatting."""

    @pytest.mark.parametrize(
        "value, fmt, unit, expected",
        [
            (None, None, "", UNKNOWN),
            (None, ".1f", "°C", UNKNOWN),
            (37.0, ".1f", "°C", "37.0 °C"),
            (75.0, None, "bpm", "75 bpm"),
            (8.5, None, "", "8.5"),
            (True, None, "", "Yes"),
            ("Female", None, "", "Female"),
        ],
    )
    def test_format_value(self, value, fmt, unit, expected):
        assert format_value(value, fmt, unit) == expected

    @pytest.mark.parametrize("tier", list(RiskTier))
    def test_status_banner(self, tier):
        html = status_banner(tier, 2)

        assert tier.label in html
        assert tier.advice in html
        assert COLORS[tier.severity] in html
        assert "qSOFA 2/3" in html

    def test_criteria_indicator_colors(self):
        assert COLORS["danger"] in criteria_indicator("Altered Mental Status", True)
        assert COLORS["danger"] not in criteria_indicator("Altered Mental Status", False)

    def test_metric_card_escapes(self):
        html = metric_card("<b>WBC</b>", "8.5")

        assert "&lt;b&gt;WBC&lt;/b&gt;" in html
        assert "8.5" in html
