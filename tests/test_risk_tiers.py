"""
Unit tests for qSOFA risk tier classification.
"""

import numpy as np
import pytest

from models.qsofa.qsofa_model import score
from models.qsofa.risk_tiers import RiskTier, classify
from sepsiswatch.data.records import Vitals
from sepsiswatch.exceptions import InvariantViolation


class TestClassify:
    """Tests for classify."""

    @pytest.mark.parametrize(
        "value, tier",
        [
            (0, RiskTier.NORMAL),
            (1, RiskTier.WATCH),
            (2, RiskTier.ALERT),
            (3, RiskTier.ALERT),
        ],
    )
    def test_score_to_tier(self, value, tier):
        assert classify(value) is tier

    def test_numpy_integer_score(self):
        """Test scores from the batch scorer classify directly."""
        assert classify(np.int32(2)) is RiskTier.ALERT

    @pytest.mark.parametrize("value", [-1, 4, 100])
    def test_out_of_range_score(self, value):
        with pytest.raises(InvariantViolation, match="between 0 and 3"):
            classify(value)

    @pytest.mark.parametrize("value", [1.0, "2", None, True])
    def test_non_integer_score(self, value):
        with pytest.raises(InvariantViolation, match="integer"):
            classify(value)


class TestRiskTierDetails:
    """Tests for tier labels, advice and banner severity."""

    def test_alert_details(self):
        assert RiskTier.ALERT.label == "Sepsis Alert!"
        assert "Immediate medical intervention" in RiskTier.ALERT.advice
        assert RiskTier.ALERT.severity == "danger"

    def test_watch_details(self):
        assert RiskTier.WATCH.label == "At-Risk / Watch"
        assert "Monitor closely" in RiskTier.WATCH.advice
        assert RiskTier.WATCH.severity == "warning"

    def test_normal_details(self):
        assert RiskTier.NORMAL.label == "Normal"
        assert "within normal ranges" in RiskTier.NORMAL.advice
        assert RiskTier.NORMAL.severity == "success"


class TestScoreAndClassify:
    """End-to-end scorer plus classifier properties."""

    @pytest.mark.parametrize("rr", [10, 16, 21])
    @pytest.mark.parametrize("sbp", [101, 120, 160])
    def test_no_criteria_is_normal(self, rr, sbp):
        result = score(Vitals(rr=rr, sbp=sbp, ams=False))

        assert result.score == 0
        assert classify(result.score) is RiskTier.NORMAL

    @pytest.mark.parametrize(
        "vitals",
        [
            Vitals(rr=22, sbp=120, ams=False),
            Vitals(rr=16, sbp=100, ams=False),
            Vitals(rr=16, sbp=120, ams=True),
        ],
    )
    def test_one_criterion_is_watch(self, vitals):
        assert classify(score(vitals).score) is RiskTier.WATCH

    @pytest.mark.parametrize(
        "vitals",
        [
            Vitals(rr=22, sbp=100, ams=False),
            Vitals(rr=22, sbp=120, ams=True),
            Vitals(rr=16, sbp=100, ams=True),
            Vitals(rr=25, sbp=90, ams=True),
        ],
    )
    def test_two_or_more_criteria_is_alert(self, vitals):
        result = score(vitals)

        assert result.score in (2, 3)
        assert classify(result.score) is RiskTier.ALERT
