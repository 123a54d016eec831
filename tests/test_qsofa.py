"""
Unit tests for the qSOFA scorer.

Tests single-vitals scoring, criterion boundaries, rejection of unusable
vitals, and DataFrame batch scoring.
"""

import math

import numpy as np
import pandas as pd
import pytest

from models.qsofa.qsofa_model import QSOFAModel, ScoreResult, score
from sepsiswatch.data.records import Vitals
from sepsiswatch.exceptions import InvalidVitalsError


def make_vitals(rr=16.0, sbp=120.0, ams=False, **kwargs):
    return Vitals(rr=rr, sbp=sbp, ams=ams, **kwargs)


class TestQSOFAModelInitialization:
    """Tests for QSOFAModel initialization."""

    def test_qsofa_init_default_parameters(self):
        """Test initialization with default Sepsis-3 thresholds."""
        model = QSOFAModel()

        assert model.resp_rate_threshold == 22.0
        assert model.sbp_threshold == 100.0

    def test_qsofa_init_custom_thresholds(self):
        """Test initialization with custom thresholds."""
        model = QSOFAModel(resp_rate_threshold=20.0, sbp_threshold=90.0)

        assert model.score(make_vitals(rr=20)).rr_high is True
        assert model.score(make_vitals(sbp=95)).sbp_low is False

    def test_repr(self):
        """Test string representation."""
        assert repr(QSOFAModel()) == "QSOFAModel(resp_rate_threshold=22.0, sbp_threshold=100.0)"


class TestScore:
    """Tests for scoring a single set of vitals."""

    def test_all_criteria_clear(self):
        """Test that normal vitals score 0 with no flags."""
        result = score(make_vitals(rr=21, sbp=101, ams=False))

        assert result == ScoreResult(score=0, rr_high=False, sbp_low=False, ams_positive=False)
        assert result.criteria_met == []

    @pytest.mark.parametrize(
        "vitals, flag",
        [
            (make_vitals(rr=22), "rr_high"),
            (make_vitals(sbp=100), "sbp_low"),
            (make_vitals(ams=True), "ams_positive"),
        ],
    )
    def test_single_criterion(self, vitals, flag):
        """Test that exactly one criterion gives score 1 and one flag."""
        result = score(vitals)

        assert result.score == 1
        flags = {
            "rr_high": result.rr_high,
            "sbp_low": result.sbp_low,
            "ams_positive": result.ams_positive,
        }
        assert flags.pop(flag) is True
        assert not any(flags.values())

    def test_two_criteria(self):
        """Test that two criteria give score 2."""
        result = score(make_vitals(rr=30, sbp=85))

        assert result.score == 2
        assert result.criteria_met == ["respiratory_rate", "systolic_bp"]

    def test_sepsis_alert_example(self):
        """Test the worked sepsis alert example."""
        result = score(Vitals(hr=110, rr=25, sbp=90, temp=38.5, ams=True))

        assert result.score == 3
        assert result.rr_high and result.sbp_low and result.ams_positive

    def test_at_risk_vitals_below_thresholds(self):
        """Test vitals just inside normal limits score 0."""
        result = score(Vitals(hr=95, rr=21, sbp=105, temp=37.9, ams=False))

        assert result.score == 0

    def test_respiratory_boundary(self):
        """Test rr == 22 is flagged and rr == 21 is not."""
        assert score(make_vitals(rr=22)).rr_high is True
        assert score(make_vitals(rr=21)).rr_high is False
        assert score(make_vitals(rr=21.9)).rr_high is False

    def test_sbp_boundary(self):
        """Test sbp == 100 is flagged and sbp == 101 is not."""
        assert score(make_vitals(sbp=100)).sbp_low is True
        assert score(make_vitals(sbp=101)).sbp_low is False

    def test_optional_vitals_not_needed(self):
        """Test that missing hr and temp do not affect scoring."""
        result = score(Vitals(rr=16, sbp=120, ams=False))

        assert result.score == 0

    def test_numpy_values_accepted(self):
        """Test numpy scalars are usable numbers and booleans."""
        result = score(Vitals(rr=np.float64(24), sbp=np.int64(95), ams=np.bool_(True)))

        assert result.score == 3

    def test_deterministic(self):
        """Test same input gives same output."""
        vitals = make_vitals(rr=23, sbp=99, ams=False)

        assert score(vitals) == score(vitals)


class TestScoreRejectsUnusableVitals:
    """Tests for InvalidVitalsError on unusable required vitals."""

    @pytest.mark.parametrize("value", [None, "25", math.nan, math.inf, True])
    def test_invalid_rr(self, value):
        with pytest.raises(InvalidVitalsError, match="rr"):
            score(make_vitals(rr=value))

    @pytest.mark.parametrize("value", [None, "90", math.nan, -math.inf, False])
    def test_invalid_sbp(self, value):
        with pytest.raises(InvalidVitalsError, match="sbp"):
            score(make_vitals(sbp=value))

    @pytest.mark.parametrize("value", [None, 1, 0, "true"])
    def test_invalid_ams(self, value):
        with pytest.raises(InvalidVitalsError, match="ams"):
            score(make_vitals(ams=value))

    def test_error_is_value_error(self):
        """Test InvalidVitalsError can be caught as ValueError."""
        with pytest.raises(ValueError):
            score(Vitals())


class TestCalculateScore:
    """Tests for DataFrame batch scoring."""

    def test_calculate_score_returns_array(self):
        model = QSOFAModel()
        df = pd.DataFrame({
            'rr': [16.0, 22.0, 25.0],
            'sbp': [120.0, 110.0, 90.0],
            'ams': [False, False, True],
        })

        scores = model.calculate_score(df)

        assert isinstance(scores, np.ndarray)
        np.testing.assert_array_equal(scores, [0, 1, 3])

    def test_calculate_score_matches_single_scoring(self):
        model = QSOFAModel()
        df = pd.DataFrame({
            'rr': [21.0, 22.0, 30.0, 18.0],
            'sbp': [101.0, 100.0, 85.0, 99.0],
            'ams': [False, True, False, False],
        })

        scores = model.calculate_score(df)
        expected = [
            model.score(Vitals(rr=r.rr, sbp=r.sbp, ams=bool(r.ams))).score
            for r in df.itertuples()
        ]

        assert scores.tolist() == expected

    def test_calculate_score_empty_dataframe(self):
        model = QSOFAModel()

        scores = model.calculate_score(pd.DataFrame())

        assert len(scores) == 0

    def test_missing_column_raises(self):
        model = QSOFAModel()
        df = pd.DataFrame({'rr': [22.0], 'sbp': [90.0]})

        with pytest.raises(InvalidVitalsError, match="ams"):
            model.calculate_score(df)

    def test_nan_raises_instead_of_counting_zero(self):
        model = QSOFAModel()
        df = pd.DataFrame({
            'rr': [22.0, np.nan],
            'sbp': [90.0, 120.0],
            'ams': [False, False],
        })

        with pytest.raises(InvalidVitalsError, match=r"rows \[1\]"):
            model.calculate_score(df)

    def test_non_boolean_ams_column_raises(self):
        model = QSOFAModel()
        df = pd.DataFrame({'rr': [22.0], 'sbp': [90.0], 'ams': [1]})

        with pytest.raises(InvalidVitalsError, match="boolean"):
            model.calculate_score(df)

    def test_criteria_breakdown(self):
        model = QSOFAModel()
        df = pd.DataFrame({
            'rr': [25.0, 16.0],
            'sbp': [120.0, 95.0],
            'ams': [False, True],
        })

        resp, sbp, ams = model.get_criteria_breakdown(df)

        assert resp.tolist() == [1, 0]
        assert sbp.tolist() == [0, 1]
        assert ams.tolist() == [0, 1]
