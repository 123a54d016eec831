"""
qSOFA (Quick Sequential Organ Failure Assessment) Scorer.

This module implements the qSOFA bedside score from the Sepsis-3 guidelines
as a pure, rule-based scorer. A single patient's vitals are scored with
``QSOFAModel.score``; a whole patient list can be scored at once from a
DataFrame with ``QSOFAModel.calculate_score``.

qSOFA Criteria (each worth 1 point, max score = 3):
    - Respiratory Rate >= 22 breaths/min
    - Systolic Blood Pressure <= 100 mmHg
    - Altered mental status

Reference:
    Singer M, et al. The Third International Consensus Definitions for Sepsis
    and Septic Shock (Sepsis-3). JAMA. 2016;315(8):801-810.
"""

import math
import numbers
from dataclasses import dataclass
from typing import Any, List, Tuple

import numpy as np
import pandas as pd

from sepsiswatch.data.records import Vitals
from sepsiswatch.exceptions import InvalidVitalsError


@dataclass(frozen=True)
class ScoreResult:
    """qSOFA score and the criteria that produced it."""
    score: int
    rr_high: bool
    sbp_low: bool
    ams_positive: bool

    @property
    def criteria_met(self) -> List[str]:
        """Names of the criteria that contributed a point."""
        names = []
        if self.rr_high:
            names.append("respiratory_rate")
        if self.sbp_low:
            names.append("systolic_bp")
        if self.ams_positive:
            names.append("altered_mentation")
        return names


def _require_number(name: str, value: Any) -> float:
    # bool is an Integral; NaN compares False against everything
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Real):
        raise InvalidVitalsError(f"{name} must be a number, got {value!r}")
    if not math.isfinite(value):
        raise InvalidVitalsError(f"{name} must be finite, got {value!r}")
    return float(value)


def _require_bool(name: str, value: Any) -> bool:
    if not isinstance(value, (bool, np.bool_)):
        raise InvalidVitalsError(f"{name} must be a boolean, got {value!r}")
    return bool(value)


class QSOFAModel:
    """
    qSOFA scoring model.

    Rule-based and stateless: it requires no training and the same vitals
    always produce the same result.

    Attributes:
        resp_rate_threshold (float): Respiratory rate threshold (default: 22).
        sbp_threshold (float): Systolic BP threshold (default: 100).

    Example:
        >>> model = QSOFAModel()
        >>> result = model.score(Vitals(rr=25, sbp=90, ams=True))
        >>> result.score
        3
    """

    REQUIRED_COLUMNS = ["rr", "sbp", "ams"]

    def __init__(
        self,
        resp_rate_threshold: float = 22.0,
        sbp_threshold: float = 100.0,
    ):
        """
        Initialize the qSOFA model.

        Args:
            resp_rate_threshold: Respiratory rate threshold in breaths/min.
                                Default is 22.
            sbp_threshold: Systolic blood pressure threshold in mmHg.
                          Default is 100.
        """
        self.resp_rate_threshold = resp_rate_threshold
        self.sbp_threshold = sbp_threshold

    def score(self, vitals: Vitals) -> ScoreResult:
        """
        Score a single set of vitals.

        Args:
            vitals: Patient vitals. Only ``rr``, ``sbp`` and ``ams`` are read.

        Returns:
            ScoreResult with the total (0-3) and the three criterion flags.

        Raises:
            InvalidVitalsError: If ``rr`` or ``sbp`` is not a finite number,
                or ``ams`` is not a boolean.
        """
        rr = _require_number("rr", vitals.rr)
        sbp = _require_number("sbp", vitals.sbp)
        ams = _require_bool("ams", vitals.ams)

        rr_high = rr >= self.resp_rate_threshold
        sbp_low = sbp <= self.sbp_threshold

        return ScoreResult(
            score=int(rr_high) + int(sbp_low) + int(ams),
            rr_high=rr_high,
            sbp_low=sbp_low,
            ams_positive=ams,
        )

    def _validate_frame(self, df: pd.DataFrame) -> None:
        missing = [col for col in self.REQUIRED_COLUMNS if col not in df.columns]
        if missing:
            raise InvalidVitalsError(f"Missing vitals columns: {missing}")

        for col in ("rr", "sbp"):
            if pd.api.types.is_bool_dtype(df[col]) or not pd.api.types.is_numeric_dtype(df[col]):
                raise InvalidVitalsError(f"Column '{col}' must be numeric")
            values = df[col].to_numpy(dtype=float)
            bad_rows = np.flatnonzero(~np.isfinite(values))
            if len(bad_rows) > 0:
                raise InvalidVitalsError(
                    f"Column '{col}' has missing or non-finite values at rows {bad_rows.tolist()}"
                )

        if not pd.api.types.is_bool_dtype(df["ams"]):
            raise InvalidVitalsError("Column 'ams' must be boolean")

    def get_criteria_breakdown(
        self,
        df: pd.DataFrame
    ) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """
        Get individual criterion values for each row.

        Args:
            df: DataFrame with ``rr``, ``sbp`` and ``ams`` columns.

        Returns:
            Tuple of three arrays:
                - respiratory_criterion: 0/1 for each row
                - sbp_criterion: 0/1 for each row
                - ams_criterion: 0/1 for each row

        Raises:
            InvalidVitalsError: If a column is missing, has the wrong type,
                or contains NaN.
        """
        self._validate_frame(df)

        resp_criterion = (df["rr"].to_numpy(dtype=float) >= self.resp_rate_threshold).astype(np.int32)
        sbp_criterion = (df["sbp"].to_numpy(dtype=float) <= self.sbp_threshold).astype(np.int32)
        ams_criterion = df["ams"].to_numpy(dtype=bool).astype(np.int32)

        return resp_criterion, sbp_criterion, ams_criterion

    def calculate_score(self, df: pd.DataFrame) -> np.ndarray:
        """
        Calculate qSOFA score for each row in the DataFrame.

        Args:
            df: DataFrame with ``rr``, ``sbp`` and ``ams`` columns, one row
                per patient.

        Returns:
            numpy array of integer scores (0-3) for each row.

        Note:
            Unlike a population screen, a missing or NaN value is an error
            here, never a criterion that silently contributes 0 points.
        """
        if len(df) == 0:
            return np.array([], dtype=np.int32)

        resp_criterion, sbp_criterion, ams_criterion = self.get_criteria_breakdown(df)
        total_score = resp_criterion + sbp_criterion + ams_criterion

        return total_score.astype(np.int32)

    def __repr__(self) -> str:
        """Return string representation of the model."""
        return (
            f"QSOFAModel(resp_rate_threshold={self.resp_rate_threshold}, "
            f"sbp_threshold={self.sbp_threshold})"
        )


_DEFAULT_MODEL = QSOFAModel()


def score(vitals: Vitals) -> ScoreResult:
    """Score vitals with the default Sepsis-3 thresholds."""
    return _DEFAULT_MODEL.score(vitals)
