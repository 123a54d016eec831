"""
Risk tier classification for qSOFA scores.

Maps a qSOFA score (0-3) to the tier shown in the dashboard status banner:
    - score >= 2 -> ALERT
    - score == 1 -> WATCH
    - score == 0 -> NORMAL
"""

import numbers
from enum import Enum

from sepsiswatch.exceptions import InvariantViolation

MAX_QSOFA_SCORE = 3
ALERT_SCORE = 2  # Sepsis-3: qSOFA >= 2 flags high risk


class RiskTier(Enum):
    """User-facing classification of a qSOFA score."""

    NORMAL = "normal"
    WATCH = "watch"
    ALERT = "alert"

    @property
    def label(self) -> str:
        return _TIER_DETAILS[self]["label"]

    @property
    def advice(self) -> str:
        return _TIER_DETAILS[self]["advice"]

    @property
    def severity(self) -> str:
        """Banner severity ('success', 'warning' or 'danger')."""
        return _TIER_DETAILS[self]["severity"]


_TIER_DETAILS = {
    RiskTier.NORMAL: {
        "label": "Normal",
        "advice": "All vital signs and labs are within normal ranges.",
        "severity": "success",
    },
    RiskTier.WATCH: {
        "label": "At-Risk / Watch",
        "advice": "Patient shows some warning signs. Monitor closely.",
        "severity": "warning",
    },
    RiskTier.ALERT: {
        "label": "Sepsis Alert!",
        "advice": "High risk of poor outcome. Immediate medical intervention required.",
        "severity": "danger",
    },
}


def classify(score: int) -> RiskTier:
    """
    Classify a qSOFA score into a risk tier.

    Args:
        score: qSOFA score, an integer between 0 and 3.

    Returns:
        The matching RiskTier.

    Raises:
        InvariantViolation: If ``score`` is not an integer in 0-3. The
            scorer never produces such a value, so this is a programming
            error rather than bad input.
    """
    if isinstance(score, bool) or not isinstance(score, numbers.Integral):
        raise InvariantViolation(f"qSOFA score must be an integer, got {score!r}")
    if not 0 <= score <= MAX_QSOFA_SCORE:
        raise InvariantViolation(
            f"qSOFA score must be between 0 and {MAX_QSOFA_SCORE}, got {score}"
        )

    if score >= ALERT_SCORE:
        return RiskTier.ALERT
    if score == 1:
        return RiskTier.WATCH
    return RiskTier.NORMAL
