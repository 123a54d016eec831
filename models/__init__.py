"""Clinical scoring models for the SepsisWatch dashboard."""

from .qsofa.qsofa_model import QSOFAModel, ScoreResult
from .qsofa.risk_tiers import RiskTier, classify

__all__ = [
    "QSOFAModel",
    "ScoreResult",
    "RiskTier",
    "classify",
]
