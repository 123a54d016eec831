"""
qSOFA (Quick Sequential Organ Failure Assessment) Package.

This package provides the rule-based qSOFA scorer from the Sepsis-3
guidelines and the risk tier classification built on top of it.
"""

from .qsofa_model import QSOFAModel, ScoreResult, score
from .risk_tiers import RiskTier, classify

__all__ = ['QSOFAModel', 'ScoreResult', 'score', 'RiskTier', 'classify']
