"""Assessment Service - qSOFA scoring and risk tiers for patient records.

Bridges patient records and the qSOFA model:
1. Score a single record and classify it for the status banner
2. Build a ward overview table for the whole loaded list

Uses models/qsofa for scoring and classification.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

import pandas as pd

from models.qsofa.qsofa_model import QSOFAModel, ScoreResult
from models.qsofa.risk_tiers import RiskTier, classify
from sepsiswatch.data.records import PatientRecord

logger = logging.getLogger(__name__)

FRAME_COLUMNS = ["id", "name", "age", "gender", "hr", "rr", "sbp", "temp", "ams"]


@dataclass(frozen=True)
class Assessment:
    """qSOFA assessment of a single patient."""
    record: PatientRecord
    result: ScoreResult
    tier: RiskTier

    def to_dict(self) -> Dict[str, Any]:
        return {
            "patient_id": self.record.info.id,
            "qsofa_score": self.result.score,
            "rr_high": self.result.rr_high,
            "sbp_low": self.result.sbp_low,
            "ams_positive": self.result.ams_positive,
            "risk_tier": self.tier.value,
            "label": self.tier.label,
            "advice": self.tier.advice,
        }


def assess(record: PatientRecord, model: Optional[QSOFAModel] = None) -> Assessment:
    """
    Score and classify a patient record.

    Raises:
        InvalidVitalsError: If the record's vitals cannot be scored.
    """
    model = model or QSOFAModel()
    result = model.score(record.vitals)
    return Assessment(record=record, result=result, tier=classify(result.score))


def patients_to_frame(patients: Sequence[PatientRecord]) -> pd.DataFrame:
    """Flatten patient records into one DataFrame row per patient."""
    rows: List[Dict[str, Any]] = [
        {
            "id": p.info.id,
            "name": p.info.name,
            "age": p.info.age,
            "gender": p.info.gender,
            "hr": p.vitals.hr,
            "rr": p.vitals.rr,
            "sbp": p.vitals.sbp,
            "temp": p.vitals.temp,
            "ams": p.vitals.ams,
        }
        for p in patients
    ]
    return pd.DataFrame(rows, columns=FRAME_COLUMNS)


def ward_overview(
    patients: Sequence[PatientRecord],
    model: Optional[QSOFAModel] = None,
) -> pd.DataFrame:
    """
    Score every loaded patient at once.

    Returns:
        DataFrame from :func:`patients_to_frame` with added ``qsofa_score``
        and ``risk_tier`` columns, in list order.

    Raises:
        InvalidVitalsError: If any record's vitals cannot be scored.
    """
    model = model or QSOFAModel()
    df = patients_to_frame(patients)
    if df.empty:
        df["qsofa_score"] = pd.Series(dtype="int32")
        df["risk_tier"] = pd.Series(dtype="object")
        return df

    # None in any cell turns the column into object dtype; the model rejects it
    for col in ("rr", "sbp"):
        df[col] = pd.to_numeric(df[col], errors="coerce")

    scores = model.calculate_score(df)
    df["qsofa_score"] = scores
    df["risk_tier"] = [classify(int(s)).label for s in scores]

    alerts = int((scores >= 2).sum())
    logger.info(f"Scored {len(df)} patients, {alerts} on sepsis alert")
    return df
