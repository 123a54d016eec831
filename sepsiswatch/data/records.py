"""Patient record data model for the SepsisWatch dashboard.

A record bundles demographics, bedside vitals, a handful of informational
labs and a short heart-rate trend. Records are immutable once constructed;
they are built either from the bundled sample scenarios or by the importer
in :mod:`sepsiswatch.data.loader`.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

DEFAULT_PATIENT_NAME = "Unnamed Patient"

# Trend labels, oldest first. The chart always uses this fixed set.
HR_HISTORY_LABELS: Tuple[str, ...] = ("-4h", "-3h", "-2h", "-1h", "Now")


@dataclass(frozen=True)
class PatientInfo:
    """Demographic header for a patient."""
    id: str
    name: str = DEFAULT_PATIENT_NAME
    age: Optional[int] = None
    gender: Optional[str] = None


@dataclass(frozen=True)
class Vitals:
    """
    Bedside vital signs.

    Attributes:
        hr: Heart rate (beats/min).
        rr: Respiratory rate (breaths/min). Required for scoring.
        sbp: Systolic blood pressure (mmHg). Required for scoring.
        temp: Temperature (Deg C).
        ams: Altered mental status. Required for scoring.
    """
    hr: Optional[float] = None
    rr: Optional[float] = None
    sbp: Optional[float] = None
    temp: Optional[float] = None
    ams: Optional[bool] = None


@dataclass(frozen=True)
class Labs:
    """Informational lab values, not used by qSOFA."""
    wbc: Optional[float] = None      # Leukocyte count (count*10^3/uL)
    lactate: Optional[float] = None  # Lactic acid (mmol/L)
    crp: Optional[float] = None      # C-reactive protein (mg/L)


@dataclass(frozen=True)
class PatientRecord:
    """One patient's info, vitals, labs and heart-rate trend."""
    info: PatientInfo
    vitals: Vitals
    labs: Labs = field(default_factory=Labs)
    hr_history: Tuple[float, ...] = ()

    @property
    def patient_id(self) -> str:
        return self.info.id

    @property
    def display_name(self) -> str:
        """Selector label, e.g. ``"P001 - Unnamed Patient"``."""
        return f"{self.info.id} - {self.info.name}"

    def to_payload(self) -> Dict[str, Any]:
        """Convert the record back to the import payload shape."""
        info = {"id": self.info.id, "name": self.info.name}
        if self.info.age is not None:
            info["age"] = self.info.age
        if self.info.gender is not None:
            info["gender"] = self.info.gender

        vitals = {
            key: value
            for key, value in (
                ("hr", self.vitals.hr),
                ("rr", self.vitals.rr),
                ("sbp", self.vitals.sbp),
                ("temp", self.vitals.temp),
                ("ams", self.vitals.ams),
            )
            if value is not None
        }
        labs = {
            key: value
            for key, value in (
                ("wbc", self.labs.wbc),
                ("lactate", self.labs.lactate),
                ("crp", self.labs.crp),
            )
            if value is not None
        }

        return {
            "info": info,
            "vitals": vitals,
            "labs": labs,
            "hrHistory": list(self.hr_history),
        }
