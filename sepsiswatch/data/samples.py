"""Built-in demo scenarios for the SepsisWatch dashboard.

Three patients covering each risk tier, used as the default patient list
before any file is imported.
"""

from typing import Dict, List

from .records import Labs, PatientInfo, PatientRecord, Vitals

NORMAL_PATIENT = PatientRecord(
    info=PatientInfo(id="P001", age=55, gender="Male"),
    vitals=Vitals(hr=75, rr=16, sbp=120, temp=37.0, ams=False),
    labs=Labs(wbc=8.5, lactate=1.1, crp=5),
    hr_history=(78, 76, 75, 77, 75),
)

AT_RISK_PATIENT = PatientRecord(
    info=PatientInfo(id="P002", age=68, gender="Female"),
    vitals=Vitals(hr=95, rr=21, sbp=105, temp=37.9, ams=False),
    labs=Labs(wbc=12.5, lactate=1.8, crp=45),
    hr_history=(90, 92, 95, 93, 95),
)

SEPSIS_ALERT_PATIENT = PatientRecord(
    info=PatientInfo(id="P003", age=76, gender="Male"),
    vitals=Vitals(hr=110, rr=25, sbp=90, temp=38.5, ams=True),
    labs=Labs(wbc=18.2, lactate=4.2, crp=150),
    hr_history=(100, 105, 108, 112, 110),
)

# Scenario name -> record, in selector order.
SAMPLE_SCENARIOS: Dict[str, PatientRecord] = {
    "Normal": NORMAL_PATIENT,
    "At-Risk": AT_RISK_PATIENT,
    "Sepsis Alert": SEPSIS_ALERT_PATIENT,
}


def get_sample_patients() -> List[PatientRecord]:
    """Return the demo patients in scenario order."""
    return list(SAMPLE_SCENARIOS.values())


def get_sample_payload() -> Dict[str, list]:
    """Return the demo patients in import payload form."""
    return {"patients": [record.to_payload() for record in get_sample_patients()]}
