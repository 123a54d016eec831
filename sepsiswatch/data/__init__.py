"""Patient records, payload import and bundled sample scenarios."""

from .records import (
    DEFAULT_PATIENT_NAME,
    HR_HISTORY_LABELS,
    Labs,
    PatientInfo,
    PatientRecord,
    Vitals,
)
from .loader import (
    ImportIssue,
    ImportResult,
    import_patients,
    normalize_hr_history,
    parse_payload,
)
from .samples import SAMPLE_SCENARIOS, get_sample_patients, get_sample_payload

__all__ = [
    "DEFAULT_PATIENT_NAME",
    "HR_HISTORY_LABELS",
    "Labs",
    "PatientInfo",
    "PatientRecord",
    "Vitals",
    "ImportIssue",
    "ImportResult",
    "import_patients",
    "normalize_hr_history",
    "parse_payload",
    "SAMPLE_SCENARIOS",
    "get_sample_patients",
    "get_sample_payload",
]
