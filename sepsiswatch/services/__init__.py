"""Services for the SepsisWatch dashboard.

This module provides:
- PatientSession: Active patient list and selection
- Assessment service: qSOFA scoring and risk tiers for patient records
"""

from .session import PatientSession
from .assessment_service import Assessment, assess, patients_to_frame, ward_overview

__all__ = [
    "PatientSession",
    "Assessment",
    "assess",
    "patients_to_frame",
    "ward_overview",
]
