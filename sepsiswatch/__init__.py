"""
SepsisWatch - qSOFA Bedside Dashboard

This package provides the patient-record ingestion, qSOFA scoring support
and session state behind the SepsisWatch Streamlit dashboard.
"""

__version__ = "0.1.0"
__author__ = "SepsisWatch Team"
