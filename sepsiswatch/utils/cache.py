"""Streamlit caching utilities for SepsisWatch.

Parsing an uploaded file is cheap, but Streamlit reruns the whole script on
every interaction; caching by file content keeps reruns from re-validating
the same payload.
"""

from pathlib import Path
from typing import Union

import streamlit as st

from sepsiswatch.data.loader import ImportResult, parse_payload
from sepsiswatch.data.records import HR_HISTORY_LABELS


@st.cache_data(show_spinner="Validating patient file...")
def cached_parse_payload(
    raw_text: Union[str, bytes],
    skip_invalid: bool = False,
    history_length: int = len(HR_HISTORY_LABELS),
) -> ImportResult:
    """Parse and validate a payload with Streamlit caching.

    Errors are not cached, so a rejected file is re-validated (and the
    error re-raised) on every attempt.

    Raises:
        PatientImportError: If the payload is rejected.
    """
    return parse_payload(
        raw_text, skip_invalid=skip_invalid, history_length=history_length
    )


@st.cache_data(show_spinner="Loading sample file...")
def cached_load_sample_file(path: str) -> str:
    """Read the bundled sample payload as text.

    Raises:
        FileNotFoundError: If the sample file does not exist.
    """
    return Path(path).read_text(encoding="utf-8")


def clear_cache() -> None:
    """Clear all Streamlit data caches."""
    st.cache_data.clear()
