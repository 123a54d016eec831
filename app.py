"""
SepsisWatch - qSOFA Bedside Dashboard

Main Streamlit application entry point.
Shows vitals, labs, the qSOFA score and a heart-rate trend for the active
patient, with a status banner driven by the qSOFA risk tier.
"""

import logging

import streamlit as st

# Configure page - must be first Streamlit command
st.set_page_config(
    page_title="SepsisWatch",
    layout="wide",
    initial_sidebar_state="expanded",
)

from models.qsofa.qsofa_model import QSOFAModel
from sepsiswatch.data.records import HR_HISTORY_LABELS
from sepsiswatch.data.samples import SAMPLE_SCENARIOS, get_sample_patients
from sepsiswatch.exceptions import InvalidVitalsError, PatientImportError
from sepsiswatch.services.assessment_service import assess, ward_overview
from sepsiswatch.services.session import PatientSession
from sepsiswatch.utils.cache import cached_load_sample_file, cached_parse_payload
from sepsiswatch.utils.config import get_config
from sepsiswatch.visualization.charts import (
    create_hr_trend_chart,
    create_tier_distribution_chart,
)
from sepsiswatch.visualization.components import (
    criteria_indicator,
    format_value,
    metric_card,
    status_banner,
)
from sepsiswatch.visualization.theme import apply_theme

config = get_config()

logging.basicConfig(
    level=getattr(logging, config.LOG_LEVEL, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def init_session_state():
    """Initialize session state with the patient session and defaults."""
    defaults = {
        "skip_invalid_records": config.SKIP_INVALID_RECORDS,
        # Upload id of the last adopted file, so reruns do not re-import it
        "_last_upload_id": None,
        "_status_message": None,
    }
    for key, value in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = value

    if "patient_session" not in st.session_state:
        st.session_state.patient_session = PatientSession(get_sample_patients())


@st.cache_resource
def get_model() -> QSOFAModel:
    """Build the qSOFA model once per process from configuration."""
    return QSOFAModel(
        resp_rate_threshold=config.RESP_RATE_THRESHOLD,
        sbp_threshold=config.SBP_THRESHOLD,
    )


def adopt_payload(session: PatientSession, raw_text, source: str) -> None:
    """Parse a payload and replace the session's list, reporting the outcome."""
    try:
        result = cached_parse_payload(
            raw_text,
            skip_invalid=st.session_state.skip_invalid_records,
            history_length=config.HR_HISTORY_LENGTH,
        )
    except PatientImportError as e:
        logger.warning(f"Import from {source} rejected: {e.reason}")
        st.session_state._status_message = ("error", f"Import failed: {e.reason}")
        return

    session.load_list(result.patients)
    message = f"Loaded {len(result.patients)} patients from {source}."
    if result.skipped:
        message += f" Skipped {len(result.skipped)} invalid records."
        st.session_state._status_message = ("warning", message)
    else:
        st.session_state._status_message = ("success", message)


# ============================================================================
# SIDEBAR
# ============================================================================

def render_sidebar(session: PatientSession) -> str:
    """Render the sidebar: navigation, scenarios, import and patient selector."""
    with st.sidebar:
        st.markdown("## SepsisWatch")
        st.markdown("*qSOFA Bedside Dashboard*")
        st.divider()

        page = st.radio(
            "Navigation",
            ["Dashboard", "Ward Overview", "Configuration"],
            label_visibility="collapsed",
        )

        st.divider()
        st.markdown("### Scenarios")
        for index, name in enumerate(SAMPLE_SCENARIOS):
            if st.button(name, key=f"scenario_{index}"):
                session.load_list(get_sample_patients())
                session.select(index)

        st.divider()
        st.markdown("### Import")
        st.session_state.skip_invalid_records = st.checkbox(
            "Skip invalid records",
            value=st.session_state.skip_invalid_records,
            help="Otherwise the first invalid record rejects the whole file.",
        )

        uploaded = st.file_uploader("Patient file (JSON)", type=["json"])
        if uploaded is not None and uploaded.file_id != st.session_state._last_upload_id:
            st.session_state._last_upload_id = uploaded.file_id
            adopt_payload(session, uploaded.getvalue(), uploaded.name)

        if st.button("Load sample file"):
            try:
                raw_text = cached_load_sample_file(str(config.SAMPLE_DATA_PATH))
            except FileNotFoundError:
                st.session_state._status_message = (
                    "error",
                    f"Sample file not found: {config.SAMPLE_DATA_PATH}",
                )
            else:
                adopt_payload(session, raw_text, config.SAMPLE_DATA_PATH.name)

        if st.session_state._status_message:
            kind, text = st.session_state._status_message
            getattr(st, kind)(text)

        st.divider()
        if len(session):
            options = list(range(len(session)))
            selected = st.selectbox(
                "Select Patient",
                options,
                index=session.selected_index or 0,
                format_func=lambda i: session.patients[i].display_name,
            )
            if selected != session.selected_index:
                session.select(selected)
        else:
            st.caption("No patients loaded")

        return page


# ============================================================================
# PAGES
# ============================================================================

def render_dashboard(session: PatientSession):
    """Render the active patient's dashboard."""
    st.title("Patient Dashboard")

    patient = session.current()
    if patient is None:
        st.info("No patient selected. Load a scenario or import a patient file.")
        return

    try:
        assessment = assess(patient, get_model())
    except InvalidVitalsError as e:
        st.error(f"Cannot score patient {patient.info.id}: {e}")
        return

    st.markdown(
        status_banner(assessment.tier, assessment.result.score),
        unsafe_allow_html=True,
    )

    info_col, vitals_col = st.columns([1, 2])

    with info_col:
        st.markdown("### Patient Info")
        st.markdown(f"**ID:** {patient.info.id}")
        st.markdown(f"**Name:** {patient.info.name}")
        st.markdown(f"**Age:** {format_value(patient.info.age)}")
        st.markdown(f"**Gender:** {format_value(patient.info.gender)}")

        st.markdown("### qSOFA Criteria")
        result = assessment.result
        model = get_model()
        st.markdown(
            criteria_indicator(f"Respiratory Rate ≥ {model.resp_rate_threshold:g}", result.rr_high)
            + criteria_indicator(f"Systolic BP ≤ {model.sbp_threshold:g}", result.sbp_low)
            + criteria_indicator("Altered Mental Status", result.ams_positive),
            unsafe_allow_html=True,
        )

    with vitals_col:
        st.markdown("### Vital Signs")
        vitals = patient.vitals
        cards = [
            ("Heart Rate", format_value(vitals.hr, unit="bpm")),
            ("Resp Rate", format_value(vitals.rr, unit="/min")),
            ("Systolic BP", format_value(vitals.sbp, unit="mmHg")),
            ("Temperature", format_value(vitals.temp, ".1f", "°C")),
        ]
        for col, (title, value) in zip(st.columns(4), cards):
            col.markdown(metric_card(title, value), unsafe_allow_html=True)

        st.markdown("### Labs")
        labs = patient.labs
        lab_cards = [
            ("WBC", format_value(labs.wbc)),
            ("Lactate", format_value(labs.lactate)),
            ("CRP", format_value(labs.crp)),
        ]
        for col, (title, value) in zip(st.columns(3), lab_cards):
            col.markdown(metric_card(title, value), unsafe_allow_html=True)

        st.plotly_chart(
            create_hr_trend_chart(patient.hr_history, HR_HISTORY_LABELS),
            use_container_width=True,
        )


def render_ward_overview(session: PatientSession):
    """Render the qSOFA overview of every loaded patient."""
    st.title("Ward Overview")

    if not len(session):
        st.info("No patients loaded.")
        return

    try:
        overview = ward_overview(session.patients, get_model())
    except InvalidVitalsError as e:
        st.error(f"Cannot score loaded patients: {e}")
        return

    st.plotly_chart(create_tier_distribution_chart(overview), use_container_width=True)
    st.dataframe(overview, use_container_width=True, hide_index=True)


def render_configuration():
    """Render the active configuration (read-only)."""
    st.title("Configuration")
    st.caption("Set SEPSISWATCH_* environment variables to change these values.")
    st.table(
        {
            "Setting": [
                "Respiratory rate threshold",
                "Systolic BP threshold",
                "Heart-rate history length",
                "Skip invalid records (default)",
                "Sample file",
                "Log level",
            ],
            "Value": [
                f"{config.RESP_RATE_THRESHOLD:g} /min",
                f"{config.SBP_THRESHOLD:g} mmHg",
                str(config.HR_HISTORY_LENGTH),
                str(config.SKIP_INVALID_RECORDS),
                str(config.SAMPLE_DATA_PATH),
                config.LOG_LEVEL,
            ],
        }
    )


# ============================================================================
# MAIN APP
# ============================================================================

def main():
    """Main application entry point."""
    init_session_state()
    apply_theme()

    session: PatientSession = st.session_state.patient_session
    page = render_sidebar(session)

    if page == "Dashboard":
        render_dashboard(session)
    elif page == "Ward Overview":
        render_ward_overview(session)
    elif page == "Configuration":
        render_configuration()


if __name__ == "__main__":
    main()
