"""Ward-light theme for the SepsisWatch dashboard."""

import streamlit as st


# Clinical light palette; tier colours match the status banner
COLORS = {
    "background": "#f4f6fa",
    "card_bg": "#ffffff",
    "card_border": "#d8dee9",
    "primary": "#4bc0c0",
    "secondary": "#6b7280",
    "success": "#2e9e5b",
    "warning": "#d99a1e",
    "danger": "#d64545",
    "text_primary": "#1f2937",
    "text_secondary": "#6b7280",
}


def get_plotly_template() -> dict:
    """
    Get a Plotly layout template matching the dashboard theme.

    Returns:
        dict: Plotly template configuration dictionary.
    """
    axis = {
        "gridcolor": COLORS["card_border"],
        "linecolor": COLORS["card_border"],
        "tickfont": {"color": COLORS["text_secondary"]},
        "title": {"font": {"color": COLORS["text_primary"]}},
        "zerolinecolor": COLORS["card_border"],
    }
    return {
        "layout": {
            "paper_bgcolor": COLORS["card_bg"],
            "plot_bgcolor": COLORS["card_bg"],
            "font": {
                "family": "Inter, -apple-system, BlinkMacSystemFont, sans-serif",
                "color": COLORS["text_primary"],
                "size": 12,
            },
            "title": {
                "font": {"size": 15, "color": COLORS["text_primary"]},
                "x": 0.5,
                "xanchor": "center",
            },
            "xaxis": dict(axis),
            "yaxis": dict(axis),
            "legend": {
                "bgcolor": "rgba(0,0,0,0)",
                "font": {"color": COLORS["text_primary"]},
            },
            "colorway": [
                COLORS["primary"],
                COLORS["success"],
                COLORS["warning"],
                COLORS["danger"],
            ],
            "margin": {"l": 50, "r": 20, "t": 50, "b": 40},
        },
    }


def apply_theme() -> None:
    """
    Inject the dashboard CSS into the Streamlit page.
    """
    css = f"""
    <style>
        .stApp {{
            background-color: {COLORS["background"]};
        }}

        section[data-testid="stSidebar"] {{
            background-color: {COLORS["card_bg"]};
            border-right: 1px solid {COLORS["card_border"]};
        }}

        h1, h2, h3, h4 {{
            color: {COLORS["text_primary"]} !important;
        }}

        .stButton > button {{
            width: 100%;
            border-radius: 6px;
        }}

        .stDataFrame {{
            border: 1px solid {COLORS["card_border"]};
            border-radius: 8px;
        }}
    </style>
    """
    st.markdown(css, unsafe_allow_html=True)
