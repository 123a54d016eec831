"""Streamlit UI components for the SepsisWatch dashboard."""

from html import escape
from typing import Any, Optional

from models.qsofa.risk_tiers import RiskTier

from .theme import COLORS

UNKNOWN = "unknown"


def format_value(value: Any, fmt: Optional[str] = None, unit: str = "") -> str:
    """
    Format a possibly missing record field for display.

    Args:
        value: Field value; None renders as "unknown".
        fmt: Optional format spec, e.g. ".1f" for temperature.
        unit: Optional unit appended after a space.

    Returns:
        str: Display text.

    Example:
        >>> format_value(37.0, ".1f", "°C")
        '37.0 °C'
        >>> format_value(None)
        'unknown'
    """
    if value is None:
        return UNKNOWN
    if isinstance(value, bool):
        text = "Yes" if value else "No"
    elif fmt is not None:
        text = format(value, fmt)
    elif isinstance(value, float) and value.is_integer():
        text = str(int(value))
    else:
        text = str(value)
    return f"{text} {unit}" if unit else text


def metric_card(title: str, value: str) -> str:
    """
    Create an HTML metric card component.

    Args:
        title: The metric title/label.
        value: The main metric value to display.

    Returns:
        str: HTML string for the metric card.
    """
    muted = value == UNKNOWN
    return f"""
    <div style="
        background-color: {COLORS["card_bg"]};
        border: 1px solid {COLORS["card_border"]};
        border-radius: 8px;
        padding: 12px 16px;
    ">
        <div style="
            font-size: 12px;
            font-weight: 500;
            color: {COLORS["text_secondary"]};
            text-transform: uppercase;
            letter-spacing: 0.5px;
        ">
            {escape(title)}
        </div>
        <div style="
            font-size: 24px;
            font-weight: 600;
            color: {COLORS["text_secondary"] if muted else COLORS["text_primary"]};
            line-height: 1.3;
        ">
            {escape(value)}
        </div>
    </div>
    """


def status_banner(tier: RiskTier, score: int) -> str:
    """
    Create the status banner for a risk tier.

    Args:
        tier: Risk tier of the active patient.
        score: qSOFA score shown alongside the tier label.

    Returns:
        str: HTML string for the status banner.
    """
    color = COLORS[tier.severity]
    return f"""
    <div style="
        background-color: {color}1a;
        border: 1px solid {color};
        border-left: 6px solid {color};
        border-radius: 6px;
        padding: 14px 18px;
        margin: 8px 0 16px 0;
    ">
        <div style="font-size: 22px; font-weight: 700; color: {color};">
            {escape(tier.label)}
            <span style="font-size: 14px; font-weight: 500; color: {COLORS["text_secondary"]};">
                qSOFA {score}/3
            </span>
        </div>
        <div style="font-size: 14px; color: {COLORS["text_primary"]}; margin-top: 4px;">
            {escape(tier.advice)}
        </div>
    </div>
    """


def criteria_indicator(label: str, positive: bool) -> str:
    """
    Create a qSOFA criterion row with a coloured indicator dot.

    Args:
        label: Criterion description, e.g. "Respiratory Rate >= 22".
        positive: Whether the criterion is met.

    Returns:
        str: HTML string for the indicator row.
    """
    color = COLORS["danger"] if positive else COLORS["card_border"]
    return f"""
    <div style="display: flex; align-items: center; gap: 10px; margin: 6px 0;">
        <span style="
            width: 12px;
            height: 12px;
            border-radius: 50%;
            background-color: {color};
            display: inline-block;
        "></span>
        <span style="font-size: 14px; color: {COLORS["text_primary"]};">
            {escape(label)}
        </span>
    </div>
    """
