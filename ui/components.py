"""Shared widgets and display formatting for the calculator views."""
import math

import streamlit as st

from core.rules import Notice


def format_currency(value) -> str:
    """Whole dollars, never negative; non-finite values show as ``$0``."""
    try:
        v = float(value)
    except (TypeError, ValueError):
        return "$0"
    if not math.isfinite(v):
        return "$0"
    return f"${max(0, math.floor(v + 0.5)):,}"


def format_signed_currency(value) -> str:
    try:
        v = float(value)
    except (TypeError, ValueError):
        return "$0"
    if math.isfinite(v) and v < 0:
        return f"-{format_currency(abs(v))}"
    return format_currency(v)


def format_pct(value, digits: int = 1) -> str:
    return f"{value:.{digits}f}%"


def money_input(label: str, value: float, key: str, help=None) -> float:
    return st.number_input(
        label, min_value=0.0, value=float(value), step=1000.0, format="%.0f", key=key, help=help
    )


def pct_input(label: str, value: float, key: str, step: float = 0.01, help=None) -> float:
    return st.number_input(
        f"{label} (%)", min_value=0.0, value=float(value), step=step, key=key, help=help
    )


def years_input(label: str, value: float, key: str, help=None) -> float:
    return st.number_input(
        f"{label} (yrs)", min_value=0.0, value=float(value), step=1.0, format="%.0f", key=key, help=help
    )


def render_notices(notices: list[Notice]) -> None:
    for n in notices:
        if n.severity == "critical":
            st.error(n.message)
        elif n.severity == "warn":
            st.warning(n.message)
        else:
            st.info(n.message)
