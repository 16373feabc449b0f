import streamlit as st

from core.calculators import reverse_mortgage_estimate
from core.models import ReverseMortgageInputs
from core.presets import DISCLAIMER, REVERSE_MIN_AGE
from core.rules import evaluate_notices
from ui.components import format_currency, format_pct, money_input, render_notices, years_input


def render_reverse_mortgage():
    """Quick estimate of available cash based on age and home value."""
    st.session_state.setdefault("reverse_mortgage_inputs", ReverseMortgageInputs().model_dump())
    i = ReverseMortgageInputs(**st.session_state["reverse_mortgage_inputs"])
    st.subheader("Reverse Mortgage")
    left, right = st.columns(2)
    with left:
        i.youngest_borrower_age = years_input(
            "Age of youngest borrower",
            i.youngest_borrower_age,
            key="reverse_age",
            help=f"Must be {REVERSE_MIN_AGE}+ to be eligible.",
        )
        i.home_value = money_input("Home Value", i.home_value, key="reverse_home_value")
        i.current_mortgage_balance = money_input(
            "Current Mortgage Balance", i.current_mortgage_balance, key="reverse_balance"
        )
    i = ReverseMortgageInputs(**i.model_dump())
    st.session_state["reverse_mortgage_inputs"] = i.model_dump()
    res = reverse_mortgage_estimate(i.youngest_borrower_age, i.home_value, i.current_mortgage_balance)
    st.session_state["reverse_mortgage_result"] = res
    eligible = res["eligible"]
    with left:
        render_notices(evaluate_notices("reverse-mortgage", res))
    with right:
        st.metric(
            "Estimated Net Principal Limit (Available Cash)",
            format_currency(res["net_principal_limit"]),
        )
        st.caption(
            f"Estimated availability: {format_pct(res['availability_pct'] * 100) if eligible else '—'}"
        )
        st.caption(
            f"Estimated principal limit: {format_currency(res['gross_principal_limit']) if eligible else '—'}"
        )
        st.caption(f"Less: current mortgage: {format_currency(i.current_mortgage_balance)}")
        st.caption(DISCLAIMER)
    return res
