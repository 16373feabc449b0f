import streamlit as st

from core.calculators import cash_out_refinance
from core.models import CashOutInputs
from core.presets import CASH_OUT_MAX_LTV, CASH_OUT_TERM_YEARS
from core.rules import evaluate_notices
from ui.components import format_currency, format_pct, money_input, pct_input, render_notices


def render_cash_out():
    """New payment on a cash-out refinance held to the max LTV."""
    st.session_state.setdefault("cash_out_inputs", CashOutInputs().model_dump())
    c = CashOutInputs(**st.session_state["cash_out_inputs"])
    st.subheader("Cash Out")
    st.caption(
        f"Estimate your new payment while respecting an {CASH_OUT_MAX_LTV * 100:.0f}% max LTV "
        f"({CASH_OUT_TERM_YEARS}-year assumption)."
    )
    left, right = st.columns(2)
    with left:
        c.home_value = money_input("Current Home Value", c.home_value, key="cash_out_home_value")
        c.existing_balance = money_input(
            "Existing Mortgage Balance", c.existing_balance, key="cash_out_existing"
        )
        c.desired_cash_out = money_input(
            "Desired Cash Out Amount", c.desired_cash_out, key="cash_out_desired"
        )
        c.rate_pct = pct_input("New Interest Rate", c.rate_pct, key="cash_out_rate")
    c = CashOutInputs(**c.model_dump())
    st.session_state["cash_out_inputs"] = c.model_dump()
    res = cash_out_refinance(c.home_value, c.existing_balance, c.desired_cash_out, c.rate_pct)
    st.session_state["cash_out_result"] = res
    with right:
        render_notices(evaluate_notices("cash-out", res))
        if res["was_capped"]:
            st.caption(f"Max allowed cash out: {format_currency(res['max_cash_out'])}")
        c1, c2 = st.columns(2)
        c1.metric("New Monthly Payment", format_currency(res["new_payment"]))
        c2.metric("Total Cash in Hand", format_currency(res["actual_cash_out"]))
        st.caption(f"New Loan Amount: {format_currency(res['new_loan'])}")
        st.caption(
            f"Max Loan Allowed ({CASH_OUT_MAX_LTV * 100:.0f}% LTV): {format_currency(res['max_loan'])}"
        )
        st.caption(f"Resulting LTV: {format_pct(res['ltv_pct'])}")
    return res
