import pandas as pd
import streamlit as st

from core.calculators import break_even_applicable, refinance_break_even
from core.models import RefinanceInputs
from core.rules import evaluate_notices
from ui.components import (
    format_currency,
    format_signed_currency,
    money_input,
    pct_input,
    render_notices,
    years_input,
)


def render_refinance():
    """Old vs new payment and the months needed to recover closing costs."""
    st.session_state.setdefault("refinance_inputs", RefinanceInputs().model_dump())
    r = RefinanceInputs(**st.session_state["refinance_inputs"])
    st.subheader("Refinance")
    st.caption("Compare monthly payments and estimate a break-even point.")
    left, right = st.columns(2)
    with left:
        r.loan_balance = money_input("Original Loan Balance", r.loan_balance, key="refi_balance")
        c1, c2 = st.columns(2)
        with c1:
            r.current_rate_pct = pct_input("Current Rate", r.current_rate_pct, key="refi_current_rate")
        with c2:
            r.new_rate_pct = pct_input("New Rate", r.new_rate_pct, key="refi_new_rate")
        r.term_years = years_input(
            "New Term",
            r.term_years,
            key="refi_term",
            help="The same term is used for both the old and new payments.",
        )
        r.closing_costs = money_input("Closing Costs", r.closing_costs, key="refi_closing_costs")
    r = RefinanceInputs(**r.model_dump())
    st.session_state["refinance_inputs"] = r.model_dump()
    res = refinance_break_even(
        r.loan_balance, r.current_rate_pct, r.new_rate_pct, r.term_years, r.closing_costs
    )
    st.session_state["refinance_result"] = res
    months = res["break_even_months"]
    with right:
        c1, c2 = st.columns(2)
        c1.metric("Monthly Savings", format_signed_currency(res["monthly_savings"]))
        c2.metric("Break-even Point", f"{months} mo" if break_even_applicable(months) else "N/A")
        st.caption(f"Old Monthly Payment: {format_currency(res['old_payment'])}")
        st.caption(f"New Monthly Payment: {format_currency(res['new_payment'])}")
        chart = pd.DataFrame(
            {"Loan": ["Old", "New"], "Payment": [res["old_payment"], res["new_payment"]]}
        ).set_index("Loan")
        st.bar_chart(chart)
    render_notices(evaluate_notices("refinance", res))
    return res
