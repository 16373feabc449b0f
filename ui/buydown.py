import streamlit as st

from core.calculators import buydown_schedule, schedule_frame
from core.models import BuydownInputs
from core.presets import BUYDOWN_TERM_YEARS, BUYDOWN_TYPES
from core.rules import evaluate_notices
from ui.components import format_currency, money_input, pct_input, render_notices


def render_buydown():
    """Temporary 2-1 buydown schedule against the base-rate payment."""
    st.session_state.setdefault("buydown_inputs", BuydownInputs().model_dump())
    b = BuydownInputs(**st.session_state["buydown_inputs"])
    st.subheader("Rate Buydown")
    st.caption(
        f"Model a temporary buydown payment schedule (2-1) vs the base rate "
        f"({BUYDOWN_TERM_YEARS}-year assumption)."
    )
    left, right = st.columns(2)
    with left:
        types = list(BUYDOWN_TYPES)
        b.buydown_type = st.selectbox(
            "Buydown Type",
            types,
            index=types.index(b.buydown_type),
            format_func=BUYDOWN_TYPES.get,
            key="buydown_type",
        )
        b.loan_amount = money_input("Loan Amount", b.loan_amount, key="buydown_loan")
        b.base_rate_pct = pct_input("Base Interest Rate", b.base_rate_pct, key="buydown_rate")
    b = BuydownInputs(**b.model_dump())
    st.session_state["buydown_inputs"] = b.model_dump()
    res = buydown_schedule(b.loan_amount, b.base_rate_pct, b.buydown_type)
    st.session_state["buydown_result"] = res
    with left:
        st.metric("Base payment (monthly)", format_currency(res["base_monthly_payment"]))
        if b.buydown_type == "temporary-2-1":
            st.caption(f"Buydown cost (total savings): {format_currency(res['total_buydown_savings'])}")
    with right:
        st.dataframe(
            schedule_frame(res["schedule"]),
            hide_index=True,
            column_config={
                "Rate %": st.column_config.NumberColumn(format="%.2f%%"),
                "Monthly": st.column_config.NumberColumn(format="$%.0f"),
                "Annual": st.column_config.NumberColumn(format="$%.0f"),
                "Savings / mo": st.column_config.NumberColumn(format="$%.0f"),
                "Savings / yr": st.column_config.NumberColumn(format="$%.0f"),
            },
        )
        if b.buydown_type == "temporary-2-1":
            st.caption("Savings shown are vs the base rate payment.")
    render_notices(evaluate_notices("rate-buydown", res))
    return res
