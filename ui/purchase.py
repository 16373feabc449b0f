import pandas as pd
import streamlit as st

from core.calculators import purchase_breakdown
from core.models import PurchaseInputs
from core.rules import evaluate_notices
from ui.components import format_currency, money_input, pct_input, render_notices, years_input


def render_purchase():
    """Purchase payment with taxes and insurance."""
    st.session_state.setdefault("purchase_inputs", PurchaseInputs().model_dump())
    p = PurchaseInputs(**st.session_state["purchase_inputs"])
    st.subheader("Purchase")
    st.caption("Estimate your monthly payment with taxes and insurance.")
    left, right = st.columns(2)
    with left:
        p.home_price = money_input("Home Price", p.home_price, key="purchase_home_price")
        pct = p.down_payment / p.home_price * 100 if p.home_price > 0 else 0.0
        p.down_payment = money_input(
            "Down Payment", p.down_payment, key="purchase_down_payment", help=f"≈ {pct:.1f}% down"
        )
        c1, c2 = st.columns(2)
        with c1:
            p.rate_pct = pct_input("Interest Rate", p.rate_pct, key="purchase_rate")
        with c2:
            p.term_years = years_input("Loan Term", p.term_years, key="purchase_term")
        c3, c4 = st.columns(2)
        with c3:
            p.annual_property_tax = money_input(
                "Annual Property Tax", p.annual_property_tax, key="purchase_tax"
            )
        with c4:
            p.annual_home_insurance = money_input(
                "Annual Home Insurance", p.annual_home_insurance, key="purchase_insurance"
            )
    p = PurchaseInputs(**p.model_dump())
    st.session_state["purchase_inputs"] = p.model_dump()
    res = purchase_breakdown(
        p.home_price,
        p.down_payment,
        p.rate_pct,
        p.term_years,
        p.annual_property_tax,
        p.annual_home_insurance,
    )
    st.session_state["purchase_result"] = res
    with left:
        st.caption(f"Loan Amount: {format_currency(res['loan_amount'])}")
    with right:
        st.metric("Total Monthly Payment", format_currency(res["total"]))
        st.caption(f"Monthly P&I: {format_currency(res['monthly_pi'])}")
        st.caption(f"Tax: {format_currency(res['monthly_tax'])}")
        st.caption(f"Insurance: {format_currency(res['monthly_insurance'])}")
        chart = pd.DataFrame(
            {
                "Component": ["Principal & Interest", "Tax", "Insurance"],
                "Monthly": [res["monthly_pi"], res["monthly_tax"], res["monthly_insurance"]],
            }
        ).set_index("Component")
        st.bar_chart(chart)
    render_notices(evaluate_notices("purchase", res))
    return res
