import streamlit as st

from core.calculators import projection_frame, rent_vs_buy_projection
from core.models import RentVsBuyInputs
from core.presets import RENT_VS_BUY_ASSUMPTIONS
from core.rules import evaluate_notices
from ui.components import format_currency, money_input, pct_input, render_notices, years_input


def render_rent_vs_buy():
    """Cumulative rent against net buying cost, one point per year."""
    st.session_state.setdefault("rent_vs_buy_inputs", RentVsBuyInputs().model_dump())
    i = RentVsBuyInputs(**st.session_state["rent_vs_buy_inputs"])
    st.subheader("Rent vs Buy")
    st.caption("Compare cumulative renting vs net buying costs over time (simplified model).")
    left, right = st.columns(2)
    with left:
        i.home_price = money_input("Target Home Price", i.home_price, key="rvb_home_price")
        i.monthly_rent = money_input("Current Monthly Rent", i.monthly_rent, key="rvb_rent")
        c1, c2 = st.columns(2)
        with c1:
            i.rent_inflation_pct = pct_input(
                "Rent Inflation", i.rent_inflation_pct, key="rvb_rent_inflation", step=0.1
            )
        with c2:
            i.appreciation_pct = pct_input(
                "Home Appreciation", i.appreciation_pct, key="rvb_appreciation", step=0.1
            )
        i.duration_years = years_input(
            "Duration", i.duration_years, key="rvb_duration", help="Chart uses years 1..N."
        )
        a = RENT_VS_BUY_ASSUMPTIONS
        st.caption(
            f"Assumptions: {a['down_pct'] * 100:.0f}% down, {a['term_years']}-year fixed at "
            f"{a['rate_pct']}% · Property tax {a['tax_pct'] * 100:.0f}%/yr · "
            f"Maintenance {a['maintenance_pct'] * 100:.0f}%/yr"
        )
    i = RentVsBuyInputs(**i.model_dump())
    st.session_state["rent_vs_buy_inputs"] = i.model_dump()
    res = rent_vs_buy_projection(
        i.home_price, i.monthly_rent, i.rent_inflation_pct, i.appreciation_pct, i.duration_years
    )
    st.session_state["rent_vs_buy_result"] = res
    summary = res["summary"]
    years = len(res["points"])
    with right:
        c1, c2 = st.columns(2)
        c1.metric(f"Rent cost ({years} yrs)", format_currency(summary["final_rent_cost"]))
        c2.metric(f"Net buy cost ({years} yrs)", format_currency(summary["final_buy_net_cost"]))
        st.caption(f"Down payment: {format_currency(summary['down_payment'])}")
        st.caption(f"Loan amount: {format_currency(summary['loan_amount'])}")
        st.caption(f"Monthly mortgage (P&I): {format_currency(summary['monthly_mortgage_payment'])}")
        st.line_chart(projection_frame(res["points"]))
    render_notices(evaluate_notices("rent-vs-buy", res))
    return res
