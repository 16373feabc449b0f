"""Loan projection math shared by every calculator screen.

All functions are pure.  Numeric arguments go through
:func:`clamp_non_negative` first, so a blank, ``NaN`` or negative field
degrades to ``0`` instead of raising.  The only "failure-like" outputs are
sentinels the UI understands: ``math.inf`` for a break-even that never
happens, ``None`` for a rent-vs-buy crossover that is not reached and a
missing ``savings_monthly`` on buydown rows without a discount.
"""

from __future__ import annotations

import logging
import math
from typing import List, Optional

import pandas as pd

from core.models import BuydownScheduleRow, ProjectionPoint
from core.presets import (
    AVAILABILITY_BANDS,
    BUYDOWN_TERM_YEARS,
    BUYDOWN_TYPES,
    CASH_OUT_MAX_LTV,
    CASH_OUT_TERM_YEARS,
    RENT_VS_BUY_ASSUMPTIONS,
    REVERSE_MAX_AGE,
    REVERSE_MIN_AGE,
)
from core.utils import clamp, clamp_non_negative, round_half_up

logger = logging.getLogger(__name__)


def monthly_payment(principal, annual_rate_pct, term_years) -> float:
    """Level monthly principal & interest payment for a fixed-rate loan.

    ``annual_rate_pct`` is the nominal yearly rate (``6.5`` for 6.5%).  The
    number of periods is ``term_years * 12`` rounded to whole months; with a
    zero rate the principal is spread evenly over those months.
    """

    P = clamp_non_negative(principal)
    periods = clamp_non_negative(term_years) * 12
    r = clamp_non_negative(annual_rate_pct) / 100 / 12
    if not math.isfinite(periods):
        # limit of the level payment as the term grows without bound
        return P * r
    n = round_half_up(periods)
    if P == 0 or n == 0:
        return 0.0
    if r == 0:
        return P / n
    # (1 + r) ** -n underflows to 0 for long terms or high rates
    discount = 1 - (1 + r) ** -n
    if discount == 0:
        return P / n
    return P * r / discount


def refinance_break_even(
    loan_balance, current_rate_pct, new_rate_pct, term_years, closing_costs
) -> dict:
    """Compare old and new payments and the months needed to recoup costs.

    Both payments use the same term so the comparison is like for like.
    ``break_even_months`` is ``math.inf`` when the new loan does not save
    money each month.
    """

    old_pay = monthly_payment(loan_balance, current_rate_pct, term_years)
    new_pay = monthly_payment(loan_balance, new_rate_pct, term_years)
    savings = old_pay - new_pay
    months = clamp_non_negative(closing_costs) / savings if savings > 0 else math.inf
    if math.isfinite(months):
        months = math.ceil(months)
    return {
        "old_payment": old_pay,
        "new_payment": new_pay,
        "monthly_savings": savings,
        "break_even_months": months,
    }


def break_even_applicable(months) -> bool:
    """True when ``months`` is a real, positive break-even horizon."""

    return isinstance(months, (int, float)) and math.isfinite(months) and months > 0


def purchase_breakdown(
    home_price,
    down_payment,
    rate_pct,
    term_years,
    annual_property_tax,
    annual_home_insurance,
) -> dict:
    """Split a purchase payment into P&I, tax and insurance."""

    price = clamp_non_negative(home_price)
    down = clamp_non_negative(down_payment)
    loan = max(0.0, price - down)
    pi = monthly_payment(loan, rate_pct, term_years)
    tax = clamp_non_negative(annual_property_tax) / 12
    ins = clamp_non_negative(annual_home_insurance) / 12
    return {
        "loan_amount": loan,
        "monthly_pi": pi,
        "monthly_tax": tax,
        "monthly_insurance": ins,
        "total": pi + tax + ins,
        "down_payment_pct": down / price * 100 if price > 0 else 0.0,
    }


def estimated_availability_pct(age) -> float:
    """Share of home value a borrower of ``age`` can draw (simplified).

    Linear inside each band: 62-69 goes 35% to 40%, 70-79 goes 45% to 50%
    and 80+ goes 55% to 60% with age capped at 95.  The bands do not join
    up, so 69 gives 40% and 70 gives 45%.
    """

    a = clamp(age, 0, REVERSE_MAX_AGE)
    if a < REVERSE_MIN_AGE:
        return 0.0
    last = len(AVAILABILITY_BANDS) - 1
    for i, (lo, hi, pct_lo, pct_hi) in enumerate(AVAILABILITY_BANDS):
        if i == last or a <= hi:
            t = (min(a, hi) - lo) / (hi - lo)
            return pct_lo + t * (pct_hi - pct_lo)
    return 0.0


def reverse_mortgage_estimate(age, home_value, current_mortgage_balance) -> dict:
    """Estimate gross and net principal limits for a reverse mortgage."""

    a = clamp_non_negative(age)
    eligible = a >= REVERSE_MIN_AGE
    pct = estimated_availability_pct(a)
    gross = clamp_non_negative(home_value) * pct
    net = max(0.0, gross - clamp_non_negative(current_mortgage_balance))
    if not eligible:
        gross = net = 0.0
    return {
        "eligible": eligible,
        "availability_pct": pct,
        "gross_principal_limit": gross,
        "net_principal_limit": net,
    }


def _growth(rate, years) -> float:
    try:
        return (1 + rate) ** years
    except OverflowError:
        return math.inf


def rent_vs_buy_projection(
    home_price,
    monthly_rent,
    rent_inflation_pct,
    appreciation_pct,
    duration_years,
) -> dict:
    """Year-by-year cumulative rent cost against net cost of buying.

    Buying uses the fixed assumptions in ``RENT_VS_BUY_ASSUMPTIONS``.  Net
    buy cost is cash paid out (down payment, mortgage, tax, maintenance)
    minus equity (down payment, principal repaid, appreciation).  The
    mortgage balance carries over from year to year.
    """

    a = RENT_VS_BUY_ASSUMPTIONS
    try:
        years = int(clamp(round_half_up(float(duration_years)), 1, 50))
    except (TypeError, ValueError, OverflowError):
        years = 1
    price0 = clamp_non_negative(home_price)
    rent0 = clamp_non_negative(monthly_rent)
    rent_infl = clamp_non_negative(rent_inflation_pct) / 100
    appr = clamp_non_negative(appreciation_pct) / 100

    down = price0 * a["down_pct"]
    loan = max(0.0, price0 - down)
    payment = monthly_payment(loan, a["rate_pct"], a["term_years"])
    r = a["rate_pct"] / 100 / 12

    balance = loan
    principal_paid = 0.0
    rent_cost = 0.0
    mortgage_paid = 0.0
    tax_paid = 0.0
    maint_paid = 0.0

    points: List[ProjectionPoint] = []
    crossover: Optional[int] = None

    for year in range(1, years + 1):
        home_value = price0 * _growth(appr, year - 1)
        rent_cost += rent0 * _growth(rent_infl, year - 1) * 12

        for _ in range(12):
            if balance <= 0:
                break
            interest = balance * r
            principal = max(0.0, payment - interest)
            balance = max(0.0, balance - principal)
            principal_paid += principal
        mortgage_paid += payment * 12

        tax_paid += home_value * a["tax_pct"]
        maint_paid += home_value * a["maintenance_pct"]

        equity = down + principal_paid + max(0.0, home_value - price0)
        cash_out = down + mortgage_paid + tax_paid + maint_paid
        net_buy = max(0.0, cash_out - equity)

        if crossover is None and net_buy <= rent_cost:
            crossover = year

        points.append(
            ProjectionPoint(
                year=year,
                cumulative_rent_cost=rent_cost,
                cumulative_net_buy_cost=net_buy,
            )
        )

    last = points[-1]
    return {
        "points": points,
        "crossover_year": crossover,
        "summary": {
            "final_rent_cost": last.cumulative_rent_cost,
            "final_buy_net_cost": last.cumulative_net_buy_cost,
            "down_payment": down,
            "loan_amount": loan,
            "monthly_mortgage_payment": payment,
        },
    }


def projection_frame(points: List[ProjectionPoint]) -> pd.DataFrame:
    """Tabulate projection points for charting, indexed by year."""

    df = pd.DataFrame(
        [
            {
                "Year": p.year,
                "Rent": p.cumulative_rent_cost,
                "Buy (net)": p.cumulative_net_buy_cost,
            }
            for p in points
        ],
        columns=["Year", "Rent", "Buy (net)"],
    )
    return df.set_index("Year")


def cash_out_refinance(home_value, existing_balance, desired_cash_out, rate_pct) -> dict:
    """Cap requested cash out at the maximum LTV and price the new loan."""

    value = clamp_non_negative(home_value)
    existing = clamp_non_negative(existing_balance)
    desired = clamp_non_negative(desired_cash_out)

    max_loan = value * CASH_OUT_MAX_LTV
    max_cash_out = max(0.0, max_loan - existing)
    cash_out = min(desired, max_cash_out)
    loan = existing + cash_out
    return {
        "max_loan": max_loan,
        "max_cash_out": max_cash_out,
        "actual_cash_out": cash_out,
        "was_capped": desired > max_cash_out,
        "new_loan": loan,
        "new_payment": monthly_payment(loan, rate_pct, CASH_OUT_TERM_YEARS),
        "ltv_pct": loan / value * 100 if value > 0 else 0.0,
    }


def _schedule_row(label, rate, loan, base_payment=None) -> BuydownScheduleRow:
    pay = monthly_payment(loan, rate, BUYDOWN_TERM_YEARS)
    row = BuydownScheduleRow(
        period_label=label,
        rate_pct=rate,
        monthly_payment=pay,
        annual_payment=pay * 12,
    )
    if base_payment is not None:
        row.savings_monthly = base_payment - pay
        row.savings_annual = (base_payment - pay) * 12
    return row


def buydown_schedule(loan_amount, base_rate_pct, buydown_type: str = "temporary-2-1") -> dict:
    """Payment schedule for a rate buydown over a 30-year loan.

    ``"temporary-2-1"`` discounts the rate by two points in year 1 and one
    point in year 2 (never below 0%).  Only those two rows carry savings
    against the base payment; later years have ``savings_monthly=None``.
    ``"none"`` yields a single flat row.
    """

    if buydown_type not in BUYDOWN_TYPES:
        logger.error("Unsupported buydown type: %r", buydown_type)
        raise ValueError(f"Unknown buydown type: {buydown_type!r}")

    loan = clamp_non_negative(loan_amount)
    base = clamp_non_negative(base_rate_pct)
    base_payment = monthly_payment(loan, base, BUYDOWN_TERM_YEARS)
    last_year = BUYDOWN_TERM_YEARS

    if buydown_type == "temporary-2-1":
        rows = [
            _schedule_row("Year 1", max(0.0, base - 2), loan, base_payment),
            _schedule_row("Year 2", max(0.0, base - 1), loan, base_payment),
            _schedule_row(f"Year 3–{last_year}", base, loan),
        ]
    else:
        rows = [_schedule_row(f"Year 1–{last_year}", base, loan)]

    total = sum(r.savings_annual for r in rows if r.savings_annual is not None)
    return {
        "base_monthly_payment": base_payment,
        "schedule": rows,
        "total_buydown_savings": total,
    }


def schedule_frame(rows: List[BuydownScheduleRow]) -> pd.DataFrame:
    """Buydown rows as a table; periods without a discount show ``NaN``."""

    return pd.DataFrame(
        [
            {
                "Period": r.period_label,
                "Rate %": r.rate_pct,
                "Monthly": r.monthly_payment,
                "Annual": r.annual_payment,
                "Savings / mo": r.savings_monthly,
                "Savings / yr": r.savings_annual,
            }
            for r in rows
        ],
        columns=["Period", "Rate %", "Monthly", "Annual", "Savings / mo", "Savings / yr"],
    )
