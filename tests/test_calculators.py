import math

import pandas as pd
import pytest

from core.calculators import (
    break_even_applicable,
    buydown_schedule,
    cash_out_refinance,
    estimated_availability_pct,
    monthly_payment,
    projection_frame,
    purchase_breakdown,
    refinance_break_even,
    rent_vs_buy_projection,
    reverse_mortgage_estimate,
    schedule_frame,
)


def test_standard_thirty_year_payment():
    assert abs(monthly_payment(100000, 6, 30) - 599.55) < 0.01


def test_zero_rate_is_straight_line():
    assert monthly_payment(120000, 0, 10) == 1000.0
    # negative rates clamp to zero
    assert monthly_payment(120000, -3, 10) == 1000.0


def test_term_rounds_to_whole_months():
    # 0.125 years is 1.5 months which rounds up to 2 periods
    assert monthly_payment(1200, 0, 0.125) == 600.0


@pytest.mark.parametrize(
    "principal,rate,term",
    [(0, 6, 30), (100000, 6, 0), (-5, 6, 30), (float("nan"), 6, 30), (100000, 6, float("inf")), (None, 6, 30)],
)
def test_invalid_inputs_degrade_to_zero(principal, rate, term):
    assert monthly_payment(principal, rate, term) == 0.0


@pytest.mark.parametrize(
    "principal,rate,term",
    [(100000, 6, 20000), (100000, 6, 1e6), (100000, 1e5, 30), (100000, 6, 1e308)],
)
def test_extreme_terms_and_rates_approach_interest_only(principal, rate, term):
    # as the term grows the level payment tends to the monthly interest
    assert monthly_payment(principal, rate, term) == pytest.approx(principal * rate / 100 / 12)


def test_extreme_inputs_do_not_raise():
    assert math.isfinite(cash_out_refinance(500000, 250000, 0, 100000)["new_payment"])
    assert purchase_breakdown(400000, 80000, 6.5, 1e6, 0, 0)["monthly_pi"] == pytest.approx(320000 * 6.5 / 1200)
    assert buydown_schedule(320000, 1e5, "temporary-2-1")["base_monthly_payment"] > 0
    res = refinance_break_even(320000, 6.5 + 1e-12, 6.5, 30, 1e300)
    assert res["break_even_months"] == math.inf
    points = rent_vs_buy_projection(400000, 2500, 1e300, 1e300, 50)["points"]
    assert len(points) == 50


def test_refinance_break_even_months():
    res = refinance_break_even(320000, 7.25, 6.5, 30, 6000)
    assert res["old_payment"] > res["new_payment"]
    assert res["monthly_savings"] == pytest.approx(res["old_payment"] - res["new_payment"])
    assert res["break_even_months"] == math.ceil(6000 / res["monthly_savings"])
    assert break_even_applicable(res["break_even_months"])


def test_refinance_without_savings_has_no_break_even():
    same = refinance_break_even(320000, 6.5, 6.5, 30, 6000)
    worse = refinance_break_even(320000, 6.0, 7.0, 30, 6000)
    assert same["break_even_months"] == math.inf
    assert worse["break_even_months"] == math.inf
    assert worse["monthly_savings"] < 0
    assert not break_even_applicable(same["break_even_months"])


def test_purchase_breakdown_sums_components():
    res = purchase_breakdown(400000, 80000, 6.5, 30, 4000, 1200)
    assert res["loan_amount"] == 320000
    assert res["monthly_pi"] == pytest.approx(monthly_payment(320000, 6.5, 30))
    assert res["monthly_tax"] == pytest.approx(4000 / 12)
    assert res["monthly_insurance"] == pytest.approx(100.0)
    assert res["total"] == pytest.approx(res["monthly_pi"] + 4000 / 12 + 100.0)
    assert res["down_payment_pct"] == pytest.approx(20.0)


def test_purchase_down_payment_above_price():
    res = purchase_breakdown(100000, 150000, 6.5, 30, 0, 0)
    assert res["loan_amount"] == 0
    assert res["total"] == 0


@pytest.mark.parametrize(
    "age,expected",
    [(61, 0.0), (62, 0.35), (69, 0.40), (70, 0.45), (79, 0.50), (80, 0.55), (87.5, 0.575), (95, 0.60), (150, 0.60)],
)
def test_availability_bands(age, expected):
    assert estimated_availability_pct(age) == pytest.approx(expected)


def test_availability_is_discontinuous_at_seventy():
    assert estimated_availability_pct(70) - estimated_availability_pct(69) == pytest.approx(0.05)


def test_availability_non_finite_age():
    assert estimated_availability_pct(float("nan")) == 0.0


def test_reverse_mortgage_net_limit():
    res = reverse_mortgage_estimate(70, 500000, 150000)
    assert res["eligible"]
    assert res["gross_principal_limit"] == pytest.approx(225000)
    assert res["net_principal_limit"] == pytest.approx(75000)
    underwater = reverse_mortgage_estimate(70, 500000, 400000)
    assert underwater["net_principal_limit"] == 0


def test_reverse_mortgage_ineligible_is_zero():
    res = reverse_mortgage_estimate(60, 500000, 0)
    assert not res["eligible"]
    assert res["gross_principal_limit"] == 0
    assert res["net_principal_limit"] == 0


def test_cash_out_within_limit():
    res = cash_out_refinance(500000, 250000, 50000, 6.75)
    assert res["max_loan"] == pytest.approx(400000)
    assert res["max_cash_out"] == pytest.approx(150000)
    assert res["actual_cash_out"] == 50000
    assert res["was_capped"] is False
    assert res["new_loan"] == pytest.approx(300000)
    assert res["ltv_pct"] == pytest.approx(60.0)
    assert res["new_payment"] == pytest.approx(monthly_payment(300000, 6.75, 30))


def test_cash_out_capped_at_max_ltv():
    res = cash_out_refinance(500000, 250000, 200000, 6.75)
    assert res["was_capped"] is True
    assert res["actual_cash_out"] == pytest.approx(150000)
    assert res["ltv_pct"] == pytest.approx(80.0)


def test_cash_out_underwater_and_zero_value():
    res = cash_out_refinance(300000, 260000, 0, 6.75)
    assert res["max_cash_out"] == 0
    assert res["was_capped"] is False
    assert cash_out_refinance(0, 0, 1000, 6)["ltv_pct"] == 0


@pytest.mark.parametrize("duration,count", [(10, 10), (0, 1), (75, 50), (2.5, 3), (float("nan"), 1), (-4, 1)])
def test_rent_vs_buy_point_count(duration, count):
    res = rent_vs_buy_projection(400000, 2500, 3, 3, duration)
    years = [p.year for p in res["points"]]
    assert years == list(range(1, count + 1))


def test_rent_vs_buy_crossover_is_first_crossing():
    res = rent_vs_buy_projection(400000, 2500, 3, 3, 30)
    first = next(
        (p.year for p in res["points"] if p.cumulative_net_buy_cost <= p.cumulative_rent_cost), None
    )
    assert res["crossover_year"] == first


def test_rent_vs_buy_no_rent_never_crosses():
    res = rent_vs_buy_projection(400000, 0, 0, 0, 10)
    assert res["crossover_year"] is None


def test_rent_vs_buy_free_home_crosses_immediately():
    res = rent_vs_buy_projection(0, 1000, 0, 0, 5)
    assert res["crossover_year"] == 1


def test_rent_vs_buy_first_year_costs():
    res = rent_vs_buy_projection(100000, 1000, 0, 0, 1)
    point = res["points"][0]
    assert point.cumulative_rent_cost == pytest.approx(12000)
    # first-year interest on 80k at 6.5% plus 1% tax and 1% maintenance
    assert 2000 + 5100 < point.cumulative_net_buy_cost < 2000 + 5200
    summary = res["summary"]
    assert summary["down_payment"] == pytest.approx(20000)
    assert summary["loan_amount"] == pytest.approx(80000)
    assert summary["monthly_mortgage_payment"] == pytest.approx(monthly_payment(80000, 6.5, 30))


def test_projection_frame_columns():
    res = rent_vs_buy_projection(400000, 2500, 3, 3, 3)
    df = projection_frame(res["points"])
    assert list(df.columns) == ["Rent", "Buy (net)"]
    assert list(df.index) == [1, 2, 3]


def test_buydown_two_one_schedule():
    res = buydown_schedule(320000, 6.5, "temporary-2-1")
    rows = res["schedule"]
    assert [r.rate_pct for r in rows] == [4.5, 5.5, 6.5]
    assert [r.period_label for r in rows] == ["Year 1", "Year 2", "Year 3–30"]
    base = res["base_monthly_payment"]
    assert rows[0].savings_monthly == pytest.approx(base - rows[0].monthly_payment)
    assert rows[1].savings_annual == pytest.approx(rows[1].savings_monthly * 12)
    assert rows[2].savings_monthly is None
    assert rows[2].savings_annual is None
    assert res["total_buydown_savings"] == pytest.approx(rows[0].savings_annual + rows[1].savings_annual)


def test_buydown_rates_floor_at_zero():
    rows = buydown_schedule(200000, 1.5, "temporary-2-1")["schedule"]
    assert rows[0].rate_pct == 0
    assert rows[1].rate_pct == pytest.approx(0.5)


def test_buydown_zero_savings_is_not_missing():
    rows = buydown_schedule(0, 6.5, "temporary-2-1")["schedule"]
    assert rows[0].savings_monthly == 0.0
    assert rows[2].savings_monthly is None


def test_buydown_none_is_single_flat_row():
    res = buydown_schedule(320000, 6.5, "none")
    rows = res["schedule"]
    assert len(rows) == 1
    assert rows[0].period_label == "Year 1–30"
    assert not rows[0].has_savings
    assert rows[0].monthly_payment == pytest.approx(res["base_monthly_payment"])
    assert res["total_buydown_savings"] == 0


def test_buydown_rejects_unknown_type():
    with pytest.raises(ValueError):
        buydown_schedule(320000, 6.5, "3-2-1")


def test_schedule_frame_marks_missing_savings():
    df = schedule_frame(buydown_schedule(320000, 6.5, "temporary-2-1")["schedule"])
    assert pd.isna(df.loc[2, "Savings / mo"])
    assert not pd.isna(df.loc[0, "Savings / mo"])
