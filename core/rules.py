from __future__ import annotations
from typing import Literal, List, Dict, Any
from pydantic import BaseModel, Field

from core.calculators import break_even_applicable
from core.presets import CASH_OUT_MAX_LTV, REVERSE_MIN_AGE


class Notice(BaseModel):
    code: str
    severity: Literal["info", "warn", "critical"]
    message: str
    context: Dict[str, Any] = Field(default_factory=dict)


def _refinance(res: dict) -> List[Notice]:
    out: List[Notice] = []
    if not break_even_applicable(res.get("break_even_months")):
        out.append(
            Notice(
                code="BREAK_EVEN_NA",
                severity="info",
                message="New payment is not lower; there is no break-even point.",
                context={"monthly_savings": float(res.get("monthly_savings", 0.0))},
            )
        )
    return out


def _cash_out(res: dict) -> List[Notice]:
    out: List[Notice] = []
    if res.get("was_capped", False):
        out.append(
            Notice(
                code="CASH_OUT_CAPPED",
                severity="warn",
                message=f"Requested cash out exceeds {CASH_OUT_MAX_LTV * 100:.0f}% LTV; amount was capped.",
                context={"max_cash_out": float(res.get("max_cash_out", 0.0))},
            )
        )
    return out


def _reverse_mortgage(res: dict) -> List[Notice]:
    out: List[Notice] = []
    if not res.get("eligible", False):
        out.append(
            Notice(
                code="REVERSE_INELIGIBLE",
                severity="critical",
                message=f"Not eligible: the youngest borrower must be at least {REVERSE_MIN_AGE}.",
                context={"min_age": REVERSE_MIN_AGE},
            )
        )
    return out


def _rent_vs_buy(res: dict) -> List[Notice]:
    year = res.get("crossover_year")
    if year is None:
        return [
            Notice(
                code="RENT_VS_BUY_NO_CROSSOVER",
                severity="info",
                message="No crossover in range; renting stays cheaper.",
            )
        ]
    return [
        Notice(
            code="RENT_VS_BUY_CROSSOVER",
            severity="info",
            message=f"Crossover: Year {year}.",
            context={"year": year},
        )
    ]


def _rate_buydown(res: dict) -> List[Notice]:
    out: List[Notice] = []
    schedule = res.get("schedule", [])
    if any(row.has_savings and row.rate_pct == 0 for row in schedule):
        out.append(
            Notice(
                code="BUYDOWN_RATE_FLOORED",
                severity="info",
                message="A discounted year reaches the 0% rate floor.",
            )
        )
    return out


NOTICE_RULES = {
    "purchase": lambda res: [],
    "refinance": _refinance,
    "rent-vs-buy": _rent_vs_buy,
    "cash-out": _cash_out,
    "rate-buydown": _rate_buydown,
    "reverse-mortgage": _reverse_mortgage,
}


def evaluate_notices(calculator: str, result: dict) -> List[Notice]:
    """Return the notices a calculator result should display."""
    try:
        rule = NOTICE_RULES[calculator]
    except KeyError:
        raise ValueError(f"Unknown calculator: {calculator!r}") from None
    return rule(result)


def has_blocking(res: List[Notice]) -> bool:
    return any(r.severity == "critical" for r in res)
