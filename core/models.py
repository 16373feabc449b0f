from typing import Literal, Optional

from pydantic import BaseModel, ValidationInfo, field_validator

from core.utils import clamp_non_negative

BuydownType = Literal["temporary-2-1", "none"]


class CalculatorInputs(BaseModel):
    """Base for calculator input forms.

    Every ``float`` field is clamped to a finite, non-negative number before
    validation so raw widget values never fail to load.
    """

    @field_validator("*", mode="before")
    @classmethod
    def _clamp_numbers(cls, v, info: ValidationInfo):
        if cls.model_fields[info.field_name].annotation is float:
            return clamp_non_negative(v)
        return v


class PurchaseInputs(CalculatorInputs):
    home_price: float = 400000.0
    down_payment: float = 80000.0
    rate_pct: float = 6.5
    term_years: float = 30.0
    annual_property_tax: float = 4000.0
    annual_home_insurance: float = 1200.0


class RefinanceInputs(CalculatorInputs):
    loan_balance: float = 320000.0
    current_rate_pct: float = 7.25
    new_rate_pct: float = 6.5
    term_years: float = 30.0
    closing_costs: float = 6000.0


class RentVsBuyInputs(CalculatorInputs):
    home_price: float = 400000.0
    monthly_rent: float = 2500.0
    rent_inflation_pct: float = 3.0
    appreciation_pct: float = 3.0
    duration_years: float = 10.0


class CashOutInputs(CalculatorInputs):
    home_value: float = 500000.0
    existing_balance: float = 250000.0
    desired_cash_out: float = 50000.0
    rate_pct: float = 6.75


class BuydownInputs(CalculatorInputs):
    buydown_type: BuydownType = "temporary-2-1"
    loan_amount: float = 320000.0
    base_rate_pct: float = 6.5


class ReverseMortgageInputs(CalculatorInputs):
    youngest_borrower_age: float = 70.0
    home_value: float = 500000.0
    current_mortgage_balance: float = 150000.0


class ProjectionPoint(BaseModel):
    year: int
    cumulative_rent_cost: float
    cumulative_net_buy_cost: float


class BuydownScheduleRow(BaseModel):
    period_label: str
    rate_pct: float
    monthly_payment: float
    annual_payment: float
    # ``None`` means the period has no discount, which is not the same as a
    # discount worth $0.
    savings_monthly: Optional[float] = None
    savings_annual: Optional[float] = None

    @property
    def has_savings(self) -> bool:
        return self.savings_monthly is not None
