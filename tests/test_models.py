import pytest
from pydantic import ValidationError

from core.models import BuydownInputs, PurchaseInputs, RentVsBuyInputs, ReverseMortgageInputs


def test_defaults_match_calculator_screens():
    p = PurchaseInputs()
    assert p.home_price == 400000
    assert p.down_payment == 80000
    assert BuydownInputs().buydown_type == "temporary-2-1"
    assert ReverseMortgageInputs().youngest_borrower_age == 70


@pytest.mark.parametrize("raw", [-5, float("nan"), float("inf"), "abc", None])
def test_invalid_numbers_clamp_to_zero(raw):
    assert PurchaseInputs(home_price=raw).home_price == 0.0


def test_numeric_strings_are_accepted():
    assert RentVsBuyInputs(duration_years="12").duration_years == 12.0


def test_unknown_buydown_type_rejected():
    with pytest.raises(ValidationError):
        BuydownInputs(buydown_type="3-2-1")
