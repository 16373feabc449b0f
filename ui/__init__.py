"""Streamlit views, one per calculator."""

from ui.buydown import render_buydown
from ui.cash_out import render_cash_out
from ui.purchase import render_purchase
from ui.refinance import render_refinance
from ui.rent_vs_buy import render_rent_vs_buy
from ui.reverse_mortgage import render_reverse_mortgage

RENDERERS = {
    "purchase": render_purchase,
    "refinance": render_refinance,
    "rent-vs-buy": render_rent_vs_buy,
    "cash-out": render_cash_out,
    "rate-buydown": render_buydown,
    "reverse-mortgage": render_reverse_mortgage,
}
