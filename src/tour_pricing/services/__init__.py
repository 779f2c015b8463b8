"""Pricing services: rate selection, conversion, margin, tax and quotations."""

from tour_pricing.services.converter import cost_from_price, price_from_cost
from tour_pricing.services.margin import calculate_margin, calculate_profit
from tour_pricing.services.quotation import price_quotation, price_quotation_on_date
from tour_pricing.services.rate_selector import (
    filter_rates_for_pair,
    select_rate_by_date,
    select_rate_for_pair,
    select_record_by_date,
)
from tour_pricing.services.tax import calculate_gross, calculate_vat

__all__ = [
    "select_rate_by_date",
    "select_record_by_date",
    "filter_rates_for_pair",
    "select_rate_for_pair",
    "price_from_cost",
    "cost_from_price",
    "calculate_margin",
    "calculate_profit",
    "calculate_vat",
    "calculate_gross",
    "price_quotation",
    "price_quotation_on_date",
]
