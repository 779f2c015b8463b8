"""Pricing engine for tour operator quotations."""

from tour_pricing.core.exceptions import (
    InvalidArgumentError,
    InvalidRateError,
    NoApplicableRateError,
    NoRatesAvailableError,
    PricingError,
)
from tour_pricing.models import Currency, ErrorKind, ExchangeRateRecord, QuotationPricing
from tour_pricing.services import (
    calculate_gross,
    calculate_margin,
    calculate_profit,
    calculate_vat,
    cost_from_price,
    price_from_cost,
    price_quotation,
    price_quotation_on_date,
    select_rate_by_date,
    select_rate_for_pair,
)
from tour_pricing.utils.formatters import format_currency

__version__ = "1.0.0"

__all__ = [
    "Currency",
    "ErrorKind",
    "ExchangeRateRecord",
    "QuotationPricing",
    "PricingError",
    "NoRatesAvailableError",
    "NoApplicableRateError",
    "InvalidRateError",
    "InvalidArgumentError",
    "select_rate_by_date",
    "select_rate_for_pair",
    "price_from_cost",
    "cost_from_price",
    "calculate_margin",
    "calculate_profit",
    "calculate_vat",
    "calculate_gross",
    "price_quotation",
    "price_quotation_on_date",
    "format_currency",
]
