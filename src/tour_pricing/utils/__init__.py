"""Utility functions for the tour pricing engine."""

from tour_pricing.utils.date_utils import format_date, normalize_date, parse_date
from tour_pricing.utils.formatters import format_currency, format_error, format_quotation
from tour_pricing.utils.money import round_money, to_decimal

__all__ = [
    "parse_date",
    "normalize_date",
    "format_date",
    "format_currency",
    "format_quotation",
    "format_error",
    "round_money",
    "to_decimal",
]
