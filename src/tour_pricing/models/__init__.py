"""Data models for the tour pricing engine."""

from tour_pricing.models.enums import Currency, ErrorKind
from tour_pricing.models.schemas import ExchangeRateRecord, QuotationPricing

__all__ = [
    "Currency",
    "ErrorKind",
    "ExchangeRateRecord",
    "QuotationPricing",
]
