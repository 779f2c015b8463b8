"""Core utilities and configuration for the tour pricing engine."""

from tour_pricing.core.config import Settings, get_settings
from tour_pricing.core.exceptions import (
    InvalidArgumentError,
    InvalidRateError,
    NoApplicableRateError,
    NoRatesAvailableError,
    PricingError,
)

__all__ = [
    "Settings",
    "get_settings",
    "PricingError",
    "NoRatesAvailableError",
    "NoApplicableRateError",
    "InvalidRateError",
    "InvalidArgumentError",
]
