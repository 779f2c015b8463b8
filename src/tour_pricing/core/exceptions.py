"""Custom exceptions for the tour pricing engine."""

from datetime import date
from decimal import Decimal
from typing import Any

from tour_pricing.models.enums import ErrorKind


class PricingError(Exception):
    """Base exception for the pricing engine."""

    kind: ErrorKind | None = None

    def __init__(self, message: str, code: str = "PRICING_ERROR") -> None:
        self.message = message
        self.code = code
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for JSON response."""
        result: dict[str, Any] = {
            "error": True,
            "code": self.code,
            "message": self.message,
        }
        if self.kind is not None:
            result["kind"] = self.kind.value
        return result


class NoRatesAvailableError(PricingError):
    """The supplied rate list is empty."""

    kind = ErrorKind.NO_RATES_AVAILABLE

    def __init__(self) -> None:
        super().__init__("No exchange rates available", "PRICING_NO_RATES")


class NoApplicableRateError(PricingError):
    """No rate record is dated on or before the target date."""

    kind = ErrorKind.NO_APPLICABLE_RATE

    def __init__(self, target_date: date) -> None:
        message = f"No exchange rate found on or before {target_date.isoformat()}"
        super().__init__(message, "PRICING_NO_APPLICABLE_RATE")
        self.target_date = target_date

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["target_date"] = self.target_date.isoformat()
        return result


class InvalidRateError(PricingError):
    """The selected rate is zero or negative."""

    kind = ErrorKind.INVALID_RATE

    def __init__(self, rate: Decimal, rate_date: date | None = None) -> None:
        message = f"Invalid exchange rate {rate}: rate must be positive"
        super().__init__(message, "PRICING_INVALID_RATE")
        self.rate = rate
        self.rate_date = rate_date

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["rate"] = str(self.rate)
        if self.rate_date:
            result["rate_date"] = self.rate_date.isoformat()
        return result


class InvalidArgumentError(PricingError, ValueError):
    """A precondition on an amount, percentage or rate was violated."""

    kind = ErrorKind.INVALID_ARGUMENT

    def __init__(self, argument: str, message: str) -> None:
        super().__init__(message, "PRICING_INVALID_ARGUMENT")
        self.argument = argument

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["argument"] = self.argument
        return result
