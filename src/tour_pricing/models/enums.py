"""Enumeration types for the tour pricing engine."""

from enum import Enum


class Currency(str, Enum):
    """Currencies handled by the tour operator."""

    EUR = "EUR"
    TRY = "TRY"
    USD = "USD"

    @classmethod
    def parse(cls, value: "str | Currency") -> "Currency":
        """
        Convert a currency code to the enum, case-insensitively.

        Args:
            value: Currency code such as 'eur' or 'TRY'

        Returns:
            Corresponding Currency enum value

        Raises:
            ValueError: If the code is not a supported currency
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value.strip().upper())
        except ValueError as e:
            supported = ", ".join(c.value for c in cls)
            raise ValueError(f"Unsupported currency: {value}. Must be one of {supported}") from e


class ErrorKind(str, Enum):
    """
    Failure kinds raised by the pricing engine.

    Callers branch on these instead of matching error messages.
    """

    NO_RATES_AVAILABLE = "no_rates_available"
    NO_APPLICABLE_RATE = "no_applicable_rate"
    INVALID_RATE = "invalid_rate"
    INVALID_ARGUMENT = "invalid_argument"
