"""Tests for error types, settings and logging setup."""

import json
from datetime import date
from decimal import Decimal

import pytest

from tour_pricing.core.config import Settings, get_settings, reset_settings
from tour_pricing.core.exceptions import (
    InvalidArgumentError,
    InvalidRateError,
    NoRatesAvailableError,
    PricingError,
)
from tour_pricing.core.logging import get_logger, render_money_values, setup_logging
from tour_pricing.models.enums import Currency, ErrorKind


class TestExceptions:
    """Tests for the pricing error hierarchy."""

    def test_base_error_dict(self):
        """Test the base error serializes code and message."""
        error = PricingError("boom")
        assert error.to_dict() == {"error": True, "code": "PRICING_ERROR", "message": "boom"}

    def test_no_rates_dict(self):
        """Test kind and code are included."""
        result = NoRatesAvailableError().to_dict()
        assert result["code"] == "PRICING_NO_RATES"
        assert result["kind"] == ErrorKind.NO_RATES_AVAILABLE.value

    def test_invalid_rate_dict(self):
        """Test the offending rate and its date are reported."""
        result = InvalidRateError(Decimal("0"), date(2024, 1, 1)).to_dict()
        assert result["rate"] == "0"
        assert result["rate_date"] == "2024-01-01"

    def test_invalid_argument_is_value_error(self):
        """Test InvalidArgumentError can be caught as ValueError."""
        with pytest.raises(ValueError):
            raise InvalidArgumentError("rate", "Exchange rate must be positive")

    def test_all_errors_are_pricing_errors(self):
        """Test every failure shares the PricingError base."""
        assert issubclass(NoRatesAvailableError, PricingError)
        assert issubclass(InvalidArgumentError, PricingError)


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self):
        """Test default settings."""
        settings = Settings()
        assert settings.default_base_currency is Currency.TRY
        assert settings.default_target_currency is Currency.EUR
        assert settings.default_vat_rate == Decimal("20")
        assert settings.default_locale == "en_US"

    def test_singleton(self):
        """Test get_settings returns the cached instance until reset."""
        first = get_settings()
        assert get_settings() is first
        reset_settings()
        assert get_settings() is not first

    def test_negative_vat_rejected(self):
        """Test a negative default VAT rate is invalid."""
        with pytest.raises(ValueError):
            Settings(default_vat_rate=Decimal("-1"))


class TestLogging:
    """Tests for logging setup."""

    @pytest.mark.parametrize("debug", [True, False])
    def test_setup_logging(self, debug):
        """Test logging can be configured in both modes."""
        setup_logging(debug=debug, log_level="DEBUG")
        logger = get_logger("test")
        logger.info("test_event", value=1)

    def test_json_output_respects_level_from_environment(self, monkeypatch, capsys):
        """Test PRICING_LOG_LEVEL filters events and money renders as strings."""
        monkeypatch.setenv("PRICING_LOG_LEVEL", "WARNING")
        setup_logging()
        logger = get_logger("test")

        logger.info("quiet_event")
        logger.warning("rate_warning", rate=Decimal("31.0"), rate_date=date(2024, 1, 10))

        lines = capsys.readouterr().err.strip().splitlines()
        assert len(lines) == 1
        payload = json.loads(lines[0])
        assert payload["event"] == "rate_warning"
        assert payload["level"] == "warning"
        assert payload["rate"] == "31.0"
        assert payload["rate_date"] == "2024-01-10"
        assert "timestamp" in payload

    def test_render_money_values(self):
        """Test Decimal and date values become plain strings."""
        event = render_money_values(
            None,
            "info",
            {"event": "x", "sell_price": Decimal("41.67"), "rate_date": date(2024, 1, 10), "n": 3},
        )
        assert event == {"event": "x", "sell_price": "41.67", "rate_date": "2024-01-10", "n": 3}
