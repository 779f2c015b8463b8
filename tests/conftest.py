"""Pytest fixtures and configuration."""

from datetime import date
from decimal import Decimal

import pytest
import structlog
from structlog.testing import LogCapture

from tour_pricing.core.config import reset_settings
from tour_pricing.models.enums import Currency
from tour_pricing.models.schemas import ExchangeRateRecord


@pytest.fixture
def sample_rates() -> list[ExchangeRateRecord]:
    """TRY/EUR rates entered manually over January 2024."""
    return [
        ExchangeRateRecord(id=1, rate=Decimal("30.0"), rate_date=date(2024, 1, 1), source="manual"),
        ExchangeRateRecord(id=2, rate=Decimal("31.0"), rate_date=date(2024, 1, 10), source="manual"),
        ExchangeRateRecord(id=3, rate=Decimal("32.0"), rate_date=date(2024, 1, 20), source="manual"),
    ]


@pytest.fixture
def mixed_pair_rates(sample_rates: list[ExchangeRateRecord]) -> list[ExchangeRateRecord]:
    """TRY/EUR rates plus a TRY/USD series."""
    usd = [
        ExchangeRateRecord(
            id=10,
            from_currency=Currency.TRY,
            to_currency=Currency.USD,
            rate=Decimal("28.5"),
            rate_date=date(2024, 1, 5),
        ),
        ExchangeRateRecord(
            id=11,
            from_currency=Currency.TRY,
            to_currency=Currency.USD,
            rate=Decimal("29.1"),
            rate_date=date(2024, 1, 25),
        ),
    ]
    return sample_rates + usd


@pytest.fixture
def sample_date() -> date:
    """Sample date for testing."""
    return date(2024, 1, 15)


@pytest.fixture(autouse=True)
def cleanup_settings():
    """Clean up settings after each test."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture(autouse=True)
def reset_structlog():
    """Restore structlog defaults so loggers are not cached between tests."""
    yield
    structlog.contextvars.clear_contextvars()
    structlog.reset_defaults()


@pytest.fixture
def log_output() -> LogCapture:
    """Capture structlog events, including context bound with contextvars."""
    capture = LogCapture()
    structlog.configure(processors=[structlog.contextvars.merge_contextvars, capture])
    return capture
