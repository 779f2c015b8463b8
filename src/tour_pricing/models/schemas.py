"""Pydantic models for exchange rates and quotation pricing."""

from datetime import date as DateType
from datetime import datetime
from decimal import Decimal
from typing import Any

from dateutil.parser import isoparse
from pydantic import BaseModel, Field, field_serializer, field_validator

from tour_pricing.models.enums import Currency


class ExchangeRateRecord(BaseModel):
    """
    One exchange rate observation.

    `rate` is expressed as units of the base (cost) currency per one unit of
    the target (price) currency, e.g. 30 TRY for 1 EUR. Non-positive rates
    are accepted here and rejected when a record is selected for pricing.
    """

    id: int | None = Field(None, description="Storage identifier, if any")
    from_currency: Currency = Field(default=Currency.TRY, description="Base currency")
    to_currency: Currency = Field(default=Currency.EUR, description="Target currency")
    rate: Decimal = Field(..., description="Base currency units per target currency unit")
    rate_date: DateType = Field(..., description="Date the rate is effective from")
    source: str | None = Field(None, description="Where the rate came from (e.g. manual, tcmb)")

    @field_validator("rate_date", mode="before")
    @classmethod
    def truncate_time(cls, value: Any) -> Any:
        """Drop the time of day from datetimes and ISO datetime strings."""
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, str):
            try:
                return isoparse(value.strip()).date()
            except (ValueError, OverflowError):
                # Left for pydantic to report
                return value
        return value

    @field_validator("rate", mode="before")
    @classmethod
    def float_via_str(cls, value: Any) -> Any:
        """Convert floats through their shortest repr (0.1 -> Decimal('0.1'))."""
        if isinstance(value, float):
            return Decimal(str(value))
        return value

    @field_validator("from_currency", "to_currency", mode="before")
    @classmethod
    def normalize_currency(cls, value: Any) -> Any:
        """Accept currency codes in any case."""
        if isinstance(value, str):
            return Currency.parse(value)
        return value

    @field_serializer("rate")
    def serialize_decimal(self, value: Decimal) -> str:
        """Serialize Decimal to string for JSON output."""
        return str(value)

    def is_pair(self, from_currency: Currency, to_currency: Currency) -> bool:
        """Check whether this record quotes the given currency pair."""
        return self.from_currency == from_currency and self.to_currency == to_currency


class QuotationPricing(BaseModel):
    """Figures stored on a quotation: cost, sell price, rate used, margin and tax."""

    base_currency: Currency = Field(..., description="Currency of the cost")
    target_currency: Currency = Field(..., description="Currency of the sell price")
    cost_in_base: Decimal = Field(..., description="Total supplier cost in base currency")
    markup_pct: Decimal = Field(..., description="Markup applied to the cost (percent)")
    exchange_rate_used: Decimal = Field(..., description="Exchange rate applied")
    rate_date: DateType | None = Field(None, description="Effective date of the rate used")

    sell_price: Decimal = Field(..., description="Net sell price in target currency")
    margin_pct: Decimal = Field(..., description="Profit as a percentage of sell price")
    profit: Decimal = Field(..., description="Profit in target currency")
    vat_rate_pct: Decimal = Field(..., description="VAT rate (percent)")
    vat: Decimal = Field(..., description="VAT on the sell price")
    gross: Decimal = Field(..., description="Sell price including VAT")

    @field_serializer(
        "cost_in_base",
        "markup_pct",
        "exchange_rate_used",
        "sell_price",
        "margin_pct",
        "profit",
        "vat_rate_pct",
        "vat",
        "gross",
    )
    def serialize_decimal(self, value: Decimal) -> str:
        """Serialize Decimal to string for JSON output."""
        return str(value)
