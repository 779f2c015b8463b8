"""Output formatters for pricing results."""

from typing import Any

from babel import Locale, UnknownLocaleError
from babel.numbers import format_currency as babel_format_currency

from tour_pricing.core.config import get_settings
from tour_pricing.core.exceptions import InvalidArgumentError, PricingError
from tour_pricing.models.enums import Currency
from tour_pricing.models.schemas import QuotationPricing
from tour_pricing.utils.date_utils import format_date
from tour_pricing.utils.money import Numeric, round_money, to_decimal


def _parse_locale(locale: str) -> Locale:
    """Accept both 'en_US' and BCP 47 style 'en-US' identifiers."""
    try:
        return Locale.parse(locale.replace("-", "_"))
    except (UnknownLocaleError, ValueError, TypeError) as e:
        raise InvalidArgumentError("locale", f"Unknown locale: '{locale}'") from e


def format_currency(
    amount: Numeric,
    currency: Currency | str,
    locale: str | None = None,
) -> str:
    """
    Format an amount as a locale-aware currency string.

    Always shows exactly 2 fraction digits, whatever the currency's own
    minor unit. Rounding is half away from zero, same as every money value.

    Args:
        amount: Amount to format
        currency: ISO currency code (e.g. EUR, TRY)
        locale: Locale identifier; defaults to settings.default_locale

    Returns:
        Formatted string, e.g. '€1,234.50' for en_US

    Raises:
        InvalidArgumentError: On a non-numeric amount or unknown locale
    """
    value = round_money(to_decimal(amount, "amount"))
    code = currency.value if isinstance(currency, Currency) else currency.strip().upper()
    babel_locale = _parse_locale(locale or get_settings().default_locale)

    return babel_format_currency(
        value,
        code,
        locale=babel_locale,
        currency_digits=False,
    )


def format_percent(value: Numeric, precision: int = 2) -> str:
    """Format a percentage value for display."""
    return f"{to_decimal(value, 'value'):.{precision}f}%"


def format_quotation(pricing: QuotationPricing, locale: str | None = None) -> str:
    """
    Format quotation pricing for text display.

    Args:
        pricing: Quotation figures to format
        locale: Locale for the currency amounts

    Returns:
        Formatted string suitable for console output or notes
    """
    base = pricing.base_currency
    target = pricing.target_currency

    rate_line = f"Rate: {pricing.exchange_rate_used} {base.value}/{target.value}"
    if pricing.rate_date:
        rate_line += f" ({format_date(pricing.rate_date)})"

    lines = [
        f"Cost:   {format_currency(pricing.cost_in_base, base, locale)}",
        f"Markup: {format_percent(pricing.markup_pct)}",
        rate_line,
        "-" * 40,
        f"Net:    {format_currency(pricing.sell_price, target, locale)}",
        f"VAT:    {format_currency(pricing.vat, target, locale)}"
        f" ({format_percent(pricing.vat_rate_pct)})",
        f"Gross:  {format_currency(pricing.gross, target, locale)}",
        f"Profit: {format_currency(pricing.profit, target, locale)}"
        f" (margin {format_percent(pricing.margin_pct)})",
    ]

    if pricing.margin_pct < 0:
        lines.append("⚠️  Priced below cost")

    return "\n".join(lines)


def format_error(error: PricingError) -> dict[str, Any]:
    """
    Format error for JSON response.

    Args:
        error: Pricing error to format

    Returns:
        Error dictionary
    """
    return error.to_dict()


def format_pricing_json(pricing: QuotationPricing) -> dict[str, Any]:
    """Format quotation pricing for JSON output."""
    return pricing.model_dump(mode="json")
