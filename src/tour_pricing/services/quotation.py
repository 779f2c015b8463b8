"""Price a quotation: sell price, margin, profit and VAT in one pass."""

from collections.abc import Iterable
from datetime import date, datetime

from tour_pricing.core.config import get_settings
from tour_pricing.core.logging import bound_context, get_logger
from tour_pricing.models.enums import Currency
from tour_pricing.models.schemas import QuotationPricing
from tour_pricing.services.converter import price_from_cost
from tour_pricing.services.margin import calculate_margin, calculate_profit
from tour_pricing.services.rate_selector import RateInput, select_rate_for_pair
from tour_pricing.services.tax import calculate_gross, calculate_vat
from tour_pricing.utils.date_utils import normalize_date
from tour_pricing.utils.money import Numeric, non_negative, positive_rate, round_money

logger = get_logger(__name__)


def price_quotation(
    cost_in_base: Numeric,
    markup_pct: Numeric,
    rate: Numeric,
    vat_rate_pct: Numeric | None = None,
    base_currency: Currency | str | None = None,
    target_currency: Currency | str | None = None,
    rate_date: date | None = None,
) -> QuotationPricing:
    """
    Price a quotation from its total cost.

    Args:
        cost_in_base: Total supplier cost in base currency
        markup_pct: Markup percentage
        rate: Base currency units per target currency unit
        vat_rate_pct: VAT rate; defaults to settings.default_vat_rate
        base_currency: Defaults to settings.default_base_currency
        target_currency: Defaults to settings.default_target_currency
        rate_date: Effective date of the rate, recorded on the result

    Returns:
        QuotationPricing with every figure rounded to 2 decimals

    Raises:
        InvalidArgumentError: If any input violates its precondition

    Example:
        >>> pricing = price_quotation(2400, 25, 30, vat_rate_pct=20)
        >>> pricing.sell_price, pricing.gross
        (Decimal('100.00'), Decimal('120.00'))
    """
    settings = get_settings()

    base = Currency.parse(base_currency or settings.default_base_currency)
    target = Currency.parse(target_currency or settings.default_target_currency)
    vat_rate = non_negative(
        settings.default_vat_rate if vat_rate_pct is None else vat_rate_pct,
        "vat_rate_pct",
        "VAT rate",
    )

    sell_price = price_from_cost(cost_in_base, markup_pct, rate)
    cost = non_negative(cost_in_base, "cost_in_base", "Cost")
    markup = non_negative(markup_pct, "markup_pct", "Markup percentage")
    fx_rate = positive_rate(rate)

    pricing = QuotationPricing(
        base_currency=base,
        target_currency=target,
        cost_in_base=round_money(cost),
        markup_pct=markup,
        exchange_rate_used=fx_rate,
        rate_date=rate_date,
        sell_price=sell_price,
        margin_pct=calculate_margin(sell_price, cost, fx_rate),
        profit=calculate_profit(sell_price, cost, fx_rate),
        vat_rate_pct=vat_rate,
        vat=calculate_vat(sell_price, vat_rate),
        gross=calculate_gross(sell_price, vat_rate),
    )

    logger.info(
        "quotation_priced",
        base_currency=base.value,
        target_currency=target.value,
        cost_in_base=pricing.cost_in_base,
        sell_price=pricing.sell_price,
        margin_pct=pricing.margin_pct,
    )

    return pricing


def price_quotation_on_date(
    rates: Iterable[RateInput],
    service_date: date | datetime | str,
    cost_in_base: Numeric,
    markup_pct: Numeric,
    vat_rate_pct: Numeric | None = None,
    base_currency: Currency | str | None = None,
    target_currency: Currency | str | None = None,
) -> QuotationPricing:
    """
    Price a quotation using the rate in effect on the service date.

    Only records for the base/target pair are considered. Events logged
    while pricing carry service_date and the currency pair.

    Raises:
        NoRatesAvailableError: If no record quotes the pair
        NoApplicableRateError: If the pair has no rate on or before service_date
        InvalidRateError: If the applicable rate is not positive
        InvalidArgumentError: If any amount violates its precondition
    """
    settings = get_settings()
    base = Currency.parse(base_currency or settings.default_base_currency)
    target = Currency.parse(target_currency or settings.default_target_currency)

    with bound_context(
        service_date=normalize_date(service_date),
        currency_pair=f"{base.value}/{target.value}",
    ):
        record = select_rate_for_pair(rates, base, target, service_date)

        return price_quotation(
            cost_in_base,
            markup_pct,
            record.rate,
            vat_rate_pct=vat_rate_pct,
            base_currency=base,
            target_currency=target,
            rate_date=record.rate_date,
        )
