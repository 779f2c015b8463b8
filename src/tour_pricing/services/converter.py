"""Conversion between supplier cost and customer sell price."""

from decimal import Decimal

from tour_pricing.core.constants import MINIMUM_AMOUNT, PERCENT_SCALE
from tour_pricing.utils.money import Numeric, non_negative, positive_rate, round_money


def price_from_cost(cost_in_base: Numeric, markup_pct: Numeric, rate: Numeric) -> Decimal:
    """
    Calculate the sell price in target currency from a base-currency cost.

    The markup is applied before conversion: (cost * (1 + markup/100)) / rate.
    A positive cost never prices below the minimum amount of 0.01.

    Args:
        cost_in_base: Cost in base currency (e.g. TRY)
        markup_pct: Markup percentage (25 for 25%)
        rate: Base currency units per target currency unit (e.g. TRY per EUR)

    Returns:
        Sell price rounded to 2 decimals

    Raises:
        InvalidArgumentError: On negative cost or markup, or non-positive rate

    Example:
        >>> price_from_cost(1000, 25, 30)
        Decimal('41.67')
    """
    cost = non_negative(cost_in_base, "cost_in_base", "Cost")
    markup = non_negative(markup_pct, "markup_pct", "Markup percentage")
    fx_rate = positive_rate(rate)

    cost_with_markup = cost * (1 + markup / PERCENT_SCALE)
    price = round_money(cost_with_markup / fx_rate)

    if cost > 0 and price < MINIMUM_AMOUNT:
        return MINIMUM_AMOUNT
    return price


def cost_from_price(sell_price: Numeric, markup_pct: Numeric, rate: Numeric) -> Decimal:
    """
    Calculate the base-currency cost behind a sell price.

    Inverse of price_from_cost for the same markup and rate, up to rounding.

    Example:
        >>> cost_from_price("41.67", 25, 30)
        Decimal('1000.08')
    """
    price = non_negative(sell_price, "sell_price", "Sell price")
    markup = non_negative(markup_pct, "markup_pct", "Markup percentage")
    fx_rate = positive_rate(rate)

    price_in_base = price * fx_rate
    return round_money(price_in_base / (1 + markup / PERCENT_SCALE))
