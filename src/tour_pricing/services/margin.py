"""Margin and profit of a sell price against a base-currency cost."""

from decimal import Decimal

from tour_pricing.core.constants import PERCENT_SCALE
from tour_pricing.utils.money import Numeric, positive_rate, round_money, to_decimal


def calculate_margin(sell_price: Numeric, cost_in_base: Numeric, rate: Numeric) -> Decimal:
    """
    Calculate gross margin as a percentage of the sell price.

    A non-positive sell price has no meaningful margin and yields 0.
    Selling below cost gives a negative margin.

    Args:
        sell_price: Sell price in target currency
        cost_in_base: Cost in base currency
        rate: Base currency units per target currency unit

    Returns:
        Margin percentage rounded to 2 decimals

    Raises:
        InvalidArgumentError: If rate is not positive
    """
    price = to_decimal(sell_price, "sell_price")
    if price <= 0:
        return Decimal("0.00")

    cost = to_decimal(cost_in_base, "cost_in_base")
    fx_rate = positive_rate(rate)

    cost_in_target = cost / fx_rate
    margin = (price - cost_in_target) / price * PERCENT_SCALE
    return round_money(margin)


def calculate_profit(sell_price: Numeric, cost_in_base: Numeric, rate: Numeric) -> Decimal:
    """
    Calculate profit in target currency: sell_price - cost_in_base / rate.

    Negative when selling below cost.
    """
    price = to_decimal(sell_price, "sell_price")
    cost = to_decimal(cost_in_base, "cost_in_base")
    fx_rate = positive_rate(rate)

    return round_money(price - cost / fx_rate)
