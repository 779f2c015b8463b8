"""VAT and gross amount calculation."""

from decimal import Decimal

from tour_pricing.core.constants import PERCENT_SCALE
from tour_pricing.utils.money import Numeric, non_negative, round_money


def calculate_vat(net_amount: Numeric, vat_rate_pct: Numeric) -> Decimal:
    """
    Calculate the VAT on a net amount.

    Args:
        net_amount: Net (tax-exclusive) amount
        vat_rate_pct: VAT rate as a percentage (20 for 20%)

    Returns:
        VAT amount rounded to 2 decimals

    Raises:
        InvalidArgumentError: On a negative amount or rate
    """
    net = non_negative(net_amount, "net_amount", "Net amount")
    vat_rate = non_negative(vat_rate_pct, "vat_rate_pct", "VAT rate")

    return round_money(net * vat_rate / PERCENT_SCALE)


def calculate_gross(net_amount: Numeric, vat_rate_pct: Numeric) -> Decimal:
    """Calculate the tax-inclusive amount: net + VAT."""
    vat = calculate_vat(net_amount, vat_rate_pct)
    net = non_negative(net_amount, "net_amount", "Net amount")

    return round_money(net + vat)
