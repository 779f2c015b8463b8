"""Decimal conversion, validation and rounding for money values."""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext

from tour_pricing.core.constants import MONEY_QUANTUM
from tour_pricing.core.exceptions import InvalidArgumentError

Numeric = Decimal | int | float | str


def to_decimal(value: Numeric, argument: str) -> Decimal:
    """
    Convert a numeric input to Decimal.

    Floats go through str() so that 0.1 becomes Decimal('0.1') rather than
    its binary expansion.

    Args:
        value: Number or numeric string
        argument: Argument name reported on failure

    Returns:
        Finite Decimal value

    Raises:
        InvalidArgumentError: If the value is not a finite number
    """
    if isinstance(value, bool):
        raise InvalidArgumentError(argument, f"Invalid {argument}: {value!r}")
    try:
        result = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except (InvalidOperation, ValueError) as e:
        raise InvalidArgumentError(argument, f"Invalid {argument}: {value!r}") from e

    if not result.is_finite():
        raise InvalidArgumentError(argument, f"Invalid {argument}: {value!r}")
    return result


def round_money(value: Decimal) -> Decimal:
    """
    Round to 2 decimal places, ties away from zero.

    Decimal's ROUND_HALF_UP rounds 0.005 -> 0.01 and -0.005 -> -0.01.
    Precision is widened so amounts past 26 integer digits still quantize.
    """
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + 3)
        return value.quantize(MONEY_QUANTUM, rounding=ROUND_HALF_UP)


def non_negative(value: Numeric, argument: str, label: str) -> Decimal:
    """Convert and reject negative values."""
    result = to_decimal(value, argument)
    if result < 0:
        raise InvalidArgumentError(argument, f"{label} cannot be negative")
    return result


def positive_rate(value: Numeric, argument: str = "rate") -> Decimal:
    """Convert and reject zero or negative exchange rates."""
    result = to_decimal(value, argument)
    if result <= 0:
        raise InvalidArgumentError(argument, "Exchange rate must be positive")
    return result
