"""Select the applicable exchange rate for a date."""

from collections.abc import Iterable, Mapping
from datetime import date, datetime
from decimal import Decimal
from typing import Any

from tour_pricing.core.exceptions import (
    InvalidRateError,
    NoApplicableRateError,
    NoRatesAvailableError,
)
from tour_pricing.core.logging import get_logger
from tour_pricing.models.enums import Currency
from tour_pricing.models.schemas import ExchangeRateRecord
from tour_pricing.utils.date_utils import normalize_date

logger = get_logger(__name__)

RateInput = ExchangeRateRecord | Mapping[str, Any]


def _as_record(rate: RateInput) -> ExchangeRateRecord:
    if isinstance(rate, ExchangeRateRecord):
        return rate
    return ExchangeRateRecord.model_validate(rate)


def select_record_by_date(
    rates: Iterable[RateInput],
    target_date: date | datetime | str,
) -> ExchangeRateRecord:
    """
    Select the most recent rate record on or before the target date.

    When several records share the latest applicable date, the last one in
    input order wins.

    Args:
        rates: Exchange rate records (or mappings with rate_date/rate keys)
        target_date: Date to price for; any time of day is ignored

    Returns:
        The selected record

    Raises:
        NoRatesAvailableError: If rates is empty
        NoApplicableRateError: If every record is dated after target_date
        InvalidRateError: If the selected record's rate is not positive
    """
    records = [_as_record(r) for r in rates]
    if not records:
        raise NoRatesAvailableError()

    target = normalize_date(target_date)

    selected: ExchangeRateRecord | None = None
    for record in records:
        if record.rate_date > target:
            continue
        # >= so that later duplicates of the same date replace earlier ones
        if selected is None or record.rate_date >= selected.rate_date:
            selected = record

    if selected is None:
        logger.debug(
            "rate_selection_failed",
            target_date=target,
            earliest=min(r.rate_date for r in records),
        )
        raise NoApplicableRateError(target)

    if selected.rate <= 0:
        raise InvalidRateError(selected.rate, selected.rate_date)

    logger.debug(
        "rate_selected",
        target_date=target,
        rate_date=selected.rate_date,
        rate=selected.rate,
        candidates=len(records),
    )
    return selected


def select_rate_by_date(
    rates: Iterable[RateInput],
    target_date: date | datetime | str,
) -> Decimal:
    """
    Select the most recent exchange rate on or before the target date.

    Example:
        >>> select_rate_by_date(
        ...     [{"rate_date": "2024-01-01", "rate": 30}, {"rate_date": "2024-01-10", "rate": 31}],
        ...     date(2024, 1, 15),
        ... )
        Decimal('31')
    """
    return select_record_by_date(rates, target_date).rate


def filter_rates_for_pair(
    rates: Iterable[RateInput],
    from_currency: Currency | str,
    to_currency: Currency | str,
) -> list[ExchangeRateRecord]:
    """
    Keep only the records quoting the given currency pair.

    Args:
        rates: Exchange rate records
        from_currency: Base currency code
        to_currency: Target currency code

    Returns:
        Matching records in input order
    """
    base = Currency.parse(from_currency)
    target = Currency.parse(to_currency)
    return [record for record in map(_as_record, rates) if record.is_pair(base, target)]


def select_rate_for_pair(
    rates: Iterable[RateInput],
    from_currency: Currency | str,
    to_currency: Currency | str,
    target_date: date | datetime | str,
) -> ExchangeRateRecord:
    """Select the applicable record for a currency pair on a date."""
    return select_record_by_date(
        filter_rates_for_pair(rates, from_currency, to_currency),
        target_date,
    )
