"""Date parsing and normalization utilities."""

from datetime import date, datetime

from dateutil import parser as date_parser

from tour_pricing.core.exceptions import InvalidArgumentError


def parse_date(date_str: str) -> date:
    """
    Parse a date string into a date object.

    Supports various formats including:
    - YYYY-MM-DD (ISO format, optionally with a time part such as
      2024-01-10T15:30:00.000Z, which is dropped)
    - DD.MM.YYYY (Turkish format)
    - DD/MM/YYYY

    ISO strings are parsed strictly first; day-first parsing only applies to
    everything else, so 2024-01-02 is always 2 January.

    Args:
        date_str: Date string to parse

    Returns:
        Parsed date object

    Raises:
        InvalidArgumentError: If the date cannot be parsed
    """
    try:
        return date_parser.isoparse(date_str.strip()).date()
    except (ValueError, TypeError, OverflowError, AttributeError):
        pass

    try:
        parsed = date_parser.parse(date_str, dayfirst=True)
    except (ValueError, TypeError, OverflowError) as e:
        raise InvalidArgumentError("date", f"Invalid date format: '{date_str}'") from e
    return parsed.date()


def normalize_date(value: date | datetime | str) -> date:
    """
    Reduce a date-like value to a calendar date.

    Datetimes lose their time of day; strings are parsed with parse_date.

    Args:
        value: Date, datetime or date string

    Returns:
        Calendar date
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return parse_date(value)
    raise InvalidArgumentError("date", f"Invalid date: {value!r}")


def format_date(d: date, format_type: str = "iso") -> str:
    """
    Format a date object to string.

    Args:
        d: Date to format
        format_type: Format type ('iso', 'turkish', 'display')

    Returns:
        Formatted date string
    """
    formats = {
        "iso": "%Y-%m-%d",
        "turkish": "%d.%m.%Y",
        "display": "%d %B %Y",
    }
    fmt = formats.get(format_type, "%Y-%m-%d")
    return d.strftime(fmt)
