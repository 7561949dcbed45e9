"""
Date formatting for <lastmod> values.
"""

from datetime import date, datetime, timezone
from typing import Optional, Union

from dateutil import parser as dateparser

from ..exceptions import InvalidValue

# W3C Datetime date-only granularity, e.g. "2024-01-01"
W3C_DATE = "%Y-%m-%d"


def parse_date(date_str: str) -> datetime:
    """
    Parse a date string into a datetime.

    Handles anything dateutil understands:
    - "2024-01-01"
    - "2024-01-01T12:30:00+02:00"
    - "Jan 1, 2024"

    Raises:
        InvalidValue: if the string is empty or cannot be parsed
    """
    if not date_str:
        raise InvalidValue("Empty date string")

    try:
        return dateparser.parse(date_str)
    except (ValueError, OverflowError) as e:
        raise InvalidValue(f"Cannot parse date `{date_str}`: {e}") from e


def format_lastmod(value: Union[datetime, date, str], fmt: Optional[str] = None) -> str:
    """
    Format a date for a <lastmod> element.

    Args:
        value: datetime, date, or a date string (parsed with dateutil)
        fmt: strftime pattern; None gives ISO 8601 with second precision
             ("2024-01-01T00:00:00+00:00", naive datetimes taken as UTC)
             or a plain date for date values

    The pattern is passed through as-is. Picking a granularity the protocol
    accepts is up to the caller.
    """
    if isinstance(value, str):
        value = parse_date(value)

    if not isinstance(value, date):
        raise InvalidValue(f"Expected a date, datetime or date string, got {type(value).__name__}")

    if fmt is not None:
        return value.strftime(fmt)

    if isinstance(value, datetime):
        # W3C Datetime requires an offset whenever a time is given; naive means UTC
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.isoformat(timespec="seconds")
    return value.isoformat()
