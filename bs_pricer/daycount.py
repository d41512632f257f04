"""
Business-day calendar and year-fraction convention.

Weekdays (Mon-Fri) are business days; there is no holiday calendar.
A date range counts its start date and never its end date, and the year
fraction is that count over 252.
"""

from datetime import date, datetime

import numpy as np

BUSINESS_DAYS_IN_YEAR = 252.0
WEEKMASK = "1111100"
DATE_FORMAT = "%d/%m/%Y"


def _as_date(value) -> date:
    """Normalize date-like values (datetime, Timestamp, datetime64) to a calendar date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, np.datetime64):
        return value.astype("datetime64[D]").item()
    raise TypeError(f"Expected a date, got {type(value).__name__}")


def business_days(start: date, end: date) -> int:
    """Count weekdays d with start <= d < end. Zero when end is not after start."""
    start, end = _as_date(start), _as_date(end)
    if end <= start:
        return 0
    return int(np.busday_count(np.datetime64(start, "D"), np.datetime64(end, "D"),
                               weekmask=WEEKMASK))


def year_fraction(start: date, end: date) -> float:
    """Time to maturity in years: business_days(start, end) / 252."""
    return business_days(start, end) / BUSINESS_DAYS_IN_YEAR


def add_business_days(start: date, n: int) -> date:
    """
    Date `end` such that business_days(start, end) == n.

    A weekend start rolls forward to Monday; it is never counted anyway.
    Raises ValueError for negative n.
    """
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    end = np.busday_offset(np.datetime64(_as_date(start), "D"), n,
                           roll="forward", weekmask=WEEKMASK)
    return end.item()


def parse_date(text: str) -> date:
    """Parse DD/MM/YYYY. Raises ValueError on malformed input."""
    try:
        return datetime.strptime(text.strip(), DATE_FORMAT).date()
    except ValueError:
        raise ValueError(f"Dates must be in DD/MM/YYYY format, got {text!r}") from None


def format_date(d: date) -> str:
    return _as_date(d).strftime(DATE_FORMAT)
