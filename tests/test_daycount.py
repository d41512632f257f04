"""Tests for the business-day calendar and year fraction."""
from datetime import date, datetime, timedelta

import numpy as np
import pandas as pd
import pytest

from bs_pricer.daycount import (
    BUSINESS_DAYS_IN_YEAR,
    add_business_days,
    business_days,
    format_date,
    parse_date,
    year_fraction,
)


def _count_by_walking(start, end):
    days = 0
    cursor = start
    while cursor < end:
        if cursor.weekday() < 5:
            days += 1
        cursor += timedelta(days=1)
    return days


def test_one_calendar_week_from_monday():
    assert business_days(date(2024, 1, 1), date(2024, 1, 8)) == 5


def test_start_counted_end_excluded():
    # Fri -> Mon: Friday counts, Monday is the end date
    assert business_days(date(2024, 1, 5), date(2024, 1, 8)) == 1
    # Mon -> Tue: only the Monday
    assert business_days(date(2024, 1, 1), date(2024, 1, 2)) == 1


def test_weekend_only_span_is_zero():
    assert business_days(date(2024, 1, 6), date(2024, 1, 8)) == 0


@pytest.mark.parametrize("start,end", [
    (date(2024, 1, 8), date(2024, 1, 8)),
    (date(2024, 1, 8), date(2024, 1, 1)),
    (date(2030, 6, 3), date(2024, 1, 1)),
])
def test_end_not_after_start_is_zero(start, end):
    assert business_days(start, end) == 0
    assert year_fraction(start, end) == 0.0


def test_matches_day_by_day_walk():
    start = date(2023, 12, 20)
    for offset in range(0, 60):
        end = start + timedelta(days=offset)
        assert business_days(start, end) == _count_by_walking(start, end)


def test_datetime_and_timestamp_inputs_use_calendar_date():
    assert business_days(datetime(2024, 1, 1, 23, 59), datetime(2024, 1, 8, 0, 1)) == 5
    assert business_days(pd.Timestamp("2024-01-01"), pd.Timestamp("2024-01-08")) == 5
    assert business_days(np.datetime64("2024-01-01"), np.datetime64("2024-01-08")) == 5


def test_rejects_non_dates():
    with pytest.raises(TypeError):
        business_days("2024-01-01", date(2024, 1, 8))


def test_year_fraction_uses_252():
    assert BUSINESS_DAYS_IN_YEAR == 252.0
    assert year_fraction(date(2024, 1, 1), date(2024, 1, 8)) == pytest.approx(5 / 252.0)


def test_add_business_days_inverts_count():
    start = date(2024, 1, 1)
    assert add_business_days(start, 5) == date(2024, 1, 8)
    for n in (0, 1, 21, 63, 252):
        assert business_days(start, add_business_days(start, n)) == n


def test_one_business_year(start, one_year_expiry):
    assert year_fraction(start, one_year_expiry) == 1.0


def test_parse_and_format_date():
    assert parse_date("02/01/2024") == date(2024, 1, 2)
    assert parse_date(" 31/12/2025 ") == date(2025, 12, 31)
    assert format_date(date(2024, 1, 2)) == "02/01/2024"


@pytest.mark.parametrize("text", ["2024-01-02", "31/02/2024", "", "aa/bb/cccc"])
def test_parse_date_rejects_malformed(text):
    with pytest.raises(ValueError):
        parse_date(text)


def test_add_business_days_from_weekend_start():
    saturday = date(2024, 1, 6)
    assert add_business_days(saturday, 0) == date(2024, 1, 8)
    for n in (1, 5, 30):
        assert business_days(saturday, add_business_days(saturday, n)) == n


def test_add_business_days_rejects_negative():
    with pytest.raises(ValueError):
        add_business_days(date(2024, 1, 8), -1)
