from datetime import date

import pytest

from bs_pricer.daycount import add_business_days

MONDAY = date(2024, 1, 1)


@pytest.fixture
def start():
    return MONDAY


@pytest.fixture
def one_year_expiry():
    """Expiry exactly 252 business days after MONDAY."""
    return add_business_days(MONDAY, 252)


@pytest.fixture
def market():
    return {"S": 100.0, "K": 100.0, "r": 0.05, "sigma": 0.2}
