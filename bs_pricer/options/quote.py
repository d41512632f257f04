"""Two-legged quotes (call and put) for the classic and modified models."""

import logging
from dataclasses import asdict, dataclass
from datetime import date
from typing import Iterable, Optional

import pandas as pd

from bs_pricer.daycount import BUSINESS_DAYS_IN_YEAR, business_days
from bs_pricer.options.black_scholes import (
    black_scholes_call,
    black_scholes_call_modified,
    black_scholes_put,
    black_scholes_put_modified,
)

logger = logging.getLogger(__name__)

CLASSIC = "classic"
MODIFIED = "modified"


@dataclass
class OptionQuote:
    variant: str
    call: float
    put: float
    time_to_expiry: float       # years, business days / 252
    business_days: int
    spot: float
    strike: float
    rate: float
    sigma: float
    start: date
    expiry: date
    p: Optional[float] = None   # modified variant only

    def to_dict(self) -> dict:
        return asdict(self)


def _log_degenerate(days: int, sigma: float, start: date, expiry: date,
                    p: Optional[float] = None):
    if days == 0:
        logger.debug("Expiry %s not after %s, pricing at intrinsic value", expiry, start)
    if sigma <= 0:
        logger.debug("Non-positive sigma %s floored", sigma)
    if p is not None and p <= 0:
        logger.debug("Non-positive p %s floored", p)


def quote_classic(
    spot: float, strike: float, rate: float, sigma: float, start: date, expiry: date,
) -> OptionQuote:
    days = business_days(start, expiry)
    _log_degenerate(days, sigma, start, expiry)
    return OptionQuote(
        variant=CLASSIC,
        call=black_scholes_call(spot, strike, rate, sigma, start, expiry),
        put=black_scholes_put(spot, strike, rate, sigma, start, expiry),
        time_to_expiry=days / BUSINESS_DAYS_IN_YEAR,
        business_days=days,
        spot=spot,
        strike=strike,
        rate=rate,
        sigma=sigma,
        start=start,
        expiry=expiry,
    )


def quote_modified(
    spot: float, strike: float, rate: float, sigma: float, p: float,
    start: date, expiry: date,
) -> OptionQuote:
    days = business_days(start, expiry)
    _log_degenerate(days, sigma, start, expiry, p)
    return OptionQuote(
        variant=MODIFIED,
        call=black_scholes_call_modified(spot, strike, rate, sigma, p, start, expiry),
        put=black_scholes_put_modified(spot, strike, rate, sigma, p, start, expiry),
        time_to_expiry=days / BUSINESS_DAYS_IN_YEAR,
        business_days=days,
        spot=spot,
        strike=strike,
        rate=rate,
        sigma=sigma,
        start=start,
        expiry=expiry,
        p=p,
    )


def price_chain(
    spot: float,
    strikes: Iterable[float],
    rate: float,
    sigma: float,
    start: date,
    expiry: date,
    p: Optional[float] = None,
) -> pd.DataFrame:
    """Price a strike ladder. Uses the modified model when p is given."""
    rows = []
    for K in strikes:
        if p is None:
            q = quote_classic(spot, K, rate, sigma, start, expiry)
        else:
            q = quote_modified(spot, K, rate, sigma, p, start, expiry)
        rows.append({"strike": float(K), "call": q.call, "put": q.put})
    return pd.DataFrame(rows, columns=["strike", "call", "put"]).set_index("strike")
