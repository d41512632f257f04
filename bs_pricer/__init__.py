"""European option pricing: classic and modified Black-Scholes on a 252 business-day year."""
from .daycount import business_days, year_fraction, add_business_days, parse_date, format_date
from .options import (
    N,
    normal_cdf,
    black_scholes_call,
    black_scholes_put,
    black_scholes_call_modified,
    black_scholes_put_modified,
    OptionQuote,
    quote_classic,
    quote_modified,
    price_chain,
)
