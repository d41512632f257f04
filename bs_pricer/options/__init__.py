"""Black-Scholes formulas and quotes."""
from .black_scholes import (
    N,
    black_scholes_call,
    black_scholes_call_modified,
    black_scholes_put,
    black_scholes_put_modified,
    normal_cdf,
)
from .quote import OptionQuote, price_chain, quote_classic, quote_modified
