"""
Pure-Python Black-Scholes pricing (no scipy dependency).

Classic European call/put plus a modified variant with a shape exponent p
and growth factor A(tau) = exp((p - 1) * sigma^2 / 2 * tau). With p = 1 the
modified formulas reduce to the classic ones.

Time to maturity is always derived from a pair of calendar dates using the
252 business-day convention in bs_pricer.daycount.
"""

import math
from datetime import date

import numpy as np

from bs_pricer.daycount import year_fraction

POSITIVE_FLOOR = 1e-12


def _erf(x: float) -> float:
    """Error function via Abramowitz & Stegun (7.1.26). Max err ~1.5e-7."""
    a1, a2, a3, a4, a5 = (
        0.254829592, -0.284496736, 1.421413741, -1.453152027, 1.061405429,
    )
    p = 0.3275911
    sign = 1.0 if x >= 0 else -1.0
    x = abs(x)
    t = 1.0 / (1.0 + p * x)
    y = 1.0 - (((((a5 * t + a4) * t) + a3) * t + a2) * t + a1) * t * math.exp(-x * x)
    return sign * y


def normal_cdf(x: float) -> float:
    """Standard normal CDF, N(x) = 0.5 * (1 + erf(x / sqrt(2)))."""
    return 0.5 * (1.0 + _erf(x / math.sqrt(2.0)))


N = normal_cdf


def ensure_positive(value: float, fallback: float = POSITIVE_FLOOR) -> float:
    """Replace a non-positive sigma or p with a tiny positive fallback."""
    return value if value > 0 else fallback


def _log_moneyness(S: float, K: float) -> float:
    """ln(S/K) with IEEE semantics: non-positive S or K yield nan/inf, never raise."""
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.log(np.float64(S) / np.float64(K)))


def _exp(x: float) -> float:
    """exp(x) with IEEE semantics: overflow yields inf, never raises."""
    with np.errstate(over="ignore"):
        return float(np.exp(np.float64(x)))


def _classic_d1_d2(S: float, K: float, r: float, sigma: float, T: float):
    sigma = ensure_positive(sigma)
    sqrt_T = math.sqrt(T)
    d1 = (_log_moneyness(S, K) + (r + 0.5 * sigma * sigma) * T) / (sigma * sqrt_T)
    d2 = d1 - sigma * sqrt_T
    return d1, d2


def _modified_terms(S: float, K: float, r: float, sigma: float, p: float, tau: float):
    """Return (A(tau), d1, d2) for the modified model."""
    sigma = ensure_positive(sigma)
    p = ensure_positive(p)
    sigma_sq = sigma * sigma
    sqrt_p_tau = math.sqrt(p * tau)

    a_tau = _exp((p - 1.0) * (sigma_sq / 2.0) * tau)
    base = _log_moneyness(S, K) - 0.5 * sigma_sq * tau + r * tau
    d1 = (base + p * sigma_sq * tau) / (sigma * sqrt_p_tau)
    d2 = base / (sigma * sqrt_p_tau)
    return a_tau, d1, d2


def black_scholes_call(
    S: float, K: float, r: float, sigma: float, start: date, end: date,
) -> float:
    """Black-Scholes European call price."""
    T = year_fraction(start, end)
    if T <= 0:
        return max(S - K, 0.0)
    d1, d2 = _classic_d1_d2(S, K, r, sigma, T)
    return S * normal_cdf(d1) - K * _exp(-r * T) * normal_cdf(d2)


def black_scholes_put(
    S: float, K: float, r: float, sigma: float, start: date, end: date,
) -> float:
    """Black-Scholes European put price."""
    T = year_fraction(start, end)
    if T <= 0:
        return max(K - S, 0.0)
    d1, d2 = _classic_d1_d2(S, K, r, sigma, T)
    return K * _exp(-r * T) * normal_cdf(-d2) - S * normal_cdf(-d1)


def black_scholes_call_modified(
    S: float, K: float, r: float, sigma: float, p: float, start: date, end: date,
) -> float:
    """Modified Black-Scholes European call: A(tau)*S*N(d1) - K*e^(-r*tau)*N(d2)."""
    tau = year_fraction(start, end)
    if tau <= 0:
        return max(S - K, 0.0)
    a_tau, d1, d2 = _modified_terms(S, K, r, sigma, p, tau)
    return a_tau * S * normal_cdf(d1) - K * _exp(-r * tau) * normal_cdf(d2)


def black_scholes_put_modified(
    S: float, K: float, r: float, sigma: float, p: float, start: date, end: date,
) -> float:
    """Modified Black-Scholes European put: K*e^(-r*tau)*N(-d2) - A(tau)*S*N(-d1)."""
    tau = year_fraction(start, end)
    if tau <= 0:
        return max(K - S, 0.0)
    a_tau, d1, d2 = _modified_terms(S, K, r, sigma, p, tau)
    return K * _exp(-r * tau) * normal_cdf(-d2) - a_tau * S * normal_cdf(-d1)
