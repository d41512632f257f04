"""
CLI runner for Black-Scholes pricing.

Usage:
    python -m bs_pricer --spot 100 --strike 105 --rate 0.05 --sigma 0.2 \
        --start 02/01/2024 --expiry 02/04/2024

    # Modified model with shape exponent p
    python -m bs_pricer --modified --p 1.2 --start 02/01/2024 --expiry 02/04/2024

    # Strike ladder
    python -m bs_pricer --strikes 90 95 100 105 110
"""

import argparse
import logging

from bs_pricer.config import PricingConfig
from bs_pricer.daycount import format_date, parse_date
from bs_pricer.options.quote import price_chain, quote_classic, quote_modified

logger = logging.getLogger(__name__)


def _print_quote(quote):
    title = "Black-Scholes Modified" if quote.p is not None else "Black-Scholes Classic"
    print(f"\n{title}")
    print(f"  Call (C):                {quote.call:.4f}")
    print(f"  Put (P):                 {quote.put:.4f}")
    print(f"  Time to expiry (years):  {quote.time_to_expiry:.6f}")
    print(f"  Business days:           {quote.business_days}")
    if quote.p is not None:
        print(f"  Parameter p:             {quote.p:.4f}")
    print("\n  Inputs:")
    print(f"    S: {quote.spot}  K: {quote.strike}  r: {quote.rate}  sigma: {quote.sigma}")
    print(f"    Start: {format_date(quote.start)}  Expiry: {format_date(quote.expiry)}")


def build_parser(config: PricingConfig) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="European option pricing (classic and modified Black-Scholes)"
    )
    parser.add_argument("--spot", type=float, default=config.spot,
                        help=f"Spot price S (default: {config.spot})")
    parser.add_argument("--strike", type=float, default=config.strike,
                        help=f"Strike price K (default: {config.strike})")
    parser.add_argument("--rate", type=float, default=config.rate,
                        help=f"Risk-free rate r, continuous (default: {config.rate})")
    parser.add_argument("--sigma", type=float, default=config.sigma,
                        help=f"Annual volatility (default: {config.sigma})")
    parser.add_argument("--p", type=float, default=config.p,
                        help=f"Shape exponent for --modified (default: {config.p})")
    parser.add_argument("--start", default=format_date(config.start),
                        help="Valuation date DD/MM/YYYY (default: today)")
    parser.add_argument("--expiry", default=format_date(config.expiry),
                        help=f"Expiry date DD/MM/YYYY (default: start + {config.maturity_days} days)")
    parser.add_argument("--modified", action="store_true",
                        help="Use the modified model with exponent p")
    parser.add_argument("--strikes", type=float, nargs="+", default=None,
                        help="Price a strike ladder instead of a single strike")
    parser.add_argument("--verbose", action="store_true",
                        help="Debug logging")
    return parser


def run(args=None, config: PricingConfig | None = None):
    config = config or PricingConfig()
    parser = build_parser(config)
    parsed = parser.parse_args(args)

    logging.basicConfig(
        level=logging.DEBUG if parsed.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        start = parse_date(parsed.start)
        expiry = parse_date(parsed.expiry)
    except ValueError as exc:
        parser.error(str(exc))

    if parsed.modified and parsed.p <= 0:
        parser.error("Parameter p must be greater than zero")

    p = parsed.p if parsed.modified else None

    if parsed.strikes:
        logger.info("Pricing %d strikes (%s)", len(parsed.strikes),
                    "modified" if p is not None else "classic")
        chain = price_chain(parsed.spot, parsed.strikes, parsed.rate, parsed.sigma,
                            start, expiry, p=p)
        print(chain.to_string(float_format=lambda v: f"{v:.4f}"))
        return chain

    if p is not None:
        quote = quote_modified(parsed.spot, parsed.strike, parsed.rate, parsed.sigma,
                               p, start, expiry)
    else:
        quote = quote_classic(parsed.spot, parsed.strike, parsed.rate, parsed.sigma,
                              start, expiry)
    _print_quote(quote)
    return quote


def main():
    run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
