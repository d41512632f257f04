"""Defaults for the command-line pricer."""

from dataclasses import dataclass, field
from datetime import date, timedelta


@dataclass
class PricingConfig:
    # Market inputs
    spot: float = 100.0
    strike: float = 105.0
    rate: float = 0.05
    sigma: float = 0.20
    p: float = 1.0

    # Dates
    start: date = field(default_factory=date.today)
    maturity_days: int = 90          # calendar days after start

    @property
    def expiry(self) -> date:
        return self.start + timedelta(days=self.maturity_days)
