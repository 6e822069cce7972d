"""
Currency constants and rate data models.

All rates are quoted against the home currency: ``rate`` is how many
units of the foreign currency one unit of home currency buys.
"""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional


HOME_CURRENCY = "JPY"

SUPPORTED_CURRENCIES = (
    "JPY", "USD", "EUR", "GBP", "CAD", "AUD", "CHF", "CNY",
    "KRW", "SGD", "HKD", "MYR", "THB", "IDR", "PHP", "VND",
)

# Approximate foreign units per 1 JPY, used when the rate source is down
FALLBACK_RATES: Dict[str, float] = {
    "USD": 0.0067,
    "EUR": 0.0062,
    "GBP": 0.0053,
    "CAD": 0.0091,
    "AUD": 0.0102,
    "CHF": 0.0059,
    "CNY": 0.048,
    "KRW": 8.9,
    "SGD": 0.0090,
    "HKD": 0.052,
    "MYR": 0.031,
    "THB": 0.24,
    "IDR": 105,
    "PHP": 0.37,
    "VND": 162,
}


def get_supported_currencies() -> List[str]:
    """Currency codes offered in currency selectors, home currency first."""
    return list(SUPPORTED_CURRENCIES)


class RateSource(str, Enum):
    """Where a rate entry came from."""
    API = "api"
    FALLBACK = "fallback"


@dataclass(frozen=True)
class RateEntry:
    """A cached currency -> home-currency rate with its capture time."""

    currency: str  # e.g., "USD"
    rate: float  # foreign units per 1 home unit
    last_updated: datetime = field(
        default_factory=lambda: datetime.now(timezone.utc)
    )
    source: RateSource = RateSource.API

    def to_dict(self) -> Dict[str, Any]:
        return {
            "currency": self.currency,
            "rate": self.rate,
            "lastUpdated": self.last_updated.isoformat(),
            "source": self.source.value,
        }


@dataclass(frozen=True)
class Conversion:
    """Result of converting one amount into home currency."""

    amount: float
    currency: str
    home_amount: float
    exchange_rate: float  # home units per 1 foreign unit
    rate_source: Optional[RateSource] = None  # None when no lookup was needed
    home_currency: str = HOME_CURRENCY

    @property
    def is_home_currency(self) -> bool:
        return self.currency == self.home_currency


def fallback_entries(now: Optional[datetime] = None) -> List[RateEntry]:
    """Build the static fallback table, stamped with ``now``."""
    stamp = now or datetime.now(timezone.utc)
    return [
        RateEntry(currency=code, rate=rate, last_updated=stamp, source=RateSource.FALLBACK)
        for code, rate in FALLBACK_RATES.items()
    ]
