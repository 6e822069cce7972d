"""Test doubles shared across the suite."""
from datetime import datetime, timedelta, timezone

from moneymood.utils.errors import DataProviderError


LIVE_RATES = {"USD": 0.0070, "EUR": 0.0060, "GBP": 0.0050, "JPY": 1.0}


class FakeClock:
    """Manually advanced UTC clock."""

    def __init__(self, start: datetime = datetime(2025, 1, 15, 9, 0, tzinfo=timezone.utc)):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += timedelta(seconds=seconds)


class StubRateClient:
    """Counts fetches and returns canned rates, or fails."""

    def __init__(self, rates=None, fail: bool = False):
        self.rates = dict(LIVE_RATES if rates is None else rates)
        self.fail = fail
        self.calls = 0

    async def fetch_rates(self):
        self.calls += 1
        if self.fail:
            raise DataProviderError("rate source down")
        return dict(self.rates)
