"""Home-currency rate provider with a freshness window and static fallback."""
from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional, Protocol

from moneymood.cache import RateCache, RateSnapshot
from moneymood.currency.client import ExchangeRateApiClient
from moneymood.currency.models import RateEntry, RateSource, fallback_entries
from moneymood.utils.errors import DataProviderError
from moneymood.utils.logging import get_logger


logger = get_logger(__name__)

Clock = Callable[[], datetime]


class RateClient(Protocol):
    async def fetch_rates(self) -> Dict[str, float]:
        ...


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class RateProvider:
    """
    Resolves currency codes to home-currency rates.

    Behaviour of ``get_rates``:
    - a non-empty cache younger than the TTL is returned as-is, no network
    - otherwise the full table is fetched and swapped into the cache
    - a failed fetch returns the static fallback table and leaves the
      cache untouched (failures are never cached)
    """

    def __init__(
        self,
        client: Optional[RateClient] = None,
        cache: Optional[RateCache] = None,
        clock: Clock = utc_now,
    ):
        self.client = client or ExchangeRateApiClient()
        self.cache = cache if cache is not None else RateCache()
        self.clock = clock

    async def get_rates(self) -> List[RateEntry]:
        now = self.clock()
        if self.cache.is_fresh(now):
            logger.debug("Serving rates from cache")
            return self._entries(self.cache.snapshot())

        try:
            return await self.refresh()
        except DataProviderError as e:
            logger.warning(f"Rate fetch failed, using fallback rates: {e}")
            return fallback_entries(now)

    async def refresh(self) -> List[RateEntry]:
        """Fetch a new table and replace the cache.

        Raises:
            DataProviderError: If the rate source fails
        """
        rates = await self.client.fetch_rates()
        snapshot = self.cache.replace(rates, self.clock())
        logger.info(f"Rate cache refreshed with {len(snapshot.rates)} currencies")
        return self._entries(snapshot)

    async def get_rate(self, currency: str) -> Optional[RateEntry]:
        """Look up a single currency's entry, or None if absent."""
        for entry in await self.get_rates():
            if entry.currency == currency:
                return entry
        return None

    def invalidate(self) -> None:
        """Forget cached rates so the next call fetches again."""
        self.cache.clear()

    @staticmethod
    def _entries(snapshot: RateSnapshot) -> List[RateEntry]:
        return [
            RateEntry(
                currency=code,
                rate=rate,
                last_updated=snapshot.refreshed_at,
                source=RateSource.API,
            )
            for code, rate in snapshot.rates.items()
        ]
