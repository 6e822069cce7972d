import asyncio

import pytest

from moneymood.cache import RateCache
from moneymood.currency.models import FALLBACK_RATES, RateSource
from moneymood.currency.rate_provider import RateProvider
from tests.helpers import StubRateClient


def _as_dict(entries):
    return {e.currency: e.rate for e in entries}


@pytest.mark.asyncio
async def test_first_call_fetches_and_caches(provider, rate_client, clock):
    entries = await provider.get_rates()

    assert rate_client.calls == 1
    assert _as_dict(entries) == rate_client.rates
    assert all(e.source == RateSource.API for e in entries)
    assert all(e.last_updated == clock.now for e in entries)
    assert provider.cache.snapshot().refreshed_at == clock.now


@pytest.mark.asyncio
async def test_calls_within_window_share_one_fetch(provider, rate_client, clock):
    first = await provider.get_rates()
    clock.advance(299)
    second = await provider.get_rates()

    assert rate_client.calls == 1
    assert first == second


@pytest.mark.asyncio
async def test_call_after_window_refetches(provider, rate_client, clock):
    await provider.get_rates()
    clock.advance(300)
    rate_client.rates["USD"] = 0.0071

    entries = await provider.get_rates()

    assert rate_client.calls == 2
    assert _as_dict(entries)["USD"] == 0.0071


@pytest.mark.asyncio
async def test_failed_fetch_returns_fallback_without_caching(clock):
    client = StubRateClient(fail=True)
    provider = RateProvider(client=client, cache=RateCache(), clock=clock)

    entries = await provider.get_rates()

    assert _as_dict(entries) == FALLBACK_RATES
    assert len(entries) == 15
    assert all(e.source == RateSource.FALLBACK for e in entries)
    assert all(e.last_updated == clock.now for e in entries)
    assert provider.cache.snapshot().is_empty

    # Failure is not cached: the next call tries the network again
    await provider.get_rates()
    assert client.calls == 2


@pytest.mark.asyncio
async def test_failed_refresh_keeps_previous_cache(provider, rate_client, clock):
    await provider.get_rates()
    good = dict(provider.cache.snapshot().rates)
    clock.advance(600)
    rate_client.fail = True

    entries = await provider.get_rates()

    assert _as_dict(entries) == FALLBACK_RATES
    assert dict(provider.cache.snapshot().rates) == good


@pytest.mark.asyncio
async def test_concurrent_calls_in_fresh_window_see_same_snapshot(provider, rate_client):
    await provider.get_rates()
    results = await asyncio.gather(*(provider.get_rates() for _ in range(5)))
    assert rate_client.calls == 1
    assert all(r == results[0] for r in results)


@pytest.mark.asyncio
async def test_get_rate_and_invalidate(provider, rate_client):
    entry = await provider.get_rate("USD")
    assert entry.rate == rate_client.rates["USD"]
    assert await provider.get_rate("VND") is None

    provider.invalidate()
    await provider.get_rates()
    assert rate_client.calls == 2


@pytest.mark.asyncio
async def test_rate_entry_to_dict(provider):
    entry = await provider.get_rate("USD")
    data = entry.to_dict()
    assert data["currency"] == "USD"
    assert data["source"] == "api"
    assert data["lastUpdated"].startswith("2025-01-15T09:00:00")
