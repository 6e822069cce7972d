"""Tests for the rate cache."""
from datetime import datetime, timedelta, timezone

from moneymood.cache import RateCache


NOW = datetime(2025, 1, 15, 9, 0, tzinfo=timezone.utc)


def test_cache_starts_empty():
    cache = RateCache()
    assert cache.snapshot().is_empty
    assert cache.is_fresh(NOW) is False
    assert cache.age(NOW) is None


def test_cache_replace_and_fresh():
    cache = RateCache(ttl_seconds=300)
    cache.replace({"USD": 0.007}, NOW)
    assert cache.snapshot().rates["USD"] == 0.007
    assert cache.is_fresh(NOW + timedelta(seconds=299))
    assert not cache.is_fresh(NOW + timedelta(seconds=300))
    assert cache.age(NOW + timedelta(seconds=10)) == timedelta(seconds=10)


def test_cache_replace_is_all_or_nothing():
    cache = RateCache()
    cache.replace({"USD": 0.007, "EUR": 0.006}, NOW)
    old = cache.snapshot()
    cache.replace({"GBP": 0.005}, NOW + timedelta(seconds=1))
    assert dict(old.rates) == {"USD": 0.007, "EUR": 0.006}
    assert dict(cache.snapshot().rates) == {"GBP": 0.005}


def test_snapshot_is_read_only():
    cache = RateCache()
    source = {"USD": 0.007}
    snapshot = cache.replace(source, NOW)
    source["USD"] = 1.0
    assert snapshot.rates["USD"] == 0.007
    try:
        snapshot.rates["USD"] = 2.0
    except TypeError:
        pass
    assert cache.snapshot().rates["USD"] == 0.007


def test_cache_clear():
    """Test clear all."""
    cache = RateCache()
    cache.replace({"USD": 0.007}, NOW)
    cache.clear()
    assert cache.snapshot().is_empty
