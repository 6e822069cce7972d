"""In-memory exchange-rate cache with a freshness window."""
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from types import MappingProxyType
from typing import Mapping, Optional, Dict


@dataclass(frozen=True)
class RateSnapshot:
    """An immutable, complete rate table captured at one refresh."""

    rates: Mapping[str, float] = field(default_factory=lambda: MappingProxyType({}))
    refreshed_at: Optional[datetime] = None

    @property
    def is_empty(self) -> bool:
        return not self.rates


class RateCache:
    """Holds the latest rate snapshot.

    Writers swap in a whole new snapshot, so readers see either the old
    table or the new one, never a mix of both.
    """
    
    def __init__(self, ttl_seconds: int = 300):
        self.ttl = timedelta(seconds=ttl_seconds)
        self._snapshot = RateSnapshot()
    
    def snapshot(self) -> RateSnapshot:
        """Return the current snapshot (possibly empty or stale)."""
        return self._snapshot
    
    def replace(self, rates: Dict[str, float], refreshed_at: datetime) -> RateSnapshot:
        """Replace the entire table with ``rates``."""
        snapshot = RateSnapshot(
            rates=MappingProxyType(dict(rates)),
            refreshed_at=refreshed_at,
        )
        self._snapshot = snapshot
        return snapshot
    
    def is_fresh(self, now: datetime) -> bool:
        """True when the cache holds data younger than the TTL."""
        snapshot = self._snapshot
        if snapshot.is_empty or snapshot.refreshed_at is None:
            return False
        return now - snapshot.refreshed_at < self.ttl
    
    def age(self, now: datetime) -> Optional[timedelta]:
        """Time since the last refresh, or None if never refreshed."""
        if self._snapshot.refreshed_at is None:
            return None
        return now - self._snapshot.refreshed_at
    
    def clear(self) -> None:
        """Drop all cached rates."""
        self._snapshot = RateSnapshot()
