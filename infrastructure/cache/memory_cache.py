import logging
from dataclasses import dataclass
from datetime import timedelta

from domain.models.currency import CacheStats, PairRate
from utils.time import Clock, MonotonicClock

logger = logging.getLogger(__name__)


@dataclass
class CacheEntry:
    rate: PairRate
    fetched_at: float


class InMemoryRateCache:
    """Pair rates keyed by ordered currency pair, trusted for `rate_ttl`.

    Expired entries stay in the dict until overwritten or cleared.
    """

    def __init__(self, rate_ttl: timedelta = timedelta(minutes=5), clock: Clock | None = None):
        self.rate_ttl = rate_ttl
        self.clock = clock or MonotonicClock()
        self._entries: dict[str, CacheEntry] = {}

    def _make_rate_key(self, from_currency: str, to_currency: str) -> str:
        return f"{from_currency}-{to_currency}"

    def get_rate(self, from_currency: str, to_currency: str) -> PairRate | None:
        key = self._make_rate_key(from_currency, to_currency)
        entry = self._entries.get(key)

        if entry is None:
            logger.debug(f"Cache miss for {key}")
            return None

        age = self.clock.now() - entry.fetched_at
        if age >= self.rate_ttl.total_seconds():
            logger.debug(f"Cache entry for {key} expired ({age:.1f}s old)")
            return None

        logger.debug(f"Cache hit for {key}")
        return entry.rate

    def set_rate(self, rate: PairRate) -> None:
        key = self._make_rate_key(rate.from_currency, rate.to_currency)
        self._entries[key] = CacheEntry(rate=rate, fetched_at=self.clock.now())

    def clear(self) -> None:
        self._entries.clear()

    def stats(self) -> CacheStats:
        return CacheStats(size=len(self._entries), ttl_seconds=self.rate_ttl.total_seconds())

    def __len__(self) -> int:
        return len(self._entries)
