# nosec B101


from datetime import UTC, datetime, timedelta

import pytest

from domain.models.currency import PairRate
from infrastructure.cache.memory_cache import InMemoryRateCache


def make_rate(from_currency: str = "USD", to_currency: str = "EUR", rate: float = 0.85) -> PairRate:
    return PairRate(
        from_currency=from_currency,
        to_currency=to_currency,
        rate=rate,
        last_updated=datetime(2025, 11, 5, 10, 30, tzinfo=UTC),
    )


@pytest.fixture
def cache(fake_clock):
    return InMemoryRateCache(rate_ttl=timedelta(minutes=5), clock=fake_clock)


def test_get_rate_cache_miss_returns_none(cache):
    assert cache.get_rate("USD", "EUR") is None


def test_get_rate_cache_hit_returns_stored_rate(cache):
    rate = make_rate()
    cache.set_rate(rate)

    assert cache.get_rate("USD", "EUR") is rate


def test_pairs_are_ordered_not_symmetric(cache):
    cache.set_rate(make_rate("USD", "EUR", 0.85))

    assert cache.get_rate("EUR", "USD") is None

    cache.set_rate(make_rate("EUR", "USD", 1.17))
    assert cache.get_rate("USD", "EUR").rate == 0.85
    assert cache.get_rate("EUR", "USD").rate == 1.17
    assert len(cache) == 2


def test_entry_valid_until_ttl_elapses(cache, fake_clock):
    cache.set_rate(make_rate())

    fake_clock.advance(299)
    assert cache.get_rate("USD", "EUR") is not None

    fake_clock.advance(1)
    assert cache.get_rate("USD", "EUR") is None


def test_expired_entry_still_counts_until_overwritten(cache, fake_clock):
    cache.set_rate(make_rate(rate=0.85))
    fake_clock.advance(600)

    assert cache.get_rate("USD", "EUR") is None
    assert cache.stats().size == 1

    cache.set_rate(make_rate(rate=0.86))
    assert cache.get_rate("USD", "EUR").rate == 0.86
    assert cache.stats().size == 1


def test_clear_empties_cache(cache):
    cache.set_rate(make_rate("USD", "EUR"))
    cache.set_rate(make_rate("GBP", "JPY"))

    cache.clear()

    assert cache.stats().size == 0
    assert cache.get_rate("USD", "EUR") is None


def test_stats_reports_ttl_seconds(fake_clock):
    cache = InMemoryRateCache(rate_ttl=timedelta(seconds=42), clock=fake_clock)

    stats = cache.stats()

    assert stats.size == 0
    assert stats.ttl_seconds == 42
