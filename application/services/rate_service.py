import logging

from domain.exceptions.currency import ProviderError
from domain.models.currency import CacheStats, PairRate, RateTable
from domain.models.result import Failure, Success
from infrastructure.cache.memory_cache import InMemoryRateCache
from infrastructure.providers.exchangerate_api import ExchangeRateAPIClient

logger = logging.getLogger(__name__)


class RateService:
    """Pairwise and base-currency rate lookups with a short-lived pair cache.

    Lookups never raise: provider and transport errors come back as `Failure`.
    """

    def __init__(self, client: ExchangeRateAPIClient, cache: InMemoryRateCache):
        self.client = client
        self.cache = cache

    async def get_rate(self, from_currency: str, to_currency: str) -> Success[PairRate] | Failure:
        cached = self.cache.get_rate(from_currency, to_currency)
        if cached is not None:
            return Success(cached)

        try:
            rate = await self.client.fetch_pair_rate(from_currency, to_currency)
        except ProviderError as e:
            logger.warning(f"Rate lookup {from_currency}-{to_currency} failed: {e}")
            return Failure(kind=e.kind, message=str(e))

        self.cache.set_rate(rate)
        logger.info(
            f"Fetched {from_currency}-{to_currency} rate {rate.rate}",
            extra={
                "extra_data": {
                    "pair": f"{from_currency}-{to_currency}",
                    "rate": rate.rate,
                    "last_updated": rate.last_updated,
                    "provider": self.client.name,
                }
            },
        )
        return Success(rate)

    async def get_all_rates(self, base_currency: str) -> Success[RateTable] | Failure:
        try:
            table = await self.client.fetch_latest_rates(base_currency)
        except ProviderError as e:
            logger.warning(f"Rate table lookup for {base_currency} failed: {e}")
            return Failure(kind=e.kind, message=str(e))

        logger.info(f"Fetched {len(table.rates)} rates for base {base_currency}")
        return Success(table)

    def clear_cache(self) -> None:
        self.cache.clear()
        logger.info("Rate cache cleared")

    def cache_stats(self) -> CacheStats:
        return self.cache.stats()

    async def close(self) -> None:
        await self.client.close()
