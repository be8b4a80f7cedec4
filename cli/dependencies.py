import logging
from dataclasses import dataclass
from datetime import timedelta

import httpx

from application.services import ConversionService, CurrencyService, RateService
from config.settings import Settings
from infrastructure.cache.memory_cache import InMemoryRateCache
from infrastructure.providers import ExchangeRateAPIClient
from utils.time import Clock

logger = logging.getLogger(__name__)


@dataclass
class AppDependencies:
	"""Objects shared for the lifetime of one shell session."""

	rate_service: RateService
	conversion_service: ConversionService


def init_dependencies(
	settings: Settings,
	http_client: httpx.AsyncClient | None = None,
	clock: Clock | None = None,
) -> AppDependencies:
	logger.info('Initializing dependencies...')
	if not settings.EXCHANGERATE_API_KEY:
		logger.warning('EXCHANGERATE_API_KEY is not set; rate lookups will be rejected')

	client = ExchangeRateAPIClient(
		api_key=settings.EXCHANGERATE_API_KEY,
		client=http_client,
		base_url=settings.EXCHANGERATE_BASE_URL,
		timeout=settings.REQUEST_TIMEOUT,
		user_agent=settings.USER_AGENT,
	)
	cache = InMemoryRateCache(
		rate_ttl=timedelta(seconds=settings.RATE_CACHE_TTL_SECONDS),
		clock=clock,
	)
	rate_service = RateService(client=client, cache=cache)
	conversion_service = ConversionService(
		rate_service=rate_service, currency_service=CurrencyService()
	)
	logger.info('Dependencies initialized')
	return AppDependencies(rate_service=rate_service, conversion_service=conversion_service)


async def cleanup_dependencies(deps: AppDependencies) -> None:
	logger.info('Cleaning up dependencies...')
	await deps.rate_service.close()
	logger.info('Cleanup complete')
