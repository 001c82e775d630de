import logging
from typing import Annotated

from fastapi import Depends
from redis.asyncio import Redis

from application.services import ConversionService, CurrencyService, RateService
from config.settings import CacheBackend, get_settings
from infrastructure.cache.base import RateCache
from infrastructure.cache.memory_cache import InMemoryCacheService
from infrastructure.cache.redis_cache import RedisCacheService
from infrastructure.providers import ExchangeRateProvider, MonobankProvider

logger = logging.getLogger(__name__)


class AppDependencies:
	"""Container for application-wide singleton dependencies."""

	cache: RateCache | None = None
	provider: ExchangeRateProvider | None = None


deps = AppDependencies()


def init_dependencies() -> None:
	"""Initialize all singleton dependencies. Called at app startup."""
	logger.info('Initializing dependencies...')
	settings = get_settings()

	if settings.CACHE_BACKEND is CacheBackend.MEMORY:
		deps.cache = InMemoryCacheService(ttl_seconds=settings.redis.ttl)
	else:
		redis_client = Redis(
			host=settings.redis.host,
			port=settings.redis.port,
			db=settings.redis.db,
			socket_timeout=settings.redis.timeout,
			socket_connect_timeout=settings.redis.timeout,
			decode_responses=True,
		)
		deps.cache = RedisCacheService(redis_client, ttl_seconds=settings.redis.ttl)

	deps.provider = MonobankProvider(settings.monobank.api_url, timeout=settings.monobank.timeout)
	logger.info(f'Dependencies initialized ({settings.CACHE_BACKEND.value} cache)')


async def cleanup_dependencies() -> None:
	logger.info('Cleaning up dependencies...')

	if deps.cache:
		await deps.cache.close()
		deps.cache = None
	if deps.provider:
		await deps.provider.close()
		deps.provider = None

	logger.info('Cleanup complete')


def get_rate_cache() -> RateCache:
	if deps.cache is None:
		raise RuntimeError('Rate cache not initialized')
	return deps.cache


def get_provider() -> ExchangeRateProvider:
	if deps.provider is None:
		raise RuntimeError('Rate provider not initialized')
	return deps.provider


def get_currency_service() -> CurrencyService:
	return CurrencyService()


def get_rate_service(
	cache: Annotated[RateCache, Depends(get_rate_cache)],
	provider: Annotated[ExchangeRateProvider, Depends(get_provider)],
) -> RateService:
	return RateService(provider=provider, cache=cache)


def get_conversion_service(
	rate_service: Annotated[RateService, Depends(get_rate_service)],
	currency_service: Annotated[CurrencyService, Depends(get_currency_service)],
) -> ConversionService:
	return ConversionService(rate_service=rate_service, currency_service=currency_service)
